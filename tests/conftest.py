"""Shared test fixtures for formkit."""

import io
import tempfile
from datetime import date
from pathlib import Path
from typing import Annotated, Literal

import pytest
from pydantic import BaseModel, ConfigDict, Field, model_validator
from starlette.datastructures import Headers, UploadFile

from formkit.schema.fields import refine


def _looks_like_email(value: str) -> bool:
    local, _, domain = value.partition("@")
    return bool(local) and "." in domain


def _looks_like_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))


Email = Annotated[str, refine(_looks_like_email, "Invalid email format", "email")]
Url = Annotated[str, refine(_looks_like_url, "Must be a URL now", "url")]


class UserForm(BaseModel):
    name: Annotated[str, Field(min_length=2)]
    email: Email
    age: Annotated[int, Field(ge=0)]
    is_active: bool = False


class RoleForm(BaseModel):
    role: Annotated[str, Field(min_length=3)]


class DepartmentForm(BaseModel):
    department: str | None = None
    is_admin: bool = False


class UrlEmailForm(BaseModel):
    email: Url


class ArticleForm(BaseModel):
    type: Literal["article"]
    title: str
    content: str


class VideoForm(BaseModel):
    type: Literal["video"]
    url: Url
    duration: Annotated[int, Field(gt=0)]


class SignupForm(BaseModel):
    name: Annotated[str, Field(min_length=2)]
    age: Annotated[int, refine(lambda v: v >= 18, "Must be adult", "too_young")]


class RegistrationForm(BaseModel):
    username: Annotated[str, Field(min_length=3, max_length=20)]
    email: Email
    password: Annotated[str, Field(min_length=8)]
    confirm_password: str
    date_of_birth: date
    newsletter: bool = False
    source: Literal["web", "mobile", "api"] = "web"

    @model_validator(mode="after")
    def _passwords_match(self) -> "RegistrationForm":
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


class UploadForm(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    title: Annotated[str, Field(min_length=1)]
    description: str | None = None
    file: UploadFile
    category: Literal["image", "document", "video"]
    is_public: bool
    tags: list[str] = Field(default_factory=list)


class Address(BaseModel):
    street: str
    city: str


class PersonForm(BaseModel):
    name: str
    address: Address


@pytest.fixture
def user_form() -> type[UserForm]:
    """Base schema with constraints, a refinement and a default."""
    return UserForm


@pytest.fixture
def valid_user() -> dict:
    return {"name": "John", "email": "john@example.com", "age": 30}


@pytest.fixture
def text_file() -> UploadFile:
    """Uploaded plain-text file with a filename and content type."""
    return UploadFile(
        io.BytesIO(b"content"),
        filename="test.txt",
        headers=Headers({"content-type": "text/plain"}),
    )


@pytest.fixture
def tmp_dir():
    """Temporary directory that cleans up after test."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)
