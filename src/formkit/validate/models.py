"""Pydantic models for validation results.

A result is either a ``ValidationSuccess`` carrying the coerced data or a
``ValidationFailure`` carrying the engine's issues in reported order.
Callers branch on ``success``; expected failures never raise.
"""

from typing import Any, Literal, Union

from pydantic import BaseModel, Field


class ValidationIssue(BaseModel):
    """One validation failure reported by pydantic."""

    path: list[str | int] = Field(default_factory=list)
    message: str
    type: str = ""  # pydantic error type, e.g. "missing" or "extra_forbidden"


class ValidationSuccess(BaseModel):
    """Data accepted by the effective schema."""

    success: Literal[True] = True
    data: Any = None


class ValidationFailure(BaseModel):
    """Data rejected by the effective schema."""

    success: Literal[False] = False
    issues: list[ValidationIssue] = Field(default_factory=list)


ValidationResult = Union[ValidationSuccess, ValidationFailure]
