"""Pydantic models for extraction options."""

from pydantic import BaseModel, ConfigDict, Field


class ExtractionOptions(BaseModel):
    """Controls which fields are pulled from a form and under what name.

    Filtering is decided on the original field name; renaming happens after.
    A field listed in both ``include_fields`` and ``exclude_fields`` is dropped.
    """

    model_config = ConfigDict(extra="forbid")

    key_transforms: dict[str, str] = Field(default_factory=dict)  # original -> renamed
    exclude_fields: list[str] = Field(default_factory=list)
    include_fields: list[str] | None = None  # empty or None means no allow-list
