"""Pydantic models for processing options and results."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Literal, Union

from pydantic import BaseModel, Field, field_validator

from formkit.extract.models import ExtractionOptions
from formkit.schema.models import (
    OutputFormat,
    SchemaModification,
    ValidationStrategy,
    normalize_option,
)

if TYPE_CHECKING:
    from formkit.config import FormKitConfig


class ProcessingOptions(ExtractionOptions):
    """Everything ``process_and_validate_form_data`` can be told to do.

    Example:
        >>> options = ProcessingOptions(
        ...     key_transforms={"user_email": "email"},
        ...     transformations={"email": str.lower},
        ...     validation_strategy="remove_extra_fields",
        ... )
    """

    transformations: dict[str, Callable[[Any], Any]] = Field(default_factory=dict)
    additional_data: dict[str, Any] = Field(default_factory=dict)  # wins over form values
    output_format: OutputFormat = "object"
    validation_strategy: ValidationStrategy = "strict"
    schema_modification: SchemaModification = "default"
    additional_schemas: list[Any] = Field(default_factory=list)
    use_dynamic_validation: bool = True  # False validates against the base schema verbatim

    @field_validator(
        "output_format", "validation_strategy", "schema_modification", mode="before"
    )
    @classmethod
    def _accept_camel_case(cls, v: Any) -> Any:
        return normalize_option(v)

    @classmethod
    def from_config(cls, config: "FormKitConfig", **overrides: Any) -> "ProcessingOptions":
        """Build options seeded with a config's defaults.

        Args:
            config: Loaded FormKitConfig
            **overrides: Per-call option values, taking priority over config

        Returns:
            Validated ProcessingOptions
        """
        values: dict[str, Any] = {
            "validation_strategy": config.validation_strategy,
            "schema_modification": config.schema_modification,
            "output_format": config.output_format,
            "use_dynamic_validation": config.use_dynamic_validation,
            "exclude_fields": list(config.exclude_fields),
        }
        values.update(overrides)
        return cls(**values)


class ProcessedSuccess(BaseModel):
    """Validated data, as a dict or as an encoded form container."""

    success: Literal[True] = True
    data: Any = None


class ProcessedFailure(BaseModel):
    """Rejected data with the same issues rendered three ways."""

    success: Literal[False] = False
    data: dict[str, Any] = Field(default_factory=dict)  # post-transform, pre-validation
    errors: dict[str, str] = Field(default_factory=dict)
    errors_in_list: list[dict[str, str]] = Field(default_factory=list)
    errors_in_string: str = ""


ProcessedResult = Union[ProcessedSuccess, ProcessedFailure]
