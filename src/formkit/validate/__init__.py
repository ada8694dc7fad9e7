"""Validation results and error formatting."""

from formkit.validate.formatters import (
    format_errors_as_dict,
    format_errors_as_list,
    format_errors_as_string,
)
from formkit.validate.models import (
    ValidationFailure,
    ValidationIssue,
    ValidationResult,
    ValidationSuccess,
)
from formkit.validate.validator import validate, validate_data_with_dynamic_schema

__all__ = [
    "ValidationFailure",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSuccess",
    "format_errors_as_dict",
    "format_errors_as_list",
    "format_errors_as_string",
    "validate",
    "validate_data_with_dynamic_schema",
]
