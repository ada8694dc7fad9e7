"""formkit: form data extraction and validation with pydantic.

Extracts fields from submitted forms (multi-valued containers or plain
mappings), applies renames and transformations, validates them against a
pydantic model reshaped at call time, and returns either the coerced data
or errors ready for redisplay.
"""

__version__ = "0.1.0"

from formkit.config import FormKitConfig
from formkit.encode import convert_mapping_to_form_data
from formkit.extract import ExtractionOptions, extract_data_from_form_data
from formkit.models import ProcessedFailure, ProcessedResult, ProcessedSuccess, ProcessingOptions
from formkit.pipeline import process_and_validate_form_data
from formkit.schema import AlternativeSchema, create_dynamic_schema, refine
from formkit.transform import apply_data_transformations
from formkit.validate import (
    ValidationFailure,
    ValidationIssue,
    ValidationResult,
    ValidationSuccess,
    format_errors_as_dict,
    format_errors_as_list,
    format_errors_as_string,
    validate,
    validate_data_with_dynamic_schema,
)

__all__ = [
    "__version__",
    "AlternativeSchema",
    "ExtractionOptions",
    "FormKitConfig",
    "ProcessedFailure",
    "ProcessedResult",
    "ProcessedSuccess",
    "ProcessingOptions",
    "ValidationFailure",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSuccess",
    "apply_data_transformations",
    "convert_mapping_to_form_data",
    "create_dynamic_schema",
    "extract_data_from_form_data",
    "format_errors_as_dict",
    "format_errors_as_list",
    "format_errors_as_string",
    "process_and_validate_form_data",
    "refine",
    "validate",
    "validate_data_with_dynamic_schema",
]
