"""Extract, transform and validate form data in one call.

Steps, in order:
1. Extract fields from the form or mapping
2. Merge ``additional_data`` over them
3. Apply per-field transformations
4. Build the dynamic schema (unless disabled) and validate
5. Return the coerced data (optionally re-encoded as a form) or the errors
"""

import logging
from collections.abc import Mapping
from typing import Any

from formkit.encode import convert_mapping_to_form_data
from formkit.extract.extractor import extract_data_from_form_data
from formkit.models import ProcessedFailure, ProcessedResult, ProcessedSuccess, ProcessingOptions
from formkit.transform import apply_data_transformations
from formkit.validate.formatters import (
    format_errors_as_dict,
    format_errors_as_list,
    format_errors_as_string,
)
from formkit.validate.validator import validate, validate_data_with_dynamic_schema

logger = logging.getLogger(__name__)


def process_and_validate_form_data(
    schema: Any,
    input_data: Mapping[str, Any],
    options: ProcessingOptions | None = None,
) -> ProcessedResult:
    """Process submitted form data and validate it against ``schema``.

    Args:
        schema: Pydantic model class describing the form
        input_data: Starlette ``FormData``/``MultiDict`` or a plain mapping
        options: Extraction, transformation and validation options

    Returns:
        ``ProcessedSuccess`` with the validated data, or ``ProcessedFailure``
        with the post-transform data and the formatted errors
    """
    options = options or ProcessingOptions()

    extracted = extract_data_from_form_data(input_data, options)
    merged = {**extracted, **options.additional_data}
    merged = apply_data_transformations(merged, options.transformations)

    if options.use_dynamic_validation:
        result = validate_data_with_dynamic_schema(
            schema,
            merged,
            options.validation_strategy,
            options.schema_modification,
            options.additional_schemas,
        )
    else:
        result = validate(schema, merged)

    if result.success:
        if options.output_format == "form_data":
            return ProcessedSuccess(data=convert_mapping_to_form_data(result.data))
        return ProcessedSuccess(data=result.data)

    errors_in_list = format_errors_as_list(result)
    logger.debug(f"Form validation failed: {[e['key'] for e in errors_in_list]}")
    return ProcessedFailure(
        data=merged,
        errors=format_errors_as_dict(result),
        errors_in_list=errors_in_list,
        errors_in_string=format_errors_as_string(result),
    )
