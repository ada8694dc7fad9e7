"""Run an effective schema against a payload.

All type checking, coercion, defaults and refinements are pydantic's job;
this module only picks the right entrypoint and converts the outcome into a
``ValidationResult``.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from formkit.schema.builder import OMIT_WHEN_UNSET, create_dynamic_schema
from formkit.schema.models import (
    AlternativeSchema,
    SchemaModification,
    ValidationStrategy,
    is_object_schema,
)
from formkit.validate.models import (
    ValidationFailure,
    ValidationIssue,
    ValidationResult,
    ValidationSuccess,
)

logger = logging.getLogger(__name__)


def _dump_model(instance: BaseModel) -> dict[str, Any]:
    """Dump a validated model, leaving out optional-ized fields never supplied."""
    omitted = {
        name
        for name in getattr(type(instance), OMIT_WHEN_UNSET, frozenset())
        if name not in instance.model_fields_set
    }
    return instance.model_dump(exclude=omitted or None)


def validate(schema: Any, data: Mapping[str, Any]) -> ValidationResult:
    """Validate ``data`` against a model, an alternative, or any pydantic type.

    Args:
        schema: Effective schema (model class, ``AlternativeSchema`` or a type
            pydantic can build a ``TypeAdapter`` for)
        data: Payload to validate

    Returns:
        ``ValidationSuccess`` with the coerced plain data, or
        ``ValidationFailure`` with the issues in engine order
    """
    try:
        if is_object_schema(schema):
            value: Any = _dump_model(schema.model_validate(data))
        else:
            if isinstance(schema, AlternativeSchema):
                adapter = schema.type_adapter()
            else:
                adapter = TypeAdapter(schema)
            value = adapter.dump_python(adapter.validate_python(data))
    except ValidationError as exc:
        issues = [
            ValidationIssue(path=list(err["loc"]), message=err["msg"], type=err["type"])
            for err in exc.errors(include_url=False)
        ]
        logger.debug(f"Validation failed with {len(issues)} issue(s)")
        return ValidationFailure(issues=issues)
    return ValidationSuccess(data=value)


def validate_data_with_dynamic_schema(
    base_schema: Any,
    data: Mapping[str, Any],
    validation_strategy: ValidationStrategy = "strict",
    schema_modification: SchemaModification = "default",
    additional_schemas: Sequence[Any] | None = None,
) -> ValidationResult:
    """Build the dynamic schema for ``data`` and validate it in one step."""
    schema = create_dynamic_schema(
        base_schema,
        data,
        validation_strategy,
        schema_modification,
        additional_schemas,
    )
    return validate(schema, data)
