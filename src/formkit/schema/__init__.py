"""Dynamic schema construction over pydantic models."""

from formkit.schema.builder import (
    as_alternative,
    create_dynamic_schema,
    merge_fields,
    with_all_fields_optional,
    with_extra_policy,
)
from formkit.schema.fields import refine
from formkit.schema.models import (
    AlternativeSchema,
    EffectiveSchema,
    OutputFormat,
    SchemaModification,
    ValidationStrategy,
)

__all__ = [
    "AlternativeSchema",
    "EffectiveSchema",
    "OutputFormat",
    "SchemaModification",
    "ValidationStrategy",
    "as_alternative",
    "create_dynamic_schema",
    "merge_fields",
    "refine",
    "with_all_fields_optional",
    "with_extra_policy",
]
