"""Dynamic schema construction.

Reshapes a base pydantic model at call time in two fixed steps:

1. Structural modification (``default``, ``merge_with_and``, ``merge_with_or``)
2. Validation strategy (extra-field policy and optionality)

Strategies only apply to object-shaped schemas. An alternative produced by
``merge_with_or`` keeps each member's own strictness.
"""

import copy
import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Literal

from pydantic import BaseModel, create_model

from formkit.schema.models import (
    SCHEMA_MODIFICATIONS,
    VALIDATION_STRATEGIES,
    AlternativeSchema,
    EffectiveSchema,
    SchemaModification,
    ValidationStrategy,
    is_object_schema,
    normalize_option,
)

logger = logging.getLogger(__name__)

ExtraPolicy = Literal["forbid", "allow", "ignore"]

# Class attribute listing fields dropped from the output when not supplied
OMIT_WHEN_UNSET = "__formkit_omit_when_unset__"


def _derive(
    model: type[BaseModel],
    fields: Mapping[str, Any] | None = None,
    extra: ExtraPolicy | None = None,
    omit_when_unset: Iterable[str] = (),
) -> type[BaseModel]:
    """Subclass ``model`` with overridden fields and/or extra-field policy."""
    cls_kwargs = {"extra": extra} if extra else None
    derived = create_model(
        model.__name__,
        __base__=model,
        __module__=model.__module__,
        __cls_kwargs__=cls_kwargs,
        **dict(fields or {}),
    )
    inherited = getattr(model, OMIT_WHEN_UNSET, frozenset())
    setattr(derived, OMIT_WHEN_UNSET, inherited | frozenset(omit_when_unset))
    return derived


def with_extra_policy(model: type[BaseModel], extra: ExtraPolicy) -> type[BaseModel]:
    """Return a copy of ``model`` that forbids, allows or ignores undeclared keys."""
    return _derive(model, extra=extra)


def with_all_fields_optional(model: type[BaseModel]) -> type[BaseModel]:
    """Make every required top-level field optional (non-recursive).

    A field may be left out but is not made nullable: an explicit ``None``
    still has to match the declared type. The field's own settings (aliases,
    constraints, ``Annotated`` validators) are kept. Fields that already
    have a default keep it; the others are left out of the output when absent.
    """
    fields: dict[str, Any] = {}
    for name, info in model.model_fields.items():
        if not info.is_required():
            continue
        # pydantic never validates this placeholder default
        optional = copy.deepcopy(info)
        optional.default = None
        optional.validate_default = False
        fields[name] = (info.annotation, optional)
    return _derive(model, fields=fields, omit_when_unset=fields)


def with_extra_fields_declared(
    model: type[BaseModel], input_data: Mapping[str, Any]
) -> type[BaseModel]:
    """Declare untyped optional fields for input keys the model does not know.

    Keys that cannot be pydantic field names (private or clashing with
    ``BaseModel`` attributes) are left to the ``extra="allow"`` pass-through.
    """
    known = set(model.model_fields)
    for info in model.model_fields.values():
        known.update(a for a in (info.alias, info.validation_alias) if isinstance(a, str))
    dynamic = {
        key: (Any, None)
        for key in input_data
        if key not in known and _is_declarable(key)
    }
    if not dynamic:
        return model
    logger.debug(f"Declaring dynamic fields on {model.__name__}: {sorted(dynamic)}")
    return _derive(model, fields=dynamic, omit_when_unset=dynamic)


def _is_declarable(key: str) -> bool:
    return (
        key.isidentifier()
        and not key.startswith("_")
        and not key.startswith("model_")
        and not hasattr(BaseModel, key)
    )


def merge_fields(first: type[BaseModel], second: type[BaseModel]) -> type[BaseModel]:
    """Merge two object schemas field by field.

    A field declared in both takes ``second``'s declaration wholesale; no
    per-field ``Annotated`` rules are combined. The merged model inherits from
    both schemas, so their ``field_validator`` and ``model_validator`` methods
    keep running, each bound to the field names it was declared for.
    ``second``'s model config wins on conflicting keys.
    """
    for schema in (first, second):
        if not is_object_schema(schema):
            raise TypeError(
                f"merge_with_and needs pydantic model classes, got {schema!r}"
            )

    # second precedes first in the MRO, so first's fields keep their position
    if issubclass(first, second):
        bases: tuple[type[BaseModel], ...] = (first,)
    elif issubclass(second, first):
        bases = (second,)
    else:
        bases = (second, first)

    fields = {
        name: (info.annotation, copy.deepcopy(info))
        for name, info in second.model_fields.items()
    }
    merged = create_model(
        first.__name__,
        __base__=bases,
        __module__=first.__module__,
        __cls_kwargs__=dict(second.model_config),
        **fields,
    )
    inherited = getattr(first, OMIT_WHEN_UNSET, frozenset())
    setattr(merged, OMIT_WHEN_UNSET, inherited - frozenset(fields))
    return merged


def as_alternative(members: Sequence[Any]) -> AlternativeSchema:
    """Build an alternative schema tried in the given order."""
    return AlternativeSchema(members)


def create_dynamic_schema(
    base_schema: Any,
    input_data: Mapping[str, Any] | None = None,
    validation_strategy: ValidationStrategy = "strict",
    schema_modification: SchemaModification = "default",
    additional_schemas: Sequence[Any] | None = None,
) -> EffectiveSchema:
    """Build the effective schema used to validate one payload.

    Args:
        base_schema: Pydantic model class describing the expected fields
        input_data: Payload about to be validated; ``allow_extra_fields``
            declares its unknown keys as untyped fields
        validation_strategy: Extra-field policy and optionality to apply
        schema_modification: Structural change applied before the strategy
        additional_schemas: Auxiliary schemas for the merge modifications

    Returns:
        A pydantic model class, or an ``AlternativeSchema`` after ``merge_with_or``

    Raises:
        ValueError: If the strategy or modification name is unknown
        TypeError: If ``merge_with_and`` is given something other than models
    """
    validation_strategy = normalize_option(validation_strategy)
    schema_modification = normalize_option(schema_modification)
    if validation_strategy not in VALIDATION_STRATEGIES:
        raise ValueError(
            f"Unknown validation strategy: {validation_strategy}. "
            f"Supported: {', '.join(VALIDATION_STRATEGIES)}"
        )
    if schema_modification not in SCHEMA_MODIFICATIONS:
        raise ValueError(
            f"Unknown schema modification: {schema_modification}. "
            f"Supported: {', '.join(SCHEMA_MODIFICATIONS)}"
        )

    input_data = input_data or {}
    additional_schemas = list(additional_schemas or [])

    schema: Any = base_schema
    if schema_modification == "merge_with_and":
        for auxiliary in additional_schemas:
            schema = merge_fields(schema, auxiliary)
    elif schema_modification == "merge_with_or":
        schema = as_alternative([schema, *additional_schemas])

    if not is_object_schema(schema):
        if validation_strategy != "strict":
            logger.warning(
                f"Validation strategy '{validation_strategy}' only applies to object "
                f"schemas; {schema!r} keeps the strictness of its own members"
            )
        return schema

    logger.debug(
        f"Applying strategy '{validation_strategy}' to {schema.__name__} "
        f"(modification: {schema_modification})"
    )
    if validation_strategy == "allow_extra_fields":
        allowed = with_extra_policy(schema, "allow")
        return with_extra_fields_declared(allowed, input_data)
    if validation_strategy == "remove_extra_fields":
        return with_extra_policy(schema, "ignore")
    if validation_strategy == "partial_strict":
        return with_extra_policy(with_all_fields_optional(schema), "forbid")
    if validation_strategy == "partial":
        return with_extra_policy(with_all_fields_optional(schema), "allow")
    return with_extra_policy(schema, "forbid")
