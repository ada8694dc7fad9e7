"""Schema-shaping option types and the alternative-of-schemas wrapper.

An effective schema is either an object-shaped schema (a pydantic
``BaseModel`` subclass) or an ``AlternativeSchema`` whose members are tried
left to right.
"""

from collections.abc import Sequence
from typing import Annotated, Any, Literal, Union, get_args

from pydantic import BaseModel, Field, TypeAdapter

ValidationStrategy = Literal[
    "strict",
    "allow_extra_fields",
    "remove_extra_fields",
    "partial_strict",
    "partial",
]

SchemaModification = Literal["default", "merge_with_and", "merge_with_or"]

OutputFormat = Literal["object", "form_data"]

VALIDATION_STRATEGIES: tuple[str, ...] = get_args(ValidationStrategy)
SCHEMA_MODIFICATIONS: tuple[str, ...] = get_args(SchemaModification)
OUTPUT_FORMATS: tuple[str, ...] = get_args(OutputFormat)

# camelCase spellings accepted in option values and config files
OPTION_ALIASES = {
    "allowExtraFields": "allow_extra_fields",
    "removeExtraFields": "remove_extra_fields",
    "partial-strict": "partial_strict",
    "mergeWithAnd": "merge_with_and",
    "mergeWithOr": "merge_with_or",
    "formData": "form_data",
    "encodedForm": "form_data",
}


def normalize_option(value: Any) -> Any:
    """Map a camelCase option spelling to its canonical name."""
    if isinstance(value, str):
        return OPTION_ALIASES.get(value, value)
    return value


def is_object_schema(schema: Any) -> bool:
    """True when ``schema`` is a pydantic model class."""
    return isinstance(schema, type) and issubclass(schema, BaseModel)


class AlternativeSchema:
    """Schema satisfied when the data matches any one of its members.

    Members are tried in declaration order and the first one that fully
    validates determines the output shape.
    """

    def __init__(self, members: Sequence[Any]) -> None:
        if not members:
            raise ValueError("An alternative schema needs at least one member")
        self.members: tuple[Any, ...] = tuple(members)

    def type_adapter(self) -> TypeAdapter:
        """Build a pydantic adapter validating the members left to right."""
        members = tuple(dict.fromkeys(self.members))
        if len(members) == 1:
            return TypeAdapter(members[0])
        return TypeAdapter(Annotated[Union[members], Field(union_mode="left_to_right")])

    def __repr__(self) -> str:
        names = ", ".join(getattr(m, "__name__", repr(m)) for m in self.members)
        return f"AlternativeSchema([{names}])"


EffectiveSchema = Union[type[BaseModel], AlternativeSchema]
