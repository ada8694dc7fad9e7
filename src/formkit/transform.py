"""Per-field value transformations applied before validation.

Simple type coercion (``"42"`` → ``42``) is better left to the pydantic
model; these hooks are for normalization the schema cannot express, such as
splitting a comma-separated tag string or trimming whitespace.
"""

from collections.abc import Callable, Mapping
from typing import Any

FieldTransform = Callable[[Any], Any]


def apply_data_transformations(
    data: Mapping[str, Any],
    transformations: Mapping[str, FieldTransform],
) -> dict[str, Any]:
    """Return a copy of ``data`` with each transform applied to its field.

    Transforms for fields missing from ``data`` are skipped; nothing is
    inserted. ``data`` itself is left untouched.
    """
    transformed = dict(data)
    for key, transform in transformations.items():
        if key in data:
            transformed[key] = transform(data[key])
    return transformed
