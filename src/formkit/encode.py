"""Serialize a plain mapping into a multi-valued form container.

Nested dicts and lists are flattened into bracketed keys, the way browsers
and most form parsers expect them::

    {"user": {"name": "Ada"}, "tags": ["a", "b"], "rows": [{"n": 1}]}

becomes ``user[name]=Ada``, ``tags=a``, ``tags=b``, ``rows[0][n]=1``.
"""

from collections.abc import Mapping
from datetime import date, time
from enum import Enum
from typing import Any

from starlette.datastructures import MultiDict, UploadFile


def _scalar(value: Any) -> Any:
    """Convert a leaf value to what the form container stores."""
    if value is None:
        return ""
    if isinstance(value, (UploadFile, bytes, bytearray)):
        return value
    if isinstance(value, Enum):
        return _scalar(value.value)
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _append(form: MultiDict, key: str, value: Any) -> None:
    if isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            if isinstance(item, (list, tuple, dict)):
                _append(form, f"{key}[{index}]", item)
            else:
                # Repeating the key rebuilds a multi-valued field
                form.append(key, _scalar(item))
        return
    if isinstance(value, dict):
        for child_key, child_value in value.items():
            _append(form, f"{key}[{child_key}]", child_value)
        return
    form.append(key, _scalar(value))


def convert_mapping_to_form_data(mapping: Mapping[str, Any]) -> MultiDict:
    """Encode ``mapping`` as a starlette ``MultiDict``.

    Uploaded files keep their filename and content type; raw bytes are added
    as unnamed blobs. Dates use ISO 8601, booleans ``"true"``/``"false"``,
    ``None`` an empty string.
    """
    form = MultiDict()
    for key, value in mapping.items():
        _append(form, key, value)
    return form
