"""Pull a flat field mapping out of submitted form data.

Accepts either a multi-valued form container (starlette ``FormData`` or
``MultiDict``, or anything else exposing ``getlist``) or a plain mapping.
The source is never modified.
"""

import logging
from collections.abc import Mapping
from typing import Any

from formkit.extract.models import ExtractionOptions

logger = logging.getLogger(__name__)


def _is_multi_valued(source: Any) -> bool:
    return callable(getattr(source, "getlist", None))


def extract_data_from_form_data(
    source: Mapping[str, Any],
    options: ExtractionOptions | None = None,
) -> dict[str, Any]:
    """Extract field values from form data or a plain mapping.

    For a multi-valued container, a key submitted several times yields the
    list of its values in submission order; a key submitted once yields the
    bare value. Plain mappings are copied as given.

    Args:
        source: Form container or mapping to read
        options: Renaming and include/exclude filtering

    Returns:
        New dict of extracted field values
    """
    options = options or ExtractionOptions()
    include = set(options.include_fields or ())
    exclude = set(options.exclude_fields)

    def keep(key: str) -> bool:
        if include and key not in include:
            return False
        return key not in exclude

    def rename(key: str) -> str:
        return options.key_transforms.get(key) or key

    result: dict[str, Any] = {}
    if _is_multi_valued(source):
        for key in source.keys():
            if not keep(key):
                continue
            values = source.getlist(key)
            result[rename(key)] = list(values) if len(values) > 1 else values[0]
    else:
        for key, value in source.items():
            if keep(key):
                result[rename(key)] = value

    logger.debug(f"Extracted {len(result)} field(s): {sorted(result)}")
    return result
