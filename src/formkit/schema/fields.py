"""Field declaration helpers."""

from collections.abc import Callable
from typing import Any

from pydantic import AfterValidator
from pydantic_core import PydanticCustomError


def refine(
    predicate: Callable[[Any], bool],
    message: str,
    error_type: str = "refine",
) -> AfterValidator:
    """Build a validator that rejects values failing ``predicate``.

    The reported issue message is exactly ``message``, without pydantic's
    "Value error, " prefix, so it can be shown to end users as-is.

    Example:
        >>> Age = Annotated[int, refine(lambda v: v >= 18, "Must be adult")]
    """

    def _check(value: Any) -> Any:
        if not predicate(value):
            raise PydanticCustomError(error_type, message)
        return value

    return AfterValidator(_check)
