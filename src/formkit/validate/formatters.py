"""Render a failed validation result for display.

Three views of the same issue list: a path → message dict, a list of
``{"key", "message"}`` entries, and a newline-joined string. Paths are
dot-joined (``["address", "street"]`` → ``"address.street"``).
All three are empty for a successful result.
"""

from formkit.validate.models import ValidationResult


def _join_path(path: list[str | int]) -> str:
    return ".".join(str(segment) for segment in path)


def format_errors_as_dict(result: ValidationResult) -> dict[str, str]:
    """Map each dot-joined path to its message; a later issue on the same path wins."""
    if result.success:
        return {}
    return {_join_path(issue.path): issue.message for issue in result.issues}


def format_errors_as_list(result: ValidationResult) -> list[dict[str, str]]:
    """One ``{"key", "message"}`` entry per issue, in reported order."""
    if result.success:
        return []
    return [
        {"key": _join_path(issue.path), "message": issue.message}
        for issue in result.issues
    ]


def format_errors_as_string(result: ValidationResult) -> str:
    """All messages joined by newlines."""
    if result.success:
        return ""
    return "\n".join(issue.message for issue in result.issues)
