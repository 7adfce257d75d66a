"""Operator-friendly messages for Pydantic validation errors.

Belongs to the Application layer — translates Pydantic machine errors
on the configuration file into messages that point at the offending key.
"""

from __future__ import annotations

from typing import Any

# Maps (field, error_type) → message
_ERROR_MAP: dict[tuple[str, str], str] = {
    ("name", "missing"): "Every check needs a 'name'.",
    ("file", "missing"): "Every check needs a 'file' to inspect.",
    ("pattern", "missing"): "Every check needs a 'pattern'.",
    ("checks", "missing"): "The configuration needs a 'checks' list.",
    ("repository", "value_error"): "Repositories must be written as 'owner/repo'.",
    ("list", "value_error"): "Repositories must be written as 'owner/repo'.",
    ("source", "literal_error"): "Only 'github' is supported as a dynamic repository source.",
    ("enabled", "bool_parsing"): "'enabled' must be true or false.",
}


def friendly_error(
    field: str,
    error_type: str,
    location: str = "",
    fallback: str | None = None,
) -> str:
    """Return a user-friendly error message.

    Args:
        field: The last component of the failing location (e.g. ``pattern``).
        error_type: The Pydantic error type string (e.g. ``missing``).
        location: Dotted path of the failing value, prefixed to the message.
        fallback: Fallback message if no mapping exists.

    Returns:
        A message of the form ``"<location>: <explanation>"``.
    """
    message = _ERROR_MAP.get((field, error_type))
    if message is None:
        if error_type == "extra_forbidden":
            message = f"Unknown key '{field}'."
        else:
            message = fallback or f"Validation error on field '{field}'."
    return f"{location}: {message}" if location else message


def format_validation_errors(errors: list[dict[str, Any]]) -> list[str]:
    """Convert a list of Pydantic error dicts to user-friendly messages.

    Args:
        errors: Output of ``ValidationError.errors()``.

    Returns:
        List of user-friendly error strings.
    """
    result: list[str] = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", [])]
        # Tuple/list indices are kept in the location but not used as field names
        named = [part for part in loc if not part.isdigit()]
        field = named[-1] if named else ""
        result.append(
            friendly_error(field, err.get("type", ""), ".".join(loc), fallback=err.get("msg"))
        )
    return result
