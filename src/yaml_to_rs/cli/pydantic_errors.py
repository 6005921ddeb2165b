"""Translate Pydantic errors to user-friendly messages."""

from __future__ import annotations

from typing import Any

from pydantic_core import ErrorDetails

# Translation map for Pydantic error types
ERROR_TRANSLATIONS: dict[str, str] = {
    "missing": "This field is required but was not provided",
    "extra_forbidden": "This field is not allowed in this context",
    "string_type": "Must be a string",
    "int_type": "Must be an integer",
    "int_parsing": "Must be an integer",
    "float_type": "Must be a number",
    "float_parsing": "Must be a number",
    "bool_type": "Must be true or false",
    "bool_parsing": "Must be true or false",
    "list_type": "Must be a list",
    "dict_type": "Must be a mapping",
    "model_type": "Must be a mapping",
    "literal_error": "Must be one of the allowed values",
    "union_tag_invalid": "Unknown type",
    "union_tag_not_found": "The 'type' field is required",
    "value_error": "Invalid value",
    "string_too_short": "String is too short",
    "too_short": "Must not be empty",
    "greater_than_equal": "Value is too small",
    "less_than_equal": "Value is too large",
}


def _context(error: ErrorDetails) -> dict[str, Any]:
    return error.get("ctx") or {}


def translate_pydantic_error(error: ErrorDetails) -> str:
    """Translate a Pydantic error to a user-friendly message.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        User-friendly error message.

    """
    error_type = error["type"]
    ctx = _context(error)

    # Check for specific translations, fallback to Pydantic's message
    base_msg = ERROR_TRANSLATIONS.get(error_type, error["msg"])

    # Add context-specific details
    if error_type == "literal_error":
        base_msg = f"Must be one of: {ctx.get('expected', 'unknown')}"

    elif error_type == "union_tag_invalid":
        base_msg = f"Unknown type '{ctx.get('tag')}', expected one of: {ctx.get('expected_tags')}"

    elif error_type == "string_too_short":
        base_msg = f"Must be at least {ctx.get('min_length', 0)} characters"

    elif error_type == "too_short":
        base_msg = f"Must have at least {ctx.get('min_length', 0)} item(s)"

    elif error_type == "greater_than_equal":
        base_msg = f"Must be at least {ctx.get('ge', 0)}"

    elif error_type == "less_than_equal":
        base_msg = f"Must be at most {ctx.get('le', 0)}"

    elif error_type == "value_error":
        base_msg = error["msg"].removeprefix("Value error, ")

    return base_msg


def format_pydantic_location(loc: tuple[str | int, ...]) -> str:
    """Format Pydantic location tuple to readable path.

    Args:
    ----
        loc: Location tuple from Pydantic error.

    Returns:
    -------
        Formatted path string.

    """
    parts: list[str] = []
    for part in loc:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        else:
            if parts:
                parts.append(".")
            parts.append(str(part))

    return "".join(parts)


def get_suggestion_for_error(error: ErrorDetails) -> str | None:
    """Get a suggestion for how to fix the error.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        Suggestion string or None.

    """
    ctx = _context(error)

    suggestions: dict[str, str] = {
        "missing": "Add the required field to your YAML",
        "extra_forbidden": "Remove this field or check for typos",
        "literal_error": f"Use one of the allowed values: {ctx.get('expected', '')}",
        "union_tag_invalid": f"Use one of: {ctx.get('expected_tags', '')}",
        "union_tag_not_found": "Add a 'type' field (null, boolean, string, number, ...)",
    }

    return suggestions.get(error["type"])
