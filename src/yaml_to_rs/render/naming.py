"""Identifier case conversion used by the template filters."""

from __future__ import annotations

import re

# Acronym before a capitalized word, a word with optional leading capital,
# or a trailing acronym. Digits stay attached to the preceding word.
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z0-9])|[A-Z]?[a-z0-9]+|[A-Z]+")


def split_words(name: str) -> list[str]:
    """Split an identifier into words.

    Underscores, hyphens, spaces and case changes are word boundaries.

    Examples
    --------
        >>> split_words("get_max_current")
        ['get', 'max', 'current']
        >>> split_words("HTTPServer")
        ['HTTP', 'Server']

    """
    return _WORD_PATTERN.findall(name)


def pascal_case(name: str) -> str:
    """Convert an identifier to PascalCase (``evse_manager`` -> ``EvseManager``)."""
    return "".join(word.capitalize() for word in split_words(name))


def snake_case(name: str) -> str:
    """Convert an identifier to snake_case (``maxCurrent`` -> ``max_current``)."""
    return "_".join(word.lower() for word in split_words(name))


# Strict and reserved keywords of the 2021 edition.
RUST_KEYWORDS = frozenset(
    {
        "abstract", "as", "async", "await", "become", "box", "break", "const",
        "continue", "crate", "do", "dyn", "else", "enum", "extern", "false",
        "final", "fn", "for", "if", "impl", "in", "let", "loop", "macro",
        "match", "mod", "move", "mut", "override", "priv", "pub", "ref",
        "return", "self", "static", "struct", "super", "trait", "true", "try",
        "type", "typeof", "unsafe", "unsized", "use", "virtual", "where",
        "while", "yield",
    }
)

# Keywords that cannot be written as raw identifiers.
_NON_RAW_KEYWORDS = frozenset({"crate", "self", "super"})


def rust_identifier(name: str) -> str:
    """Convert an identifier to a snake_case Rust field, argument or function name.

    Keywords are escaped as raw identifiers; the few that Rust does not
    allow in raw form get a trailing underscore.

    Examples
    --------
        >>> rust_identifier("maxCurrent")
        'max_current'
        >>> rust_identifier("type")
        'r#type'
        >>> rust_identifier("self")
        'self_'

    """
    identifier = snake_case(name)
    if identifier in _NON_RAW_KEYWORDS:
        return f"{identifier}_"
    if identifier in RUST_KEYWORDS:
        return f"r#{identifier}"
    return identifier
