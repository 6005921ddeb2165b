"""Tests for pydantic error translation."""

from typing import Any

import pytest
from pydantic import ValidationError
from pydantic_core import ErrorDetails
from yaml_to_rs.cli.pydantic_errors import (
    format_pydantic_location,
    get_suggestion_for_error,
    translate_pydantic_error,
)
from yaml_to_rs.models import Manifest, RequiresEntry, Variable


def first_error(model: Any, data: dict[str, Any]) -> ErrorDetails:
    with pytest.raises(ValidationError) as exc_info:
        model.model_validate(data)
    return exc_info.value.errors()[0]


class TestTranslatePydanticError:
    """Tests for translate_pydantic_error function."""

    def test_missing(self) -> None:
        """Should explain missing fields."""
        error = first_error(Manifest, {"description": "x", "provides": {}})
        assert translate_pydantic_error(error) == "This field is required but was not provided"

    def test_unknown_type_tag(self) -> None:
        """Should list the known argument types."""
        error = first_error(Variable, {"type": "decimal"})
        message = translate_pydantic_error(error)

        assert message.startswith("Unknown type 'decimal', expected one of:")
        assert "'integer'" in message

    def test_missing_type_tag(self) -> None:
        """Should explain that 'type' is required."""
        error = first_error(Variable, {"description": "No type"})
        assert translate_pydantic_error(error) == "The 'type' field is required"

    def test_value_error_prefix_stripped(self) -> None:
        """Should drop pydantic's 'Value error, ' prefix."""
        error = first_error(
            RequiresEntry, {"interface": "x", "min_connections": 2, "max_connections": 1}
        )
        assert translate_pydantic_error(error) == (
            "min_connections (2) cannot exceed max_connections (1)"
        )

    def test_greater_than_equal(self) -> None:
        """Should state the lower bound."""
        error = first_error(RequiresEntry, {"interface": "x", "min_connections": -1})
        assert translate_pydantic_error(error) == "Must be at least 0"

    def test_too_short(self) -> None:
        """Should state the minimum item count."""
        error = first_error(Variable, {"type": "string", "enum": []})
        assert translate_pydantic_error(error) == "Must have at least 1 item(s)"

    def test_fallback_to_pydantic_message(self) -> None:
        """Should keep pydantic's message for untranslated errors."""
        error: ErrorDetails = {
            "type": "url_parsing",
            "loc": ("metadata",),
            "msg": "Input should be a valid URL",
            "input": "x",
        }
        assert translate_pydantic_error(error) == "Input should be a valid URL"


class TestFormatPydanticLocation:
    """Tests for format_pydantic_location function."""

    @pytest.mark.parametrize(
        ("loc", "expected"),
        [
            (("provides",), "provides"),
            (("provides", "main", "interface"), "provides.main.interface"),
            (("metadata", "authors", 0), "metadata.authors[0]"),
            ((), ""),
        ],
    )
    def test_format(self, loc: tuple, expected: str) -> None:
        """Should join names with dots and indexes with brackets."""
        assert format_pydantic_location(loc) == expected


class TestGetSuggestionForError:
    """Tests for get_suggestion_for_error function."""

    def test_extra_forbidden(self) -> None:
        """Should suggest checking for typos."""
        with pytest.raises(ValidationError) as exc_info:
            Manifest.model_validate({"unknown": 1})
        extra = next(e for e in exc_info.value.errors() if e["type"] == "extra_forbidden")

        assert get_suggestion_for_error(extra) == "Remove this field or check for typos"

    def test_no_suggestion(self) -> None:
        """Should return None for errors without a hint."""
        error = first_error(RequiresEntry, {"interface": "x", "min_connections": -1})
        assert get_suggestion_for_error(error) is None
