"""Tests for identifier case conversion."""

import pytest
from yaml_to_rs.render import pascal_case, rust_identifier, snake_case, split_words


class TestSplitWords:
    """Tests for split_words function."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("get_max_current", ["get", "max", "current"]),
            ("maxCurrent", ["max", "Current"]),
            ("HTTPServer", ["HTTP", "Server"]),
            ("board-support", ["board", "support"]),
            ("phase2_current", ["phase2", "current"]),
            ("EVSE", ["EVSE"]),
        ],
    )
    def test_boundaries(self, name: str, expected: list[str]) -> None:
        """Should split on separators and case changes."""
        assert split_words(name) == expected


class TestPascalCase:
    """Tests for pascal_case function."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("evse_manager", "EvseManager"),
            ("board_support", "BoardSupport"),
            ("HTTPServer", "HttpServer"),
            ("Charging", "Charging"),
            ("cType2", "CType2"),
            ("main", "Main"),
        ],
    )
    def test_conversion(self, name: str, expected: str) -> None:
        """Should capitalize every word and join them."""
        assert pascal_case(name) == expected


class TestSnakeCase:
    """Tests for snake_case function."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("maxCurrent", "max_current"),
            ("GetState", "get_state"),
            ("energy_Wh_import", "energy_wh_import"),
            ("session_event", "session_event"),
            ("HTTPServer", "http_server"),
        ],
    )
    def test_conversion(self, name: str, expected: str) -> None:
        """Should lowercase every word and join with underscores."""
        assert snake_case(name) == expected


class TestRustIdentifier:
    """Tests for rust_identifier function."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("maxCurrent", "max_current"),
            ("type", "r#type"),
            ("ref", "r#ref"),
            ("Match", "r#match"),
            ("async", "r#async"),
            ("self", "self_"),
            ("Self", "self_"),
            ("super", "super_"),
            ("crate", "crate_"),
            ("type_id", "type_id"),
        ],
    )
    def test_conversion(self, name: str, expected: str) -> None:
        """Should snake-case names and escape Rust keywords."""
        assert rust_identifier(name) == expected
