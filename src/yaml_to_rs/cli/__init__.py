"""CLI module for yaml-to-rs."""

from yaml_to_rs.cli.error_formatter import ErrorFormatter, ErrorTable, ErrorTree
from yaml_to_rs.cli.exception_handler import handle_exceptions
from yaml_to_rs.cli.pydantic_errors import (
    format_pydantic_location,
    get_suggestion_for_error,
    translate_pydantic_error,
)
from yaml_to_rs.cli_main import app

__all__ = [
    "app",
    "ErrorFormatter",
    "ErrorTable",
    "ErrorTree",
    "handle_exceptions",
    "format_pydantic_location",
    "get_suggestion_for_error",
    "translate_pydantic_error",
]
