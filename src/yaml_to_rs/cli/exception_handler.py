"""CLI exception handling."""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from yaml_to_rs.errors import AmbiguousError, CodegenError, ParseError
from yaml_to_rs.validation.validator import ValidationError

T = TypeVar("T")

console = Console(stderr=True)


def handle_exceptions(
    verbose: bool = False,
    error_console: Console | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Handle exceptions in CLI commands with formatted output.

    Every handled exception ends the command with exit code 1.

    Args:
    ----
        verbose: Whether to show full tracebacks.
        error_console: Console to print to; defaults to stderr.

    Returns:
    -------
        Decorator function.

    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: object, **kwargs: object) -> T:
            out = error_console or console
            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except ValidationError as e:
                _handle_validation_error(e, out)
                raise typer.Exit(1) from None
            except ParseError as e:
                _handle_parse_error(e, out, verbose)
                raise typer.Exit(1) from None
            except CodegenError as e:
                _handle_codegen_error(e, out)
                raise typer.Exit(1) from None
            except PermissionError as e:
                _handle_permission_error(e, out)
                raise typer.Exit(1) from None
            except Exception as e:
                _handle_generic_error(e, out, verbose)
                raise typer.Exit(1) from None

        return wrapper

    return decorator


def _handle_validation_error(error: ValidationError, out: Console) -> None:
    """Handle semantic validation errors."""
    from yaml_to_rs.cli.error_formatter import ErrorFormatter

    ErrorFormatter(out).format_validation_result(error.result)


def _handle_parse_error(error: ParseError, out: Console, verbose: bool) -> None:
    """Handle documents that fail to load or match their schema."""
    from yaml_to_rs.cli.pydantic_errors import (
        format_pydantic_location,
        get_suggestion_for_error,
        translate_pydantic_error,
    )

    out.print(f"[red bold]Schema Validation Failed[/red bold] ({error.kind})")
    if error.path is not None:
        out.print(f"[dim]File: {error.path}[/dim]")
    out.print()

    if not error.errors:
        out.print(f"[red]✗[/red] {escape(error.message)}")
        out.print()
        return

    for err in error.errors:
        location = format_pydantic_location(err["loc"])
        suggestion = get_suggestion_for_error(err)

        out.print(f"[red]✗[/red] {location}")
        out.print(f"  {escape(translate_pydantic_error(err))}")
        out.print(f"  [dim]({err['type']})[/dim]")

        if suggestion:
            out.print(f"  [green]💡 {suggestion}[/green]")

        out.print()

    if verbose:
        out.print("[dim]Full error:[/dim]")
        out.print(escape(str(error)))


def _handle_codegen_error(error: CodegenError, out: Console) -> None:
    """Handle resolution and render errors."""
    lines = [f"[red]{escape(error.message)}[/red]"]
    if error.path is not None:
        lines.append(f"\nDocument: {error.path}")
    if isinstance(error, AmbiguousError):
        lines.append("\nCandidates:")
        lines.extend(f"  • {match}" for match in error.matches)
    for key, value in sorted(error.detail.items()):
        lines.append(f"[dim]{key}: {escape(str(value))}[/dim]")

    out.print(
        Panel(
            "\n".join(lines),
            title=f"Error: {error.kind}",
            border_style="red",
        )
    )


def _handle_permission_error(error: PermissionError, out: Console) -> None:
    """Handle permission errors."""
    filename = error.filename or "unknown"
    out.print(
        Panel(
            f"[red]Permission denied: {filename}[/red]\n\n" "Check file permissions and try again.",
            title="Error",
            border_style="red",
        )
    )


def _handle_generic_error(error: Exception, out: Console, verbose: bool) -> None:
    """Handle unexpected errors."""
    out.print(
        Panel(
            f"[red]An unexpected error occurred:[/red]\n{error}",
            title="Error",
            border_style="red",
        )
    )

    if verbose:
        out.print("\n[dim]Traceback:[/dim]")
        out.print(traceback.format_exc())
    else:
        out.print("\n[dim]Use --verbose for full traceback[/dim]")
