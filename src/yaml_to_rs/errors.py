"""Error kinds raised by the schema resolution pipeline.

Every error is fatal to a run. Each carries enough context (document path,
reference string, type name) to locate the offending schema source.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class CodegenError(Exception):
    """Base class for all pipeline errors."""

    kind = "error"

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        **detail: Any,
    ) -> None:
        """Initialize CodegenError.

        Args:
        ----
            message: Error message describing what went wrong.
            path: Optional path to the document that caused the error.
            **detail: Additional context (reference, type name, ...).

        """
        self.message = message
        self.path = path
        self.detail = detail
        super().__init__(f"{path}: {message}" if path else message)


class NotFoundError(CodegenError):
    """A document is absent from every search root, or a type from its document."""

    kind = "not found"


class AmbiguousError(CodegenError):
    """A logical document name resolves in more than one search root."""

    kind = "ambiguous"

    def __init__(self, message: str, matches: list[Path], **detail: Any) -> None:
        """Initialize AmbiguousError.

        Args:
        ----
            message: Error message describing what went wrong.
            matches: Every path that parsed successfully.
            **detail: Additional context.

        """
        self.matches = matches
        super().__init__(message, **detail)


class ParseError(CodegenError):
    """A document fails structural or strict-schema deserialization."""

    kind = "parse error"

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        errors: list[Any] | None = None,
        **detail: Any,
    ) -> None:
        """Initialize ParseError.

        Args:
        ----
            message: Error message describing what went wrong.
            path: Optional path to the document that failed to parse.
            errors: Pydantic error details, when the failure came from a model.
            **detail: Additional context.

        """
        self.errors = errors or []
        super().__init__(message, path, **detail)


class MalformedReferenceError(ParseError):
    """A `$ref` string is missing its separator, path or type name."""

    kind = "malformed reference"

    def __init__(self, reference: str, reason: str) -> None:
        """Initialize MalformedReferenceError.

        Args:
        ----
            reference: The offending reference string.
            reason: Why the reference was rejected.

        """
        self.reference = reference
        super().__init__(f"Malformed reference '{reference}': {reason}", reference=reference)


class SchemaConflictError(CodegenError):
    """A schema node is self-contradictory or unsupported for code generation."""

    kind = "schema conflict"


class RenderError(CodegenError):
    """The render context does not satisfy the template's variable contract."""

    kind = "render error"
