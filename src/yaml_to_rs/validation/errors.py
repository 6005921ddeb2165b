"""Validation issue types and error codes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationLocation:
    """Where an issue was found: a dotted path, optionally inside a schema document."""

    path: str
    """Dotted path to the issue (e.g., 'provides.main.interface')."""

    document: Path | None = None
    """Interface or types document the path points into, if not the manifest."""

    def __str__(self) -> str:
        """Format location as string."""
        if self.document is not None:
            return f"{self.path} (in {self.document})"
        return self.path


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation issue."""

    code: str
    """Error code (e.g., 'E001', 'W003')."""

    message: str
    """Human-readable error message."""

    severity: ValidationSeverity
    """Severity level."""

    location: ValidationLocation | None = None
    """Location of the issue."""

    suggestion: str | None = None
    """Suggested fix."""

    context: dict[str, Any] = field(default_factory=dict)
    """Additional context for debugging."""

    def __str__(self) -> str:
        """Format issue as string."""
        parts = [f"[{self.code}]", self.severity.value.upper(), self.message]
        if self.location:
            parts.append(f"at {self.location}")
        if self.suggestion:
            parts.append(f"(hint: {self.suggestion})")
        return " ".join(parts)


@dataclass
class ValidationResult:
    """Issues collected over one manifest and the schemas it uses."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    @property
    def is_valid(self) -> bool:
        """Check if there are no errors (warnings are OK)."""
        return len(self.errors) == 0

    def codes(self) -> list[str]:
        """Return the codes of all issues in report order."""
        return [issue.code for issue in self.issues]

    def add(self, issue: ValidationIssue) -> None:
        """Add an issue, ignoring exact repeats."""
        if issue not in self.issues:
            self.issues.append(issue)

    def add_error(
        self,
        code: str,
        message: str,
        path: str,
        suggestion: str | None = None,
        document: Path | None = None,
        **context: Any,
    ) -> None:
        """Add an error issue."""
        self._add(ValidationSeverity.ERROR, code, message, path, suggestion, document, context)

    def add_warning(
        self,
        code: str,
        message: str,
        path: str,
        suggestion: str | None = None,
        document: Path | None = None,
        **context: Any,
    ) -> None:
        """Add a warning issue."""
        self._add(ValidationSeverity.WARNING, code, message, path, suggestion, document, context)

    def merge(self, other: ValidationResult) -> None:
        """Merge another result into this one."""
        for issue in other.issues:
            self.add(issue)

    def _add(
        self,
        severity: ValidationSeverity,
        code: str,
        message: str,
        path: str,
        suggestion: str | None,
        document: Path | None,
        context: dict[str, Any],
    ) -> None:
        self.add(
            ValidationIssue(
                code=code,
                message=message,
                severity=severity,
                location=ValidationLocation(path=path, document=document),
                suggestion=suggestion,
                context=context,
            )
        )


class ErrorCodes:
    """Standard validation error codes."""

    # E0xx - Reference errors
    E001_UNRESOLVED_INTERFACE = "E001"
    E002_AMBIGUOUS_DOCUMENT = "E002"
    E003_UNRESOLVED_TYPE = "E003"

    # E1xx - Slot naming errors
    E100_DUPLICATE_SLOT_NAME = "E100"
    E101_INVALID_SLOT_NAME = "E101"

    # E2xx - Range errors
    E200_INVALID_BOUNDS = "E200"
    E201_DEFAULT_OUT_OF_BOUNDS = "E201"

    # E3xx - Format errors
    E300_INVALID_DOCUMENT = "E300"
    E301_MALFORMED_REFERENCE = "E301"
    E302_SCHEMA_CONFLICT = "E302"

    # W0xx - Warnings
    W003_MISSING_DESCRIPTION = "W003"
