"""Semantic validation of module manifests against their schema roots."""

from yaml_to_rs.validation.errors import (
    ErrorCodes,
    ValidationIssue,
    ValidationLocation,
    ValidationResult,
    ValidationSeverity,
)
from yaml_to_rs.validation.validator import (
    ManifestValidator,
    ValidationError,
)

__all__ = [
    "ErrorCodes",
    "ManifestValidator",
    "ValidationError",
    "ValidationIssue",
    "ValidationLocation",
    "ValidationResult",
    "ValidationSeverity",
]
