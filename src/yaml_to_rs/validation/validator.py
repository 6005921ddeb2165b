"""Main validator combining all validation rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from yaml_to_rs.validation.base import CompositeValidator
from yaml_to_rs.validation.config_validators import ConfigBoundsValidator
from yaml_to_rs.validation.consistency_validators import (
    DescriptionValidator,
    SlotNameValidator,
)
from yaml_to_rs.validation.errors import ValidationResult, ValidationSeverity
from yaml_to_rs.validation.reference_validators import (
    InterfaceReferenceValidator,
    TypeReferenceValidator,
)

if TYPE_CHECKING:
    from yaml_to_rs.models.manifest import Manifest
    from yaml_to_rs.models.repository import DocumentRepository


class ManifestValidator:
    """Main validator for module manifests.

    Combines reference validators (interface and type resolution across
    schema roots) with consistency validators (slot names, config bounds,
    descriptions).
    """

    def __init__(self, repository: DocumentRepository, strict: bool = False) -> None:
        """Initialize validator.

        Args:
        ----
            repository: Source of the interface and types documents.
            strict: If True, treat warnings as errors.

        """
        self.strict = strict
        self._validator = CompositeValidator(
            [
                # Reference validators
                InterfaceReferenceValidator(repository),
                TypeReferenceValidator(repository),
                # Consistency validators
                SlotNameValidator(),
                ConfigBoundsValidator(),
                DescriptionValidator(repository),
            ]
        )

    def validate(self, manifest: Manifest) -> ValidationResult:
        """Validate a manifest against its schema roots.

        Args:
        ----
            manifest: The manifest to validate.

        Returns:
        -------
            ValidationResult with all issues found.

        """
        result = ValidationResult()
        self._validator.validate(manifest, result)
        return result

    def validate_and_raise(self, manifest: Manifest) -> ValidationResult:
        """Validate and raise exception if invalid.

        Raises
        ------
            ValidationError: If there are errors, or warnings in strict mode.

        """
        result = self.validate(manifest)

        if not result.is_valid:
            raise ValidationError(result)

        if self.strict and result.warnings:
            raise ValidationError(result)

        return result


class ValidationError(Exception):
    """Raised when validation fails."""

    def __init__(self, result: ValidationResult) -> None:
        """Initialize with validation result.

        Args:
        ----
            result: The validation result containing issues.

        """
        self.result = result
        error_count = len(result.errors)
        warning_count = len(result.warnings)

        parts = []
        if error_count:
            parts.append(f"{error_count} error(s)")
        if warning_count:
            parts.append(f"{warning_count} warning(s)")

        message = f"Validation failed: {', '.join(parts)}"
        super().__init__(message)

    def format_issues(self) -> str:
        """Format all issues as a string, errors first."""
        lines = [f"ERROR: {issue}" for issue in self.result.errors]
        lines.extend(f"WARNING: {issue}" for issue in self.result.warnings)
        return "\n".join(lines)

    @property
    def errors_only(self) -> list[str]:
        return [
            str(issue) for issue in self.result.issues if issue.severity == ValidationSeverity.ERROR
        ]
