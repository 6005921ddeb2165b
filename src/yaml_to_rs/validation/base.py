"""Base validator class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from yaml_to_rs.validation.errors import ValidationResult

if TYPE_CHECKING:
    from yaml_to_rs.models.manifest import Manifest


class BaseValidator(ABC):
    """Base class for validators."""

    @abstractmethod
    def validate(
        self,
        manifest: Manifest,
        result: ValidationResult,
    ) -> None:
        """Validate the manifest and add issues to result.

        Args:
        ----
            manifest: The module manifest to validate.
            result: The result object to add issues to.

        """
        ...


class CompositeValidator(BaseValidator):
    """Combines multiple validators."""

    def __init__(self, validators: list[BaseValidator] | None = None) -> None:
        self.validators = validators or []

    def add(self, validator: BaseValidator) -> None:
        self.validators.append(validator)

    def validate(
        self,
        manifest: Manifest,
        result: ValidationResult,
    ) -> None:
        """Run all validators in order."""
        for validator in self.validators:
            validator.validate(manifest, result)
