"""Validators for configuration entry bounds."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from yaml_to_rs.models.config import (
    IntegerConfigEntry,
    NumberConfigEntry,
    StringConfigEntry,
)
from yaml_to_rs.validation.base import BaseValidator
from yaml_to_rs.validation.errors import ErrorCodes, ValidationResult

if TYPE_CHECKING:
    from yaml_to_rs.models.config import ConfigEntry
    from yaml_to_rs.models.manifest import Manifest


def config_entries(manifest: Manifest) -> Iterator[tuple[str, ConfigEntry]]:
    """Yield ``(dotted path, entry)`` for module and provided-slot config."""
    for name, entry in manifest.config.items():
        yield f"config.{name}", entry
    for slot_id, provided in manifest.provides.items():
        for name, entry in provided.config.items():
            yield f"provides.{slot_id}.config.{name}", entry


class ConfigBoundsValidator(BaseValidator):
    """Validates that bounds are ordered and defaults lie within them."""

    def validate(
        self,
        manifest: Manifest,
        result: ValidationResult,
    ) -> None:
        """Check every numeric and string configuration entry."""
        for path, entry in config_entries(manifest):
            if isinstance(entry, (IntegerConfigEntry, NumberConfigEntry)):
                self._check_range(
                    path,
                    {"minimum": entry.minimum, "maximum": entry.maximum},
                    entry.default,
                    result,
                )
            elif isinstance(entry, StringConfigEntry):
                self._check_range(
                    path,
                    {"minLength": entry.min_length, "maxLength": entry.max_length},
                    len(entry.default) if entry.default is not None else None,
                    result,
                    measured="length",
                )

    def _check_range(
        self,
        path: str,
        bounds: Mapping[str, float | int | None],
        value: float | int | None,
        result: ValidationResult,
        measured: str = "value",
    ) -> None:
        (low_name, low), (high_name, high) = bounds.items()

        if low is not None and high is not None and low > high:
            result.add_error(
                code=ErrorCodes.E200_INVALID_BOUNDS,
                message=f"{low_name} ({low}) is greater than {high_name} ({high})",
                path=path,
            )
            return

        if value is None:
            return
        if (low is not None and value < low) or (high is not None and value > high):
            result.add_error(
                code=ErrorCodes.E201_DEFAULT_OUT_OF_BOUNDS,
                message=(
                    f"Default {measured} {value} is outside "
                    f"[{'-' if low is None else low}, {'-' if high is None else high}]"
                ),
                path=f"{path}.default",
                suggestion=f"Choose a default within {low_name}/{high_name}",
            )
