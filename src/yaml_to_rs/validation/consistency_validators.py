"""Validators for slot naming and documentation consistency."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from yaml_to_rs.errors import CodegenError
from yaml_to_rs.validation.base import BaseValidator
from yaml_to_rs.validation.errors import ErrorCodes, ValidationResult
from yaml_to_rs.validation.reference_validators import slot_interfaces

if TYPE_CHECKING:
    from yaml_to_rs.models.manifest import Manifest
    from yaml_to_rs.models.repository import DocumentRepository

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class SlotNameValidator(BaseValidator):
    """Validates that slot names are identifiers and unique across slot kinds."""

    def validate(
        self,
        manifest: Manifest,
        result: ValidationResult,
    ) -> None:
        """Check provides/requires slot names."""
        for section, slots in (("provides", manifest.provides), ("requires", manifest.requires)):
            for slot_id in slots:
                if not IDENTIFIER_PATTERN.match(slot_id):
                    result.add_error(
                        code=ErrorCodes.E101_INVALID_SLOT_NAME,
                        message=f"Slot name '{slot_id}' is not a valid identifier",
                        path=f"{section}.{slot_id}",
                        suggestion="Use letters, digits and underscores, not starting with a digit",
                    )

        for slot_id in manifest.provides:
            if slot_id in manifest.requires:
                result.add_error(
                    code=ErrorCodes.E100_DUPLICATE_SLOT_NAME,
                    message=(
                        f"Slot name '{slot_id}' is used in both 'provides' and 'requires'"
                    ),
                    path=f"requires.{slot_id}",
                    suggestion="Rename one of the slots; both become fields of the module",
                )


class DescriptionValidator(BaseValidator):
    """Warns about interface commands and variables without a description."""

    def __init__(self, repository: DocumentRepository) -> None:
        self.repository = repository

    def validate(
        self,
        manifest: Manifest,
        result: ValidationResult,
    ) -> None:
        """Check descriptions of every distinct interface used by the manifest."""
        seen: set[str] = set()
        for _, interface_name in slot_interfaces(manifest):
            if interface_name in seen:
                continue
            seen.add(interface_name)

            try:
                interface = self.repository.get_interface(interface_name)
            except CodegenError:
                continue

            for cmd_name, command in interface.cmds.items():
                if not command.description.strip():
                    result.add_warning(
                        code=ErrorCodes.W003_MISSING_DESCRIPTION,
                        message=f"Command '{cmd_name}' of '{interface_name}' has no description",
                        path=f"interfaces.{interface_name}.cmds.{cmd_name}.description",
                    )

            for var_name, variable in interface.vars.items():
                if not (variable.description or "").strip():
                    result.add_warning(
                        code=ErrorCodes.W003_MISSING_DESCRIPTION,
                        message=f"Variable '{var_name}' of '{interface_name}' has no description",
                        path=f"interfaces.{interface_name}.vars.{var_name}",
                        suggestion="Descriptions become doc comments in the generated code",
                    )
