"""Validators for interface and type references across schema documents."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from yaml_to_rs.errors import (
    AmbiguousError,
    CodegenError,
    MalformedReferenceError,
    NotFoundError,
    ParseError,
    SchemaConflictError,
)
from yaml_to_rs.transform.refs import extract_typed_refs
from yaml_to_rs.transform.resolver import TypeResolver
from yaml_to_rs.validation.base import BaseValidator
from yaml_to_rs.validation.errors import ErrorCodes, ValidationResult

if TYPE_CHECKING:
    from yaml_to_rs.ir.types import TypeRef
    from yaml_to_rs.models.arguments import Variable
    from yaml_to_rs.models.interface import Interface
    from yaml_to_rs.models.manifest import Manifest
    from yaml_to_rs.models.repository import DocumentRepository


def error_code(error: CodegenError, not_found: str) -> str:
    """Map a pipeline error to its validation code.

    Args:
    ----
        error: The error raised while loading or resolving.
        not_found: Code to use for NotFoundError in this context.

    """
    if isinstance(error, NotFoundError):
        return not_found
    if isinstance(error, AmbiguousError):
        return ErrorCodes.E002_AMBIGUOUS_DOCUMENT
    if isinstance(error, MalformedReferenceError):
        return ErrorCodes.E301_MALFORMED_REFERENCE
    if isinstance(error, ParseError):
        return ErrorCodes.E300_INVALID_DOCUMENT
    if isinstance(error, SchemaConflictError):
        return ErrorCodes.E302_SCHEMA_CONFLICT
    return ErrorCodes.E300_INVALID_DOCUMENT


def slot_interfaces(manifest: Manifest) -> Iterator[tuple[str, str]]:
    """Yield ``(manifest path, interface name)`` for every slot, provides first."""
    for slot_id, provided in manifest.provides.items():
        yield f"provides.{slot_id}.interface", provided.interface
    for slot_id, required in manifest.requires.items():
        yield f"requires.{slot_id}.interface", required.interface


def interface_variables(interface: Interface) -> Iterator[tuple[str, Variable]]:
    """Yield ``(dotted path, variable)`` for every var, argument and result."""
    for name, variable in interface.vars.items():
        yield f"vars.{name}", variable
    for cmd_name, command in interface.cmds.items():
        for arg_name, arg in command.arguments.items():
            yield f"cmds.{cmd_name}.arguments.{arg_name}", arg
        if command.result is not None:
            yield f"cmds.{cmd_name}.result", command.result


class InterfaceReferenceValidator(BaseValidator):
    """Validates that every slot names exactly one loadable interface document."""

    def __init__(self, repository: DocumentRepository) -> None:
        self.repository = repository

    def validate(
        self,
        manifest: Manifest,
        result: ValidationResult,
    ) -> None:
        """Load the interface of each slot and report failures."""
        for path, interface_name in slot_interfaces(manifest):
            try:
                self.repository.get_interface(interface_name)
            except CodegenError as e:
                result.add_error(
                    code=error_code(e, ErrorCodes.E001_UNRESOLVED_INTERFACE),
                    message=f"Interface '{interface_name}': {e.message}",
                    path=path,
                    suggestion=self._suggestion(e, interface_name),
                    document=e.path,
                    interface=interface_name,
                )

    def _suggestion(self, error: CodegenError, interface_name: str) -> str | None:
        if isinstance(error, NotFoundError):
            return f"Add interfaces/{interface_name}.yaml under one of the schema roots"
        if isinstance(error, AmbiguousError):
            return "Remove the duplicate document from all but one schema root"
        return None


class TypeReferenceValidator(BaseValidator):
    """Validates that the referenced type closure of every used interface resolves.

    Interfaces that fail to load are skipped; they are reported by
    InterfaceReferenceValidator.
    """

    def __init__(self, repository: DocumentRepository) -> None:
        self.repository = repository
        self.resolver = TypeResolver(repository)

    def validate(
        self,
        manifest: Manifest,
        result: ValidationResult,
    ) -> None:
        """Resolve the types of each distinct interface."""
        seen: set[str] = set()
        for _, interface_name in slot_interfaces(manifest):
            if interface_name in seen:
                continue
            seen.add(interface_name)

            try:
                interface = self.repository.get_interface(interface_name)
            except CodegenError:
                continue

            roots = self._collect_refs(interface_name, interface, result)
            try:
                self.resolver.resolve_references(roots)
            except CodegenError as e:
                result.add_error(
                    code=error_code(e, ErrorCodes.E003_UNRESOLVED_TYPE),
                    message=e.message,
                    path=f"interfaces.{interface_name}",
                    document=e.path,
                    **e.detail,
                )

    def _collect_refs(
        self,
        interface_name: str,
        interface: Interface,
        result: ValidationResult,
    ) -> set[tuple[TypeRef, str]]:
        refs: set[tuple[TypeRef, str]] = set()
        for path, variable in interface_variables(interface):
            try:
                refs |= extract_typed_refs(variable)
            except CodegenError as e:
                result.add_error(
                    code=error_code(e, ErrorCodes.E003_UNRESOLVED_TYPE),
                    message=e.message,
                    path=f"interfaces.{interface_name}.{path}",
                )
        return refs
