"""Render context: the flat, template-ready view of a module.

Every type name here is already spelled in the target language; templates
only substitute and apply naming filters.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class ArgumentContext:
    """A variable, command argument, command result or object property."""

    name: str
    data_type: str
    description: str | None = None
    optional: bool = False


@dataclass(frozen=True)
class CommandContext:
    """A command with its ordered arguments and optional result."""

    name: str
    description: str
    arguments: tuple[ArgumentContext, ...] = ()
    result: ArgumentContext | None = None


@dataclass(frozen=True)
class InterfaceContext:
    """An interface with its variables and commands in document order."""

    name: str
    description: str
    vars: tuple[ArgumentContext, ...] = ()
    cmds: tuple[CommandContext, ...] = ()


@dataclass(frozen=True)
class ConfigContext:
    """A configuration entry.

    Bounds and default are advisory metadata; they are not re-validated here.
    """

    name: str
    kind: str
    data_type: str
    description: str | None = None
    default: Any = None
    minimum: float | int | None = None
    maximum: float | int | None = None
    min_length: int | None = None
    max_length: int | None = None


@dataclass(frozen=True)
class SlotContext:
    """A provides/requires binding of an implementation id to an interface."""

    implementation_id: str
    interface: str
    config: tuple[ConfigContext, ...] = ()
    min_connections: int | None = None
    max_connections: int | None = None


@dataclass(frozen=True)
class ObjectTypeContext:
    name: str
    properties: tuple[ArgumentContext, ...] = ()
    description: str | None = None


@dataclass(frozen=True)
class EnumTypeContext:
    name: str
    items: tuple[str, ...] = ()
    description: str | None = None


@dataclass
class TypeModuleContext:
    """One generated Rust module of named types, children sorted by name."""

    children: dict[str, TypeModuleContext] = field(default_factory=dict)
    objects: list[ObjectTypeContext] = field(default_factory=list)
    enums: list[EnumTypeContext] = field(default_factory=list)


@dataclass(frozen=True)
class RenderContext:
    """Everything the module template needs.

    Attributes
    ----------
        module_name: Name of the module being generated.
        provided_interfaces: Distinct interfaces of ``provides`` slots, first-seen order.
        required_interfaces: Distinct interfaces of ``requires`` slots, first-seen order.
        interfaces: Distinct interfaces over both slot kinds, first-seen order.
        provides: Provided slots in manifest order.
        requires: Required slots in manifest order.
        module_config: Module-level configuration entries.
        type_module: Root of the generated type modules.

    """

    module_name: str
    provided_interfaces: tuple[InterfaceContext, ...]
    required_interfaces: tuple[InterfaceContext, ...]
    interfaces: tuple[InterfaceContext, ...]
    provides: tuple[SlotContext, ...]
    requires: tuple[SlotContext, ...]
    module_config: tuple[ConfigContext, ...]
    type_module: TypeModuleContext

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary of the context."""
        return asdict(self)
