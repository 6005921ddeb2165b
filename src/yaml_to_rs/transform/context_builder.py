"""Project a manifest and its resolved types into a RenderContext."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from yaml_to_rs.ir.context import (
    ArgumentContext,
    CommandContext,
    ConfigContext,
    EnumTypeContext,
    InterfaceContext,
    ObjectTypeContext,
    RenderContext,
    SlotContext,
    TypeModuleContext,
)
from yaml_to_rs.ir.module_tree import ModuleNode, ModuleTree, ObjectDefinition
from yaml_to_rs.ir.types import TypeRef
from yaml_to_rs.logging import get_logger
from yaml_to_rs.models.arguments import Variable
from yaml_to_rs.models.config import ConfigEntry
from yaml_to_rs.models.interface import Command
from yaml_to_rs.models.manifest import Manifest
from yaml_to_rs.models.repository import DocumentRepository
from yaml_to_rs.transform.refs import extract_typed_refs
from yaml_to_rs.transform.resolver import TypeResolver
from yaml_to_rs.transform.type_mapper import map_argument, map_config_entry, rust_type_name

logger = get_logger(__name__)

RESULT_NAME = "return_value"


def argument_context(name: str, variable: Variable) -> ArgumentContext:
    """Create the context of a variable, argument or result."""
    return ArgumentContext(
        name=name,
        data_type=rust_type_name(map_argument(variable)),
        description=variable.description,
    )


def command_context(name: str, command: Command) -> CommandContext:
    """Create the context of a command, keeping argument order."""
    return CommandContext(
        name=name,
        description=command.description,
        arguments=tuple(
            argument_context(arg_name, arg) for arg_name, arg in command.arguments.items()
        ),
        result=argument_context(RESULT_NAME, command.result) if command.result else None,
    )


def config_context(name: str, entry: ConfigEntry) -> ConfigContext:
    """Create the context of a configuration entry.

    Bounds and default are copied as-is.
    """
    return ConfigContext(
        name=name,
        kind=entry.type,
        data_type=rust_type_name(map_config_entry(entry)),
        description=entry.description,
        default=entry.default,
        minimum=getattr(entry, "minimum", None),
        maximum=getattr(entry, "maximum", None),
        min_length=getattr(entry, "min_length", None),
        max_length=getattr(entry, "max_length", None),
    )


def config_contexts(entries: Mapping[str, ConfigEntry]) -> tuple[ConfigContext, ...]:
    return tuple(config_context(name, entry) for name, entry in entries.items())


def object_type_context(definition: ObjectDefinition) -> ObjectTypeContext:
    """Create the context of a resolved object type.

    Optional properties are wrapped in ``Option<...>`` and keep their flag.
    """
    return ObjectTypeContext(
        name=definition.name,
        description=definition.description,
        properties=tuple(
            ArgumentContext(
                name=prop.name,
                data_type=rust_type_name(prop.data_type, optional=prop.optional),
                description=prop.description,
                optional=prop.optional,
            )
            for prop in definition.properties
        ),
    )


def type_module_context(node: ModuleNode) -> TypeModuleContext:
    """Convert a module tree node (recursively) into its render context."""
    return TypeModuleContext(
        children={name: type_module_context(node.children[name]) for name in sorted(node.children)},
        objects=[object_type_context(definition) for definition in node.objects],
        enums=[
            EnumTypeContext(
                name=definition.name,
                items=definition.items,
                description=definition.description,
            )
            for definition in node.enums
        ],
    )


class RenderContextBuilder:
    """Build the RenderContext of a module.

    Interfaces are loaded through the repository and projected once, no
    matter how many slots use them. The references of every used interface
    seed the type resolver.

    Usage:
        builder = RenderContextBuilder(DocumentRepository(roots))
        context = builder.build(manifest, module_name="EvseManager")
    """

    def __init__(
        self,
        repository: DocumentRepository,
        resolver: TypeResolver | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
        ----
            repository: Source of interface and data types documents.
            resolver: Type resolver; defaults to one over `repository`.

        """
        self.repository = repository
        self.resolver = resolver or TypeResolver(repository)
        self._interfaces: dict[str, tuple[InterfaceContext, frozenset[tuple[TypeRef, str]]]] = {}

    def build(self, manifest: Manifest, module_name: str) -> RenderContext:
        """Build the render context of a manifest.

        Args:
        ----
            manifest: The validated module manifest.
            module_name: Name of the module being generated.

        Returns:
        -------
            RenderContext ready for the templates.

        """
        provides = tuple(
            SlotContext(
                implementation_id=slot_id,
                interface=entry.interface,
                config=config_contexts(entry.config),
            )
            for slot_id, entry in manifest.provides.items()
        )
        requires = tuple(
            SlotContext(
                implementation_id=slot_id,
                interface=entry.interface,
                min_connections=entry.min_connections,
                max_connections=entry.max_connections,
            )
            for slot_id, entry in manifest.requires.items()
        )

        interfaces = self.unique_interfaces((*provides, *requires))
        tree = self.resolve_types(interface.name for interface in interfaces)

        return RenderContext(
            module_name=module_name,
            provided_interfaces=self.unique_interfaces(provides),
            required_interfaces=self.unique_interfaces(requires),
            interfaces=interfaces,
            provides=provides,
            requires=requires,
            module_config=config_contexts(manifest.config),
            type_module=type_module_context(tree.root),
        )

    def unique_interfaces(self, slots: Iterable[SlotContext]) -> tuple[InterfaceContext, ...]:
        """Return the distinct interfaces of `slots` in first-seen order."""
        unique: dict[str, InterfaceContext] = {}
        for slot in slots:
            if slot.interface not in unique:
                unique[slot.interface] = self.interface_context(slot.interface)
        return tuple(unique.values())

    def interface_context(self, name: str) -> InterfaceContext:
        """Return the context of an interface, loading it on first use."""
        return self._load_interface(name)[0]

    def interface_refs(self, name: str) -> frozenset[tuple[TypeRef, str]]:
        """Return the `(TypeRef, kind)` references an interface makes directly."""
        return self._load_interface(name)[1]

    def resolve_types(self, interface_names: Iterable[str]) -> ModuleTree:
        """Resolve the type closure of the given interfaces."""
        references: set[tuple[TypeRef, str]] = set()
        for name in interface_names:
            references |= self.interface_refs(name)
        return self.resolver.resolve_references(references)

    def _load_interface(self, name: str) -> tuple[InterfaceContext, frozenset[tuple[TypeRef, str]]]:
        cached = self._interfaces.get(name)
        if cached is None:
            interface = self.repository.get_interface(name)

            refs: set[tuple[TypeRef, str]] = set()
            for variable in interface.vars.values():
                refs |= extract_typed_refs(variable)
            for command in interface.cmds.values():
                for arg in command.arguments.values():
                    refs |= extract_typed_refs(arg)
                if command.result is not None:
                    refs |= extract_typed_refs(command.result)

            context = InterfaceContext(
                name=name,
                description=interface.description,
                vars=tuple(argument_context(var_name, var) for var_name, var in interface.vars.items()),
                cmds=tuple(command_context(cmd_name, cmd) for cmd_name, cmd in interface.cmds.items()),
            )
            logger.debug("Interface '%s' references %d type(s)", name, len(refs))
            cached = self._interfaces[name] = (context, frozenset(refs))
        return cached
