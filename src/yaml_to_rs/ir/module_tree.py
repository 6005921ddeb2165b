"""IR model for resolved named types, organized by module path."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

from yaml_to_rs.ir.types import DataType, TypeRef


@dataclass(frozen=True)
class Property:
    """A property of a named object type.

    Attributes
    ----------
        name: Property name as written in the schema.
        data_type: Resolved data type of the property value.
        optional: True if the name is absent from the type's ``required`` list.
        description: Optional human-readable description.

    """

    name: str
    data_type: DataType
    optional: bool
    description: str | None = None


@dataclass(frozen=True)
class ObjectDefinition:
    """A named object type with its resolved properties."""

    type_ref: TypeRef
    properties: tuple[Property, ...] = ()
    description: str | None = None

    @property
    def name(self) -> str:
        return self.type_ref.type_name


@dataclass(frozen=True)
class EnumDefinition:
    """A named string enum."""

    type_ref: TypeRef
    items: tuple[str, ...]
    description: str | None = None

    @property
    def name(self) -> str:
        return self.type_ref.type_name


TypeDefinition = Union[ObjectDefinition, EnumDefinition]


@dataclass
class ModuleNode:
    """One namespace level of the module tree."""

    children: dict[str, ModuleNode] = field(default_factory=dict)
    objects: list[ObjectDefinition] = field(default_factory=list)
    enums: list[EnumDefinition] = field(default_factory=list)


class ModuleTree:
    """Prefix tree of resolved types keyed by module-path segments.

    Filled by the resolver, then frozen; a frozen tree rejects inserts.
    """

    def __init__(self) -> None:
        """Initialize an empty tree."""
        self.root = ModuleNode()
        self._index: dict[TypeRef, TypeDefinition] = {}
        self._frozen = False

    def insert(self, definition: TypeDefinition) -> None:
        """Insert a definition at the node named by its module path.

        Intermediate nodes are created as needed.

        Raises
        ------
            ValueError: If the tree is frozen or the type is already present.

        """
        if self._frozen:
            raise ValueError("Module tree is read-only after resolution")
        type_ref = definition.type_ref
        if type_ref in self._index:
            raise ValueError(f"Type {type_ref} is already in the module tree")

        node = self.root
        for segment in type_ref.module_path:
            node = node.children.setdefault(segment, ModuleNode())

        if isinstance(definition, ObjectDefinition):
            node.objects.append(definition)
        else:
            node.enums.append(definition)
        self._index[type_ref] = definition

    def freeze(self) -> ModuleTree:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def find(self, type_ref: TypeRef) -> TypeDefinition | None:
        """Return the definition of a type, or None if it was never resolved."""
        return self._index.get(type_ref)

    def walk(self) -> Iterator[tuple[tuple[str, ...], ModuleNode]]:
        """Yield ``(module_path, node)`` pairs in pre-order, children sorted by name."""
        stack: list[tuple[tuple[str, ...], ModuleNode]] = [((), self.root)]
        while stack:
            path, node = stack.pop()
            yield path, node
            for name in sorted(node.children, reverse=True):
                stack.append(((*path, name), node.children[name]))

    def __contains__(self, type_ref: object) -> bool:
        return type_ref in self._index

    def __iter__(self) -> Iterator[TypeDefinition]:
        return iter(self._index.values())

    def __len__(self) -> int:
        return len(self._index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModuleTree):
            return NotImplemented
        return self.root == other.root

    __hash__ = None  # type: ignore[assignment]
