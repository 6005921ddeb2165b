"""Resolve the transitive closure of named types into a ModuleTree."""

from __future__ import annotations

from collections.abc import Iterable

from yaml_to_rs.errors import NotFoundError, SchemaConflictError
from yaml_to_rs.ir.module_tree import (
    EnumDefinition,
    ModuleTree,
    ObjectDefinition,
    Property,
    TypeDefinition,
)
from yaml_to_rs.ir.types import TypeRef
from yaml_to_rs.logging import get_logger
from yaml_to_rs.models.arguments import ObjectType, StringType, Variable
from yaml_to_rs.models.repository import DocumentRepository
from yaml_to_rs.transform.refs import extract_typed_refs
from yaml_to_rs.transform.type_mapper import map_argument

logger = get_logger(__name__)


class TypeResolver:
    """Compute every named type reachable from a set of root references.

    Resolution is breadth-first. Each round resolves its frontier in
    TypeRef order and hands the references it discovers to the next round,
    minus everything already done, so cycles terminate and each type is
    inserted exactly once.

    Usage:
        resolver = TypeResolver(repository)
        tree = resolver.resolve({parse_reference("/evse#/State")})
    """

    def __init__(self, repository: DocumentRepository) -> None:
        """Initialize the resolver.

        Args:
        ----
            repository: Source of data types documents.

        """
        self.repository = repository

    def resolve(self, roots: Iterable[TypeRef]) -> ModuleTree:
        """Resolve the closure of `roots`.

        Args:
        ----
            roots: Directly referenced types.

        Returns:
        -------
            Frozen ModuleTree holding every reachable type exactly once.

        Raises:
        ------
            NotFoundError: If a referenced type or its document does not exist.
            SchemaConflictError: If a named type cannot be generated, or a
                reference inside a resolved type names the wrong kind of type.

        """
        return self._resolve(frozenset(roots), frozenset())

    def resolve_references(self, references: Iterable[tuple[TypeRef, str]]) -> ModuleTree:
        """Resolve the closure of `(TypeRef, kind)` references.

        Like `resolve`, but also checks that each root reference names the
        kind of type it was written as: a ``"string"`` reference must name
        an enum and an ``"object"`` reference must name an object type.
        """
        usages = frozenset(references)
        return self._resolve(frozenset(ref for ref, _ in usages), usages)

    def _resolve(
        self,
        roots: frozenset[TypeRef],
        usages: frozenset[tuple[TypeRef, str]],
    ) -> ModuleTree:
        tree = ModuleTree()
        done: frozenset[TypeRef] = frozenset()
        frontier = roots
        round_number = 0

        while frontier:
            round_number += 1
            logger.debug("Resolution round %d: %d type(s)", round_number, len(frontier))
            discovered = self._resolve_round(frontier, tree)
            usages = usages | discovered
            done = done | frontier
            frontier = frozenset(ref for ref, _ in discovered) - done

        for type_ref, kind in sorted(usages):
            check_reference_kind(tree, type_ref, kind)

        logger.debug("Resolved %d type(s) in %d round(s)", len(tree), round_number)
        return tree.freeze()

    def _resolve_round(
        self,
        frontier: frozenset[TypeRef],
        tree: ModuleTree,
    ) -> frozenset[tuple[TypeRef, str]]:
        discovered: set[tuple[TypeRef, str]] = set()
        for type_ref in sorted(frontier):
            definition, refs = self.resolve_type(type_ref)
            tree.insert(definition)
            discovered |= refs
        return frozenset(discovered)

    def resolve_type(
        self, type_ref: TypeRef
    ) -> tuple[TypeDefinition, frozenset[tuple[TypeRef, str]]]:
        """Resolve one named type.

        Returns
        -------
            The definition and the `(TypeRef, kind)` references found in its
            properties.

        """
        data_types = self.repository.get_data_types(type_ref.document_name)
        variable = data_types.types.get(type_ref.type_name)
        if variable is None:
            raise NotFoundError(
                f"Type '{type_ref.type_name}' is not declared in "
                f"types/{type_ref.document_name}.yaml",
                reference=str(type_ref),
                type_name=type_ref.type_name,
            )

        arg = variable.arg
        if isinstance(arg, ObjectType):
            return self._resolve_object(type_ref, variable, arg)
        if isinstance(arg, StringType):
            return self._resolve_enum(type_ref, variable, arg), frozenset()

        raise SchemaConflictError(
            f"Named type {type_ref} is a '{arg.type}'; only objects and string enums "
            "can be referenced",
            reference=str(type_ref),
        )

    def _resolve_object(
        self,
        type_ref: TypeRef,
        variable: Variable,
        arg: ObjectType,
    ) -> tuple[ObjectDefinition, frozenset[tuple[TypeRef, str]]]:
        if arg.object_reference is not None:
            raise SchemaConflictError(
                f"Named type {type_ref} is an alias of '{arg.object_reference}'; "
                "aliases are not supported",
                reference=str(type_ref),
            )

        required = set(arg.required)
        refs: set[tuple[TypeRef, str]] = set()
        properties = []
        for name, prop in arg.properties.items():
            refs |= extract_typed_refs(prop)
            properties.append(
                Property(
                    name=name,
                    data_type=map_argument(prop),
                    optional=name not in required,
                    description=prop.description,
                )
            )

        definition = ObjectDefinition(
            type_ref=type_ref,
            properties=tuple(properties),
            description=variable.description,
        )
        return definition, frozenset(refs)

    def _resolve_enum(
        self,
        type_ref: TypeRef,
        variable: Variable,
        arg: StringType,
    ) -> EnumDefinition:
        if arg.enum_items is None:
            raise SchemaConflictError(
                f"Named string type {type_ref} must declare 'enum' items",
                reference=str(type_ref),
            )
        if arg.object_reference is not None:
            raise SchemaConflictError(
                f"Named type {type_ref} is an alias of '{arg.object_reference}'; "
                "aliases are not supported",
                reference=str(type_ref),
            )
        return EnumDefinition(
            type_ref=type_ref,
            items=tuple(arg.enum_items),
            description=variable.description,
        )


def check_reference_kind(tree: ModuleTree, type_ref: TypeRef, kind: str) -> None:
    """Check that a resolved reference names the kind of type it was written as.

    Raises
    ------
        SchemaConflictError: If a string reference names an object type or an
            object reference names an enum.

    """
    definition = tree.find(type_ref)
    if kind == "string" and not isinstance(definition, EnumDefinition):
        raise SchemaConflictError(
            f"String reference to {type_ref} must name a string enum, "
            f"but {type_ref.type_name} is an object type",
            reference=str(type_ref),
        )
    if kind == "object" and not isinstance(definition, ObjectDefinition):
        raise SchemaConflictError(
            f"Object reference to {type_ref} must name an object type, "
            f"but {type_ref.type_name} is a string enum",
            reference=str(type_ref),
        )
