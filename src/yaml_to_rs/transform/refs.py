"""Parse `$ref` strings and collect the named types an argument references."""

from __future__ import annotations

from yaml_to_rs.errors import MalformedReferenceError, SchemaConflictError
from yaml_to_rs.ir.types import TypeRef
from yaml_to_rs.models.arguments import ArrayType, ObjectType, StringType, Variable

REFERENCE_SEPARATOR = "#/"


def parse_reference(reference: str) -> TypeRef:
    """Parse a reference string into a TypeRef.

    Grammar: ``/<slash-delimited module path>#/<local type name>``; the
    leading slash is optional.

    Examples
    --------
        >>> parse_reference("/evse#/State")
        TypeRef(module_path=('evse',), type_name='State')
        >>> parse_reference("evse/board#/Limits")
        TypeRef(module_path=('evse', 'board'), type_name='Limits')

    Raises
    ------
        MalformedReferenceError: If the separator, path or name is missing.

    """
    parts = reference.lstrip("/").split(REFERENCE_SEPARATOR)
    if len(parts) != 2:
        raise MalformedReferenceError(
            reference, f"expected exactly one '{REFERENCE_SEPARATOR}' separator"
        )

    module_name, type_name = parts
    if not module_name:
        raise MalformedReferenceError(reference, "module path is empty")
    if not type_name or "/" in type_name:
        raise MalformedReferenceError(reference, "type name is empty or contains '/'")

    module_path = tuple(module_name.split("/"))
    if any(segment in {"", ".", ".."} for segment in module_path):
        raise MalformedReferenceError(reference, "module path has an empty or relative segment")

    return TypeRef(module_path=module_path, type_name=type_name)


def object_reference(options: ObjectType) -> TypeRef | None:
    """Return the TypeRef of a referencing object, or None.

    Raises
    ------
        SchemaConflictError: If the object has both a reference and properties.

    """
    if options.object_reference is None:
        return None
    if options.properties:
        raise SchemaConflictError(
            f"Object references '{options.object_reference}' but also declares "
            f"properties {sorted(options.properties)}",
            reference=options.object_reference,
        )
    return parse_reference(options.object_reference)


def string_reference(options: StringType) -> TypeRef | None:
    """Return the TypeRef of a referencing string, or None."""
    if options.object_reference is None:
        return None
    return parse_reference(options.object_reference)


def extract_typed_refs(variable: Variable) -> set[tuple[TypeRef, str]]:
    """Collect every TypeRef an argument references directly, with its kind.

    The kind is the argument type that carries the ``$ref``: ``"string"``
    references must name an enum and ``"object"`` references an object.
    Arrays recurse into their item type and inline objects into their
    properties; references inside referenced types are left to the resolver.
    """
    arg = variable.arg
    refs: set[tuple[TypeRef, str]] = set()

    if isinstance(arg, StringType):
        ref = string_reference(arg)
        if ref is not None:
            refs.add((ref, arg.type))
    elif isinstance(arg, ObjectType):
        ref = object_reference(arg)
        if ref is not None:
            refs.add((ref, arg.type))
        for prop in arg.properties.values():
            refs |= extract_typed_refs(prop)
    elif isinstance(arg, ArrayType) and arg.items is not None:
        refs |= extract_typed_refs(arg.items)

    return refs


def extract_refs(variable: Variable) -> set[TypeRef]:
    """Collect every TypeRef an argument references directly."""
    return {ref for ref, _ in extract_typed_refs(variable)}
