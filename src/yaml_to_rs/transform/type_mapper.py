"""Map IDL arguments to data types and spell them in Rust."""

from __future__ import annotations

from yaml_to_rs.ir.types import DataType, ScalarKind
from yaml_to_rs.models.arguments import (
    ArrayType,
    BooleanType,
    IntegerType,
    MultipleType,
    NullType,
    NumberType,
    ObjectType,
    StringType,
    Variable,
)
from yaml_to_rs.models.config import (
    BooleanConfigEntry,
    IntegerConfigEntry,
    NumberConfigEntry,
    StringConfigEntry,
)
from yaml_to_rs.transform.refs import object_reference, string_reference

# Rust spelling of every non-composite scalar kind
RUST_SCALAR_NAMES: dict[ScalarKind, str] = {
    ScalarKind.UNIT: "()",
    ScalarKind.BOOLEAN: "bool",
    ScalarKind.TEXT: "String",
    ScalarKind.FLOAT: "f64",
    ScalarKind.INTEGER: "i64",
    ScalarKind.DYNAMIC: "::serde_json::Value",
}

_SIMPLE_KINDS: dict[type, ScalarKind] = {
    NullType: ScalarKind.UNIT,
    BooleanType: ScalarKind.BOOLEAN,
    NumberType: ScalarKind.FLOAT,
    IntegerType: ScalarKind.INTEGER,
    MultipleType: ScalarKind.DYNAMIC,
}

_CONFIG_KINDS: dict[type, ScalarKind] = {
    BooleanConfigEntry: ScalarKind.BOOLEAN,
    StringConfigEntry: ScalarKind.TEXT,
    IntegerConfigEntry: ScalarKind.INTEGER,
    NumberConfigEntry: ScalarKind.FLOAT,
}


def map_argument(variable: Variable) -> DataType:
    """Classify the value carried by a variable.

    Args:
    ----
        variable: The schema variable.

    Returns:
    -------
        DataType; referenced strings and objects become NAMED.

    Raises:
    ------
        SchemaConflictError: If an object has both a reference and properties.
        MalformedReferenceError: If a reference cannot be parsed.

    """
    arg = variable.arg

    kind = _SIMPLE_KINDS.get(type(arg))
    if kind is not None:
        return DataType(kind)

    if isinstance(arg, StringType):
        ref = string_reference(arg)
        return DataType.named(ref) if ref else DataType(ScalarKind.TEXT)

    if isinstance(arg, ObjectType):
        ref = object_reference(arg)
        return DataType.named(ref) if ref else DataType(ScalarKind.DYNAMIC)

    if isinstance(arg, ArrayType):
        if arg.items is None:
            return DataType.sequence(DataType(ScalarKind.DYNAMIC))
        return DataType.sequence(map_argument(arg.items))

    raise TypeError(f"Unsupported argument type: {type(arg).__name__}")


def map_config_entry(
    entry: BooleanConfigEntry | StringConfigEntry | IntegerConfigEntry | NumberConfigEntry,
) -> DataType:
    """Classify a configuration entry with the argument naming scheme."""
    return DataType(_CONFIG_KINDS[type(entry)])


def rust_type_name(data_type: DataType, optional: bool = False) -> str:
    """Spell a data type in Rust.

    Examples
    --------
        >>> rust_type_name(DataType.sequence(DataType(ScalarKind.INTEGER)))
        'Vec<i64>'
        >>> rust_type_name(DataType(ScalarKind.TEXT), optional=True)
        'Option<String>'

    """
    if data_type.kind == ScalarKind.SEQUENCE:
        assert data_type.item is not None
        name = f"Vec<{rust_type_name(data_type.item)}>"
    elif data_type.kind == ScalarKind.NAMED:
        assert data_type.type_ref is not None
        name = data_type.type_ref.absolute_type_path
    else:
        name = RUST_SCALAR_NAMES[data_type.kind]

    return f"Option<{name}>" if optional else name
