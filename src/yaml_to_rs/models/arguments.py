"""Models for the recursive argument/type grammar shared by all IDL documents.

Every variable, command argument, command result, type definition and
object property in the IDL is a `Variable`: an optional description plus an
`Argument`, discriminated on the YAML ``type`` key.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, model_validator

ScalarKindName = Literal["null", "boolean", "string", "number", "integer", "object", "array"]


class NullType(BaseModel):
    """The ``null`` type."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["null"]


class BooleanType(BaseModel):
    """The ``boolean`` type."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["boolean"]
    default: bool | None = None


class StringType(BaseModel):
    """The ``string`` type, optionally a reference to a named enum.

    Example:
    -------
        ```yaml
        type: string
        $ref: /evse_manager#/SessionEventEnum
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    type: Literal["string"]
    pattern: str | None = None
    format: str | None = None
    min_length: Annotated[
        int | None,
        Field(default=None, ge=0, alias="minLength", description="Minimum string length"),
    ]
    max_length: Annotated[
        int | None,
        Field(default=None, ge=0, alias="maxLength", description="Maximum string length"),
    ]
    enum_items: Annotated[
        list[str] | None,
        Field(default=None, alias="enum", min_length=1, description="Allowed values"),
    ]
    object_reference: Annotated[
        str | None,
        Field(default=None, alias="$ref", description="Reference to a named enum type"),
    ]
    default: str | None = None


class NumberType(BaseModel):
    """The ``number`` type (double precision)."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["number"]
    minimum: float | None = None
    maximum: float | None = None
    default: float | None = None


class IntegerType(BaseModel):
    """The ``integer`` type (64 bit signed)."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["integer"]
    minimum: int | None = None
    maximum: int | None = None
    default: int | None = None


class ArrayType(BaseModel):
    """The ``array`` type, with or without a typed item.

    Example:
    -------
        ```yaml
        type: array
        items:
          type: object
          $ref: /powermeter#/Powermeter
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    type: Literal["array"]
    items: Annotated[
        Variable | None,
        Field(default=None, description="Item type; untyped arrays hold opaque values"),
    ]
    min_items: Annotated[int | None, Field(default=None, ge=0, alias="minItems")]
    max_items: Annotated[int | None, Field(default=None, ge=0, alias="maxItems")]
    default: list[Any] | None = None


class ObjectType(BaseModel):
    """The ``object`` type.

    Either a reference to a named object type (``$ref``), a set of inline
    ``properties``, or neither (an opaque value). Both at once is a schema
    conflict and is reported when references are extracted.

    Example:
    -------
        ```yaml
        type: object
        required:
          - id
        properties:
          id:
            type: integer
          label:
            type: string
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    type: Literal["object"]
    properties: Annotated[
        dict[str, Variable],
        Field(default_factory=dict, description="Inline property definitions"),
    ]
    required: Annotated[
        list[str],
        Field(default_factory=list, description="Names of mandatory properties"),
    ]
    additional_properties: Annotated[
        bool | None,
        Field(default=None, alias="additionalProperties"),
    ]
    object_reference: Annotated[
        str | None,
        Field(default=None, alias="$ref", description="Reference to a named object type"),
    ]
    default: dict[str, Any] | None = None


class MultipleType(BaseModel):
    """A union of kinds, e.g. ``type: [string, "null"]``.

    There is no code-level discriminated union; the value is opaque.
    """

    model_config = ConfigDict(extra="forbid")

    type: Annotated[list[ScalarKindName], Field(min_length=1)]


def _argument_tag(value: Any) -> str | None:
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if isinstance(kind, list):
        return "multiple"
    return kind


Argument = Annotated[
    Union[
        Annotated[NullType, Tag("null")],
        Annotated[BooleanType, Tag("boolean")],
        Annotated[StringType, Tag("string")],
        Annotated[NumberType, Tag("number")],
        Annotated[IntegerType, Tag("integer")],
        Annotated[ArrayType, Tag("array")],
        Annotated[ObjectType, Tag("object")],
        Annotated[MultipleType, Tag("multiple")],
    ],
    Discriminator(_argument_tag),
]


class Variable(BaseModel):
    """An argument with an optional human-readable description.

    In YAML the description sits next to the type keys; it is split off
    before the argument is validated.

    Example:
    -------
        ```yaml
        description: Maximum current in ampere
        type: number
        minimum: 0
        ```

    """

    model_config = ConfigDict(extra="forbid")

    description: str | None = None
    arg: Argument

    @model_validator(mode="before")
    @classmethod
    def split_description(cls, data: Any) -> Any:
        """Separate the description from the argument keys."""
        if isinstance(data, dict) and "arg" not in data:
            fields = dict(data)
            description = fields.pop("description", None)
            return {"description": description, "arg": fields}
        return data


ArrayType.model_rebuild()
ObjectType.model_rebuild()
Variable.model_rebuild()
