"""Models for module- and slot-level configuration entries."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class BooleanConfigEntry(BaseModel):
    """A boolean configuration entry."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["boolean"]
    description: str | None = None
    default: bool | None = None


class StringConfigEntry(BaseModel):
    """A string configuration entry.

    Example:
    -------
        ```yaml
        connector_type:
          description: Type of the charging connector
          type: string
          default: cType2
          minLength: 1
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    type: Literal["string"]
    description: str | None = None
    default: str | None = None
    min_length: Annotated[int | None, Field(default=None, ge=0, alias="minLength")]
    max_length: Annotated[int | None, Field(default=None, ge=0, alias="maxLength")]


class IntegerConfigEntry(BaseModel):
    """An integer configuration entry."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["integer"]
    description: str | None = None
    default: int | None = None
    minimum: int | None = None
    maximum: int | None = None


class NumberConfigEntry(BaseModel):
    """A floating point configuration entry."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["number"]
    description: str | None = None
    default: float | None = None
    minimum: float | None = None
    maximum: float | None = None


ConfigEntry = Annotated[
    Union[BooleanConfigEntry, StringConfigEntry, IntegerConfigEntry, NumberConfigEntry],
    Field(discriminator="type"),
]
