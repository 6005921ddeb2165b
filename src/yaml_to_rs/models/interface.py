"""Models for interface and data type documents."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from yaml_to_rs.models.arguments import Variable


class Command(BaseModel):
    """A command offered by an interface.

    Example:
    -------
        ```yaml
        get_state:
          description: Returns the current state
          arguments:
            connector:
              type: integer
          result:
            type: string
            $ref: /evse#/State
        ```

    """

    model_config = ConfigDict(extra="forbid")

    description: str
    arguments: Annotated[
        dict[str, Variable],
        Field(default_factory=dict, description="Ordered command arguments"),
    ]
    result: Annotated[
        Variable | None,
        Field(default=None, description="Return value; absent for commands returning nothing"),
    ]


class Interface(BaseModel):
    """A named contract: published variables and callable commands.

    Loaded from ``interfaces/<name>.yaml`` under a schema root.

    Example:
    -------
        ```yaml
        description: EVSE manager
        cmds:
          get_state:
            description: Returns the current state
            result:
              type: string
              $ref: /evse#/State
        vars:
          limits:
            description: Current limits
            type: object
            $ref: /evse#/Limits
        ```

    """

    model_config = ConfigDict(extra="forbid")

    description: str
    cmds: Annotated[
        dict[str, Command],
        Field(default_factory=dict, description="Commands by name"),
    ]
    vars: Annotated[
        dict[str, Variable],
        Field(default_factory=dict, description="Published variables by name"),
    ]


class DataTypes(BaseModel):
    """A catalogue of named types for one module path.

    ``types/evse/board.yaml`` holds the types of module path
    ``["evse", "board"]``; each entry is an object with properties or a
    string enum.

    Example:
    -------
        ```yaml
        description: EVSE types
        types:
          State:
            type: string
            enum: [Idle, Charging]
        ```

    """

    model_config = ConfigDict(extra="forbid")

    description: str
    types: Annotated[
        dict[str, Variable],
        Field(default_factory=dict, description="Named type definitions by local name"),
    ]
