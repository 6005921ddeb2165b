"""Models for the module manifest, the root IDL document."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from yaml_to_rs.models.config import ConfigEntry


class Metadata(BaseModel):
    """License and authorship of a module."""

    model_config = ConfigDict(extra="forbid")

    license: Annotated[
        str,
        Field(min_length=1, description="License identifier or URL"),
    ]
    authors: Annotated[
        list[str],
        Field(description="Module authors"),
    ]


class ProvidesEntry(BaseModel):
    """A provided slot: an implementation of an interface offered by the module."""

    model_config = ConfigDict(extra="forbid")

    interface: Annotated[
        str,
        Field(min_length=1, description="Logical name of the implemented interface"),
    ]
    description: str
    config: Annotated[
        dict[str, ConfigEntry],
        Field(default_factory=dict, description="Per-slot configuration entries"),
    ]


class RequiresEntry(BaseModel):
    """A required slot: an interface the module connects to."""

    model_config = ConfigDict(extra="forbid")

    interface: Annotated[
        str,
        Field(min_length=1, description="Logical name of the required interface"),
    ]
    min_connections: Annotated[
        int | None,
        Field(default=None, ge=0, description="Minimum number of connections"),
    ]
    max_connections: Annotated[
        int | None,
        Field(default=None, ge=0, description="Maximum number of connections"),
    ]

    @model_validator(mode="after")
    def validate_connection_range(self) -> RequiresEntry:
        """Validate min_connections <= max_connections."""
        if (
            self.min_connections is not None
            and self.max_connections is not None
            and self.min_connections > self.max_connections
        ):
            msg = (
                f"min_connections ({self.min_connections}) cannot exceed "
                f"max_connections ({self.max_connections})"
            )
            raise ValueError(msg)
        return self


class Manifest(BaseModel):
    """Root model of a module manifest.

    Slot names are unique within ``provides`` and within ``requires``; the
    YAML loader rejects duplicate keys before this model sees the data.

    Example:
    -------
        ```yaml
        description: Charging station manager
        metadata:
          license: https://opensource.org/licenses/Apache-2.0
          authors:
            - Jane Doe
        provides:
          main:
            interface: evse_manager
            description: EVSE manager implementation
            config:
              connector_id:
                type: integer
                default: 1
        requires:
          board:
            interface: board_support
        config:
          debug_mode:
            type: boolean
            default: false
        ```

    """

    model_config = ConfigDict(extra="forbid")

    description: str
    metadata: Annotated[Metadata, Field(description="License and authors")]
    provides: Annotated[
        dict[str, ProvidesEntry],
        Field(description="Provided slots by implementation id"),
    ]
    requires: Annotated[
        dict[str, RequiresEntry],
        Field(default_factory=dict, description="Required slots by requirement id"),
    ]
    config: Annotated[
        dict[str, ConfigEntry],
        Field(default_factory=dict, description="Module-level configuration entries"),
    ]
    enable_external_mqtt: Annotated[
        bool,
        Field(default=False, description="Module talks to MQTT directly"),
    ]
    enable_telemetry: Annotated[
        bool,
        Field(default=False, description="Module publishes telemetry"),
    ]
