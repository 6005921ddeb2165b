"""Pydantic models for the YAML interface definition documents.

Three document kinds make up a module's schema:

- Manifest: the module's provided and required slots and its configuration
- Interface: commands and variables, loaded from ``interfaces/<name>.yaml``
- DataTypes: named types, loaded from ``types/<module/path>.yaml``

Primary Entry Points:
    load_manifest(path): Load and validate a manifest
    validate_manifest(path): Validate and return list of errors
    DocumentRepository(roots): Look up interfaces and data types by name

Example:
-------
    >>> from yaml_to_rs.models import DocumentRepository, load_manifest
    >>> manifest = load_manifest(Path("manifest.yaml"))
    >>> repository = DocumentRepository([Path("everest-core")])
    >>> for slot_id, entry in manifest.provides.items():
    ...     print(slot_id, repository.get_interface(entry.interface).description)

Model Hierarchy:
    Manifest (root)
    ├── Metadata - license and authors
    ├── ProvidesEntry - provided slot with its config
    ├── RequiresEntry - required slot with connection bounds
    └── ConfigEntry - typed module config entry

    Interface
    ├── Command - arguments and optional result
    └── Variable - published value

    DataTypes
    └── Variable - named object or string enum

"""

from yaml_to_rs.models.arguments import (
    Argument,
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
    ConfigEntry,
    IntegerConfigEntry,
    NumberConfigEntry,
    StringConfigEntry,
)
from yaml_to_rs.models.interface import Command, DataTypes, Interface
from yaml_to_rs.models.loader import (
    LoaderError,
    load_document,
    load_manifest,
    load_yaml_file,
    validate_manifest,
)
from yaml_to_rs.models.manifest import Manifest, Metadata, ProvidesEntry, RequiresEntry
from yaml_to_rs.models.repository import DocumentKind, DocumentRepository

__all__ = [
    # Arguments
    "Argument",
    "ArrayType",
    "BooleanType",
    "IntegerType",
    "MultipleType",
    "NullType",
    "NumberType",
    "ObjectType",
    "StringType",
    "Variable",
    # Config
    "BooleanConfigEntry",
    "ConfigEntry",
    "IntegerConfigEntry",
    "NumberConfigEntry",
    "StringConfigEntry",
    # Documents
    "Command",
    "DataTypes",
    "Interface",
    "Manifest",
    "Metadata",
    "ProvidesEntry",
    "RequiresEntry",
    # Loading
    "DocumentKind",
    "DocumentRepository",
    "LoaderError",
    "load_document",
    "load_manifest",
    "load_yaml_file",
    "validate_manifest",
]
