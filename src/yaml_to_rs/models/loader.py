"""YAML/JSON file loading utilities."""

from __future__ import annotations

from collections.abc import Hashable
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from yaml_to_rs.errors import ParseError
from yaml_to_rs.models.manifest import Manifest

ModelT = TypeVar("ModelT", bound=BaseModel)


class LoaderError(ParseError):
    """Error during YAML/JSON file loading."""


class UniqueKeyLoader(yaml.SafeLoader):
    """Safe loader that rejects duplicate mapping keys."""

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        seen: set[Any] = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                continue
            if key in seen:
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key '{key}'",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML or JSON file and return the raw dictionary.

    Args:
    ----
        path: Path to the YAML or JSON file.

    Returns:
    -------
        Parsed dictionary from the file.

    Raises:
    ------
        LoaderError: If the file cannot be loaded or parsed.

    """
    if not path.exists():
        raise LoaderError(f"File not found: {path}", path)

    if not path.is_file():
        raise LoaderError(f"Not a file: {path}", path)

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise LoaderError(
            f"Unsupported file extension: {suffix}. Use .yaml, .yml, or .json",
            path,
        )

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.load(f, Loader=UniqueKeyLoader)
    except yaml.YAMLError as e:
        raise LoaderError(f"YAML parsing error: {e}", path) from e
    except OSError as e:
        raise LoaderError(f"File read error: {e}", path) from e

    if data is None:
        raise LoaderError("File is empty", path)

    if not isinstance(data, dict):
        raise LoaderError(
            f"Expected dictionary at root level, got {type(data).__name__}",
            path,
        )

    return data


def load_document(path: Path, model: type[ModelT]) -> ModelT:
    """Load a file and validate it against a document model.

    Args:
    ----
        path: Path to the document.
        model: The pydantic model of the document kind.

    Returns:
    -------
        Validated model instance.

    Raises:
    ------
        LoaderError: If the file cannot be loaded.
        ParseError: If the content does not match the model.

    """
    data = load_yaml_file(path)

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ParseError(
            f"Invalid {model.__name__} document ({e.error_count()} error(s))",
            path,
            errors=e.errors(),
        ) from e


def load_manifest(path: Path) -> Manifest:
    """Load and validate a module manifest.

    Args:
    ----
        path: Path to the manifest file.

    Returns:
    -------
        Validated Manifest instance.

    """
    return load_document(path, Manifest)


def validate_manifest(path: Path) -> list[str]:
    """Validate a manifest file and return list of errors.

    This is a non-throwing version of load_manifest, useful for
    validation CLI commands.

    Args:
    ----
        path: Path to the manifest file.

    Returns:
    -------
        List of error messages (empty if valid).

    """
    try:
        load_manifest(path)
    except LoaderError as e:
        return [str(e)]
    except ParseError as e:
        return [
            f"{'.'.join(str(x) for x in error['loc'])}: {error['msg']}" for error in e.errors
        ]

    return []
