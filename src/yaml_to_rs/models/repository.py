"""Caching loader for interface and data type documents."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import Union, cast

from yaml_to_rs.errors import AmbiguousError, NotFoundError, ParseError
from yaml_to_rs.logging import get_logger
from yaml_to_rs.models.interface import DataTypes, Interface
from yaml_to_rs.models.loader import load_document

logger = get_logger(__name__)

Document = Union[Interface, DataTypes]


class DocumentKind(Enum):
    """Document kinds looked up by logical name, valued by their directory."""

    INTERFACE = "interfaces"
    DATA_TYPES = "types"


_MODELS: dict[DocumentKind, type[Interface] | type[DataTypes]] = {
    DocumentKind.INTERFACE: Interface,
    DocumentKind.DATA_TYPES: DataTypes,
}


class DocumentRepository:
    """Map logical document names to parsed documents.

    Each lookup searches every schema root in order and requires exactly
    one root to yield a successful parse. Results are cached for the
    lifetime of the repository, so every physical file is parsed at most
    once per run.

    Usage:
        repository = DocumentRepository([Path("everest-core")])
        interface = repository.get_interface("evse_manager")
        data_types = repository.get_data_types("evse/board")
    """

    def __init__(self, roots: Sequence[Path]) -> None:
        """Initialize the repository.

        Args:
        ----
            roots: Schema root directories, searched in order.

        """
        if not roots:
            raise ValueError("At least one schema root is required")
        self.roots = tuple(Path(root) for root in roots)
        self._cache: dict[tuple[DocumentKind, str], Document] = {}

    def get_interface(self, name: str) -> Interface:
        """Return the interface document with the given logical name."""
        return cast(Interface, self._get(DocumentKind.INTERFACE, name))

    def get_data_types(self, name: str) -> DataTypes:
        """Return the data types document for a slash-joined module path."""
        return cast(DataTypes, self._get(DocumentKind.DATA_TYPES, name))

    def __contains__(self, key: tuple[DocumentKind, str]) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def _get(self, kind: DocumentKind, name: str) -> Document:
        key = (kind, name)
        document = self._cache.get(key)
        if document is None:
            document = self._cache[key] = self._load_unique(kind, name)
        return document

    def _load_unique(self, kind: DocumentKind, name: str) -> Document:
        model = _MODELS[kind]
        matches: list[tuple[Path, Document]] = []
        failures: list[ParseError] = []

        for root in self.roots:
            path = root / kind.value / f"{name}.yaml"
            if not path.is_file():
                continue
            try:
                matches.append((path, load_document(path, model)))
            except ParseError as e:
                logger.warning("Skipping %s: %s", path, e.message)
                failures.append(e)

        if not matches:
            if failures:
                raise failures[0]
            searched = ", ".join(str(root / kind.value) for root in self.roots)
            raise NotFoundError(
                f"{model.__name__} '{name}' not found (searched: {searched})",
                name=name,
                kind=kind.value,
            )

        if len(matches) > 1:
            paths = [path for path, _ in matches]
            raise AmbiguousError(
                f"{model.__name__} '{name}' found in more than one schema root: "
                + ", ".join(str(p) for p in paths),
                matches=paths,
                name=name,
                kind=kind.value,
            )

        path, document = matches[0]
        logger.debug("Loaded %s '%s' from %s", kind.value, name, path)
        return document
