"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from yaml_to_rs.models import DocumentRepository, Manifest, load_manifest

from tests.fixtures.sample_schemas import SCHEMA_DOCUMENTS, write_documents, write_manifest


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Undo handlers and propagation set by CLI invocations."""
    logger = logging.getLogger("yaml_to_rs")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def schema_root(tmp_path: Path) -> Path:
    """Return a schema root holding the sample interfaces and types."""
    return write_documents(tmp_path / "schemas", SCHEMA_DOCUMENTS)


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    """Return path to the sample manifest."""
    return write_manifest(tmp_path / "manifest.yaml")


@pytest.fixture
def repository(schema_root: Path) -> DocumentRepository:
    """Return a repository over the sample schema root."""
    return DocumentRepository([schema_root])


@pytest.fixture
def manifest(manifest_path: Path) -> Manifest:
    """Return the loaded sample manifest."""
    return load_manifest(manifest_path)
