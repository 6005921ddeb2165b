"""Tests for DocumentRepository."""

from pathlib import Path

import pytest
from yaml_to_rs.errors import AmbiguousError, NotFoundError, ParseError
from yaml_to_rs.models import DocumentKind, DocumentRepository

from tests.fixtures.sample_schemas import (
    BOARD_SUPPORT_INTERFACE,
    EVSE_MANAGER_INTERFACE,
    write_documents,
)


class TestDocumentRepository:
    """Tests for DocumentRepository lookups."""

    def test_requires_roots(self) -> None:
        """Should reject an empty root list."""
        with pytest.raises(ValueError, match="At least one schema root"):
            DocumentRepository([])

    def test_get_interface(self, repository: DocumentRepository) -> None:
        """Should load an interface by logical name."""
        interface = repository.get_interface("evse_manager")
        assert interface.description == "EVSE manager"

    def test_get_nested_data_types(self, repository: DocumentRepository) -> None:
        """Should resolve slash-joined names into nested directories."""
        data_types = repository.get_data_types("board/support")
        assert list(data_types.types) == ["Telemetry"]

    def test_results_are_cached(self, repository: DocumentRepository, schema_root: Path) -> None:
        """Should parse each document at most once."""
        first = repository.get_interface("evse_manager")
        (schema_root / "interfaces" / "evse_manager.yaml").unlink()

        assert repository.get_interface("evse_manager") is first
        assert (DocumentKind.INTERFACE, "evse_manager") in repository
        assert len(repository) == 1

    def test_kinds_cached_separately(self, repository: DocumentRepository) -> None:
        """Should key the cache on kind and name."""
        repository.get_data_types("evse")
        assert (DocumentKind.DATA_TYPES, "evse") in repository
        assert (DocumentKind.INTERFACE, "evse") not in repository

    def test_not_found(self, repository: DocumentRepository) -> None:
        """Should raise NotFoundError naming the searched directories."""
        with pytest.raises(NotFoundError, match="Interface 'unknown' not found") as exc_info:
            repository.get_interface("unknown")
        assert exc_info.value.detail["name"] == "unknown"

    def test_ambiguous(self, tmp_path: Path) -> None:
        """Should raise AmbiguousError when two roots hold the same document."""
        first = write_documents(
            tmp_path / "a", {"interfaces/evse_manager.yaml": EVSE_MANAGER_INTERFACE}
        )
        second = write_documents(
            tmp_path / "b", {"interfaces/evse_manager.yaml": BOARD_SUPPORT_INTERFACE}
        )
        repository = DocumentRepository([first, second])

        with pytest.raises(AmbiguousError, match="more than one schema root") as exc_info:
            repository.get_interface("evse_manager")
        assert exc_info.value.matches == [
            first / "interfaces" / "evse_manager.yaml",
            second / "interfaces" / "evse_manager.yaml",
        ]

    def test_lookup_across_roots(self, tmp_path: Path) -> None:
        """Should find documents in whichever root holds them."""
        first = write_documents(
            tmp_path / "a", {"interfaces/evse_manager.yaml": EVSE_MANAGER_INTERFACE}
        )
        second = write_documents(
            tmp_path / "b", {"interfaces/board_support.yaml": BOARD_SUPPORT_INTERFACE}
        )
        repository = DocumentRepository([first, second])

        assert repository.get_interface("evse_manager").description == "EVSE manager"
        assert repository.get_interface("board_support").description == "Board support package"

    def test_parse_failure_in_one_root_skipped(self, tmp_path: Path) -> None:
        """Should use the root that parses when another root's copy is invalid."""
        broken = tmp_path / "broken" / "interfaces"
        broken.mkdir(parents=True)
        (broken / "evse_manager.yaml").write_text("description: x\nunknown: 1\n")
        good = write_documents(
            tmp_path / "good", {"interfaces/evse_manager.yaml": EVSE_MANAGER_INTERFACE}
        )
        repository = DocumentRepository([tmp_path / "broken", good])

        assert repository.get_interface("evse_manager").description == "EVSE manager"

    def test_parse_failure_everywhere_raised(self, tmp_path: Path) -> None:
        """Should raise the parse error when no root yields a document."""
        broken = tmp_path / "interfaces"
        broken.mkdir()
        (broken / "evse_manager.yaml").write_text("description: x\nunknown: 1\n")
        repository = DocumentRepository([tmp_path])

        with pytest.raises(ParseError) as exc_info:
            repository.get_interface("evse_manager")
        assert exc_info.value.path == broken / "evse_manager.yaml"
