"""Tests for the yaml-to-rs command line."""

import copy
import json
from pathlib import Path

import pytest
from typer.testing import CliRunner
from yaml_to_rs import __version__
from yaml_to_rs.cli_main import app

from tests.fixtures.sample_schemas import (
    MANIFEST,
    SCHEMA_DOCUMENTS,
    write_documents,
    write_manifest,
)

runner = CliRunner()


def schema_args(schema_root: Path, manifest_path: Path) -> list[str]:
    return ["-s", str(schema_root), "-m", str(manifest_path)]


class TestApp:
    """Tests for top-level options."""

    def test_version(self) -> None:
        """Should print the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"yaml-to-rs version {__version__}" in result.output

    def test_help(self) -> None:
        """Should list the commands."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("generate", "validate", "types", "context"):
            assert command in result.output


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_generate(self, schema_root: Path, manifest_path: Path, tmp_path: Path) -> None:
        """Should write generated.rs into the output directory."""
        out_dir = tmp_path / "out"

        result = runner.invoke(
            app,
            ["generate", "-n", "EvseManager", *schema_args(schema_root, manifest_path)]
            + ["-o", str(out_dir)],
        )

        assert result.exit_code == 0, result.output
        source = (out_dir / "generated.rs").read_text(encoding="utf-8")
        assert "pub const MODULE_NAME: &str = \"EvseManager\";" in source
        assert "Wrote" in result.output

    def test_generate_from_out_dir_env(
        self,
        schema_root: Path,
        manifest_path: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should fall back to $OUT_DIR."""
        monkeypatch.setenv("OUT_DIR", str(tmp_path / "env_out"))

        result = runner.invoke(
            app, ["generate", "-n", "EvseManager", *schema_args(schema_root, manifest_path)]
        )

        assert result.exit_code == 0, result.output
        assert (tmp_path / "env_out" / "generated.rs").is_file()

    def test_generate_without_out_dir(
        self,
        schema_root: Path,
        manifest_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should fail when no output directory is known."""
        monkeypatch.delenv("OUT_DIR", raising=False)

        result = runner.invoke(
            app, ["generate", "-n", "EvseManager", *schema_args(schema_root, manifest_path)]
        )

        assert result.exit_code == 1
        assert "OUT_DIR is not set" in result.output

    def test_generate_unknown_interface(
        self, schema_root: Path, tmp_path: Path
    ) -> None:
        """Should exit with 1 and write nothing for an unknown interface."""
        data = copy.deepcopy(MANIFEST)
        data["requires"]["bsp"]["interface"] = "nowhere"
        manifest_path = write_manifest(tmp_path / "broken.yaml", data)
        out_dir = tmp_path / "out"

        result = runner.invoke(
            app,
            ["generate", "-n", "EvseManager", *schema_args(schema_root, manifest_path)]
            + ["-o", str(out_dir)],
        )

        assert result.exit_code == 1
        assert "Error: not found" in result.output
        assert not out_dir.exists()

    def test_generate_invalid_manifest(self, schema_root: Path, tmp_path: Path) -> None:
        """Should report schema errors of the manifest."""
        manifest_path = tmp_path / "bad.yaml"
        manifest_path.write_text("description: x\n")

        result = runner.invoke(
            app,
            ["generate", "-n", "EvseManager", *schema_args(schema_root, manifest_path)]
            + ["-o", str(tmp_path / "out")],
        )

        assert result.exit_code == 1
        assert "Schema Validation Failed" in result.output
        assert "This field is required but was not provided" in result.output

    def test_missing_manifest_file(self, schema_root: Path, tmp_path: Path) -> None:
        """Should reject a manifest path that does not exist."""
        result = runner.invoke(
            app,
            ["generate", "-n", "EvseManager", *schema_args(schema_root, tmp_path / "nope.yaml")],
        )

        assert result.exit_code == 2


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid(self, schema_root: Path, manifest_path: Path) -> None:
        """Should report a valid manifest."""
        result = runner.invoke(app, ["validate", *schema_args(schema_root, manifest_path)])

        assert result.exit_code == 0, result.output
        assert "manifest.yaml is valid" in result.output

    def test_quiet(self, schema_root: Path, manifest_path: Path) -> None:
        """Should print nothing for a valid manifest in quiet mode."""
        result = runner.invoke(
            app, ["validate", "-q", *schema_args(schema_root, manifest_path)]
        )

        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_schema_roots_from_environment(self, schema_root: Path, manifest_path: Path) -> None:
        """Should read schema roots from the environment."""
        result = runner.invoke(
            app,
            ["validate", "-m", str(manifest_path)],
            env={"YAML_TO_RS_SCHEMA_ROOTS": str(schema_root)},
        )

        assert result.exit_code == 0, result.output

    @pytest.mark.parametrize(
        ("output_format", "expected"),
        [
            ("text", "[E001]"),
            ("table", "Validation Issues"),
            ("tree", "requires (1 issues)"),
        ],
    )
    def test_errors(
        self, schema_root: Path, tmp_path: Path, output_format: str, expected: str
    ) -> None:
        """Should print the issues and exit with 1."""
        data = copy.deepcopy(MANIFEST)
        data["requires"]["bsp"]["interface"] = "nowhere"
        manifest_path = write_manifest(tmp_path / "broken.yaml", data)

        result = runner.invoke(
            app,
            ["validate", "-f", output_format, *schema_args(schema_root, manifest_path)],
        )

        assert result.exit_code == 1
        assert expected in result.output

    def test_warnings(self, tmp_path: Path, manifest_path: Path) -> None:
        """Should pass with warnings, and fail with --strict."""
        documents = copy.deepcopy(SCHEMA_DOCUMENTS)
        del documents["interfaces/board_support.yaml"]["vars"]["telemetry"]["description"]
        schema_root = write_documents(tmp_path / "warn", documents)
        args = schema_args(schema_root, manifest_path)

        result = runner.invoke(app, ["validate", *args])
        assert result.exit_code == 0, result.output
        assert "W003" in result.output
        assert "valid with warnings" in result.output

        strict = runner.invoke(app, ["validate", "--strict", *args])
        assert strict.exit_code == 1


class TestTypesCommand:
    """Tests for the types command."""

    def test_types(self, schema_root: Path, manifest_path: Path) -> None:
        """Should show the resolved type tree."""
        result = runner.invoke(app, ["types", *schema_args(schema_root, manifest_path)])

        assert result.exit_code == 0, result.output
        assert "crate::generated::types (5 types)" in result.output
        assert "enum State: Idle, Charging" in result.output
        assert "struct SessionEvent" in result.output
        assert "phases: Option<i64>" in result.output


class TestContextCommand:
    """Tests for the context command."""

    def test_context_json(self, schema_root: Path, manifest_path: Path) -> None:
        """Should print the render context as JSON."""
        result = runner.invoke(
            app, ["context", "-n", "EvseManager", *schema_args(schema_root, manifest_path)]
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["module_name"] == "EvseManager"
        assert [i["name"] for i in data["interfaces"]] == ["evse_manager", "board_support"]
        assert list(data["type_module"]["children"]) == ["board", "evse", "powermeter"]

    def test_default_module_name(self, schema_root: Path, manifest_path: Path) -> None:
        """Should default the module name."""
        result = runner.invoke(app, ["context", *schema_args(schema_root, manifest_path)])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["module_name"] == "Module"
