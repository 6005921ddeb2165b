"""Programmatic entry points: generate a module's Rust bindings in one call."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from yaml_to_rs.errors import CodegenError
from yaml_to_rs.ir.context import RenderContext
from yaml_to_rs.logging import get_logger
from yaml_to_rs.models.loader import load_manifest
from yaml_to_rs.models.repository import DocumentRepository
from yaml_to_rs.render.renderer import TemplateRenderer
from yaml_to_rs.transform.context_builder import RenderContextBuilder

logger = get_logger(__name__)

OUTPUT_FILE_NAME = "generated.rs"
OUT_DIR_ENV = "OUT_DIR"


def build_context(
    manifest_path: str | Path,
    schema_roots: Sequence[str | Path],
    module_name: str,
) -> RenderContext:
    """Load a manifest and build its render context.

    Args:
    ----
        manifest_path: Path to the module manifest.
        schema_roots: Directories holding ``interfaces/`` and ``types/``.
        module_name: Name of the module being generated.

    Returns:
    -------
        RenderContext of the module.

    """
    manifest = load_manifest(Path(manifest_path))
    repository = DocumentRepository([Path(root) for root in schema_roots])
    return RenderContextBuilder(repository).build(manifest, module_name)


def emit(
    manifest_path: str | Path,
    schema_roots: Sequence[str | Path],
    module_name: str,
) -> str:
    """Run the whole pipeline and return the generated Rust source.

    Raises
    ------
        CodegenError: On any load, resolution or render failure.

    """
    context = build_context(manifest_path, schema_roots, module_name)
    return TemplateRenderer().render(context)


class Builder:
    """Generate ``generated.rs`` for a module, typically from a build script.

    Usage:
        Builder("manifest.yaml", ["everest-core"], "EvseManager") \\
            .out_dir("target/gen") \\
            .generate()
    """

    def __init__(
        self,
        manifest_path: str | Path,
        schema_roots: Sequence[str | Path],
        module_name: str,
    ) -> None:
        self.manifest_path = Path(manifest_path)
        self.schema_roots = [Path(root) for root in schema_roots]
        self.module_name = module_name
        self._out_dir: Path | None = None

    def out_dir(self, path: str | Path) -> Builder:
        """Set the output directory, overriding ``$OUT_DIR``."""
        self._out_dir = Path(path)
        return self

    def resolve_out_dir(self) -> Path:
        """Return the configured output directory or ``$OUT_DIR``."""
        if self._out_dir is not None:
            return self._out_dir
        env_dir = os.environ.get(OUT_DIR_ENV)
        if not env_dir:
            raise CodegenError(
                f"No output directory given and ${OUT_DIR_ENV} is not set",
                variable=OUT_DIR_ENV,
            )
        return Path(env_dir)

    def generate(self) -> Path:
        """Render the module and write it to ``<out_dir>/generated.rs``.

        Nothing is written unless rendering succeeds.

        Returns
        -------
            Path of the written file.

        """
        out_dir = self.resolve_out_dir()
        source = emit(self.manifest_path, self.schema_roots, self.module_name)

        out_dir.mkdir(parents=True, exist_ok=True)
        output_path = out_dir / OUTPUT_FILE_NAME
        output_path.write_text(source, encoding="utf-8")
        logger.info("Wrote %s (%d bytes)", output_path, len(source.encode("utf-8")))
        return output_path
