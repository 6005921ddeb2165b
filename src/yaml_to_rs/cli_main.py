"""Command-line interface for the yaml-to-rs code generator."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, TypeVar

import typer
from rich.console import Console
from rich.tree import Tree

from yaml_to_rs import __version__
from yaml_to_rs.ir.module_tree import ModuleNode, ModuleTree
from yaml_to_rs.ir.types import TYPES_MODULE_PATH
from yaml_to_rs.logging import configure_logging
from yaml_to_rs.models import DocumentRepository, load_manifest
from yaml_to_rs.transform.type_mapper import rust_type_name

T = TypeVar("T")

# Create Typer app
app = typer.Typer(
    name="yaml-to-rs",
    help="Generate Rust module bindings from YAML interface and type schemas.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich consoles for output
console = Console()
error_console = Console(stderr=True)

SCHEMA_ROOTS_ENV = "YAML_TO_RS_SCHEMA_ROOTS"

SchemaRootsOption = Annotated[
    list[Path],
    typer.Option(
        "--schema-root",
        "-s",
        help="Directory holding interfaces/ and types/. Repeat for several roots.",
        envvar=SCHEMA_ROOTS_ENV,
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
    ),
]

ManifestOption = Annotated[
    Path,
    typer.Option(
        "--manifest",
        "-m",
        help="Module manifest YAML file.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        help="Show debug logging and full tracebacks.",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"yaml-to-rs version {__version__}")
        raise typer.Exit()


def _run(func: Callable[[], T], verbose: bool) -> T:
    """Run a command body, turning pipeline errors into exit code 1."""
    from yaml_to_rs.cli.exception_handler import handle_exceptions

    return handle_exceptions(verbose, error_console)(func)()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate Rust bindings for a module from its YAML manifest.

    Interfaces and data types are looked up by name under one or more
    schema roots; every referenced type is resolved transitively.
    """


@app.command()
def generate(
    module_name: Annotated[
        str,
        typer.Option(
            "--module-name",
            "-n",
            help="Name of the module to generate.",
        ),
    ],
    schema_roots: SchemaRootsOption,
    manifest: ManifestOption,
    out_dir: Annotated[
        Path | None,
        typer.Option(
            "--out-dir",
            "-o",
            help="Output directory for generated.rs. Defaults to $OUT_DIR.",
            file_okay=False,
            resolve_path=True,
        ),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Generate generated.rs for a module.

    Examples
    --------
        yaml-to-rs generate -n EvseManager -s everest-core -m manifest.yaml -o gen/

    """
    from yaml_to_rs.builder import Builder

    configure_logging(verbose=verbose, console=error_console)

    def run() -> Path:
        builder = Builder(manifest, schema_roots, module_name)
        if out_dir is not None:
            builder.out_dir(out_dir)
        return builder.generate()

    output_path = _run(run, verbose)
    console.print(f"[bold green]✓ Wrote {output_path}[/bold green]")


@app.command()
def validate(
    schema_roots: SchemaRootsOption,
    manifest: ManifestOption,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Treat warnings as errors.",
        ),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format for validation results: text, table, tree.",
        ),
    ] = "text",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only output problems, no success messages.",
        ),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Validate a manifest and every schema document it uses.

    Examples
    --------
        yaml-to-rs validate -s everest-core -m manifest.yaml
        yaml-to-rs validate -s everest-core -m manifest.yaml --strict
        yaml-to-rs validate -s everest-core -m manifest.yaml --format table

    """
    from yaml_to_rs.cli.error_formatter import ErrorFormatter, ErrorTable, ErrorTree
    from yaml_to_rs.validation import ManifestValidator, ValidationResult

    configure_logging(verbose=verbose, console=error_console)

    def run() -> ValidationResult:
        repository = DocumentRepository(schema_roots)
        return ManifestValidator(repository, strict=strict).validate(load_manifest(manifest))

    result = _run(run, verbose)

    if not result.is_valid or result.warnings:
        if output_format == "table":
            ErrorTable(error_console).print_result(result)
        elif output_format == "tree":
            ErrorTree(error_console).print_result(result)
        else:
            ErrorFormatter(error_console).format_validation_result(result, manifest)

        if not result.is_valid or strict:
            raise typer.Exit(code=1)

    if not quiet:
        if result.warnings:
            console.print(f"\n[bold yellow]⚠ {manifest.name} is valid with warnings[/bold yellow]\n")
        else:
            console.print(f"\n[bold green]✓ {manifest.name} is valid[/bold green]\n")


@app.command()
def types(
    schema_roots: SchemaRootsOption,
    manifest: ManifestOption,
    verbose: VerboseOption = False,
) -> None:
    """Show every type the module's interfaces reference, by module path."""
    from yaml_to_rs.transform.context_builder import RenderContextBuilder

    configure_logging(verbose=verbose, console=error_console)

    def run() -> ModuleTree:
        loaded = load_manifest(manifest)
        builder = RenderContextBuilder(DocumentRepository(schema_roots))
        names = [entry.interface for entry in loaded.provides.values()]
        names += [entry.interface for entry in loaded.requires.values()]
        return builder.resolve_types(dict.fromkeys(names))

    tree = _run(run, verbose)

    view = Tree(f"[bold]{TYPES_MODULE_PATH}[/bold] ({len(tree)} types)")
    _add_module_node(view, tree.root)
    console.print(view)


def _add_module_node(parent: Tree, node: ModuleNode) -> None:
    for definition in node.enums:
        parent.add(f"[magenta]enum[/magenta] {definition.name}: {', '.join(definition.items)}")
    for definition in node.objects:
        branch = parent.add(f"[cyan]struct[/cyan] {definition.name}")
        for prop in definition.properties:
            branch.add(f"{prop.name}: {rust_type_name(prop.data_type, optional=prop.optional)}")
    for name in sorted(node.children):
        _add_module_node(parent.add(f"[bold]{name}[/bold]"), node.children[name])


@app.command()
def context(
    schema_roots: SchemaRootsOption,
    manifest: ManifestOption,
    module_name: Annotated[
        str,
        typer.Option(
            "--module-name",
            "-n",
            help="Module name recorded in the context.",
        ),
    ] = "Module",
    verbose: VerboseOption = False,
) -> None:
    """Print the render context passed to the templates as JSON."""
    from yaml_to_rs.builder import build_context

    configure_logging(verbose=verbose, console=error_console)

    render_context = _run(lambda: build_context(manifest, schema_roots, module_name), verbose)
    typer.echo(json.dumps(render_context.to_dict(), indent=2))


if __name__ == "__main__":
    app()
