"""yaml-to-rs: Rust code generator for YAML interface definition schemas.

This package provides tools for:
- Loading and validating module manifests, interfaces and data types
- Resolving every referenced named type across several schema roots
- Rendering Rust service traits, clients, config and types with Jinja2

Quick Start:
    >>> from yaml_to_rs.builder import Builder
    >>>
    >>> Builder("manifest.yaml", ["everest-core"], "EvseManager") \\
    ...     .out_dir("gen") \\
    ...     .generate()

Modules:
    models: Pydantic models and the document repository
    transform: Reference resolution and render context building
    ir: Type references, module tree and render context data structures
    render: Jinja2 templates and naming filters
    validation: Semantic validation beyond schema
    cli: Command-line interface
"""

__version__ = "0.1.0"
