"""Schema to render context transformation.

The transformation process:
    1. Parse `$ref` strings into TypeRefs (`refs`)
    2. Classify arguments and spell them in Rust (`type_mapper`)
    3. Resolve the closure of referenced types into a ModuleTree (`resolver`)
    4. Project manifest, interfaces and types into a RenderContext
       (`context_builder`)

Example:
-------
    >>> from yaml_to_rs.models import DocumentRepository, load_manifest
    >>> from yaml_to_rs.transform import RenderContextBuilder
    >>>
    >>> repository = DocumentRepository(["schemas"])
    >>> builder = RenderContextBuilder(repository)
    >>> context = builder.build(load_manifest("manifest.yaml"), "EvseManager")
    >>> print([interface.name for interface in context.interfaces])

"""

from yaml_to_rs.transform.context_builder import RenderContextBuilder
from yaml_to_rs.transform.refs import extract_refs, extract_typed_refs, parse_reference
from yaml_to_rs.transform.resolver import TypeResolver
from yaml_to_rs.transform.type_mapper import map_argument, map_config_entry, rust_type_name

__all__ = [
    "RenderContextBuilder",
    "TypeResolver",
    "extract_refs",
    "extract_typed_refs",
    "map_argument",
    "map_config_entry",
    "parse_reference",
    "rust_type_name",
]
