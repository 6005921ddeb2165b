"""Template rendering of the generated Rust module."""

from yaml_to_rs.render.naming import pascal_case, rust_identifier, snake_case, split_words
from yaml_to_rs.render.renderer import ENTRY_TEMPLATE, TemplateRenderer, doc_comment

__all__ = [
    "ENTRY_TEMPLATE",
    "TemplateRenderer",
    "doc_comment",
    "pascal_case",
    "rust_identifier",
    "snake_case",
    "split_words",
]
