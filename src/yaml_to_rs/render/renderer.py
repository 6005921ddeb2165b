"""Jinja2 rendering of a RenderContext into Rust source."""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Any

from jinja2 import (
    BaseLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    TemplateError,
)

from yaml_to_rs.errors import RenderError
from yaml_to_rs.ir.context import RenderContext
from yaml_to_rs.logging import get_logger
from yaml_to_rs.render.naming import pascal_case, rust_identifier, snake_case

logger = get_logger(__name__)

ENTRY_TEMPLATE = "module.jinja2"


def doc_comment(text: str | None, indent: int = 0) -> str:
    """Turn a schema description into Rust ``///`` doc comment lines."""
    prefix = " " * indent + "///"
    lines = (text or "").strip().splitlines() or [""]
    return "\n".join(f"{prefix} {line.rstrip()}".rstrip() for line in lines)


class TemplateRenderer:
    """Render the generated module from the bundled Rust templates.

    Undefined template variables are errors. Every Jinja2 failure is
    raised as RenderError.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        """Initialize the renderer.

        Args:
        ----
            template_dir: Directory overriding the bundled templates.

        """
        loader: BaseLoader
        if template_dir is None:
            loader = PackageLoader("yaml_to_rs", "templates")
        else:
            loader = FileSystemLoader(str(template_dir))

        self._env = Environment(
            loader=loader,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self._env.filters["title"] = pascal_case
        self._env.filters["snake"] = snake_case
        self._env.filters["ident"] = rust_identifier
        self._env.filters["doc"] = doc_comment

    @property
    def environment(self) -> Environment:
        return self._env

    def render(self, context: RenderContext) -> str:
        """Render the entry template for a module.

        Args:
        ----
            context: The module's render context.

        Returns:
        -------
            Rust source text.

        Raises:
        ------
            RenderError: If a template is missing, malformed or uses an
                undefined value.

        """
        variables = {f.name: getattr(context, f.name) for f in fields(context)}
        return self.render_template(ENTRY_TEMPLATE, **variables)

    def render_template(self, template_name: str, **variables: Any) -> str:
        """Render a single template with the given variables."""
        logger.debug("Rendering template '%s'", template_name)
        try:
            template = self._env.get_template(template_name)
            return template.render(**variables)
        except TemplateError as e:
            raise RenderError(
                f"Failed to render template '{template_name}': {e}",
                template=template_name,
            ) from e
