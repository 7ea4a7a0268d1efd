"""Jinja2 template loader for site pages."""

from importlib.resources import files
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, Template, TemplateError, select_autoescape

from noogle.core.exceptions import TemplateRenderError
from noogle.engine import filters


class TemplateLoader:
    """Loads and renders the HTML templates of the site.

    Supports:
    - Template inheritance (``base.html.jinja2``)
    - Custom filters (dotted paths, entry routes, toc indentation)
    - Configurable template directory
    """

    def __init__(self, template_dir: Path | None = None) -> None:
        """Initialize TemplateLoader.

        Args:
            template_dir: Path to template directory. Defaults to src/noogle/engine/templates

        """
        if template_dir is None:
            template_dir = Path(str(files("noogle.engine").joinpath("templates")))

        self.template_dir = template_dir

        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=select_autoescape(["html", "jinja2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

        self._register_filters()

    def _register_filters(self) -> None:
        """Register custom Jinja2 filters."""
        self.env.filters["dotted"] = filters.dotted
        self.env.filters["route"] = filters.route
        self.env.filters["toc_indent"] = filters.toc_indent

    def load_template(self, template_name: str) -> Template:
        """Load a template by name.

        Raises:
            TemplateNotFound: If template does not exist

        """
        return self.env.get_template(template_name)

    def render_template(self, template_name: str, **context: Any) -> str:
        """Load and render a template with context.

        Raises:
            TemplateRenderError: If the template is missing or fails to render

        """
        try:
            template = self.load_template(template_name)
            return template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(template_name, str(e)) from e
