"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for member generation.
"""

from typing import Any, Dict, Optional
from pathlib import Path

from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
)

from ...logging_config import get_logger

logger = get_logger(__name__)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Optional[Path] = None, indent_unit: str = "    "):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
            indent_unit: Text used for one level of indentation
        """
        self.template_dir = template_dir
        self.indent_unit = indent_unit
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            logger.debug("Template directory %s not found", self.template_dir)
            loader = DictLoader({})

        self._env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            undefined=StrictUndefined,
        )

        # Add custom filters for code generation
        self._env.filters["indent_code"] = self._indent_filter
        self._env.globals["indent_unit"] = self.indent_unit

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {template_name}") from e
        except Exception as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {str(e)}"
            ) from e

    def template_exists(self, template_name: str) -> bool:
        """Check if a template can be loaded."""
        try:
            self._env.get_template(template_name)
            return True
        except TemplateNotFound:
            return False

    # Template filters for code generation

    def _indent_filter(self, value: str, levels: int = 1) -> str:
        """Indent all non-blank lines by the configured unit."""
        indent = self.indent_unit * levels
        lines = str(value).split("\n")
        return "\n".join(indent + line if line.strip() else line for line in lines)


def create_template_engine(
    template_dir: Optional[Path] = None, indent_unit: str = "    "
) -> TemplateEngine:
    """Create a template engine for the given directory."""
    return TemplateEngine(template_dir, indent_unit)
