"""
Jinja2 rendering for generated Java methods.

Templates are loaded from a language's template directory or, when none
is available, an empty loader. Two filters are installed: ``indent``
and ``comment``.
"""

from typing import Dict, Any, Optional
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    DictLoader,
    StrictUndefined,
    TemplateNotFound,
)


class TemplateError(Exception):
    """Raised when a template cannot be loaded or rendered."""

    pass


class TemplateEngine:
    """Thin wrapper around a Jinja2 environment configured for source output."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Args:
            template_dir: Directory holding ``*.j2`` files; in-memory if None
        """
        self.template_dir = template_dir
        self._env = Environment(
            loader=self._make_loader(),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            undefined=StrictUndefined,
        )
        self._env.filters["indent"] = indent_filter
        self._env.filters["comment"] = comment_filter

    def _make_loader(self):
        if self.template_dir is not None and self.template_dir.exists():
            return FileSystemLoader(str(self.template_dir))
        return DictLoader({})

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a named template, wrapping any Jinja2 failure in TemplateError."""
        try:
            return self._env.get_template(template_name).render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def template_exists(self, template_name: str) -> bool:
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True


def indent_filter(value: str, spaces: int = 4) -> str:
    """Prefix every non-blank line with ``spaces`` spaces."""
    pad = " " * spaces
    return "\n".join(
        pad + line if line.strip() else line for line in str(value).split("\n")
    )


def comment_filter(value: str, style: str = "//") -> str:
    """Turn every non-blank line into a line comment."""
    return "\n".join(
        f"{style} {line}" if line.strip() else line for line in str(value).split("\n")
    )


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, file-backed when a directory is given."""
    return TemplateEngine(template_dir)
