"""
Template handling for scaffolding.

Two kinds of templates live here: the ``{{variable}}`` patterns used for
directory and file names, resolved by plain substitution, and the Jinja2
templates that render the bodies of generated source files.
"""

import re
from pathlib import Path
from typing import Dict, Any, List, Mapping, Optional

from jinja2 import (
    Environment,
    FileSystemLoader,
    DictLoader,
    StrictUndefined,
    select_autoescape,
)

from .naming import to_camel_case, to_pascal_case, to_kebab_case, to_snake_case

PLACEHOLDER_PATTERN = re.compile(r"\{\{([^{}]+)\}\}")


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


def resolve_placeholders(template: str, variables: Mapping[str, str]) -> str:
    """
    Substitute ``{{variable}}`` tokens in a path or file-name pattern.

    Unknown variables (and variables bound to None) render as an empty
    string. Substituted values are never scanned again.

    Args:
        template: Pattern such as ``{{pascalName}}Service.ts``
        variables: Values for the placeholders

    Returns:
        Resolved string
    """

    def _substitute(match: re.Match) -> str:
        value = variables.get(match.group(1))
        return "" if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(_substitute, template)


def find_placeholders(template: str) -> List[str]:
    """Return placeholder names used in a pattern, in order of appearance."""
    return PLACEHOLDER_PATTERN.findall(template)


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
        """
        self.template_dir = template_dir
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            # Use in-memory templates
            loader = DictLoader({})

        self._env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        # Case filters share the converters used for file names
        self._env.filters["pascal_case"] = to_pascal_case
        self._env.filters["camel_case"] = to_camel_case
        self._env.filters["kebab_case"] = to_kebab_case
        self._env.filters["snake_case"] = to_snake_case

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
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, reading files from ``template_dir`` if given."""
    return TemplateEngine(template_dir)
