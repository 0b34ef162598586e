"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

from typing import Any, Dict, Set, Union

from jinja2 import Environment, StrictUndefined, Template, meta
from jinja2 import TemplateError as JinjaTemplateError


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


def capitalize_first(value: str) -> str:
    """Upper-case the first character only, leaving the rest unchanged."""
    value = str(value)
    return value[:1].upper() + value[1:]


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self):
        """Initialize template engine."""
        self._env = Environment(
            # Generated code is not markup; '<' in List<dynamic> must survive
            autoescape=False,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self._string_cache: Dict[str, Template] = {}

        # Add custom filters for code generation
        self._env.filters["indent"] = self._indent_filter
        self._env.filters["capitalize_first"] = capitalize_first

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """
        Render a template string with the given context.

        Compiled templates are cached by source text.

        Args:
            template_string: Template content as string
            context: Variables to pass to template

        Returns:
            Rendered content
        """
        try:
            template = self._string_cache.get(template_string)
            if template is None:
                template = self._env.from_string(template_string)
                self._string_cache[template_string] = template
            return template.render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render template string: {str(e)}")

    def slot_names(self, template_string: str) -> Set[str]:
        """
        Get the variables a template string expects.

        Args:
            template_string: Template content as string

        Returns:
            Names of undeclared variables referenced by the template
        """
        try:
            ast = self._env.parse(template_string)
        except JinjaTemplateError as e:
            raise TemplateError(f"Invalid template: {str(e)}")
        return meta.find_undeclared_variables(ast)

    # Template filters for code generation

    def _indent_filter(self, value: str, width: Union[int, str] = 4) -> str:
        """Indent all non-blank lines in a string."""
        indent = " " * width if isinstance(width, int) else width
        lines = str(value).split("\n")
        return "\n".join(indent + line if line.strip() else "" for line in lines)


# Default template engine instance
_default_engine = None


def get_default_template_engine() -> TemplateEngine:
    """Get the default template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()
    return _default_engine
