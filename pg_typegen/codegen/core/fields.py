"""
Field block rendering.

A field block is everything emitted for one column: one comment per
foreign-key edge, an optional default-value comment, then the field line.
"""

from typing import List, Optional

from .mapper import TypeMapper
from .profile import LanguageProfile
from .templates import TemplateEngine, capitalize_first
from ...catalog.base import ColumnDescriptor, ForeignKeyEdge


class FieldRenderer:
    """Renders column metadata as field blocks for one language."""

    def __init__(
        self,
        profile: LanguageProfile,
        type_mapper: Optional[TypeMapper] = None,
        add_comments: bool = True,
        engine: Optional[TemplateEngine] = None,
    ):
        """
        Initialize renderer.

        Args:
            profile: Target language profile
            type_mapper: Mapper for column types (defaults to the legacy
                fallback behaviour)
            add_comments: Emit foreign-key and default-value comments
            engine: Template engine for comment rendering
        """
        self.profile = profile
        self.type_mapper = type_mapper or TypeMapper(profile, engine=engine)
        self.add_comments = add_comments
        self.engine = engine

    def foreign_key_comment(self, edge: ForeignKeyEdge) -> str:
        """Render the provenance comment for one foreign-key edge."""
        text = (
            f"{capitalize_first(edge.source_table)}.{edge.constraint_name} "
            f"references {capitalize_first(edge.target_table)}.{edge.target_column}"
        )
        return self.profile.render_comment(text, self.engine)

    def default_comment(self, column: ColumnDescriptor) -> Optional[str]:
        """Render the default-value comment, or None without a default."""
        if not column.has_default:
            return None
        return self.profile.render_comment(
            f" default value: {column.default_expression}", self.engine
        )

    def field_line(self, column: ColumnDescriptor) -> str:
        """Render the ``name: type`` line."""
        return f"{column.column_name}: {self.type_mapper.map_type(column.declared_type)}"

    def render(self, column: ColumnDescriptor) -> str:
        """
        Render the complete field block for a column.

        Args:
            column: Column metadata including its foreign-key edges

        Returns:
            Newline-separated block ending with the field line
        """
        lines: List[str] = []

        if self.add_comments:
            lines.extend(self.foreign_key_comment(edge) for edge in column.foreign_keys)
            default = self.default_comment(column)
            if default is not None:
                lines.append(default)

        lines.append(self.field_line(column))
        return "\n".join(lines)


def render_field(
    column: ColumnDescriptor, profile: LanguageProfile, add_comments: bool = True
) -> str:
    """Render one column's field block with default settings."""
    return FieldRenderer(profile, add_comments=add_comments).render(column)
