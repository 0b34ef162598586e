"""
Catalog data model and the read-only introspection interface.

Generators never talk to a database directly; they receive a
:class:`CatalogReader` and ask it for tables, columns and foreign keys.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


class CatalogError(Exception):
    """Exception raised when catalog metadata cannot be read."""

    pass


@dataclass(frozen=True)
class ForeignKeyEdge:
    """One column-to-column reference implied by a foreign-key constraint."""

    constraint_name: str
    source_table: str
    source_column: str
    target_table: str
    target_column: str


@dataclass(frozen=True)
class ColumnDescriptor:
    """Metadata for a single catalog column."""

    table_name: str
    column_name: str
    declared_type: str
    default_expression: Optional[str] = None
    ordinal_position: int = 0
    foreign_keys: Tuple[ForeignKeyEdge, ...] = field(default_factory=tuple)

    @property
    def has_default(self) -> bool:
        """True when the column declares a default expression."""
        return self.default_expression is not None


class CatalogReader(ABC):
    """Read-only view of a relational catalog."""

    @abstractmethod
    def list_tables(self, schema: str) -> List[str]:
        """
        List table names in a schema.

        Args:
            schema: Schema name

        Returns:
            Table names in catalog enumeration order
        """
        pass

    @abstractmethod
    def list_columns(self, schema: str, table: str) -> List[ColumnDescriptor]:
        """
        List the columns of a table ordered by ordinal position.

        The returned descriptors carry no foreign keys; those are
        fetched per column with :meth:`list_foreign_keys`.
        """
        pass

    @abstractmethod
    def list_foreign_keys(
        self, schema: str, table: str, column: str
    ) -> List[ForeignKeyEdge]:
        """
        List foreign-key edges leaving a column.

        Edges are ordered by constraint name, then by the column's
        position within the constraint.
        """
        pass

    @abstractmethod
    def table_exists(self, schema: str, table: str) -> bool:
        """Check whether a table is present in the catalog."""
        pass
