"""
Catalog access.

Provides the read-only introspection interface used by the generators
and its in-memory and PostgreSQL implementations.
"""

from .base import CatalogError, CatalogReader, ColumnDescriptor, ForeignKeyEdge
from .memory import InMemoryCatalog
from .postgres import PostgresCatalog

__all__ = [
    "CatalogError",
    "CatalogReader",
    "ColumnDescriptor",
    "ForeignKeyEdge",
    "InMemoryCatalog",
    "PostgresCatalog",
]
