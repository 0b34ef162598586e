"""
PostgreSQL catalog reader.

Reads table, column and foreign-key metadata from ``information_schema``
of a live database using psycopg 3. A connection is opened per call, so
results always reflect the current state of the database.
"""

import os
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import psycopg
from psycopg.rows import dict_row

from .base import CatalogError, CatalogReader, ColumnDescriptor, ForeignKeyEdge
from ..logging_config import get_logger

logger = get_logger(__name__)

TYPE_SOURCES = ("data_type", "udt_name")

# Same relation kinds as information_schema.tables, in pg_class oid order
LIST_TABLES_SQL = """
    SELECT c.relname AS table_name
    FROM pg_catalog.pg_class c
    JOIN pg_catalog.pg_namespace n ON n.oid = c.relnamespace
    WHERE n.nspname = %s AND c.relkind IN ('r', 'p', 'v', 'f')
    ORDER BY c.oid
"""

TABLE_EXISTS_SQL = """
    SELECT EXISTS (
        SELECT 1
        FROM information_schema.tables
        WHERE table_schema = %s AND table_name = %s
    ) AS present
"""

# Type column is interpolated from TYPE_SOURCES only
LIST_COLUMNS_SQL = """
    SELECT column_name, {type_column} AS declared_type, column_default, ordinal_position
    FROM information_schema.columns
    WHERE table_schema = %s AND table_name = %s
    ORDER BY ordinal_position
"""

# The referenced column is the one at the same position in the
# unique/primary key that the constraint points to.
LIST_FOREIGN_KEYS_SQL = """
    SELECT c.constraint_name,
           x.table_name AS source_table,
           x.column_name AS source_column,
           y.table_name AS target_table,
           y.column_name AS target_column
    FROM information_schema.referential_constraints c
    JOIN information_schema.key_column_usage x
        ON x.constraint_name = c.constraint_name
       AND x.constraint_schema = c.constraint_schema
    JOIN information_schema.key_column_usage y
        ON y.ordinal_position = x.position_in_unique_constraint
       AND y.constraint_name = c.unique_constraint_name
       AND y.constraint_schema = c.unique_constraint_schema
    WHERE x.table_schema = %s AND x.table_name = %s AND x.column_name = %s
    ORDER BY c.constraint_name, x.ordinal_position
"""


class PostgresCatalog(CatalogReader):
    """
    Catalog reader backed by a PostgreSQL database.

    Usage:
        catalog = PostgresCatalog("postgresql://localhost/app")
        catalog.list_tables("public")
    """

    def __init__(
        self,
        connection_string: Optional[str] = None,
        type_source: str = "data_type",
    ):
        """
        Initialize the reader.

        Args:
            connection_string: libpq connection string or URL. Falls back to
                ``DATABASE_URL``, then to the standard ``PG*`` variables.
            type_source: Column of ``information_schema.columns`` reported as
                the declared type: ``data_type`` (e.g. ``integer``) or
                ``udt_name`` (e.g. ``int4``)
        """
        if type_source not in TYPE_SOURCES:
            raise CatalogError(
                f"Invalid type_source: {type_source}. "
                f"Expected one of: {', '.join(TYPE_SOURCES)}"
            )

        self._conn_string = connection_string
        self.type_source = type_source

    @property
    def conn_string(self) -> str:
        """Connection string, resolved from the environment when not given."""
        if self._conn_string is None:
            # Empty conninfo lets libpq read PGHOST, PGDATABASE, ...
            self._conn_string = os.environ.get("DATABASE_URL", "")
        return self._conn_string

    @contextmanager
    def get_connection(self):
        """
        Context manager for catalog connections.

        Yields:
            psycopg connection with dict_row factory
        """
        conn = None
        try:
            logger.debug("Connecting to PostgreSQL...")
            conn = psycopg.connect(self.conn_string, row_factory=dict_row)
            yield conn
        except psycopg.Error as e:
            logger.error("PostgreSQL catalog error: %s", e)
            raise CatalogError(f"Failed to read catalog: {e}") from e
        finally:
            if conn:
                conn.close()

    def fetch_all(self, query: str, params: tuple) -> List[Dict[str, Any]]:
        """Execute a query and fetch all rows."""
        with self.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(query, params)
                return cur.fetchall()

    def list_tables(self, schema: str) -> List[str]:
        """List tables in catalog order (creation order, not sorted by name)."""
        rows = self.fetch_all(LIST_TABLES_SQL, (schema,))
        return [row["table_name"] for row in rows]

    def list_columns(self, schema: str, table: str) -> List[ColumnDescriptor]:
        query = LIST_COLUMNS_SQL.format(type_column=self.type_source)
        rows = self.fetch_all(query, (schema, table))
        return [
            ColumnDescriptor(
                table_name=table,
                column_name=row["column_name"],
                declared_type=row["declared_type"],
                default_expression=row["column_default"],
                ordinal_position=row["ordinal_position"],
            )
            for row in rows
        ]

    def list_foreign_keys(
        self, schema: str, table: str, column: str
    ) -> List[ForeignKeyEdge]:
        rows = self.fetch_all(LIST_FOREIGN_KEYS_SQL, (schema, table, column))
        return [
            ForeignKeyEdge(
                constraint_name=row["constraint_name"],
                source_table=row["source_table"],
                source_column=row["source_column"],
                target_table=row["target_table"],
                target_column=row["target_column"],
            )
            for row in rows
        ]

    def table_exists(self, schema: str, table: str) -> bool:
        rows = self.fetch_all(TABLE_EXISTS_SQL, (schema, table))
        return bool(rows and rows[0]["present"])
