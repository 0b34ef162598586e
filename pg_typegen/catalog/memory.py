"""
In-memory catalog.

Holds table metadata in plain Python structures. Used for offline
generation from a JSON catalog dump and as a test double.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, Union

from .base import CatalogError, CatalogReader, ColumnDescriptor, ForeignKeyEdge
from ..logging_config import get_logger

logger = get_logger(__name__)

ColumnSpec = Union[Dict[str, Any], Sequence[Any]]


class InMemoryCatalog(CatalogReader):
    """Catalog backed by dictionaries, preserving insertion order."""

    def __init__(self):
        """Initialize an empty catalog."""
        self._schemas: Dict[str, Dict[str, Dict[str, List[Dict[str, Any]]]]] = {}

    def add_table(
        self,
        table: str,
        columns: Iterable[ColumnSpec] = (),
        foreign_keys: Iterable[Dict[str, Any]] = (),
        schema: str = "public",
    ) -> "InMemoryCatalog":
        """
        Add (or replace) a table.

        Args:
            table: Table name
            columns: Column specs, either dicts with ``name``, ``type`` and
                optional ``default`` keys, or ``(name, type[, default])``
                sequences
            foreign_keys: Dicts with ``constraint_name``, ``column``,
                ``foreign_table`` and ``foreign_column`` keys
            schema: Schema the table belongs to

        Returns:
            The catalog itself, for chaining
        """
        normalized_columns = [self._normalize_column(table, c) for c in columns]
        normalized_fks = [self._normalize_foreign_key(table, fk) for fk in foreign_keys]

        known = {c["name"] for c in normalized_columns}
        for fk in normalized_fks:
            if fk["column"] not in known:
                raise CatalogError(
                    f"Foreign key {fk['constraint_name']} references unknown "
                    f"column {table}.{fk['column']}"
                )

        self._schemas.setdefault(schema, {})[table] = {
            "columns": normalized_columns,
            "foreign_keys": normalized_fks,
        }
        return self

    def drop_table(self, table: str, schema: str = "public") -> None:
        """Remove a table if present."""
        self._schemas.get(schema, {}).pop(table, None)

    def _normalize_column(self, table: str, spec: ColumnSpec) -> Dict[str, Any]:
        if isinstance(spec, dict):
            try:
                return {
                    "name": spec["name"],
                    "type": spec["type"],
                    "default": spec.get("default"),
                }
            except KeyError as e:
                raise CatalogError(f"Column in table {table} is missing {e}") from e

        # Strings are sequences too; "id" must not become name "i", type "d"
        if not isinstance(spec, (list, tuple)):
            raise CatalogError(
                f"Column spec in table {table} must be an object or a list: {spec!r}"
            )

        values = list(spec)
        if len(values) not in (2, 3):
            raise CatalogError(
                f"Column spec in table {table} must be (name, type[, default]): {spec!r}"
            )
        default = values[2] if len(values) == 3 else None
        return {"name": values[0], "type": values[1], "default": default}

    def _normalize_foreign_key(
        self, table: str, spec: Dict[str, Any]
    ) -> Dict[str, Any]:
        if not isinstance(spec, dict):
            raise CatalogError(
                f"Foreign key in table {table} must be an object: {spec!r}"
            )

        required = ("constraint_name", "column", "foreign_table", "foreign_column")
        missing = [key for key in required if key not in spec]
        if missing:
            raise CatalogError(
                f"Foreign key in table {table} is missing: {', '.join(missing)}"
            )
        return {key: spec[key] for key in required}

    # CatalogReader interface

    def list_tables(self, schema: str) -> List[str]:
        return list(self._schemas.get(schema, {}))

    def list_columns(self, schema: str, table: str) -> List[ColumnDescriptor]:
        entry = self._schemas.get(schema, {}).get(table)
        if entry is None:
            return []

        return [
            ColumnDescriptor(
                table_name=table,
                column_name=column["name"],
                declared_type=column["type"],
                default_expression=column["default"],
                ordinal_position=position,
            )
            for position, column in enumerate(entry["columns"], start=1)
        ]

    def list_foreign_keys(
        self, schema: str, table: str, column: str
    ) -> List[ForeignKeyEdge]:
        entry = self._schemas.get(schema, {}).get(table)
        if entry is None:
            return []

        return [
            ForeignKeyEdge(
                constraint_name=fk["constraint_name"],
                source_table=table,
                source_column=fk["column"],
                target_table=fk["foreign_table"],
                target_column=fk["foreign_column"],
            )
            for fk in entry["foreign_keys"]
            if fk["column"] == column
        ]

    def table_exists(self, schema: str, table: str) -> bool:
        return table in self._schemas.get(schema, {})

    # Loading

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InMemoryCatalog":
        """
        Build a catalog from a nested dictionary.

        Expected shape::

            {"schemas": {"public": {"users": {"columns": [...],
                                              "foreign_keys": [...]}}}}

        Args:
            data: Catalog dictionary

        Returns:
            Populated catalog
        """
        if not isinstance(data, dict) or not isinstance(data.get("schemas"), dict):
            raise CatalogError("Catalog data must contain a 'schemas' object")

        catalog = cls()
        for schema_name, tables in data["schemas"].items():
            if not isinstance(tables, dict):
                raise CatalogError(f"Schema '{schema_name}' must map table names")
            # Keep empty schemas enumerable
            catalog._schemas.setdefault(schema_name, {})
            for table_name, table_data in tables.items():
                if not isinstance(table_data, dict):
                    raise CatalogError(
                        f"Table '{schema_name}.{table_name}' must be an object"
                    )

                columns = table_data.get("columns", [])
                foreign_keys = table_data.get("foreign_keys", [])
                for key, value in (("columns", columns), ("foreign_keys", foreign_keys)):
                    if not isinstance(value, list):
                        raise CatalogError(
                            f"'{key}' of table '{schema_name}.{table_name}' "
                            f"must be a list"
                        )

                catalog.add_table(
                    table_name,
                    columns=columns,
                    foreign_keys=foreign_keys,
                    schema=schema_name,
                )

        logger.debug(
            "Loaded in-memory catalog with %d schema(s)", len(catalog._schemas)
        )
        return catalog

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "InMemoryCatalog":
        """Load a catalog from a JSON file."""
        path = Path(path)

        if not path.exists():
            raise CatalogError(f"Catalog file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Invalid JSON in catalog file {path}: {e}") from e
        except OSError as e:
            raise CatalogError(f"Error reading catalog file {path}: {e}") from e

        logger.info("Loaded catalog from %s", path)
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the catalog back into the ``from_dict`` shape."""
        return {
            "schemas": {
                schema: {
                    table: {
                        "columns": [dict(c) for c in entry["columns"]],
                        "foreign_keys": [dict(fk) for fk in entry["foreign_keys"]],
                    }
                    for table, entry in tables.items()
                }
                for schema, tables in self._schemas.items()
            }
        }

    def save(self, path: Union[str, Path]) -> None:
        """Write the catalog to a JSON file."""
        path = Path(path)
        try:
            with path.open("w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise CatalogError(f"Failed to save catalog to {path}: {e}") from e

    @classmethod
    def snapshot(cls, reader: CatalogReader, schema: str) -> "InMemoryCatalog":
        """
        Copy one schema of another catalog into memory.

        Args:
            reader: Source catalog, typically a live database
            schema: Schema to copy

        Returns:
            Detached in-memory catalog
        """
        catalog = cls()
        catalog._schemas.setdefault(schema, {})

        for table in reader.list_tables(schema):
            columns = reader.list_columns(schema, table)
            foreign_keys = [
                {
                    "constraint_name": edge.constraint_name,
                    "column": edge.source_column,
                    "foreign_table": edge.target_table,
                    "foreign_column": edge.target_column,
                }
                for column in columns
                for edge in reader.list_foreign_keys(schema, table, column.column_name)
            ]
            catalog.add_table(
                table,
                columns=[
                    {
                        "name": c.column_name,
                        "type": c.declared_type,
                        "default": c.default_expression,
                    }
                    for c in columns
                ],
                foreign_keys=foreign_keys,
                schema=schema,
            )

        logger.info(
            "Snapshot of schema %s: %d table(s)", schema, len(catalog._schemas[schema])
        )
        return catalog
