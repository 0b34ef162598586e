"""
pytest configuration and fixtures for pg_typegen tests.
"""
import json

import pytest

from pg_typegen.catalog import InMemoryCatalog
from pg_typegen.codegen.core.config import GeneratorConfig


@pytest.fixture
def catalog() -> InMemoryCatalog:
    """A small shop schema with defaults and foreign keys."""
    catalog = InMemoryCatalog()
    catalog.add_table(
        "users",
        columns=[
            ("id", "integer", "nextval('users_id_seq'::regclass)"),
            ("email", "text"),
            ("created_at", "timestamp without time zone", "now()"),
        ],
    )
    catalog.add_table(
        "orders",
        columns=[
            ("id", "bigint"),
            ("user_id", "integer"),
            ("total", "numeric"),
            ("meta", "jsonb"),
            ("shipped", "bool", "false"),
        ],
        foreign_keys=[
            {
                "constraint_name": "orders_user_id_fkey",
                "column": "user_id",
                "foreign_table": "users",
                "foreign_column": "id",
            }
        ],
    )
    catalog.add_table(
        "line_items",
        columns=[
            ("order_id", "bigint"),
            ("sku", "character varying"),
        ],
        foreign_keys=[
            {
                "constraint_name": "line_items_order_fkey",
                "column": "order_id",
                "foreign_table": "orders",
                "foreign_column": "id",
            },
            {
                "constraint_name": "line_items_shipment_fkey",
                "column": "order_id",
                "foreign_table": "shipments",
                "foreign_column": "order_id",
            },
        ],
    )
    return catalog


@pytest.fixture
def empty_table_catalog() -> InMemoryCatalog:
    """Catalog holding one table without columns."""
    return InMemoryCatalog().add_table("audit_marker", columns=[])


@pytest.fixture
def config() -> GeneratorConfig:
    """Default generator configuration."""
    return GeneratorConfig()


@pytest.fixture
def catalog_file(tmp_path, catalog):
    """The shop catalog written to a JSON file."""
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog.to_dict()), encoding="utf-8")
    return path
