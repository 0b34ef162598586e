"""
pg_typegen

Generate struct/class/type declarations for several programming languages
from PostgreSQL catalog metadata.
"""

from .catalog import (
    CatalogError,
    CatalogReader,
    ColumnDescriptor,
    ForeignKeyEdge,
    InMemoryCatalog,
    PostgresCatalog,
)
from .codegen import (
    EmptyTableError,
    GenerationResult,
    GeneratorConfig,
    Language,
    LanguageProfile,
    UnknownLanguageError,
    generate_file,
    generate_schema_types,
    generate_table_type,
    get_profile,
    list_supported_languages,
    register_profile,
    __version__,
)

__all__ = [
    "CatalogError",
    "CatalogReader",
    "ColumnDescriptor",
    "ForeignKeyEdge",
    "InMemoryCatalog",
    "PostgresCatalog",
    "EmptyTableError",
    "GenerationResult",
    "GeneratorConfig",
    "Language",
    "LanguageProfile",
    "UnknownLanguageError",
    "generate_file",
    "generate_schema_types",
    "generate_table_type",
    "get_profile",
    "list_supported_languages",
    "register_profile",
    "__version__",
]
