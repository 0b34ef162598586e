"""
pg_typegen code generation module.

Generates type declarations in various languages from catalog metadata.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

from .registry import (
    Language,
    LanguageRegistry,
    RegistryError,
    UnknownLanguageError,
    get_profile,
    get_language_info,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
    register_profile,
)
from .core.generator import (
    TypeGenerator,
    SchemaGenerator,
    GeneratorError,
    EmptyTableError,
    GenerationResult,
    generate_code,
)
from .core.profile import BodyTemplate, LanguageProfile, ProfileError
from .core.mapper import map_type
from .core.config import GeneratorConfig, ConfigError, load_config
from ..catalog.base import CatalogReader

ConfigLike = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


def resolve_config(config: ConfigLike = None) -> GeneratorConfig:
    """
    Build a GeneratorConfig from any supported form.

    Args:
        config: GeneratorConfig, dict of overrides, JSON file path or None

    Returns:
        Generator configuration
    """
    if isinstance(config, GeneratorConfig):
        return config
    if isinstance(config, (str, Path)):
        return load_config(config_file=config)
    if isinstance(config, dict):
        return load_config(custom_config=config)
    if config is None:
        return load_config()
    raise ConfigError(f"Invalid config type: {type(config)}")


def create_schema_generator(
    catalog: CatalogReader, language, config: ConfigLike = None
) -> SchemaGenerator:
    """
    Create a schema generator for a language.

    Args:
        catalog: Catalog reader
        language: Language name, alias, Language member or profile
        config: Generator configuration

    Raises:
        UnknownLanguageError: If the language is not registered
    """
    profile = get_profile(language)
    return SchemaGenerator(catalog, profile, resolve_config(config))


def generate_table_type(
    catalog: CatalogReader,
    table: str,
    language,
    schema: Optional[str] = None,
    config: ConfigLike = None,
) -> str:
    """
    Generate the type declaration of one table.

    Args:
        catalog: Catalog reader
        table: Table name
        language: Target language
        schema: Schema name (defaults to the configured schema, "public")
        config: Generator configuration

    Returns:
        Rendered type declaration

    Raises:
        UnknownLanguageError: If the language is not registered
        EmptyTableError: If the table does not exist
    """
    profile = get_profile(language)
    generator = TypeGenerator(catalog, profile, resolve_config(config))
    return generator.generate(table, schema)


def generate_schema_types(
    catalog: CatalogReader,
    schema: str,
    language,
    config: ConfigLike = None,
) -> str:
    """
    Generate the type declarations of every table in a schema.

    Missing tables are skipped with a warning.

    Raises:
        UnknownLanguageError: If the language is not registered
    """
    return create_schema_generator(catalog, language, config).generate(schema)


def generate_file(
    catalog: CatalogReader,
    language,
    schema: Optional[str] = None,
    tables: Optional[Sequence[str]] = None,
    config: ConfigLike = None,
) -> GenerationResult:
    """
    Generate a complete source file with error handling.

    Args:
        catalog: Catalog reader
        language: Target language
        schema: Schema name (defaults to the configured schema)
        tables: Optional explicit table selection
        config: Generator configuration

    Returns:
        GenerationResult with code, warnings, and metadata

    Raises:
        UnknownLanguageError: If the language is not registered
    """
    generator = create_schema_generator(catalog, language, config)
    return generate_code(generator, schema, tables)


# Version info
__version__ = "0.1.0"

# Export main interfaces
__all__ = [
    "Language",
    "LanguageRegistry",
    "RegistryError",
    "UnknownLanguageError",
    "TypeGenerator",
    "SchemaGenerator",
    "GeneratorError",
    "EmptyTableError",
    "GenerationResult",
    "BodyTemplate",
    "LanguageProfile",
    "ProfileError",
    "GeneratorConfig",
    "ConfigError",
    "load_config",
    "resolve_config",
    "map_type",
    "create_schema_generator",
    "generate_table_type",
    "generate_schema_types",
    "generate_file",
    "generate_code",
    "get_profile",
    "get_language_info",
    "is_language_supported",
    "list_all_language_info",
    "list_supported_languages",
    "register_profile",
]
