"""
Core code generation components.

Provides the language profile model, type mapping, field rendering and
the table/schema generators used by every target language.
"""

from .generator import (
    TypeGenerator,
    SchemaGenerator,
    GeneratorError,
    EmptyTableError,
    GenerationResult,
    generate_code,
)
from .profile import BodyTemplate, LanguageProfile, ProfileError, validate_profile
from .mapper import TypeCategory, TypeMapper, classify, map_type
from .fields import FieldRenderer, render_field
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, capitalize_first

__all__ = [
    # Generators
    "TypeGenerator",
    "SchemaGenerator",
    "GeneratorError",
    "EmptyTableError",
    "GenerationResult",
    "generate_code",
    # Language profiles
    "BodyTemplate",
    "LanguageProfile",
    "ProfileError",
    "validate_profile",
    # Type mapping
    "TypeCategory",
    "TypeMapper",
    "classify",
    "map_type",
    # Field rendering
    "FieldRenderer",
    "render_field",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "capitalize_first",
]
