"""
Postgres type to target-language type mapping.

Rules are checked in a fixed order and the first match wins. Mapping is
total: a type no rule recognises maps to a commented fallback instead of
raising.
"""

from enum import Enum
from typing import Callable, List, Optional, Tuple

from .profile import LanguageProfile
from .templates import TemplateEngine
from ...logging_config import get_logger

logger = get_logger(__name__)


class TypeCategory(Enum):
    """Primitive categories, valued by the profile attribute they select."""

    INTEGER = "integer_type"
    FLOAT = "float_type"
    JSON = "json_type"
    ARRAY = "array_type"
    BINARY = "binary_type"
    STRING = "string_type"
    BOOLEAN = "boolean_type"
    VOID = "void_type"
    TIME = "time_type"
    TIMESTAMP = "timestamp_type"


# Legacy fallback: always the literal "str", whatever the target language
FALLBACK_TOKEN = "str"

Rule = Tuple[TypeCategory, Callable[[str], bool]]

# Order matters: "interval" hits INTEGER before anything else, and
# "timestamp" is only reached once no earlier rule matched.
TYPE_RULES: List[Rule] = [
    (TypeCategory.INTEGER, lambda t: "int" in t),
    (TypeCategory.FLOAT, lambda t: t.startswith("float") or t == "numeric"),
    (TypeCategory.JSON, lambda t: t in ("jsonb", "json")),
    (TypeCategory.ARRAY, lambda t: t in ("vector", "array")),
    (TypeCategory.BINARY, lambda t: t == "bytea"),
    (TypeCategory.STRING, lambda t: "char" in t or "text" in t or t == "uuid"),
    (TypeCategory.BOOLEAN, lambda t: t == "bool"),
    (TypeCategory.VOID, lambda t: t == "void"),
    (TypeCategory.TIME, lambda t: t in ("time", "timez")),
    (TypeCategory.TIMESTAMP, lambda t: "timestamp" in t),
]


def classify(declared_type: str) -> Optional[TypeCategory]:
    """
    Find the category of a catalog type.

    Args:
        declared_type: Type name as reported by the catalog

    Returns:
        Matching category, or None when no rule applies
    """
    normalized = declared_type.lower()
    for category, matches in TYPE_RULES:
        if matches(normalized):
            return category
    return None


class TypeMapper:
    """Maps catalog type names to spellings of one target language."""

    def __init__(
        self,
        profile: LanguageProfile,
        use_profile_fallback: bool = False,
        engine: Optional[TemplateEngine] = None,
    ):
        """
        Initialize mapper.

        Args:
            profile: Target language profile
            use_profile_fallback: Use the profile's own fallback type and
                comment syntax for unknown types instead of ``str #``
            engine: Template engine for rendering fallback comments
        """
        self.profile = profile
        self.use_profile_fallback = use_profile_fallback
        self.engine = engine

    def map_type(self, declared_type: str) -> str:
        """Map one catalog type name to a target-language spelling."""
        category = classify(declared_type)
        if category is not None:
            return getattr(self.profile, category.value)

        logger.debug(
            "No mapping rule for type %r (%s), using fallback",
            declared_type,
            self.profile.name,
        )
        return self._fallback(declared_type)

    def _fallback(self, declared_type: str) -> str:
        if self.use_profile_fallback:
            comment = self.profile.render_comment(f" {declared_type}", self.engine)
            return f"{self.profile.fallback_type} {comment}"
        return f"{FALLBACK_TOKEN} # {declared_type}"


def map_type(
    declared_type: str,
    profile: LanguageProfile,
    use_profile_fallback: bool = False,
) -> str:
    """
    Map a catalog type to a target-language type.

    Args:
        declared_type: Type name as reported by the catalog
        profile: Target language profile
        use_profile_fallback: See :class:`TypeMapper`

    Returns:
        Type spelling; never raises for unknown types
    """
    return TypeMapper(profile, use_profile_fallback).map_type(declared_type)
