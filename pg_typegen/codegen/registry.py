"""
Language registry for managing available language profiles.

Resolves language identifiers and aliases to exactly one LanguageProfile.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .core.profile import LanguageProfile, validate_profile
from ..logging_config import get_logger

logger = get_logger(__name__)


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class UnknownLanguageError(RegistryError):
    """Raised when a language identifier has no registered profile."""

    def __init__(self, language: str, available: List[str]):
        self.language = language
        self.available = available
        super().__init__(
            f"No profile registered for language: {language}. "
            f"Available: {', '.join(available)}"
        )


class Language(str, Enum):
    """Identifiers of the built-in languages."""

    PYTHON = "python"
    GO = "go"
    SWIFT = "swift"
    DART = "dart"
    TYPESCRIPT = "typescript"


LanguageKey = Union[str, Language, LanguageProfile]


def _language_key(language: LanguageKey) -> str:
    if isinstance(language, LanguageProfile):
        return language.name.lower()
    if isinstance(language, Language):
        return language.value
    return str(language).lower()


class LanguageRegistry:
    """Registry for managing available language profiles."""

    def __init__(self):
        """Initialize empty registry."""
        self._profiles: Dict[str, LanguageProfile] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        profile: LanguageProfile,
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a language profile.

        Args:
            profile: Profile to register under ``profile.name``
            aliases: Alternative names in addition to ``profile.aliases``
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            ProfileError: If the profile is incomplete
            RegistryError: If an alias conflicts with another language
        """
        validate_profile(profile)

        language_key = profile.name.lower()

        # Check if already registered
        if language_key in self._profiles and not replace:
            logger.debug("Language %s already registered, skipping", language_key)
            return

        all_aliases = list(profile.aliases) + list(aliases or [])

        # Check for conflicts before touching state
        for alias in all_aliases:
            alias_key = alias.lower()
            if alias_key == language_key:
                continue
            if alias_key in self._profiles:
                raise RegistryError(
                    f"Alias '{alias}' conflicts with existing primary language"
                )
            if (
                not replace
                and alias_key in self._aliases
                and self._aliases[alias_key] != language_key
            ):
                raise RegistryError(
                    f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                )

        if language_key in self._profiles:
            self.unregister(language_key)

        self._profiles[language_key] = profile
        for alias in all_aliases:
            alias_key = alias.lower()
            if alias_key != language_key:
                self._aliases[alias_key] = language_key

        logger.debug("Registered language %s", language_key)

    def unregister(self, language: LanguageKey):
        """
        Unregister a profile and its aliases.

        Args:
            language: Language name to unregister
        """
        language_key = _language_key(language)
        self._profiles.pop(language_key, None)

        # Remove aliases pointing to this language
        aliases_to_remove = [
            alias for alias, target in self._aliases.items() if target == language_key
        ]
        for alias in aliases_to_remove:
            del self._aliases[alias]

    def resolve_name(self, language: LanguageKey) -> str:
        """
        Resolve a language name or alias to its primary name.

        Raises:
            UnknownLanguageError: If language not found
        """
        language_key = _language_key(language)

        if language_key in self._profiles:
            return language_key

        if language_key in self._aliases:
            return self._aliases[language_key]

        raise UnknownLanguageError(str(language), self.list_languages())

    def get_profile(self, language: LanguageKey) -> LanguageProfile:
        """
        Get the profile for a language.

        A LanguageProfile argument is returned unchanged, so callers may
        pass unregistered profiles directly.

        Args:
            language: Language name, alias, Language member or profile

        Returns:
            Registered profile

        Raises:
            UnknownLanguageError: If language not found
        """
        if isinstance(language, LanguageProfile):
            return language
        return self._profiles[self.resolve_name(language)]

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._profiles.keys())

    def get_aliases_for_language(self, language: LanguageKey) -> List[str]:
        """
        Get all aliases for a specific language.

        Args:
            language: Primary language name

        Returns:
            List of aliases for this language
        """
        language_key = _language_key(language)
        return sorted(
            [alias for alias, target in self._aliases.items() if target == language_key]
        )

    def list_all_names(self) -> Dict[str, List[str]]:
        """
        Get all registered names including aliases.

        Returns:
            Dict mapping primary language to list of all names (including aliases)
        """
        result = {}
        for language in self._profiles:
            names = [language]
            names.extend(self.get_aliases_for_language(language))
            result[language] = names
        return result

    def is_supported(self, language: LanguageKey) -> bool:
        """
        Check if language is supported.

        Args:
            language: Language name or alias

        Returns:
            True if supported
        """
        language_key = _language_key(language)
        return language_key in self._profiles or language_key in self._aliases

    def get_language_info(self, language: LanguageKey) -> Dict[str, Any]:
        """
        Get information about a registered language.

        Args:
            language: Language name

        Returns:
            Dict with language information

        Raises:
            UnknownLanguageError: If language not found
        """
        language_key = self.resolve_name(language)
        profile = self._profiles[language_key]

        return {
            "name": profile.name,
            "file_extension": profile.file_extension,
            "aliases": self.get_aliases_for_language(language_key),
            "preamble": profile.preamble,
            "types": profile.primitive_types(),
        }


# Global registry instance - created once
_global_registry: Optional[LanguageRegistry] = None


def get_registry() -> LanguageRegistry:
    """Get the global language registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = LanguageRegistry()
        _auto_register_profiles(_global_registry)
    return _global_registry


def _auto_register_profiles(registry: LanguageRegistry):
    """
    Register the built-in language profiles.

    This is the single source of truth for built-in registration.
    """
    from .languages import BUILTIN_PROFILES

    for profile in BUILTIN_PROFILES:
        registry.register(profile)


# Public API functions using the global registry


def register_profile(
    profile: LanguageProfile,
    aliases: Optional[List[str]] = None,
    replace: bool = False,
):
    """
    Register a profile in the global registry.

    Args:
        profile: Language profile
        aliases: Optional aliases
        replace: Replace an existing registration
    """
    get_registry().register(profile, aliases, replace)


def get_profile(language: LanguageKey) -> LanguageProfile:
    """Get a profile from the global registry."""
    return get_registry().get_profile(language)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: LanguageKey) -> bool:
    """Check if language is supported by global registry."""
    return get_registry().is_supported(language)


def get_language_info(language: LanguageKey) -> Dict[str, Any]:
    """Get information about a supported language."""
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all supported languages."""
    return {
        language: get_language_info(language)
        for language in list_supported_languages()
    }
