"""
Built-in language profiles.

Each module defines one LanguageProfile. Add a language by adding a
module here and listing its profile in BUILTIN_PROFILES.
"""

from .dart import DART_PROFILE
from .go import GO_PROFILE
from .python import PYTHON_PROFILE
from .swift import SWIFT_PROFILE
from .typescript import TYPESCRIPT_PROFILE

BUILTIN_PROFILES = (
    PYTHON_PROFILE,
    GO_PROFILE,
    SWIFT_PROFILE,
    DART_PROFILE,
    TYPESCRIPT_PROFILE,
)

__all__ = [
    "BUILTIN_PROFILES",
    "PYTHON_PROFILE",
    "GO_PROFILE",
    "SWIFT_PROFILE",
    "DART_PROFILE",
    "TYPESCRIPT_PROFILE",
]
