"""Shared constants for catalogbridge.

This module provides centralized configuration constants used across
the core engine, the loaders, and the command-line entry point. Placing
constants here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Namespaces: Identifier scoping for merged catalogs
- Hashing: Content hash algorithm used as the translation join key
- Layout: Default input/output locations relative to the project root
- Input limits: Size constraints for loaded files

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Namespaces
    "GENERAL_NAMESPACE",
    "NAMESPACE_SEPARATOR",
    "DEFAULT_SOURCE_LOCALE",
    # Hashing
    "HASH_ALGORITHM",
    # Layout
    "DEFAULT_LANGUAGES_PATH",
    "DEFAULT_ROUTES_PATH",
    "DEFAULT_MESSAGES_DIR",
    "DEFAULT_ASSETS_DIR",
    "DEFAULT_TRANSLATIONS_DIR",
    "DEFAULT_TEMPLATES_DIR",
    "ASSET_OVERRIDES_FILENAME",
    "CATALOG_SUFFIX",
    "TRANSLATION_SUFFIX",
    # Input limits
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# NAMESPACES
# ============================================================================

# Namespace holding catalog entries shared by every view.
GENERAL_NAMESPACE: str = "general"

# Separator between namespace and message id in an IdentifierKey.
# Keys are split on the FIRST separator only, so message ids may contain dots.
NAMESPACE_SEPARATOR: str = "."

# Locale of the application's own catalog strings.
DEFAULT_SOURCE_LOCALE: str = "en"

# ============================================================================
# HASHING
# ============================================================================

# Digest used for content hashes. Changing it invalidates every externally
# produced translation source keyed by the previous digest.
HASH_ALGORITHM: str = "sha256"

# ============================================================================
# LAYOUT
# ============================================================================

DEFAULT_LANGUAGES_PATH: str = "i18n/languages.json"
DEFAULT_ROUTES_PATH: str = "routes.json"
DEFAULT_MESSAGES_DIR: str = "i18n/messages"
DEFAULT_ASSETS_DIR: str = "i18n/assets"
DEFAULT_TRANSLATIONS_DIR: str = "i18n/translations"
DEFAULT_TEMPLATES_DIR: str = "templates"

# Locale-specific URL override registry inside the assets directory.
ASSET_OVERRIDES_FILENAME: str = "localized.json"

CATALOG_SUFFIX: str = ".json"
TRANSLATION_SUFFIX: str = ".po"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum size in bytes for any single catalog, manifest or PO file (10 MB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
