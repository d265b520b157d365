"""Type aliases for the reconciliation domain.

Provides semantic type aliases used throughout the core engine and the
localization package, and by user code annotating catalogbridge call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Scalars
    "MessageId",
    "Namespace",
    "IdentifierKey",
    "LocaleCode",
    "ViewId",
    "ContentHash",
    # Maps
    "MessageCatalog",
    "ContentMap",
    "ReverseContentMap",
    "TranslationDelta",
    "LocaleBundle",
    "AssetUrlMap",
]

type MessageId = str
"""Message identifier, unique within its namespace (e.g., 'greeting')."""

type Namespace = str
"""Identifier scope: 'general' or a view identifier."""

type IdentifierKey = str
"""Namespace-qualified identifier: '<namespace>.<messageId>'."""

type LocaleCode = str
"""Locale code as written in the language registry (e.g., 'es', 'pt-BR')."""

type ViewId = str
"""View identifier from the route manifest (e.g., 'home')."""

type ContentHash = str
"""Hex digest of whitespace-normalized string content."""

type MessageCatalog = Mapping[MessageId, str]
"""Message id -> English source string, for one namespace."""

type ContentMap = Mapping[IdentifierKey, str]
"""IdentifierKey -> source content."""

type ReverseContentMap = Mapping[str, frozenset[IdentifierKey]]
"""Source content -> every IdentifierKey holding exactly that content."""

type TranslationDelta = Mapping[IdentifierKey, str]
"""IdentifierKey -> translated string, for one locale, matched entries only."""

type LocaleBundle = Mapping[MessageId, str]
"""Short message id -> output string, for one view and one locale."""

type AssetUrlMap = Mapping[str, str]
"""Asset key -> URL, for one view and one locale."""
