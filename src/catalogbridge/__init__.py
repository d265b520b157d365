"""catalogbridge - reconcile view message catalogs with translated strings.

Builds one translation bundle per application view, carrying every supported
locale. Translations arrive keyed by a hash of the original English text, so
the engine joins them back to the application's own identifiers through a
content-hash index, then merges global, per-view and asset-URL scopes with a
fixed precedence, falling back to English wherever no translation exists.

Public API:
    BuildConfig - Input/output locations of a build run
    BundleBuilder - Runs a complete build
    build_bundles - One-call build
    content_hash - Whitespace-normalized content hash (the join key)
    resolve_locale - (hash, translation) pairs -> TranslationDelta

Exceptions:
    CatalogBridgeError - Base exception class
    CatalogSchemaError - Catalog value is not a string
    ViewConfigurationError - View has no template
    ManifestError - Route manifest or language registry malformed
    TranslationSourceError - PO file cannot be parsed

Submodules:
    catalogbridge.core - Hashing, mapping, hash index, resolver, merge engine
    catalogbridge.localization - Loaders, orchestration and bundle writer
    catalogbridge.diagnostics - Error types and diagnostic codes
"""

from .config import BuildConfig
from .core import build_hash_index, compose_view_bundle, content_hash, resolve_locale
from .diagnostics import (
    CatalogBridgeError,
    CatalogSchemaError,
    ManifestError,
    TranslationSourceError,
    ViewConfigurationError,
)
from .localization import BuildSummary, BundleBuilder, build_bundles

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("catalogbridge")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BuildConfig",
    "BuildSummary",
    "BundleBuilder",
    "CatalogBridgeError",
    "CatalogSchemaError",
    "ManifestError",
    "TranslationSourceError",
    "ViewConfigurationError",
    "__version__",
    "build_bundles",
    "build_hash_index",
    "compose_view_bundle",
    "content_hash",
    "resolve_locale",
]
