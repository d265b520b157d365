"""Loading, orchestration and output around the reconciliation engine.

Submodules:
    types        - PEP 695 type aliases (MessageId, IdentifierKey, LocaleCode, ...)
    loading      - CatalogLoader protocol, PathCatalogLoader, OptionalLoad, LoadSummary
    manifest     - ViewRoute, RouteManifest, LanguageRegistry and their loaders
    assets       - AssetOverrides and per-locale asset URL maps
    translations - gettext PO translation sources (via Babel)
    writer       - BundleWriter (JSON or ES module output)
    orchestrator - ReconciliationSnapshot, BundleBuilder, BuildSummary

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from catalogbridge.enums import LoadStatus, OutputFormat
from catalogbridge.localization.assets import AssetOverrides, load_asset_overrides
from catalogbridge.localization.loading import (
    CatalogLoader,
    LoadSummary,
    OptionalLoad,
    PathCatalogLoader,
    load_optional,
)
from catalogbridge.localization.manifest import (
    LanguageRegistry,
    RouteManifest,
    ViewRoute,
    load_language_registry,
    load_route_manifest,
)
from catalogbridge.localization.orchestrator import (
    BuildSummary,
    BundleBuilder,
    ReconciliationSnapshot,
    ViewInputs,
    build_bundles,
)
from catalogbridge.localization.translations import (
    load_translation_sources,
    read_translation_source,
)
from catalogbridge.localization.types import (
    IdentifierKey,
    LocaleCode,
    MessageId,
    Namespace,
    ViewId,
)
from catalogbridge.localization.writer import BundleWriter

__all__ = [
    # Orchestration
    "BundleBuilder",
    "BuildSummary",
    "ReconciliationSnapshot",
    "ViewInputs",
    "build_bundles",
    # Loader protocol and implementations
    "CatalogLoader",
    "PathCatalogLoader",
    # Optional-file outcomes
    "LoadStatus",
    "LoadSummary",
    "OptionalLoad",
    "load_optional",
    # Manifest and registry
    "LanguageRegistry",
    "RouteManifest",
    "ViewRoute",
    "load_language_registry",
    "load_route_manifest",
    # Assets and translations
    "AssetOverrides",
    "load_asset_overrides",
    "load_translation_sources",
    "read_translation_source",
    # Output
    "BundleWriter",
    "OutputFormat",
    # Type aliases for user code type annotations
    "IdentifierKey",
    "LocaleCode",
    "MessageId",
    "Namespace",
    "ViewId",
]
