"""Build orchestration: inputs -> snapshot -> view bundles -> files.

Key architectural decisions:
- Eager loading: every input (registry, manifest, catalogs, asset files,
  translation sources) is loaded and validated before any bundle is composed
- Immutable snapshot: shared lookup structures (catalogs, hash index,
  translation deltas) are built once into a frozen ReconciliationSnapshot and
  passed read-only into each view's composition
- All-or-nothing: every view is composed before the first file is written, so
  a fatal error for any view leaves no output at all
- Explicit optional-file outcomes: per-view catalogs and asset files load into
  OptionalLoad results and are dispatched with match statements

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from catalogbridge.constants import GENERAL_NAMESPACE
from catalogbridge.core.hash_index import HashIndex, build_hash_index
from catalogbridge.core.mapping import (
    content_to_identifiers,
    identifiers_to_content,
    merge_reverse_maps,
)
from catalogbridge.core.merge import BundleStats, ViewBundle, compose_view_bundle
from catalogbridge.core.resolver import resolve_locale
from catalogbridge.diagnostics import ErrorTemplate, ViewConfigurationError
from catalogbridge.enums import LoadStatus
from catalogbridge.localization.assets import (
    AssetOverrides,
    load_asset_overrides,
    localize_assets,
)
from catalogbridge.localization.loading import (
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
from catalogbridge.localization.translations import load_translation_sources
from catalogbridge.localization.writer import BundleWriter

if TYPE_CHECKING:
    from catalogbridge.config import BuildConfig
    from catalogbridge.localization.translations import TranslationPairs
    from catalogbridge.localization.types import (
        AssetUrlMap,
        ContentMap,
        LocaleCode,
        MessageCatalog,
        TranslationDelta,
        ViewId,
    )

__all__ = [
    "BuildSummary",
    "BundleBuilder",
    "ReconciliationSnapshot",
    "ViewInputs",
    "build_bundles",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ViewInputs:
    """Per-view inputs after optional-file classification.

    Attributes:
        route: Manifest route of the view
        catalog: View catalog, or None when the view has none
        assets: Asset key -> default URL, or None when the view has none
    """

    route: ViewRoute
    catalog: MessageCatalog | None = None
    assets: Mapping[str, str] | None = None

    @property
    def view(self) -> ViewId:
        """View identifier."""
        return self.route.view  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class ReconciliationSnapshot:
    """Read-only lookup structures shared by every view's composition.

    Attributes:
        registry: Configured locales
        general: General catalog
        views: View id -> classified per-view inputs, in manifest order
        content_map: IdentifierKey -> content across all namespaces
        hash_index: Content hash -> IdentifierKeys across all namespaces
        deltas: Locale -> TranslationDelta (target locales only)
        asset_maps: View id -> locale -> asset URL map (views with assets only)
    """

    registry: LanguageRegistry
    general: MessageCatalog
    views: Mapping[ViewId, ViewInputs]
    content_map: ContentMap
    hash_index: HashIndex
    deltas: Mapping[LocaleCode, TranslationDelta]
    asset_maps: Mapping[ViewId, Mapping[LocaleCode, AssetUrlMap]]

    @classmethod
    def build(
        cls,
        registry: LanguageRegistry,
        general: MessageCatalog,
        views: Mapping[ViewId, ViewInputs],
        sources: Mapping[LocaleCode, TranslationPairs],
        overrides: AssetOverrides | None = None,
    ) -> ReconciliationSnapshot:
        """Build every shared structure once.

        Args:
            registry: Configured locales
            general: General catalog
            views: Classified per-view inputs
            sources: Locale -> (hash, translation) pairs
            overrides: Locale-specific asset URL overrides

        Returns:
            Frozen snapshot
        """
        catalogs: dict[str, MessageCatalog] = {GENERAL_NAMESPACE: general}
        for view, inputs in views.items():
            if inputs.catalog is not None:
                catalogs[view] = inputs.catalog

        content: dict[str, str] = {}
        for namespace, catalog in catalogs.items():
            content.update(identifiers_to_content(namespace, catalog))
        reverse = merge_reverse_maps(
            *(content_to_identifiers(ns, catalog) for ns, catalog in catalogs.items())
        )
        hash_index = build_hash_index(reverse)
        logger.info(
            "Indexed %d identifiers from %d namespaces under %d hashes",
            len(content),
            len(catalogs),
            len(hash_index),
        )

        deltas = {
            locale: resolve_locale(locale, hash_index, sources.get(locale, ()))
            for locale in registry.target_locales
        }

        overrides = overrides if overrides is not None else AssetOverrides()
        asset_maps = {
            view: localize_assets(inputs.assets, overrides, registry.locales)
            for view, inputs in views.items()
            if inputs.assets is not None
        }

        return cls(
            registry=registry,
            general=general,
            views=MappingProxyType(dict(views)),
            content_map=MappingProxyType(content),
            hash_index=hash_index,
            deltas=MappingProxyType(deltas),
            asset_maps=MappingProxyType(asset_maps),
        )

    def compose(self, view: ViewId) -> ViewBundle:
        """Compose one view's bundle for every configured locale.

        Raises:
            KeyError: If the view is not part of the snapshot
        """
        inputs = self.views[view]
        return compose_view_bundle(
            view,
            self.registry.locales,
            self.general,
            inputs.catalog,
            self.deltas,
            self.asset_maps.get(view),
        )

    def compose_all(self) -> tuple[ViewBundle, ...]:
        """Compose every view, in manifest order."""
        return tuple(self.compose(view) for view in self.views)


@dataclass(frozen=True, slots=True)
class BuildSummary:
    """Immutable outcome of a build run.

    Attributes:
        bundles: Composed view bundles, in manifest order
        written: Output paths, parallel to bundles
        loads: Optional per-view file outcomes
        redirects: Paths of routes excluded as redirects
        source_locale: Locale left out of coverage (its strings are the source)
    """

    bundles: tuple[ViewBundle, ...]
    written: tuple[Path, ...]
    loads: LoadSummary
    redirects: tuple[str, ...] = ()
    source_locale: LocaleCode | None = None

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"BuildSummary(views={len(self.bundles)}, "
            f"written={len(self.written)}, "
            f"redirects={len(self.redirects)}, "
            f"loads={self.loads!r})"
        )

    @property
    def views(self) -> tuple[ViewId, ...]:
        """View identifiers that received a bundle."""
        return tuple(bundle.view for bundle in self.bundles)

    def get_bundle(self, view: ViewId) -> ViewBundle | None:
        """Get the bundle of a view, or None if it produced none."""
        for bundle in self.bundles:
            if bundle.view == view:
                return bundle
        return None

    def get_stats(self, locale: LocaleCode) -> tuple[BundleStats, ...]:
        """Get composition counts of every view for one locale."""
        return tuple(s for bundle in self.bundles for s in bundle.stats if s.locale == locale)

    def coverage(self) -> Mapping[LocaleCode, float]:
        """Fraction of catalog keys translated per locale, over all views.

        The source locale and asset-overlaid keys are not counted. A locale
        with no keys at all reports 1.0.
        """
        totals: dict[LocaleCode, list[int]] = {}
        for bundle in self.bundles:
            for stats in bundle.stats:
                if stats.locale == self.source_locale:
                    continue
                entry = totals.setdefault(stats.locale, [0, 0])
                entry[0] += stats.translated
                entry[1] += stats.translated + stats.fallback
        return MappingProxyType(
            {locale: (done / total if total else 1.0) for locale, (done, total) in totals.items()}
        )


class BundleBuilder:
    """Runs a complete build from a BuildConfig.

    Example:
        >>> builder = BundleBuilder(BuildConfig(output_dir=Path("dist/i18n")))
        >>> summary = builder.run()
        >>> summary.views
        ('home', 'about')
    """

    __slots__ = ("_assets", "_config", "_messages")

    def __init__(self, config: BuildConfig) -> None:
        """Initialize the builder.

        Args:
            config: Build configuration
        """
        self._config = config
        self._messages = PathCatalogLoader(config.messages_dir)
        self._assets = PathCatalogLoader(config.assets_dir)

    @property
    def config(self) -> BuildConfig:
        """Build configuration."""
        return self._config

    def template_exists(self, route: ViewRoute) -> bool:
        """Check that a view route resolves to an existing template file."""
        if route.template is None:
            return False
        return (self._config.templates_dir / route.template).is_file()

    def classify_view(
        self, route: ViewRoute
    ) -> tuple[ViewInputs, tuple[OptionalLoad[object], ...]]:
        """Load a view's optional files and decide whether the view is valid.

        Returns:
            (view inputs, optional load results)

        Raises:
            ViewConfigurationError: If the view has no existing template. When
                an optional file was also missing, its FileNotFoundError is
                chained as the cause.
            CatalogSchemaError: If an optional file exists but is malformed
        """
        view = route.view
        if view is None:
            msg = f"Redirect route '{route.path}' has no view to classify"
            raise ValueError(msg)
        view_valid = self.template_exists(route)
        catalog_load = load_optional(
            view,
            self._messages.load,
            view_valid=view_valid,
            source_path=self._messages.describe_path(view),
        )
        assets_load = load_optional(
            view,
            self._assets.load,
            view_valid=view_valid,
            source_path=self._assets.describe_path(view),
        )

        resolved: dict[str, MessageCatalog | None] = {}
        for kind, result in (("catalog", catalog_load), ("assets", assets_load)):
            match result.status:
                case LoadStatus.FOUND:
                    resolved[kind] = result.value
                case LoadStatus.ABSENT:
                    logger.debug("View %s has no %s file; using broader scope", view, kind)
                    resolved[kind] = None
                case LoadStatus.MISCONFIGURED:
                    raise ViewConfigurationError(
                        ErrorTemplate.view_not_resolvable(view, route.template)
                    ) from result.error
        if not view_valid:
            raise ViewConfigurationError(ErrorTemplate.view_not_resolvable(view, route.template))

        inputs = ViewInputs(route, catalog=resolved["catalog"], assets=resolved["assets"])
        return inputs, (catalog_load, assets_load)

    def load(self) -> tuple[ReconciliationSnapshot, LoadSummary, RouteManifest]:
        """Load every input and build the snapshot.

        Raises:
            FileNotFoundError: If a required input (registry, manifest,
                general catalog) is missing
            CatalogBridgeError: On any schema, manifest or view error
        """
        registry = load_language_registry(self._config.languages_path)
        manifest = load_route_manifest(self._config.routes_path)
        general = self._messages.load(GENERAL_NAMESPACE)

        views: dict[ViewId, ViewInputs] = {}
        results: list[OptionalLoad[object]] = []
        for route in manifest.views():
            inputs, loads = self.classify_view(route)
            views[inputs.view] = inputs
            results.extend(loads)
        for redirect in manifest.redirects:
            logger.debug("Skipping redirect %s -> %s", redirect.path, redirect.redirect)

        sources = load_translation_sources(self._config.translations_dir, registry.target_locales)
        overrides = load_asset_overrides(self._config.assets_dir)
        snapshot = ReconciliationSnapshot.build(registry, general, views, sources, overrides)
        return snapshot, LoadSummary(tuple(results)), manifest

    def run(self) -> BuildSummary:
        """Load, compose every view, then write every bundle.

        Raises:
            FileNotFoundError: If a required input is missing
            CatalogBridgeError: On any schema, manifest or view error; nothing
                is written in that case
        """
        snapshot, loads, manifest = self.load()
        bundles = snapshot.compose_all()

        writer = BundleWriter(self._config.output_dir, self._config.output_format)
        writer.prepare()
        written = tuple(writer.write(bundle) for bundle in bundles)

        summary = BuildSummary(
            bundles=bundles,
            written=written,
            loads=loads,
            redirects=tuple(route.path for route in manifest.redirects),
            source_locale=snapshot.registry.source_locale,
        )
        for locale, ratio in summary.coverage().items():
            logger.info("Locale %s: %.1f%% translated", locale, ratio * 100)
        logger.info("Built %d view bundles into %s", len(written), self._config.output_dir)
        return summary


def build_bundles(config: BuildConfig) -> BuildSummary:
    """Run a complete build. Convenience wrapper around BundleBuilder."""
    return BundleBuilder(config).run()
