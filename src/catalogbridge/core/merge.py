"""View merge engine: compose per-view, per-locale bundles.

Precedence, lowest to highest:
    1. general catalog (English)
    2. view catalog (English), overriding same-named general keys
    3. translation delta for the owning identifier
    4. asset URL map for the view and locale

Every key of the effective catalog is present in every locale's bundle;
missing translations fall back to the effective English value.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from catalogbridge.constants import GENERAL_NAMESPACE
from catalogbridge.core.mapping import qualify

if TYPE_CHECKING:
    from catalogbridge.localization.types import (
        AssetUrlMap,
        LocaleBundle,
        LocaleCode,
        MessageCatalog,
        TranslationDelta,
        ViewId,
    )

__all__ = [
    "BundleStats",
    "ViewBundle",
    "compose_locale_bundle",
    "compose_view_bundle",
    "effective_catalog",
    "overlay_assets",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BundleStats:
    """Composition counts for one view and one locale.

    Attributes:
        locale: Locale code
        total: Keys in the final bundle
        translated: Keys taken from the translation delta and kept
        fallback: Keys that fell back to English and were kept
        asset_overrides: Keys set by the asset URL map
    """

    locale: LocaleCode
    total: int
    translated: int
    fallback: int
    asset_overrides: int


@dataclass(frozen=True, slots=True)
class ViewBundle:
    """Finished bundle for one view across all configured locales.

    Attributes:
        view: View identifier
        bundles: Locale -> (message id -> string), in registry order
        stats: Per-locale composition counts, in registry order
    """

    view: ViewId
    bundles: Mapping[LocaleCode, LocaleBundle]
    stats: tuple[BundleStats, ...]

    def as_dict(self) -> dict[LocaleCode, dict[str, str]]:
        """Return a plain nested dict suitable for serialization."""
        return {locale: dict(bundle) for locale, bundle in self.bundles.items()}


def effective_catalog(
    general: MessageCatalog,
    view_catalog: MessageCatalog | None = None,
) -> MessageCatalog:
    """General catalog with view keys overriding same-named general keys.

    Key order: general keys first (in their order), then view-only keys.
    ``view_catalog=None`` means the view has no catalog of its own.

    Example:
        >>> dict(effective_catalog({"k": "A", "x": "X"}, {"k": "B"}))
        {'k': 'B', 'x': 'X'}
    """
    merged = dict(general)
    if view_catalog is not None:
        merged.update(view_catalog)
    return MappingProxyType(merged)


def compose_locale_bundle(
    view: ViewId,
    general: MessageCatalog,
    view_catalog: MessageCatalog | None,
    delta: TranslationDelta,
    uncounted: Collection[str] = frozenset(),
) -> tuple[LocaleBundle, int]:
    """Build one locale's bundle for a view, before the asset overlay.

    A key is looked up in the delta under the namespace that owns it in the
    effective catalog: the view namespace when the view catalog defines it,
    'general' otherwise.

    Keys in ``uncounted`` are composed as usual but left out of the
    translated count; the asset overlay replaces them afterwards.

    Returns:
        (bundle, translated_count)
    """
    view_keys = view_catalog.keys() if view_catalog is not None else frozenset()
    bundle: dict[str, str] = {}
    translated = 0
    for message_id, english in effective_catalog(general, view_catalog).items():
        owner = view if message_id in view_keys else GENERAL_NAMESPACE
        value = delta.get(qualify(owner, message_id))
        if value is None:
            bundle[message_id] = english
        else:
            bundle[message_id] = value
            if message_id not in uncounted:
                translated += 1
    return MappingProxyType(bundle), translated


def overlay_assets(bundle: LocaleBundle, asset_map: AssetUrlMap | None) -> LocaleBundle:
    """Apply asset URLs over a composed bundle.

    Asset values win for their keys; other keys are untouched. Asset keys
    absent from the bundle are added.

    Example:
        >>> dict(overlay_assets({"K": "B", "L": "x"}, {"K": "C"}))
        {'K': 'C', 'L': 'x'}
    """
    if not asset_map:
        return bundle
    merged = dict(bundle)
    merged.update(asset_map)
    return MappingProxyType(merged)


def compose_view_bundle(
    view: ViewId,
    locales: Iterable[LocaleCode],
    general: MessageCatalog,
    view_catalog: MessageCatalog | None,
    deltas: Mapping[LocaleCode, TranslationDelta],
    asset_maps: Mapping[LocaleCode, AssetUrlMap] | None = None,
) -> ViewBundle:
    """Compose a view's bundle for every configured locale.

    Args:
        view: View identifier
        locales: Locale codes in registry order
        general: General catalog
        view_catalog: View catalog, or None when the view has none
        deltas: Locale -> TranslationDelta; a missing locale means no translations
        asset_maps: Locale -> asset URL map for this view (optional)

    Returns:
        ViewBundle with one entry per locale
    """
    empty: TranslationDelta = MappingProxyType({})
    bundles: dict[LocaleCode, LocaleBundle] = {}
    stats: list[BundleStats] = []
    for locale in locales:
        asset_map = asset_maps.get(locale) if asset_maps is not None else None
        replaced = asset_map.keys() if asset_map else frozenset()
        composed, translated = compose_locale_bundle(
            view, general, view_catalog, deltas.get(locale, empty), uncounted=replaced
        )
        catalog_keys = sum(1 for key in composed if key not in replaced)
        final = overlay_assets(composed, asset_map)
        bundles[locale] = final
        stats.append(
            BundleStats(
                locale=locale,
                total=len(final),
                translated=translated,
                fallback=catalog_keys - translated,
                asset_overrides=len(asset_map) if asset_map else 0,
            )
        )
        logger.debug(
            "Composed view %s locale %s: %d keys, %d translated",
            view,
            locale,
            len(final),
            translated,
        )
    return ViewBundle(view=view, bundles=MappingProxyType(bundles), stats=tuple(stats))
