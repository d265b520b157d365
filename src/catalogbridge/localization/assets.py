"""Localized asset URLs.

Each view may have a static asset catalog (asset key -> default URL). A
shared override registry maps a default URL to its locale-specific
replacements. For one view and locale the asset map holds the override when
one exists and the default URL otherwise.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from catalogbridge.constants import ASSET_OVERRIDES_FILENAME
from catalogbridge.diagnostics import CatalogSchemaError, ErrorTemplate
from catalogbridge.localization.loading import read_json

if TYPE_CHECKING:
    from catalogbridge.localization.types import AssetUrlMap, LocaleCode

__all__ = ["AssetOverrides", "load_asset_overrides", "localize_assets"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AssetOverrides:
    """Registry of locale-specific URL overrides.

    Attributes:
        entries: Default URL -> (locale -> localized URL)
    """

    entries: Mapping[str, Mapping[LocaleCode, str]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def resolve(self, default_url: str, locale: LocaleCode) -> str:
        """Return the localized URL for a locale, or the default URL.

        Example:
            >>> overrides = AssetOverrides({"/logo.png": {"es": "/logo-es.png"}})
            >>> overrides.resolve("/logo.png", "es"), overrides.resolve("/logo.png", "fr")
            ('/logo-es.png', '/logo.png')
        """
        return self.entries.get(default_url, {}).get(locale, default_url)


def load_asset_overrides(directory: Path) -> AssetOverrides:
    """Load the override registry from '<directory>/localized.json'.

    The registry is optional; a missing file yields an empty registry.

    Raises:
        CatalogSchemaError: If the registry is not an object of objects of strings
    """
    path = directory / ASSET_OVERRIDES_FILENAME
    try:
        document = read_json(path)
    except FileNotFoundError:
        logger.debug("No asset override registry at %s", path)
        return AssetOverrides()
    if not isinstance(document, Mapping):
        raise CatalogSchemaError(
            ErrorTemplate.catalog_not_object(str(path), type(document).__name__)
        )

    entries: dict[str, Mapping[LocaleCode, str]] = {}
    for default_url, by_locale in document.items():
        if not isinstance(by_locale, Mapping):
            raise CatalogSchemaError(
                ErrorTemplate.catalog_value_not_string(
                    "assets", default_url, type(by_locale).__name__, str(path)
                )
            )
        for locale, url in by_locale.items():
            if not isinstance(url, str) or not url:
                raise CatalogSchemaError(
                    ErrorTemplate.catalog_value_not_string(
                        "assets", f"{default_url}[{locale}]", type(url).__name__, str(path)
                    )
                )
        entries[default_url] = MappingProxyType(dict(by_locale))
    logger.debug("Loaded %d asset URL overrides from %s", len(entries), path)
    return AssetOverrides(MappingProxyType(entries))


def localize_assets(
    asset_catalog: Mapping[str, str],
    overrides: AssetOverrides,
    locales: Iterable[LocaleCode],
) -> Mapping[LocaleCode, AssetUrlMap]:
    """Build one asset URL map per locale for a view.

    Args:
        asset_catalog: Asset key -> default URL
        overrides: Locale-specific URL overrides
        locales: Locale codes

    Returns:
        Locale -> (asset key -> URL)
    """
    return MappingProxyType(
        {
            locale: MappingProxyType(
                {key: overrides.resolve(url, locale) for key, url in asset_catalog.items()}
            )
            for locale in locales
        }
    )
