"""Route manifest and language registry.

The route manifest lists the application's routes in order. A route either
redirects elsewhere (and gets no bundle) or names a view and its template.
The language registry lists the locales every bundle must carry.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from catalogbridge.constants import DEFAULT_SOURCE_LOCALE, GENERAL_NAMESPACE
from catalogbridge.diagnostics import ErrorTemplate, ManifestError
from catalogbridge.locale_utils import is_known_locale
from catalogbridge.localization.loading import read_json, validate_namespace

if TYPE_CHECKING:
    from catalogbridge.localization.types import LocaleCode, ViewId

__all__ = [
    "LanguageRegistry",
    "RouteManifest",
    "ViewRoute",
    "load_language_registry",
    "load_route_manifest",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ViewRoute:
    """One route of the manifest.

    Attributes:
        path: URL path of the route
        view: View identifier (None for redirects)
        template: Template reference, relative to the templates directory
        redirect: Redirect target (None for view routes)
    """

    path: str
    view: ViewId | None = None
    template: str | None = None
    redirect: str | None = None

    @property
    def is_redirect(self) -> bool:
        """Check if the route redirects (and so produces no bundle)."""
        return self.redirect is not None

    @classmethod
    def from_dict(cls, index: int, data: object) -> ViewRoute:
        """Build a route from its manifest entry.

        Raises:
            ManifestError: If the entry is malformed or its view identifier
                cannot name a catalog
        """
        if not isinstance(data, Mapping):
            raise ManifestError(ErrorTemplate.route_malformed(index, "not an object"))
        path = data.get("path")
        if not isinstance(path, str):
            raise ManifestError(ErrorTemplate.route_malformed(index, "'path' must be a string"))

        redirect = data.get("redirect")
        if redirect is not None:
            if not isinstance(redirect, str) or not redirect:
                raise ManifestError(
                    ErrorTemplate.route_malformed(index, "'redirect' must be a non-empty string")
                )
            return cls(path=path, redirect=redirect)

        view = data.get("view")
        if not isinstance(view, str) or view == GENERAL_NAMESPACE:
            raise ManifestError(ErrorTemplate.view_id_invalid(path, view))
        try:
            validate_namespace(view)
        except ValueError as e:
            raise ManifestError(ErrorTemplate.view_id_invalid(path, view)) from e

        template = data.get("template")
        if template is not None and not isinstance(template, str):
            raise ManifestError(ErrorTemplate.route_malformed(index, "'template' must be a string"))
        return cls(path=path, view=view, template=template or None)


@dataclass(frozen=True, slots=True)
class RouteManifest:
    """Ordered routes of the application.

    Attributes:
        routes: All routes, redirects included, in manifest order
    """

    routes: tuple[ViewRoute, ...]

    def views(self) -> Iterator[ViewRoute]:
        """Yield non-redirect routes, first route per view identifier.

        Several paths may render the same view; the view gets one bundle.
        """
        seen: set[ViewId] = set()
        for route in self.routes:
            if route.is_redirect or route.view in seen:
                continue
            seen.add(route.view)  # type: ignore[arg-type]
            yield route

    @property
    def redirects(self) -> tuple[ViewRoute, ...]:
        """Routes excluded from bundling."""
        return tuple(r for r in self.routes if r.is_redirect)


@dataclass(frozen=True, slots=True)
class LanguageRegistry:
    """Locales every bundle carries.

    Attributes:
        locales: Locale codes in output order; always includes source_locale
        source_locale: Locale of the catalogs' own strings
    """

    locales: tuple[LocaleCode, ...]
    source_locale: LocaleCode = DEFAULT_SOURCE_LOCALE

    def __post_init__(self) -> None:
        """Validate registry invariants.

        Raises:
            ValueError: If locales is empty or omits the source locale
        """
        if not self.locales:
            msg = "locales must not be empty"
            raise ValueError(msg)
        if self.source_locale not in self.locales:
            msg = f"source locale '{self.source_locale}' must be listed in locales"
            raise ValueError(msg)

    @property
    def target_locales(self) -> tuple[LocaleCode, ...]:
        """Locales that need a translation source."""
        return tuple(code for code in self.locales if code != self.source_locale)


def load_route_manifest(path: Path) -> RouteManifest:
    """Load the route manifest.

    Accepts a JSON list of routes or an object with a "routes" list.

    Raises:
        FileNotFoundError: If the manifest does not exist
        ManifestError: If the manifest or any route is malformed
    """
    document = read_json(path, error_type=ManifestError)
    if isinstance(document, Mapping):
        document = document.get("routes")
    if not isinstance(document, list):
        raise ManifestError(
            ErrorTemplate.manifest_malformed(str(path), "expected a list of routes")
        )
    manifest = RouteManifest(
        tuple(ViewRoute.from_dict(index, entry) for index, entry in enumerate(document))
    )
    logger.info(
        "Loaded route manifest %s: %d routes, %d redirects",
        path,
        len(manifest.routes),
        len(manifest.redirects),
    )
    return manifest


def load_language_registry(path: Path) -> LanguageRegistry:
    """Load the language registry.

    Accepts a JSON list of locale codes, or an object
    ``{"source": "en", "languages": [...]}``. Duplicates are dropped keeping
    the first occurrence; the source locale is prepended when missing.
    Codes unknown to CLDR are kept and logged as warnings.

    Raises:
        FileNotFoundError: If the registry does not exist
        ManifestError: If the registry is malformed or empty
    """
    document = read_json(path, error_type=ManifestError)
    source: object = DEFAULT_SOURCE_LOCALE
    if isinstance(document, Mapping):
        source = document.get("source", DEFAULT_SOURCE_LOCALE)
        document = document.get("languages")
    if not isinstance(document, list):
        raise ManifestError(
            ErrorTemplate.languages_malformed(str(path), "expected a list of locale codes")
        )
    if not isinstance(source, str) or not source:
        raise ManifestError(
            ErrorTemplate.languages_malformed(str(path), "'source' must be a locale code")
        )

    locales: list[LocaleCode] = []
    for code in document:
        if not isinstance(code, str) or not code or ".." in code or "/" in code or "\\" in code:
            raise ManifestError(
                ErrorTemplate.languages_malformed(str(path), f"invalid locale code {code!r}")
            )
        if code not in locales:
            locales.append(code)
    if not locales:
        raise ManifestError(ErrorTemplate.languages_empty(str(path)))
    if source not in locales:
        locales.insert(0, source)

    for code in locales:
        if not is_known_locale(code):
            logger.warning("Locale '%s' is not known to CLDR; keeping it as declared", code)

    registry = LanguageRegistry(tuple(locales), source)
    logger.info("Loaded language registry %s: %s", path, ", ".join(registry.locales))
    return registry
