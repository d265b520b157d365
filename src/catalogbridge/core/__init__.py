"""Reconciliation engine.

Submodules:
    hashing    - Whitespace-normalized content hashing
    mapping    - Identifier <-> content maps and set-union merging
    hash_index - Content hash -> identifiers index
    resolver   - Translation source -> per-locale TranslationDelta
    merge      - Per-view, per-locale bundle composition

Python 3.13+.
"""

from .hash_index import HashIndex, build_hash_index
from .hashing import content_hash, normalize_whitespace
from .mapping import (
    content_to_identifiers,
    identifiers_to_content,
    merge_reverse_maps,
    qualify,
    split_identifier,
)
from .merge import (
    BundleStats,
    ViewBundle,
    compose_locale_bundle,
    compose_view_bundle,
    effective_catalog,
    overlay_assets,
)
from .resolver import resolve_locale

__all__ = [
    "BundleStats",
    "HashIndex",
    "ViewBundle",
    "build_hash_index",
    "compose_locale_bundle",
    "compose_view_bundle",
    "content_hash",
    "content_to_identifiers",
    "effective_catalog",
    "identifiers_to_content",
    "merge_reverse_maps",
    "normalize_whitespace",
    "overlay_assets",
    "qualify",
    "resolve_locale",
    "split_identifier",
]
