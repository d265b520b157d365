"""Translation resolver: external (hash, translation) pairs -> TranslationDelta.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from catalogbridge.core.hash_index import HashIndex
    from catalogbridge.localization.types import (
        ContentHash,
        IdentifierKey,
        LocaleCode,
        TranslationDelta,
    )

__all__ = ["resolve_locale"]

logger = logging.getLogger(__name__)


def resolve_locale(
    locale: LocaleCode,
    hash_index: HashIndex,
    external_source: Iterable[tuple[ContentHash, str]],
) -> TranslationDelta:
    """Match one locale's translation source against the hash index.

    Each matched translation is recorded under every identifier sharing the
    source content. Unmatched hashes are expected (translation sources lag
    behind the catalogs) and are skipped. Empty translations are skipped so
    the English fallback applies. If the source repeats a hash, the later
    pair wins.

    English text is never consulted here; fallback is the merge engine's job.

    Args:
        locale: Locale code (for logging)
        hash_index: Hash index built from the merged catalogs
        external_source: (original_string_hash, translated_string) pairs

    Returns:
        Read-only IdentifierKey -> translated string map
    """
    delta: dict[IdentifierKey, str] = {}
    matched = unmatched = 0
    for digest, translated in external_source:
        identifiers = hash_index.lookup(digest)
        if not identifiers:
            unmatched += 1
            logger.debug("No identifier for hash %s in locale %s", digest[:12], locale)
            continue
        if not translated.strip():
            continue
        matched += 1
        for identifier in identifiers:
            delta[identifier] = translated
    logger.info(
        "Resolved locale %s: %d matched, %d unmatched, %d identifiers translated",
        locale,
        matched,
        unmatched,
        len(delta),
    )
    return MappingProxyType(delta)
