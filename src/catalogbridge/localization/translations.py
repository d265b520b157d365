"""gettext translation sources.

Translators work on PO catalogs keyed by the original English text. Each
usable entry becomes an (original-string hash, translated string) pair,
the only shape the resolver accepts.

An entry is usable when it is singular, not fuzzy, and translated. Plural
entries (msgid tuples) are left out of the join; ICU strings carry their own
plural logic inside a single msgid.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from babel.messages.pofile import PoFileError, read_po

from catalogbridge.constants import MAX_SOURCE_SIZE, TRANSLATION_SUFFIX
from catalogbridge.core.hashing import content_hash
from catalogbridge.diagnostics import ErrorTemplate, TranslationSourceError

if TYPE_CHECKING:
    from babel.messages.catalog import Catalog

    from catalogbridge.localization.types import ContentHash, LocaleCode

__all__ = [
    "TranslationPairs",
    "load_translation_sources",
    "read_translation_source",
    "translation_pairs",
]

logger = logging.getLogger(__name__)

type TranslationPairs = tuple[tuple[ContentHash, str], ...]
"""(original-string hash, translated string) pairs for one locale."""


def translation_pairs(catalog: Catalog) -> Iterator[tuple[ContentHash, str]]:
    """Yield (hash(msgid), msgstr) for every usable catalog entry.

    Skips the header, plural entries, fuzzy entries and untranslated entries.
    """
    for message in catalog:
        if not message.id or not isinstance(message.id, str):
            continue
        if message.fuzzy or not isinstance(message.string, str) or not message.string:
            continue
        yield content_hash(message.id), message.string


def read_translation_source(path: Path) -> TranslationPairs:
    """Read one locale's PO file into translation pairs.

    Raises:
        FileNotFoundError: If the PO file does not exist
        TranslationSourceError: If the file is too large or cannot be parsed
    """
    size = path.stat().st_size
    if size > MAX_SOURCE_SIZE:
        raise TranslationSourceError(
            ErrorTemplate.source_too_large(str(path), size, MAX_SOURCE_SIZE)
        )
    try:
        with path.open("rb") as fileobj:
            catalog = read_po(fileobj, abort_invalid=True)
    except (PoFileError, UnicodeDecodeError, ValueError) as e:
        raise TranslationSourceError(
            ErrorTemplate.translation_source_malformed(str(path), str(e))
        ) from e
    pairs = tuple(translation_pairs(catalog))
    logger.debug("Read %s: %d entries, %d usable", path, len(catalog), len(pairs))
    return pairs


def load_translation_sources(
    directory: Path,
    locales: Iterable[LocaleCode],
) -> Mapping[LocaleCode, TranslationPairs]:
    """Read '<directory>/<locale>.po' for every locale.

    A missing PO file is not an error: the locale falls back to English
    entirely, and a warning is logged.

    Args:
        directory: Directory holding PO files
        locales: Locales needing translations (the source locale excluded)

    Returns:
        Locale -> translation pairs
    """
    sources: dict[LocaleCode, TranslationPairs] = {}
    for locale in locales:
        path = directory / f"{locale}{TRANSLATION_SUFFIX}"
        try:
            sources[locale] = read_translation_source(path)
        except FileNotFoundError:
            logger.warning("No translation source for %s at %s; using English", locale, path)
            sources[locale] = ()
    return MappingProxyType(sources)
