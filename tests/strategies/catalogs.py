"""Hypothesis strategies for message catalogs and translation sources.

Provides reusable strategies for generating reconciliation test data:
- Message ids and non-blank English source strings
- Flat catalogs with controlled duplicate content
- Whitespace variants that hash to the same content hash
- Locale codes drawn from a CLDR-known pool

Event-Emitting Strategies (HypoFuzz-Optimized):
- message_catalogs: Emits catalog_duplicates=none|some
- whitespace_variants: Emits ws_variant=identical|reflowed

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

LOCALE_POOL = (
    "es", "fr", "de", "it", "pt", "pt_BR", "ja", "ko", "zh",
    "lv", "lt", "et", "nl", "pl", "sv", "ru", "ar",
)

_ID_FIRST_CHARS = string.ascii_lowercase
_ID_REST_CHARS = string.ascii_lowercase + string.digits + "_-"
_WORD_CHARS = string.ascii_letters + string.digits + "áéíóúñü¿¡'!?,{}#"
_WHITESPACE = (" ", "  ", "\n", "\t", " \n  ", "\r\n")


@st.composite
def message_ids(draw: DrawFn) -> str:
    """Generate catalog message ids: [a-z][a-z0-9_-]*."""
    first = draw(st.sampled_from(_ID_FIRST_CHARS))
    rest = draw(st.text(alphabet=_ID_REST_CHARS, max_size=20))
    return first + rest


@st.composite
def source_strings(draw: DrawFn, max_words: int = 6) -> str:
    """Generate non-blank English source strings in canonical form.

    Words are joined by single spaces, so the result equals its own
    whitespace-normalized form.
    """
    words = draw(
        st.lists(
            st.text(alphabet=_WORD_CHARS, min_size=1, max_size=10),
            min_size=1,
            max_size=max_words,
        )
    )
    return " ".join(words)


@st.composite
def whitespace_variants(draw: DrawFn, content: str) -> str:
    """Re-flow a canonical string with arbitrary whitespace runs.

    Events emitted:
    - ws_variant=identical|reflowed
    """
    words = content.split(" ")
    separators = draw(
        st.lists(st.sampled_from(_WHITESPACE), min_size=len(words) - 1, max_size=len(words) - 1)
    )
    leading = draw(st.sampled_from(("", *_WHITESPACE)))
    trailing = draw(st.sampled_from(("", *_WHITESPACE)))
    parts = [leading, words[0]]
    for separator, word in zip(separators, words[1:], strict=True):
        parts.extend((separator, word))
    parts.append(trailing)
    result = "".join(parts)
    event(f"ws_variant={'identical' if result == content else 'reflowed'}")
    return result


@st.composite
def message_catalogs(
    draw: DrawFn,
    min_size: int = 1,
    max_size: int = 8,
) -> dict[str, str]:
    """Generate a flat catalog, sometimes with several ids sharing content.

    Events emitted:
    - catalog_duplicates=none|some
    """
    ids = draw(st.lists(message_ids(), min_size=min_size, max_size=max_size, unique=True))
    pool = draw(st.lists(source_strings(), min_size=1, max_size=len(ids)))
    catalog = {message_id: draw(st.sampled_from(pool)) for message_id in ids}
    duplicates = len(set(catalog.values())) < len(catalog)
    event(f"catalog_duplicates={'some' if duplicates else 'none'}")
    return catalog


def locale_codes() -> st.SearchStrategy[str]:
    """Target locale codes known to CLDR (never the 'en' source)."""
    return st.sampled_from(LOCALE_POOL)
