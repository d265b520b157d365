"""Differential fuzzing of the reconciliation pipeline.

Builds catalogs, translation sources and asset maps with Hypothesis, runs
them through the real hash-index pipeline (ReconciliationSnapshot) and
through the naive shadow reconciler, and requires identical bundles.

Usage:
    pytest tests/fuzz/test_reconciliation_oracle.py -m fuzz -v

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from catalogbridge.core.hashing import content_hash
from catalogbridge.localization.manifest import LanguageRegistry, ViewRoute
from catalogbridge.localization.orchestrator import ReconciliationSnapshot, ViewInputs
from tests.strategies.catalogs import (
    locale_codes,
    message_catalogs,
    source_strings,
    whitespace_variants,
)

from .shadow_reconciler import shadow_view_bundle

# Mark entire module as fuzz tests (excluded from normal test runs)
pytestmark = pytest.mark.fuzz


@st.composite
def translation_entries(draw: st.DrawFn, texts: list[str]) -> list[tuple[str, str]]:
    """PO-like (msgid, msgstr) entries: some match catalog text, some do not."""
    matching = st.sampled_from(texts).flatmap(whitespace_variants)
    msgids = st.one_of(matching, source_strings())
    msgstrs = st.one_of(st.just(""), st.just("  "), source_strings())
    return draw(st.lists(st.tuples(msgids, msgstrs), max_size=12))


@given(data=st.data())
@settings(max_examples=300, deadline=None)
def test_snapshot_matches_shadow(data: st.DataObject) -> None:
    """The indexed pipeline and the naive scan compose the same bundles."""
    general = data.draw(message_catalogs(), label="general")
    view = data.draw(st.one_of(st.none(), message_catalogs()), label="view")
    targets = data.draw(st.lists(locale_codes(), unique=True, max_size=3), label="targets")
    locales = ("en", *targets)
    texts = sorted(set(general.values()) | set((view or {}).values()))
    entries = {
        locale: data.draw(translation_entries(texts), label=f"entries[{locale}]")
        for locale in targets
    }
    asset_catalog = data.draw(
        st.one_of(st.none(), st.dictionaries(st.sampled_from(sorted(general)), st.just("/a.png"))),
        label="assets",
    )

    snapshot = ReconciliationSnapshot.build(
        LanguageRegistry(locales),
        general,
        {"home": ViewInputs(ViewRoute("/", "home", "home.html"), view, asset_catalog)},
        {
            locale: tuple(
                (content_hash(msgid), msgstr) for msgid, msgstr in entries[locale] if msgstr
            )
            for locale in targets
        },
    )
    real = snapshot.compose("home").as_dict()

    shadow = shadow_view_bundle(
        locales,
        general,
        view,
        entries,
        {locale: asset_catalog for locale in locales} if asset_catalog else None,
    )
    assert real == shadow
