"""Hypothesis strategies for catalogbridge property-based testing.

Strategies are organized by domain:

- catalogs: message ids, source strings, catalogs, locale codes and
  whitespace variants of a string

Usage:
    from tests.strategies import message_catalogs, source_strings
    from tests.strategies.catalogs import whitespace_variants

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - message_catalogs, whitespace_variants
"""

from .catalogs import (
    LOCALE_POOL,
    locale_codes,
    message_catalogs,
    message_ids,
    source_strings,
    whitespace_variants,
)

__all__ = [
    "LOCALE_POOL",
    "locale_codes",
    "message_catalogs",
    "message_ids",
    "source_strings",
    "whitespace_variants",
]
