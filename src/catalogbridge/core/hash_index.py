"""Hash index: content hash -> IdentifierKeys.

Derived once per run from the merged reverse content map. It is the join
between the application's catalogs and the external translation source,
which only knows hashes of the original strings.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from catalogbridge.core.hashing import content_hash

if TYPE_CHECKING:
    from catalogbridge.localization.types import ContentHash, IdentifierKey, ReverseContentMap

__all__ = ["HashIndex", "build_hash_index"]

_EMPTY: frozenset[str] = frozenset()


@dataclass(frozen=True, slots=True)
class HashIndex(Mapping[str, frozenset[str]]):
    """Read-only mapping of content hash -> frozenset of IdentifierKeys.

    Attributes:
        entries: Underlying read-only mapping
    """

    entries: Mapping[str, frozenset[str]]

    def __getitem__(self, key: ContentHash) -> frozenset[IdentifierKey]:
        return self.entries[key]

    def __iter__(self) -> Iterator[ContentHash]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def lookup(self, digest: ContentHash) -> frozenset[IdentifierKey]:
        """Return identifiers for a hash, or an empty set on a miss."""
        return self.entries.get(digest, _EMPTY)

    def identifiers(self) -> frozenset[IdentifierKey]:
        """Return every IdentifierKey reachable through the index."""
        return frozenset().union(*self.entries.values())


def build_hash_index(reverse_map: ReverseContentMap) -> HashIndex:
    """Hash every content key of a reverse map.

    Distinct raw contents that normalize to the same text (differing only in
    whitespace) land on the same hash; their identifier sets are unioned.

    Args:
        reverse_map: Content -> IdentifierKeys, typically merged across namespaces

    Returns:
        HashIndex over the same identifiers
    """
    collected: dict[ContentHash, set[IdentifierKey]] = {}
    for content, identifiers in reverse_map.items():
        collected.setdefault(content_hash(content), set()).update(identifiers)
    return HashIndex(MappingProxyType({key: frozenset(ids) for key, ids in collected.items()}))
