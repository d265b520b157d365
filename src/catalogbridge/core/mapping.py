"""Identifier <-> content maps for message catalogs.

Builds the forward map (IdentifierKey -> content) and the reverse map
(content -> IdentifierKeys) for one namespace, and merges reverse maps
across namespaces.

Reverse map values are frozensets and merging is a set-union: two
identifiers holding the same text, in the same namespace or in different
ones, must both stay reachable from that text.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from catalogbridge.constants import NAMESPACE_SEPARATOR
from catalogbridge.diagnostics import CatalogSchemaError, ErrorTemplate

if TYPE_CHECKING:
    from catalogbridge.localization.types import (
        ContentMap,
        IdentifierKey,
        MessageCatalog,
        MessageId,
        Namespace,
        ReverseContentMap,
    )

__all__ = [
    "content_to_identifiers",
    "identifiers_to_content",
    "merge_reverse_maps",
    "qualify",
    "split_identifier",
]


def qualify(namespace: Namespace, message_id: MessageId) -> IdentifierKey:
    """Build the namespace-qualified IdentifierKey.

    Example:
        >>> qualify("general", "greeting")
        'general.greeting'
    """
    return f"{namespace}{NAMESPACE_SEPARATOR}{message_id}"


def split_identifier(key: IdentifierKey) -> tuple[Namespace, MessageId]:
    """Split an IdentifierKey into (namespace, message_id).

    Splits on the first separator, so message ids may contain dots.

    Raises:
        ValueError: If key has no namespace separator

    Example:
        >>> split_identifier("home.button.save")
        ('home', 'button.save')
    """
    namespace, sep, message_id = key.partition(NAMESPACE_SEPARATOR)
    if not sep or not namespace or not message_id:
        msg = f"Not a namespace-qualified identifier: {key!r}"
        raise ValueError(msg)
    return namespace, message_id


def iter_catalog(
    namespace: Namespace,
    catalog: MessageCatalog,
    *,
    source_path: str | None = None,
) -> Iterator[tuple[MessageId, str]]:
    """Yield (message_id, content) pairs after schema validation.

    Raises:
        CatalogSchemaError: On a non-string key, a non-string value or an
            empty value. Raised at the first offending entry.
    """
    for message_id, content in catalog.items():
        if not isinstance(message_id, str) or not message_id:
            raise CatalogSchemaError(ErrorTemplate.catalog_key_invalid(namespace, message_id))
        if not isinstance(content, str):
            raise CatalogSchemaError(
                ErrorTemplate.catalog_value_not_string(
                    namespace, message_id, type(content).__name__, source_path
                )
            )
        if not content.strip():
            raise CatalogSchemaError(
                ErrorTemplate.catalog_value_empty(namespace, message_id, source_path)
            )
        yield message_id, content


def identifiers_to_content(
    namespace: Namespace,
    catalog: MessageCatalog,
    *,
    source_path: str | None = None,
) -> ContentMap:
    """Build the forward map for one namespace.

    Args:
        namespace: 'general' or a view identifier
        catalog: Message id -> English source string
        source_path: Catalog file path, for diagnostics

    Returns:
        Read-only map of '<namespace>.<message_id>' -> content

    Raises:
        CatalogSchemaError: If a catalog value is not a plain string
    """
    return MappingProxyType(
        {
            qualify(namespace, message_id): content
            for message_id, content in iter_catalog(namespace, catalog, source_path=source_path)
        }
    )


def content_to_identifiers(
    namespace: Namespace,
    catalog: MessageCatalog,
    *,
    source_path: str | None = None,
) -> ReverseContentMap:
    """Build the reverse map for one namespace.

    Returns:
        Read-only map of content -> frozenset of IdentifierKeys

    Raises:
        CatalogSchemaError: If a catalog value is not a plain string

    Example:
        >>> reverse = content_to_identifiers("general", {"a": "OK", "b": "OK"})
        >>> sorted(reverse["OK"])
        ['general.a', 'general.b']
    """
    collected: dict[str, set[IdentifierKey]] = {}
    for message_id, content in iter_catalog(namespace, catalog, source_path=source_path):
        collected.setdefault(content, set()).add(qualify(namespace, message_id))
    return _freeze(collected)


def merge_reverse_maps(*reverse_maps: ReverseContentMap) -> ReverseContentMap:
    """Merge reverse maps, unioning identifier sets on shared content.

    Example:
        >>> merged = merge_reverse_maps({"OK": frozenset({"general.ok"})},
        ...                             {"OK": frozenset({"home.ok"})})
        >>> sorted(merged["OK"])
        ['general.ok', 'home.ok']
    """
    collected: dict[str, set[IdentifierKey]] = {}
    for reverse_map in reverse_maps:
        for content, identifiers in reverse_map.items():
            collected.setdefault(content, set()).update(identifiers)
    return _freeze(collected)


def _freeze(collected: Mapping[str, set[IdentifierKey]]) -> ReverseContentMap:
    return MappingProxyType({key: frozenset(ids) for key, ids in collected.items()})
