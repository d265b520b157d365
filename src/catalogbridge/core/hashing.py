"""Content hashing for the translation join.

The external translation source is keyed by a hash of the original English
string, not by the application's identifiers. Both sides must hash the same
text to the same digest, so whitespace is normalized first: string literals
in catalogs and msgids extracted into PO files routinely differ in line
wrapping and indentation.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING

from catalogbridge.constants import HASH_ALGORITHM

if TYPE_CHECKING:
    from catalogbridge.localization.types import ContentHash

__all__ = ["content_hash", "normalize_whitespace"]


def normalize_whitespace(content: str) -> str:
    """Collapse whitespace runs to single spaces and trim both ends.

    Covers newlines, tabs and Unicode whitespace (str.split() semantics).

    Example:
        >>> normalize_whitespace("  Hello\\n\\t  world ")
        'Hello world'
    """
    return " ".join(content.split())


def content_hash(content: str) -> ContentHash:
    """Compute the stable content hash of a string.

    Args:
        content: Source-language string

    Returns:
        Hex digest of the UTF-8 encoded, whitespace-normalized content

    Raises:
        TypeError: If content is not a str

    Example:
        >>> content_hash("Hello   world") == content_hash(" Hello world ")
        True
    """
    if not isinstance(content, str):
        msg = f"content must be str, got {type(content).__name__}"
        raise TypeError(msg)
    digest = hashlib.new(HASH_ALGORITHM)
    digest.update(normalize_whitespace(content).encode("utf-8"))
    return digest.hexdigest()
