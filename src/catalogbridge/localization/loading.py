"""Catalog loading infrastructure.

Provides the protocol for catalog loaders, a filesystem implementation
with path-traversal checks, and the explicit three-way result type used
for optional per-view files.

Components:
    CatalogLoader - Protocol for loading flat string catalogs (structural typing)
    PathCatalogLoader - Directory-based JSON loader
    OptionalLoad - Immutable FOUND / ABSENT / MISCONFIGURED result
    LoadSummary - Immutable aggregate of optional load results
    load_optional - Classify an optional load against view validity
    read_json - Size-limited JSON reader shared by all loaders

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from catalogbridge.constants import CATALOG_SUFFIX, MAX_SOURCE_SIZE, NAMESPACE_SEPARATOR
from catalogbridge.core.mapping import iter_catalog
from catalogbridge.diagnostics import CatalogBridgeError, CatalogSchemaError, ErrorTemplate
from catalogbridge.enums import LoadStatus

if TYPE_CHECKING:
    from catalogbridge.localization.types import MessageCatalog, Namespace

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "CatalogLoader",
    # Concrete loader
    "PathCatalogLoader",
    # Load result types
    "OptionalLoad",
    "LoadSummary",
    # Helpers
    "load_optional",
    "read_json",
    "validate_namespace",
]

logger = logging.getLogger(__name__)


def read_json(
    path: Path,
    *,
    error_type: type[CatalogBridgeError] = CatalogSchemaError,
) -> object:
    """Read and decode a UTF-8 JSON document.

    Args:
        path: File to read
        error_type: Exception class raised for oversize or undecodable files

    Returns:
        Decoded JSON document

    Raises:
        FileNotFoundError: If the file does not exist (left to the caller)
        CatalogBridgeError: error_type, if the file is too large or not JSON
    """
    size = path.stat().st_size
    if size > MAX_SOURCE_SIZE:
        raise error_type(ErrorTemplate.source_too_large(str(path), size, MAX_SOURCE_SIZE))
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise error_type(ErrorTemplate.catalog_malformed(str(path), str(e))) from e


def validate_namespace(namespace: Namespace) -> None:
    """Validate a namespace for use as a file stem and identifier prefix.

    Raises:
        ValueError: If namespace is empty or contains a path separator
            or the namespace separator
    """
    if not namespace:
        msg = "Namespace cannot be empty"
        raise ValueError(msg)
    if "/" in namespace or "\\" in namespace:
        msg = f"Path separators not allowed in namespace: '{namespace}'"
        raise ValueError(msg)
    if NAMESPACE_SEPARATOR in namespace:
        msg = f"Namespace must not contain '{NAMESPACE_SEPARATOR}': '{namespace}'"
        raise ValueError(msg)


class CatalogLoader(Protocol):
    """Protocol for loading one flat string catalog per namespace.

    Example:
        >>> class DictLoader:
        ...     def __init__(self, catalogs): self.catalogs = catalogs
        ...     def load(self, namespace):
        ...         try:
        ...             return self.catalogs[namespace]
        ...         except KeyError:
        ...             raise FileNotFoundError(namespace) from None
        ...     def describe_path(self, namespace): return namespace
    """

    def load(self, namespace: Namespace) -> MessageCatalog:
        """Load the catalog for a namespace.

        Raises:
            FileNotFoundError: If no catalog exists for this namespace
            CatalogSchemaError: If the catalog is structurally invalid
        """

    def describe_path(self, namespace: Namespace) -> str:
        """Return human-readable path for diagnostics."""
        return namespace


@dataclass(frozen=True, slots=True)
class PathCatalogLoader:
    """Directory loader for '<directory>/<namespace>.json' catalogs.

    Catalogs are flat JSON objects of message id -> string. Values are
    validated on load; a non-string value fails the whole catalog.

    Attributes:
        directory: Directory holding the catalog files
    """

    directory: Path

    def describe_path(self, namespace: Namespace) -> str:
        """Return the catalog file path for a namespace."""
        return str(self.directory / f"{namespace}{CATALOG_SUFFIX}")

    def load(self, namespace: Namespace) -> MessageCatalog:
        """Load and validate a namespace's catalog.

        Raises:
            ValueError: If namespace is unsafe as a file name
            FileNotFoundError: If the catalog file does not exist
            CatalogSchemaError: If the file is not a flat object of strings
        """
        validate_namespace(namespace)
        path = self.directory / f"{namespace}{CATALOG_SUFFIX}"
        document = read_json(path)
        if not isinstance(document, Mapping):
            raise CatalogSchemaError(
                ErrorTemplate.catalog_not_object(str(path), type(document).__name__)
            )
        catalog = MappingProxyType(dict(iter_catalog(namespace, document, source_path=str(path))))
        logger.debug("Loaded catalog %s: %d messages", path, len(catalog))
        return catalog


@dataclass(frozen=True, slots=True)
class OptionalLoad[T]:
    """Result of loading an optional per-view file.

    Exactly one of three outcomes:
        FOUND: value holds the loaded data
        ABSENT: file missing, view valid; use the broader scope
        MISCONFIGURED: file missing and view invalid; error holds the
            FileNotFoundError and the run must abort

    Attributes:
        namespace: View identifier the file belongs to
        status: Outcome
        value: Loaded data if FOUND, None otherwise
        error: FileNotFoundError if not FOUND, None otherwise
        source_path: Human-readable path of the file
    """

    namespace: Namespace
    status: LoadStatus
    value: T | None = None
    error: FileNotFoundError | None = None
    source_path: str | None = None

    @property
    def is_found(self) -> bool:
        """Check if the file was loaded."""
        return self.status == LoadStatus.FOUND

    @property
    def is_absent(self) -> bool:
        """Check if the file is missing but the view is valid."""
        return self.status == LoadStatus.ABSENT

    @property
    def is_misconfigured(self) -> bool:
        """Check if the file is missing and the view is invalid."""
        return self.status == LoadStatus.MISCONFIGURED


def load_optional[T](
    namespace: Namespace,
    load: Callable[[Namespace], T],
    *,
    view_valid: bool,
    source_path: str | None = None,
) -> OptionalLoad[T]:
    """Load an optional per-view file and classify the outcome.

    Only FileNotFoundError is classified; every other exception propagates.

    Args:
        namespace: View identifier
        load: Loader callable for the namespace
        view_valid: Whether the view resolves to an existing template
        source_path: Human-readable path for diagnostics

    Returns:
        OptionalLoad with status FOUND, ABSENT or MISCONFIGURED
    """
    try:
        value = load(namespace)
    except FileNotFoundError as e:
        status = LoadStatus.ABSENT if view_valid else LoadStatus.MISCONFIGURED
        logger.debug("Optional file for %s not found (%s)", namespace, status)
        return OptionalLoad(namespace, status, error=e, source_path=source_path)
    return OptionalLoad(namespace, LoadStatus.FOUND, value=value, source_path=source_path)


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of optional load results from one build run.

    Attributes:
        results: All individual load results (immutable tuple)
    """

    results: tuple[OptionalLoad[object], ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"found={self.found}, "
            f"absent={self.absent}, "
            f"misconfigured={self.misconfigured})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def found(self) -> int:
        """Number of files loaded."""
        return sum(1 for r in self.results if r.is_found)

    @property
    def absent(self) -> int:
        """Number of acceptable missing files."""
        return sum(1 for r in self.results if r.is_absent)

    @property
    def misconfigured(self) -> int:
        """Number of fatal missing files."""
        return sum(1 for r in self.results if r.is_misconfigured)

    def get_absent(self) -> tuple[OptionalLoad[object], ...]:
        """Get all results where the file was missing but acceptable."""
        return tuple(r for r in self.results if r.is_absent)

    def get_by_namespace(self, namespace: Namespace) -> tuple[OptionalLoad[object], ...]:
        """Get all results for a view."""
        return tuple(r for r in self.results if r.namespace == namespace)
