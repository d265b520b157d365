"""Diagnostic system for catalogbridge errors.

Provides structured error diagnostics with codes, hints, and source paths.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CatalogBridgeError,
    CatalogSchemaError,
    ManifestError,
    TranslationSourceError,
    ViewConfigurationError,
)
from .templates import ErrorTemplate

__all__ = [
    "CatalogBridgeError",
    "CatalogSchemaError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "ManifestError",
    "TranslationSourceError",
    "ViewConfigurationError",
]
