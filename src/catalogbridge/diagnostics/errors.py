"""catalogbridge exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.
Every exception in this module is fatal to a build run: the only
non-fatal condition (a missing optional per-view file) is reported as a
LoadStatus, never raised.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class CatalogBridgeError(Exception):
    """Base exception for all catalogbridge errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CatalogBridgeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CatalogSchemaError(CatalogBridgeError):
    """Catalog content has the wrong structure.

    Examples:
    - Catalog file is not a JSON object
    - Catalog value is not a plain string
    - Catalog value is empty

    No partial conversion is attempted.
    """


class ViewConfigurationError(CatalogBridgeError):
    """A declared view cannot be resolved.

    Raised when a non-redirect route has no existing template. When the
    view's optional catalog was also missing, the underlying
    FileNotFoundError is chained as __cause__.
    """


class ManifestError(CatalogBridgeError):
    """Route manifest or language registry is malformed."""


class TranslationSourceError(CatalogBridgeError):
    """A translation source exists but cannot be read as a gettext catalog."""
