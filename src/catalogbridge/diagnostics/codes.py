"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Catalog schema errors (malformed catalog content)
        2000-2999: View configuration errors (routes, templates)
        3000-3999: Manifest and registry errors
        4000-4999: Translation source errors
    """

    # Catalog schema errors (1000-1999)
    CATALOG_NOT_OBJECT = 1001
    CATALOG_VALUE_NOT_STRING = 1002
    CATALOG_VALUE_EMPTY = 1003
    CATALOG_KEY_INVALID = 1004
    CATALOG_MALFORMED = 1005
    SOURCE_TOO_LARGE = 1006

    # View configuration errors (2000-2999)
    VIEW_NOT_RESOLVABLE = 2001
    VIEW_ID_INVALID = 2002

    # Manifest and registry errors (3000-3999)
    MANIFEST_MALFORMED = 3001
    ROUTE_MALFORMED = 3002
    LANGUAGES_MALFORMED = 3003
    LANGUAGES_EMPTY = 3004

    # Translation source errors (4000-4999)
    TRANSLATION_SOURCE_MALFORMED = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        source_path: File the error originates from (if known)
        namespace: Catalog namespace involved (if any)
        key: Message id or route path involved (if any)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    source_path: str | None = None
    namespace: str | None = None
    key: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[CATALOG_VALUE_NOT_STRING]: Catalog value for 'home.title' is not a string
              --> i18n/messages/home.json
              = help: Catalog values must be plain strings

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape(self.message)}"]
        if self.source_path is not None:
            lines.append(f"  --> {_escape(self.source_path)}")
        if self.hint is not None:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    """Escape control characters so file content cannot forge log lines."""
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\x1b", "\\x1b")
