"""Enumerations for catalogbridge type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of loading an optional per-view file.

    StrEnum provides automatic string conversion: str(LoadStatus.FOUND) == "found"
    """

    FOUND = "found"
    """File exists and was loaded."""

    ABSENT = "absent"
    """File does not exist; the view is valid, so the broader scope is used."""

    MISCONFIGURED = "misconfigured"
    """File does not exist and the view has no template either."""


class OutputFormat(StrEnum):
    """Serialization format for written view bundles.

    StrEnum provides automatic string conversion: str(OutputFormat.JSON) == "json"
    """

    JSON = "json"
    """Plain JSON object: {"en": {...}, "es": {...}}"""

    ESM = "esm"
    """ES module: export default {...};"""

    @property
    def suffix(self) -> str:
        """File suffix for bundles written in this format."""
        return ".json" if self is OutputFormat.JSON else ".js"


__all__ = [
    "LoadStatus",
    "OutputFormat",
]
