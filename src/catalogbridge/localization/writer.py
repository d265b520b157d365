"""Bundle writer: one file per view.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from catalogbridge.enums import OutputFormat

if TYPE_CHECKING:
    from catalogbridge.core.merge import ViewBundle

__all__ = ["BundleWriter", "render_bundle"]

logger = logging.getLogger(__name__)


def render_bundle(bundle: ViewBundle, output_format: OutputFormat = OutputFormat.JSON) -> str:
    """Serialize a view bundle.

    Locales and message ids keep their composition order; non-ASCII text is
    written as-is.

    Example:
        >>> print(render_bundle(bundle, OutputFormat.ESM))  # doctest: +SKIP
        export default {
          "en": {
            "greeting": "Hello"
          }
        };
    """
    body = json.dumps(bundle.as_dict(), ensure_ascii=False, indent=2)
    match output_format:
        case OutputFormat.JSON:
            return body + "\n"
        case OutputFormat.ESM:
            return f"export default {body};\n"


@dataclass(frozen=True, slots=True)
class BundleWriter:
    """Writes view bundles into an output directory.

    Attributes:
        output_dir: Target directory, created by prepare() or on first write
        output_format: Serialization format
    """

    output_dir: Path
    output_format: OutputFormat = OutputFormat.JSON

    def path_for(self, view: str) -> Path:
        """Return the output path for a view."""
        return self.output_dir / f"{view}{self.output_format.suffix}"

    def prepare(self) -> None:
        """Create the output directory if absent."""
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def write(self, bundle: ViewBundle) -> Path:
        """Write one view bundle and return its path."""
        self.prepare()
        path = self.path_for(bundle.view)
        path.write_text(render_bundle(bundle, self.output_format), encoding="utf-8")
        logger.info("Wrote %s (%d locales)", path, len(bundle.bundles))
        return path
