"""Build configuration.

Provides a single frozen dataclass that encapsulates every input and output
location of a build run, resolved against a project root.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from catalogbridge.constants import (
    DEFAULT_ASSETS_DIR,
    DEFAULT_LANGUAGES_PATH,
    DEFAULT_MESSAGES_DIR,
    DEFAULT_ROUTES_PATH,
    DEFAULT_TEMPLATES_DIR,
    DEFAULT_TRANSLATIONS_DIR,
)
from catalogbridge.enums import OutputFormat

__all__ = ["BuildConfig"]


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Immutable configuration for one build run.

    Relative input paths resolve against ``root``; absolute paths are used
    as-is. ``output_dir`` is taken as given (relative to the working directory).
    Constructing ``BuildConfig(output_dir=...)`` with no other arguments
    uses the default project layout.

    Attributes:
        output_dir: Directory receiving one bundle per view.
        root: Project root (default: current directory).
        languages: Language registry JSON file.
        routes: Route manifest JSON file.
        messages: Directory of message catalogs ('general.json', '<view>.json').
        assets: Directory of asset catalogs and the override registry.
        translations: Directory of '<locale>.po' translation sources.
        templates: Directory template references resolve against.
        output_format: Bundle serialization format.

    Example:
        >>> config = BuildConfig(output_dir=Path("dist/i18n"), root=Path("/srv/app"))
        >>> config.messages_dir
        PosixPath('/srv/app/i18n/messages')
    """

    output_dir: Path
    root: Path = Path()
    languages: Path = Path(DEFAULT_LANGUAGES_PATH)
    routes: Path = Path(DEFAULT_ROUTES_PATH)
    messages: Path = Path(DEFAULT_MESSAGES_DIR)
    assets: Path = Path(DEFAULT_ASSETS_DIR)
    translations: Path = Path(DEFAULT_TRANSLATIONS_DIR)
    templates: Path = Path(DEFAULT_TEMPLATES_DIR)
    output_format: OutputFormat = OutputFormat.JSON

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If output_format is unknown
        """
        object.__setattr__(self, "output_format", OutputFormat(self.output_format))

    def _resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.root / path

    @property
    def languages_path(self) -> Path:
        """Language registry file, resolved against the root."""
        return self._resolve(self.languages)

    @property
    def routes_path(self) -> Path:
        """Route manifest file, resolved against the root."""
        return self._resolve(self.routes)

    @property
    def messages_dir(self) -> Path:
        """Message catalog directory, resolved against the root."""
        return self._resolve(self.messages)

    @property
    def assets_dir(self) -> Path:
        """Asset catalog directory, resolved against the root."""
        return self._resolve(self.assets)

    @property
    def translations_dir(self) -> Path:
        """Translation source directory, resolved against the root."""
        return self._resolve(self.translations)

    @property
    def templates_dir(self) -> Path:
        """Template directory, resolved against the root."""
        return self._resolve(self.templates)
