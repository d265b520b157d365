"""Command-line entry point.

Usage:
    catalogbridge OUTPUT_DIR [--root DIR] [--format {json,esm}] [-v] [-q]

Exit Codes:
    0: All view bundles written
    1: Build failed (missing input, schema or configuration error); nothing written
    2: Usage error

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from catalogbridge.config import BuildConfig
from catalogbridge.constants import (
    DEFAULT_ASSETS_DIR,
    DEFAULT_LANGUAGES_PATH,
    DEFAULT_MESSAGES_DIR,
    DEFAULT_ROUTES_PATH,
    DEFAULT_TEMPLATES_DIR,
    DEFAULT_TRANSLATIONS_DIR,
)
from catalogbridge.diagnostics import CatalogBridgeError
from catalogbridge.enums import OutputFormat
from catalogbridge.localization.orchestrator import build_bundles

__all__ = ["build_parser", "main"]

logger = logging.getLogger("catalogbridge")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="catalogbridge",
        description=(
            "Reconcile view message catalogs with gettext translations and write "
            "one translation bundle per view."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("output_dir", type=Path, help="Directory to write bundles to")
    parser.add_argument("--root", type=Path, default=Path(), help="Project root")
    parser.add_argument("--languages", type=Path, default=Path(DEFAULT_LANGUAGES_PATH))
    parser.add_argument("--routes", type=Path, default=Path(DEFAULT_ROUTES_PATH))
    parser.add_argument("--messages", type=Path, default=Path(DEFAULT_MESSAGES_DIR))
    parser.add_argument("--assets", type=Path, default=Path(DEFAULT_ASSETS_DIR))
    parser.add_argument("--translations", type=Path, default=Path(DEFAULT_TRANSLATIONS_DIR))
    parser.add_argument("--templates", type=Path, default=Path(DEFAULT_TEMPLATES_DIR))
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.JSON.value,
        help="Bundle serialization format",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="count", default=0, help="More output (repeat for debug)"
    )
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Errors only")
    return parser


def _configure_logging(verbose: int, quiet: bool) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    """Run a build from command-line arguments.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    config = BuildConfig(
        output_dir=args.output_dir,
        root=args.root,
        languages=args.languages,
        routes=args.routes,
        messages=args.messages,
        assets=args.assets,
        translations=args.translations,
        templates=args.templates,
        output_format=OutputFormat(args.output_format),
    )
    try:
        summary = build_bundles(config)
    except CatalogBridgeError as e:
        logger.error("%s", e)
        return 1
    except FileNotFoundError as e:
        logger.error("Required input not found: %s", e.filename or e)
        return 1

    if not args.quiet:
        print(f"Wrote {len(summary.written)} view bundle(s) to {config.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
