"""Command-line entry point: parse a PGN file and dump its records."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from pgnreader import __version__
from pgnreader.pgn_io import format_parsed_game, load_pgn_file

_LOGGER = logging.getLogger(__name__)
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pgnreader",
        description="Read a .pgn file and print its tags and half-moves.",
    )
    ap.add_argument("path", type=Path, help="Path to the .pgn file")
    only = ap.add_mutually_exclusive_group()
    only.add_argument(
        "--tags-only", action="store_true", help="Print header tags only"
    )
    only.add_argument(
        "--moves-only", action="store_true", help="Print half-moves only"
    )
    ap.add_argument(
        "--hide-errors",
        action="store_true",
        help="Do not print tag and movetext errors",
    )
    ap.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default=os.environ.get("PGNREADER_LOG_LEVEL", "WARNING").upper(),
        help="Logging verbosity (default: $PGNREADER_LOG_LEVEL or WARNING)",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        parsed = load_pgn_file(args.path)
    except (OSError, UnicodeDecodeError) as exc:
        _LOGGER.error("Cannot read %s: %s", args.path, exc)
        return 1

    for record in format_parsed_game(
        parsed,
        show_tags=not args.moves_only,
        show_moves=not args.tags_only,
        show_errors=not args.hide_errors,
    ):
        print(record)
    return 0


if __name__ == "__main__":
    sys.exit(main())
