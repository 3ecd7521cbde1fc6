"""PGN file loading and plain-text dumping of parsed games."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from pgnreader.core.notation import HalfMove, ParsedGame, Tag, parse_pgn_lines

_LOGGER = logging.getLogger(__name__)


def read_pgn_lines(file_path: Path) -> list[str]:
    """Read the whole file into memory as a list of lines.

    ``OSError`` and ``UnicodeDecodeError`` propagate to the caller.
    """
    text = file_path.read_text(encoding="utf-8")
    return text.splitlines()


def load_pgn_file(file_path: Path) -> ParsedGame:
    """Load and parse a single-game PGN file from disk."""
    lines = read_pgn_lines(file_path)
    parsed = parse_pgn_lines(lines)
    _LOGGER.info(
        "Parsed %s: %d tag(s), %d half-move(s), %d error(s)",
        file_path,
        len(parsed.tags),
        len(parsed.moves),
        len(parsed.tag_errors) + len(parsed.move_errors),
    )
    return parsed


def format_parsed_game(
    parsed: ParsedGame,
    *,
    show_tags: bool = True,
    show_moves: bool = True,
    show_errors: bool = True,
) -> Iterator[str]:
    """Yield one printable record per tag, half-move and error."""
    if show_tags:
        for tag_result in parsed.tag_results:
            if isinstance(tag_result, Tag):
                yield str(tag_result)
            elif show_errors:
                yield f"TagError: {tag_result}"
    if show_moves:
        for move_result in parsed.move_results:
            if isinstance(move_result, HalfMove):
                yield str(move_result)
            elif show_errors:
                yield f"MovetextError: {move_result}"
        yield f"Result: {parsed.result_token}"
