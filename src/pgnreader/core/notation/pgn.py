"""Single-game PGN assembly from raw lines."""

from __future__ import annotations

from collections.abc import Iterable

from pgnreader.core.notation.models import ParsedGame, Tag, TagKind, TagResult
from pgnreader.core.notation.movetext import tokenize_movetext
from pgnreader.core.notation.results import PGN_RESULT_TOKENS
from pgnreader.core.notation.tags import try_decode_tag


def decode_tags(lines: Iterable[str]) -> list[TagResult]:
    """Decode every tag line (a line starting with ``[``) in source order."""
    return [try_decode_tag(line) for line in lines if line.strip().startswith("[")]


def parse_pgn_lines(lines: Iterable[str]) -> ParsedGame:
    """Parse one game's lines into tag results and attributed half-moves.

    The tag pass and the movetext pass run independently over the same
    lines; errors in one never affect the other.
    """
    lines = tuple(lines)
    tag_results = decode_tags(lines)
    movetext = tokenize_movetext(lines)

    result_token = movetext.result_token
    if result_token is None:
        header_result = next(
            (
                item.text
                for item in tag_results
                if isinstance(item, Tag) and item.kind == TagKind.RESULT
            ),
            None,
        )
        result_token = header_result if header_result in PGN_RESULT_TOKENS else "*"

    return ParsedGame(
        tag_results=tuple(tag_results),
        move_results=movetext.moves,
        result_token=result_token,
    )


def parse_pgn_text(pgn_text: str) -> ParsedGame:
    """Parse a single PGN game held in a string."""
    return parse_pgn_lines(pgn_text.splitlines())
