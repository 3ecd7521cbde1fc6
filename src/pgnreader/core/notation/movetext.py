"""Movetext tokenization: numbered move pairs into attributed half-moves."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from pgnreader.core.enums import Color
from pgnreader.core.notation.errors import (
    EmptyMoveSegment,
    InvalidMoveNumber,
    UnexpectedMoveToken,
)
from pgnreader.core.notation.models import HalfMove, MoveResult
from pgnreader.core.notation.results import PGN_RESULT_TOKENS

_LOGGER = logging.getLogger(__name__)

# "12. " starts a move pair, "12... " a pair resumed at Black's half-move.
_MOVE_NUMBER_RE = re.compile(r"(?<!\S)(\d+)\.(\.\.)?(?=\s|$)")


@dataclass(slots=True, frozen=True)
class MovetextResult:
    """Half-moves (or per-segment errors) in play order plus the result token."""

    moves: tuple[MoveResult, ...]
    result_token: str | None = None


def select_movetext(lines: Iterable[str]) -> str:
    """Join the non-tag, non-empty lines into one space-separated stream."""
    parts: list[str] = []
    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("["):
            continue
        if line.startswith("%"):
            # PGN escape line, ignored by readers.
            continue
        parts.append(line)
    return " ".join(parts)


def half_move_from_index(index: str, san: str) -> HalfMove:
    """Attribute ``san`` from its flattened half-move index.

    Odd indices are White's moves and even indices Black's.
    """
    if not index.isascii() or not index.isdigit():
        raise ValueError(f"Invalid half-move index: {index!r}")
    color = Color.BLACK if int(index) % 2 == 0 else Color.WHITE
    return HalfMove(color, san.strip())


def _decode_segment(
    number: int, black_first: bool, segment: str
) -> tuple[list[MoveResult], str | None]:
    result_token: str | None = None
    tokens: list[str] = []
    for token in segment.split():
        if token in PGN_RESULT_TOKENS:
            result_token = token
        else:
            tokens.append(token)

    if not tokens:
        _LOGGER.debug("Move %d has no move token", number)
        return [EmptyMoveSegment(number)], result_token

    first_index = 2 * number if black_first else 2 * number - 1
    limit = 1 if black_first else 2

    moves: list[MoveResult] = []
    for offset, token in enumerate(tokens[:limit]):
        try:
            moves.append(half_move_from_index(str(first_index + offset), token))
        except ValueError:
            # "0." puts White at index -1.
            _LOGGER.debug("Move number %d cannot place %r", number, token)
            moves.append(InvalidMoveNumber(number, token))
    for token in tokens[limit:]:
        _LOGGER.debug("Unexpected token %r after move %d", token, number)
        moves.append(UnexpectedMoveToken(number, token))
    return moves, result_token


def tokenize_movetext(lines: Iterable[str]) -> MovetextResult:
    """Turn raw PGN lines into half-moves attributed to White or Black.

    Tag lines and blank lines are ignored; the rest is split on move-number
    markers. Segment failures are returned in place as
    :class:`~pgnreader.core.notation.errors.MovetextError` values.
    """
    text = select_movetext(lines)
    markers = list(_MOVE_NUMBER_RE.finditer(text))
    preamble = text[: markers[0].start()].strip() if markers else ""
    if preamble:
        _LOGGER.debug("Ignoring text before first move number: %r", preamble)

    moves: list[MoveResult] = []
    result_token: str | None = None
    for idx, marker in enumerate(markers):
        end = markers[idx + 1].start() if idx + 1 < len(markers) else len(text)
        segment = text[marker.end() : end]
        segment_moves, segment_result = _decode_segment(
            int(marker.group(1)), marker.group(2) is not None, segment
        )
        moves.extend(segment_moves)
        if segment_result is not None:
            result_token = segment_result

    if not markers:
        # A bare result such as "*" with no moves played.
        result_token = next(
            (token for token in text.split() if token in PGN_RESULT_TOKENS), None
        )
    return MovetextResult(moves=tuple(moves), result_token=result_token)
