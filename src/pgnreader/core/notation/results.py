"""Game-termination tokens and their :class:`GameResult` mapping."""

from __future__ import annotations

from pgnreader.core.enums import GameResult

_RESULT_BY_TOKEN: dict[str, GameResult] = {
    "1-0": GameResult.WHITE_WINS,
    "0-1": GameResult.BLACK_WINS,
    "1/2-1/2": GameResult.DRAW,
    "*": GameResult.IN_PROGRESS,
}

PGN_RESULT_TOKENS = frozenset(_RESULT_BY_TOKEN)


def game_result_from_pgn(token: str) -> GameResult:
    """Map a termination token; anything unrecognised counts as unfinished."""
    return _RESULT_BY_TOKEN.get(token, GameResult.IN_PROGRESS)
