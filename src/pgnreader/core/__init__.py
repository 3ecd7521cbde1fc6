"""Core domain layer: pure PGN parsing with zero external dependencies.

Quick start::

    from pgnreader.core import parse_pgn_lines

    game = parse_pgn_lines(['[Event "Test"]', "", "1. e4 c6 2. Nf3 d5"])
    for move in game.moves:
        print(move)
"""

from pgnreader.core.enums import Color, GameResult
from pgnreader.core.notation import (
    HalfMove,
    ParsedGame,
    Tag,
    TagError,
    TagKind,
    decode_tag,
    parse_pgn_lines,
    parse_pgn_text,
    tokenize_movetext,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    # Models
    "HalfMove",
    "ParsedGame",
    "Tag",
    "TagError",
    "TagKind",
    # Parsing
    "decode_tag",
    "parse_pgn_lines",
    "parse_pgn_text",
    "tokenize_movetext",
]
