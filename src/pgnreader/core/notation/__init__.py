"""Notation package: PGN tag decoding, movetext tokenization and assembly."""

from pgnreader.core.notation.errors import (
    EmptyMoveSegment,
    InvalidMoveNumber,
    InvalidTagValue,
    MovetextError,
    NoClosingSquareBracket,
    NoOpeningSquareBracket,
    TagError,
    UnexpectedMoveToken,
    UnknownTag,
)
from pgnreader.core.notation.models import (
    HalfMove,
    MoveResult,
    ParsedGame,
    Tag,
    TagKind,
    TagResult,
    TagValue,
)
from pgnreader.core.notation.movetext import (
    MovetextResult,
    half_move_from_index,
    select_movetext,
    tokenize_movetext,
)
from pgnreader.core.notation.pgn import decode_tags, parse_pgn_lines, parse_pgn_text
from pgnreader.core.notation.results import (
    PGN_RESULT_TOKENS,
    game_result_from_pgn,
)
from pgnreader.core.notation.tags import decode_tag, split_tag_line, try_decode_tag

__all__ = [
    # Models
    "HalfMove",
    "MoveResult",
    "MovetextResult",
    "ParsedGame",
    "Tag",
    "TagKind",
    "TagResult",
    "TagValue",
    # Errors
    "EmptyMoveSegment",
    "InvalidMoveNumber",
    "InvalidTagValue",
    "MovetextError",
    "NoClosingSquareBracket",
    "NoOpeningSquareBracket",
    "TagError",
    "UnexpectedMoveToken",
    "UnknownTag",
    # Tags
    "decode_tag",
    "split_tag_line",
    "try_decode_tag",
    # Movetext
    "half_move_from_index",
    "select_movetext",
    "tokenize_movetext",
    # Assembly
    "decode_tags",
    "parse_pgn_lines",
    "parse_pgn_text",
    # Results
    "PGN_RESULT_TOKENS",
    "game_result_from_pgn",
]
