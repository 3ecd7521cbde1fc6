"""Typed records produced by the PGN parsers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from enum import StrEnum

from pgnreader.core.enums import Color, GameResult
from pgnreader.core.notation.errors import MovetextError, TagError
from pgnreader.core.notation.results import game_result_from_pgn

TagValue = str | date | time | int

PGN_DATE_FORMAT = "%Y.%m.%d"
PGN_TIME_FORMAT = "%H:%M:%S"


class TagKind(StrEnum):
    """Known PGN header keys. The value is the key as written in PGN text."""

    EVENT = "Event"
    SITE = "Site"
    DATE = "Date"
    ROUND = "Round"
    WHITE = "White"
    BLACK = "Black"
    RESULT = "Result"
    UTC_DATE = "UTCDate"
    UTC_TIME = "UTCTime"
    END_TIME = "EndTime"
    ECO = "ECO"
    WHITE_ELO = "WhiteElo"
    BLACK_ELO = "BlackElo"
    ANNOTATOR = "Annotator"
    WHITE_RATING_DIFF = "WhiteRatingDiff"
    BLACK_RATING_DIFF = "BlackRatingDiff"
    VARIANT = "Variant"
    TIME_CONTROL = "TimeControl"
    OPENING = "Opening"
    TERMINATION = "Termination"

    @property
    def value_type(self) -> type:
        """Python type of the payload carried by tags of this kind."""
        return _TAG_VALUE_TYPES.get(self, str)


_TAG_VALUE_TYPES: dict[TagKind, type] = {
    TagKind.DATE: date,
    TagKind.UTC_DATE: date,
    TagKind.UTC_TIME: time,
    TagKind.END_TIME: time,
    TagKind.WHITE_ELO: int,
    TagKind.BLACK_ELO: int,
    TagKind.WHITE_RATING_DIFF: int,
    TagKind.BLACK_RATING_DIFF: int,
}


@dataclass(slots=True, frozen=True)
class Tag:
    """A decoded header tag pair."""

    kind: TagKind
    value: TagValue

    @property
    def key(self) -> str:
        return self.kind.value

    @property
    def text(self) -> str:
        """The value rendered back as PGN tag text (unescaped)."""
        if isinstance(self.value, date):
            return self.value.strftime(PGN_DATE_FORMAT)
        if isinstance(self.value, time):
            return self.value.strftime(PGN_TIME_FORMAT)
        return str(self.value)

    def to_pgn(self) -> str:
        """Render the tag as a ``[Key "Value"]`` header line."""
        escaped = self.text.replace("\\", "\\\\").replace('"', '\\"')
        return f'[{self.key} "{escaped}"]'

    def __str__(self) -> str:
        return f"Tag({self.key}, {self.text})"


@dataclass(slots=True, frozen=True)
class HalfMove:
    """One player's move, kept as the literal movetext token."""

    color: Color
    san: str

    @classmethod
    def white(cls, san: str) -> HalfMove:
        return cls(Color.WHITE, san)

    @classmethod
    def black(cls, san: str) -> HalfMove:
        return cls(Color.BLACK, san)

    def __str__(self) -> str:
        return f"{self.color.label}({self.san})"


TagResult = Tag | TagError
MoveResult = HalfMove | MovetextError


@dataclass(slots=True, frozen=True)
class ParsedGame:
    """Tags and half-moves of a single game, each kept in source order.

    ``tag_results`` and ``move_results`` hold successes and recoverable
    errors side by side; the remaining properties are filtered views.
    """

    tag_results: tuple[TagResult, ...]
    move_results: tuple[MoveResult, ...]
    result_token: str = "*"

    @property
    def tags(self) -> list[Tag]:
        return [item for item in self.tag_results if isinstance(item, Tag)]

    @property
    def tag_errors(self) -> list[TagError]:
        return [item for item in self.tag_results if isinstance(item, TagError)]

    @property
    def moves(self) -> list[HalfMove]:
        return [item for item in self.move_results if isinstance(item, HalfMove)]

    @property
    def move_errors(self) -> list[MovetextError]:
        return [
            item for item in self.move_results if isinstance(item, MovetextError)
        ]

    @property
    def headers(self) -> dict[str, str]:
        """Successfully decoded tags as ``key -> text``; later duplicates win."""
        return {tag.key: tag.text for tag in self.tags}

    def tag(self, kind: TagKind) -> Tag | None:
        """Return the first decoded tag of ``kind``, if any."""
        for tag in self.tags:
            if tag.kind == kind:
                return tag
        return None

    @property
    def result(self) -> GameResult:
        return game_result_from_pgn(self.result_token)
