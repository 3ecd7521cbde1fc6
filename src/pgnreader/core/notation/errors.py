"""Recoverable per-line and per-segment parse errors.

Every error here is a :class:`ValueError` so it can be raised as usual, while
the assembly layer collects the instances as values alongside successful
results.
"""

from __future__ import annotations


class _ParseError(ValueError):
    """Errors compare by type and arguments so parse results compare structurally."""

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class TagError(_ParseError):
    """Base class for a tag line that could not be decoded."""


class NoOpeningSquareBracket(TagError):
    def __init__(self) -> None:
        super().__init__("tag must start with '['")


class NoClosingSquareBracket(TagError):
    def __init__(self) -> None:
        super().__init__("tag must end with ']'")


class UnknownTag(TagError):
    """A bracketed line whose key is not a known tag."""

    def __init__(self, key: str, value: str) -> None:
        super().__init__(key, value)
        self.key = key
        self.value = value

    def __str__(self) -> str:
        return f"tag {self.key} is not supported (value {self.value!r})"


class InvalidTagValue(TagError):
    """A known tag whose value failed typed conversion."""

    def __init__(self, key: str, value: str, reason: str) -> None:
        super().__init__(key, value, reason)
        self.key = key
        self.value = value
        self.reason = reason

    def __str__(self) -> str:
        return f"invalid value {self.value!r} for tag {self.key}: {self.reason}"


class MovetextError(_ParseError):
    """Base class for a movetext segment that produced no half-move."""


class EmptyMoveSegment(MovetextError):
    """A move-number marker with no move token after it."""

    def __init__(self, number: int) -> None:
        super().__init__(number)
        self.number = number

    def __str__(self) -> str:
        return f"move {self.number} has no move token"


class UnexpectedMoveToken(MovetextError):
    """A token left over after both half-moves of a move pair."""

    def __init__(self, number: int, token: str) -> None:
        super().__init__(number, token)
        self.number = number
        self.token = token

    def __str__(self) -> str:
        return f"unexpected token {self.token!r} after move {self.number}"


class InvalidMoveNumber(MovetextError):
    """A move number that yields no valid half-move index for a token."""

    def __init__(self, number: int, token: str) -> None:
        super().__init__(number, token)
        self.number = number
        self.token = token

    def __str__(self) -> str:
        return f"move number {self.number} cannot place token {self.token!r}"
