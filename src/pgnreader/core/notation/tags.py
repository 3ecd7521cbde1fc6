"""Tag pair decoding: one ``[Key "Value"]`` line into a typed :class:`Tag`."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import date, datetime, time

from pgnreader.core.notation.errors import (
    InvalidTagValue,
    NoClosingSquareBracket,
    NoOpeningSquareBracket,
    TagError,
    UnknownTag,
)
from pgnreader.core.notation.models import (
    PGN_DATE_FORMAT,
    PGN_TIME_FORMAT,
    Tag,
    TagKind,
    TagValue,
)

_LOGGER = logging.getLogger(__name__)

_UNSIGNED_RE = re.compile(r"[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_QUOTED_RE = re.compile(r'"((?:[^"\\]|\\.)*)"')
_ESCAPE_RE = re.compile(r"\\(.)")


def _parse_date(text: str) -> date:
    try:
        return datetime.strptime(text, PGN_DATE_FORMAT).date()
    except ValueError:
        raise ValueError("expected a YYYY.MM.DD date") from None


def _parse_time(text: str) -> time:
    try:
        return datetime.strptime(text, PGN_TIME_FORMAT).time()
    except ValueError:
        raise ValueError("expected an HH:MM:SS time") from None


def _parse_end_time(text: str) -> time:
    # EndTime is often written with a zone suffix, e.g. "12:34:56 GMT+0000".
    parts = text.split()
    if len(parts) > 2:
        raise ValueError("expected an HH:MM:SS time with an optional timezone")
    return _parse_time(parts[0] if parts else "")


def _parse_unsigned(text: str) -> int:
    if _UNSIGNED_RE.fullmatch(text) is None:
        raise ValueError("expected a non-negative integer")
    return int(text)


def _parse_signed(text: str) -> int:
    if _SIGNED_RE.fullmatch(text) is None:
        raise ValueError("expected a signed integer")
    return int(text)


_CONVERTERS: dict[TagKind, Callable[[str], TagValue]] = {
    TagKind.DATE: _parse_date,
    TagKind.UTC_DATE: _parse_date,
    TagKind.UTC_TIME: _parse_time,
    TagKind.END_TIME: _parse_end_time,
    TagKind.WHITE_ELO: _parse_unsigned,
    TagKind.BLACK_ELO: _parse_unsigned,
    TagKind.WHITE_RATING_DIFF: _parse_signed,
    TagKind.BLACK_RATING_DIFF: _parse_signed,
}


def _unquote(raw_value: str) -> str:
    value = raw_value.strip()
    match = _QUOTED_RE.fullmatch(value)
    if match is not None:
        value = match.group(1)
    else:
        # Unbalanced or missing quotes: drop whichever outer quote is present.
        value = value.removeprefix('"').removesuffix('"')
    return _ESCAPE_RE.sub(r"\1", value)


def split_tag_line(line: str) -> tuple[str, str]:
    """Check the brackets of ``line`` and split it into ``(key, value)``.

    The value has its surrounding quotes removed. Raises
    :class:`NoOpeningSquareBracket` or :class:`NoClosingSquareBracket`.
    """
    text = line.strip()
    if not text.startswith("["):
        raise NoOpeningSquareBracket()
    if not text.endswith("]"):
        raise NoClosingSquareBracket()

    parts = text[1:-1].split(maxsplit=1)
    key = parts[0] if parts else ""
    raw_value = parts[1] if len(parts) > 1 else ""
    return key, _unquote(raw_value)


def decode_tag(line: str) -> Tag:
    """Decode a single tag line into a :class:`Tag`.

    Raises a :class:`TagError` subclass when the line is not bracketed, the
    key is not a known tag, or the value does not match the tag's type.
    """
    key, value = split_tag_line(line)
    try:
        kind = TagKind(key)
    except ValueError:
        raise UnknownTag(key, value) from None

    converter = _CONVERTERS.get(kind)
    if converter is None:
        return Tag(kind, value)
    try:
        return Tag(kind, converter(value))
    except ValueError as exc:
        raise InvalidTagValue(key, value, str(exc)) from exc


def try_decode_tag(line: str) -> Tag | TagError:
    """Like :func:`decode_tag` but return the error instead of raising it."""
    try:
        return decode_tag(line)
    except TagError as exc:
        _LOGGER.debug("Skipping tag line %r: %s", line, exc)
        return exc.with_traceback(None)
