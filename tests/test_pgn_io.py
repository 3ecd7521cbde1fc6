"""Tests for PGN file loading and record formatting."""

from collections.abc import Callable
from pathlib import Path

import pytest

from pgnreader.core.notation import HalfMove, TagKind
from pgnreader.pgn_io import format_parsed_game, load_pgn_file, read_pgn_lines


class TestLoadPgnFile:
    def test_reads_lines(self, write_pgn: Callable[..., Path]) -> None:
        path = write_pgn('[Event "x"]\n\n1. e4\n')
        assert read_pgn_lines(path) == ['[Event "x"]', "", "1. e4"]

    def test_sample_game(self, write_pgn: Callable[..., Path]) -> None:
        parsed = load_pgn_file(write_pgn())

        assert len(parsed.tags) == 16
        assert parsed.tag_errors == []
        assert len(parsed.moves) == 10
        assert parsed.moves[-1] == HalfMove.black("c5")
        assert parsed.result_token == "1-0"
        rating_diff = parsed.tag(TagKind.BLACK_RATING_DIFF)
        assert rating_diff is not None
        assert rating_diff.value == -6

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_pgn_file(tmp_path / "missing.pgn")

    def test_non_utf8_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.pgn"
        path.write_bytes(b'[Event "Caf\xe9"]\n')
        with pytest.raises(UnicodeDecodeError):
            load_pgn_file(path)


class TestFormatParsedGame:
    def test_one_record_per_line(self, write_pgn: Callable[..., Path]) -> None:
        path = write_pgn('[Event "Test"]\n[Foo "bar"]\n\n1. e4 c6 2.\n')
        records = list(format_parsed_game(load_pgn_file(path)))

        assert records == [
            "Tag(Event, Test)",
            "TagError: tag Foo is not supported (value 'bar')",
            "White(e4)",
            "Black(c6)",
            "MovetextError: move 2 has no move token",
            "Result: *",
        ]

    def test_filters(self, write_pgn: Callable[..., Path]) -> None:
        parsed = load_pgn_file(write_pgn('[Event "Test"]\n[Foo "bar"]\n\n1. e4\n'))

        assert list(format_parsed_game(parsed, show_moves=False)) == [
            "Tag(Event, Test)",
            "TagError: tag Foo is not supported (value 'bar')",
        ]
        assert list(
            format_parsed_game(parsed, show_tags=False, show_errors=False)
        ) == ["White(e4)", "Result: *"]
