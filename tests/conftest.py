"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_PGN = """\
[Event "Rated Blitz game"]
[Site "https://lichess.org/abcd1234"]
[Date "2023.04.01"]
[White "Alice"]
[Black "Bob"]
[Result "1-0"]
[UTCDate "2023.04.01"]
[UTCTime "18:05:09"]
[WhiteElo "1500"]
[BlackElo "1480"]
[WhiteRatingDiff "+6"]
[BlackRatingDiff "-6"]
[ECO "B12"]
[Opening "Caro-Kann Defense: Advance Variation"]
[TimeControl "300+3"]
[Termination "Normal"]

1. e4 c6 2. d4 d5 3. e5 Bf5
4. Nf3 e6 5. Be2 c5 1-0
"""


@pytest.fixture
def sample_lines() -> list[str]:
    """A minimal three-tag, two-move game."""
    return ['[Event "Test"]', '[White "A"]', '[Black "B"]', "", "1. e4 c6 2. Nf3 d5"]


@pytest.fixture
def write_pgn(tmp_path: Path) -> Callable[..., Path]:
    """Write PGN text to a temporary ``.pgn`` file and return its path."""

    def _write(text: str = SAMPLE_PGN, name: str = "game.pgn") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
