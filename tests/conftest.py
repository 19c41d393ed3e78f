from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Iterable

import pytest
from rich.console import Console


def _scripted_reader(lines: Iterable[str]) -> Callable[[str], str]:
    """Return a ``read_line`` replacement that raises ``EOFError`` once exhausted."""

    remaining = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read


def _deck_lines() -> list[str]:
    """Player one is dealt red 1..10, player two blue 11..20."""

    lines: list[str] = []
    for rank in range(1, 11):
        lines.append(f"{rank}_r")
        lines.append(f"{rank + 10}_b")
    return lines


# One complete game over the deck above. Player one ends with 92 points,
# player two with 70.
_FULL_GAME_SCRIPT: list[str] = [
    # round 1
    "abc", "1", "2", "11", "12",
    "help", "place 4 1", "place 1 1", "place 1 2", "place 1 11", "place 1 12",
    # round 2
    "13", "14", "3", "4",
    "place 1 13", "place 1 14", "place 2 3", "place 2 4",
    # round 3
    "5", "6", "15", "16",
    "place 2 5", "place 2 6", "place 1 15", "place 1 16",
    # round 4
    "17", "18", "7", "8",
    "discard 17", "discard 18", "place 2 7", "place 2 8",
    # round 5
    "9", "10", "19", "20",
    "place 3 9", "place 3 10", "place 3 19", "place 3 20",
]


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120, record=True, color_system=None)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.txt"
    path.write_text("\n".join(["ESP", "2", *_deck_lines()]) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def full_game_script() -> list[str]:
    return list(_FULL_GAME_SCRIPT)


@pytest.fixture
def reader_factory() -> Callable[[Iterable[str]], Callable[[str], str]]:
    return _scripted_reader
