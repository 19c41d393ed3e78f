"""Loading of the deck configuration file and appending of game results."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .cards import MAX_RANK, Card, parse_card, parse_number
from .state import DECK_SIZE

MAGIC_NUMBER: Final[str] = "ESP"
CARD_LINES_START: Final[int] = 3

WRONG_ARGUMENT_COUNT: Final[int] = 1
CANNOT_OPEN_FILE: Final[int] = 2
INVALID_FILE: Final[int] = 3
MEMORY_ALLOCATION_ERROR: Final[int] = 4

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Base class for configuration failures that abort the program."""

    exit_code: int = INVALID_FILE

    def __init__(self, path: Path | str, message: str, detail: str = "") -> None:
        super().__init__(message)
        self.path = Path(path)
        self.message = message
        self.detail = detail


class CannotOpenConfig(ConfigError):
    """Raised when the configuration file cannot be read at all."""

    exit_code = CANNOT_OPEN_FILE

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, f"Error: Cannot open file: {path}")


class InvalidConfig(ConfigError):
    """Raised when the configuration file content is malformed."""

    exit_code = INVALID_FILE

    def __init__(self, path: Path | str, detail: str = "") -> None:
        super().__init__(path, f"Error: Invalid file: {path}", detail)


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Parsed content of a configuration file."""

    path: Path
    player_count: int
    cards: tuple[Card, ...]


def _parse_card_line(path: Path, line_number: int, line: str) -> Card:
    rank_token, separator, color_token = line.strip().partition("_")
    if not separator:
        raise InvalidConfig(path, f"line {line_number}: missing '_' in '{line.strip()}'")
    try:
        card = parse_card(rank_token, color_token)
    except ValueError as exc:
        raise InvalidConfig(path, f"line {line_number}: {exc}") from exc
    if card.rank > MAX_RANK:
        raise InvalidConfig(path, f"line {line_number}: rank {card.rank} above {MAX_RANK}")
    return card


def parse_config(path: Path, text: str) -> GameConfig:
    """Parse configuration ``text`` read from ``path``."""

    lines = text.splitlines()
    if not lines or lines[0].rstrip("\r") != MAGIC_NUMBER:
        raise InvalidConfig(path, "bad magic number")
    if len(lines) < 2:
        raise InvalidConfig(path, "missing player count")
    try:
        player_count = parse_number(lines[1])
    except ValueError as exc:
        raise InvalidConfig(path, f"line 2: {exc}") from exc

    card_lines = lines[CARD_LINES_START - 1 : CARD_LINES_START - 1 + DECK_SIZE]
    if len(card_lines) < DECK_SIZE:
        raise InvalidConfig(path, f"expected {DECK_SIZE} cards, found {len(card_lines)}")
    cards = tuple(
        _parse_card_line(path, CARD_LINES_START + offset, line)
        for offset, line in enumerate(card_lines)
    )
    return GameConfig(path=path, player_count=player_count, cards=cards)


def load_config(path: Path | str) -> GameConfig:
    """Read and validate the configuration file at ``path``."""

    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidConfig(config_path, "not a text file") from exc
    except OSError as exc:
        raise CannotOpenConfig(config_path) from exc
    config = parse_config(config_path, text)
    logger.info("loaded %d cards for %d player(s) from %s", len(config.cards), config.player_count, config_path)
    return config


def append_results(path: Path | str, report: str) -> bool:
    """Append ``report`` to ``path``; return ``False`` if the file cannot be written."""

    try:
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(report)
    except OSError as exc:
        logger.warning("could not append results to %s: %s", path, exc)
        return False
    return True
