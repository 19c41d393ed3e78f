"""Decoding of console input lines into tagged commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Union

from .cards import MAX_RANK, MIN_RANK, parse_number
from .rules import ROW_COUNT

NOT_IN_HAND: Final[str] = "Please enter the number of a card in your hand cards!"
NOT_IN_CHOSEN: Final[str] = "Please enter the number of a card in your chosen cards!"
INVALID_ROW: Final[str] = "Please enter a valid row number!"
WRONG_PARAMETER_COUNT: Final[str] = "Please enter the correct number of parameters!"
UNKNOWN_COMMAND: Final[str] = "Please enter a valid command!"
CANNOT_EXTEND_ROW: Final[str] = "This card cannot extend the chosen row!"

HELP_TEXT: Final[str] = "\n".join(
    [
        "Available commands:",
        "  - help",
        "    Display this help message.",
        "  - place <row number> <card number>",
        "    Append a card to the chosen row or if the chosen row does not exist create it.",
        "  - discard <card number>",
        "    Discard a card from the chosen cards.",
        "  - quit",
        "    Terminate the program.",
    ]
)


@dataclass(frozen=True, slots=True)
class Quit:
    """Voluntary end of the game."""


@dataclass(frozen=True, slots=True)
class Help:
    """Request for the command overview."""


@dataclass(frozen=True, slots=True)
class Choose:
    rank: int


@dataclass(frozen=True, slots=True)
class Place:
    """Place the chosen card ``rank`` in the 0-based row ``row``."""

    row: int
    rank: int


@dataclass(frozen=True, slots=True)
class Discard:
    rank: int


@dataclass(frozen=True, slots=True)
class Invalid:
    """Rejected input together with the message shown to the player."""

    reason: str


ChoosingCommand = Union[Quit, Choose, Invalid]
ActionCommand = Union[Quit, Help, Place, Discard, Invalid]


def _rank(token: str) -> int | None:
    try:
        rank = parse_number(token)
    except ValueError:
        return None
    if not MIN_RANK <= rank <= MAX_RANK:
        return None
    return rank


def parse_choosing_command(line: str) -> ChoosingCommand:
    """Decode a card-choosing line: a bare rank or ``quit``."""

    text = line.strip()
    if text.lower() == "quit":
        return Quit()
    rank = _rank(text)
    if rank is None:
        return Invalid(NOT_IN_HAND)
    return Choose(rank)


def parse_action_command(line: str) -> ActionCommand:
    """Decode an action-phase line."""

    tokens = line.split()
    if not tokens:
        return Invalid(UNKNOWN_COMMAND)
    keyword, args = tokens[0].lower(), tokens[1:]

    if keyword in ("help", "quit"):
        if args:
            return Invalid(WRONG_PARAMETER_COUNT)
        return Help() if keyword == "help" else Quit()

    if keyword == "place":
        if len(args) != 2:
            return Invalid(WRONG_PARAMETER_COUNT)
        try:
            row = parse_number(args[0])
        except ValueError:
            return Invalid(INVALID_ROW)
        if not 1 <= row <= ROW_COUNT:
            return Invalid(INVALID_ROW)
        rank = _rank(args[1])
        if rank is None:
            return Invalid(NOT_IN_CHOSEN)
        return Place(row=row - 1, rank=rank)

    if keyword == "discard":
        if len(args) != 1:
            return Invalid(WRONG_PARAMETER_COUNT)
        rank = _rank(args[0])
        if rank is None:
            return Invalid(NOT_IN_CHOSEN)
        return Discard(rank)

    return Invalid(UNKNOWN_COMMAND)
