"""Card abstractions and helpers for SyntaxSakura."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable

MIN_RANK: Final[int] = 1
MAX_RANK: Final[int] = 120


class InvalidColor(ValueError):
    """Raised when a color token is not one of ``r``, ``g``, ``b`` or ``w``."""


class Color(str, Enum):
    """Enumeration of the four card colors."""

    RED = "r"
    GREEN = "g"
    BLUE = "b"
    WHITE = "w"

    @classmethod
    def from_letter(cls, letter: str) -> "Color":
        """Return the color encoded by ``letter``."""

        try:
            return cls(letter)
        except ValueError:
            raise InvalidColor(f"invalid color '{letter}'") from None


CARD_POINTS: Final[dict[Color, int]] = {
    Color.RED: 10,
    Color.WHITE: 7,
    Color.GREEN: 4,
    Color.BLUE: 3,
}


@dataclass(frozen=True, slots=True, eq=False)
class Card:
    """Value object describing a single card.

    Equality is identity: two cards with the same rank and color are still
    different cards, so sequences remove the exact instance they were given.
    """

    rank: int
    color: Color

    @classmethod
    def from_code(cls, code: str) -> "Card":
        parts = code.strip().split("_")
        if len(parts) != 2:
            raise ValueError(f"invalid card code '{code}'")
        return parse_card(parts[0], parts[1])

    @property
    def points(self) -> int:
        return CARD_POINTS[self.color]

    @property
    def code(self) -> str:
        return f"{self.rank}_{self.color.value}"

    def __str__(self) -> str:
        return self.code


def parse_number(token: str) -> int:
    """Convert a decimal token into an integer.

    Only ASCII digits are accepted; signs, blanks inside the token and
    trailing garbage raise ``ValueError``.
    """

    text = token.strip()
    if not text or not (text.isascii() and text.isdigit()):
        raise ValueError(f"not a number: '{token}'")
    return int(text)


def parse_card(rank_token: str, color_token: str) -> Card:
    """Build a card from its rank and color tokens."""

    rank = parse_number(rank_token)
    if rank < MIN_RANK:
        raise ValueError(f"rank must be at least {MIN_RANK}, got {rank}")
    return Card(rank=rank, color=Color.from_letter(color_token.strip()))


def format_cards(cards: Iterable[Card]) -> str:
    return " ".join(card.code for card in cards)
