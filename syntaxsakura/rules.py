"""Rule utilities and constants for SyntaxSakura."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final, Sequence

from .cards import Card
from .sequence import CardNotFound, CardSequence

if TYPE_CHECKING:
    from .state import PlayerState

__all__ = [
    "ROW_COUNT",
    "IllegalPlacement",
    "InvalidRow",
    "sort_hand",
    "try_extend_row",
    "place_chosen_card",
    "discard_chosen_card",
    "row_points",
    "longest_row_index",
    "score_rows",
]

ROW_COUNT: Final[int] = 3

logger = logging.getLogger(__name__)


class IllegalPlacement(RuntimeError):
    """Raised when a card cannot extend the requested row."""


class InvalidRow(ValueError):
    """Raised when a row index is outside the player's rows."""


def sort_hand(hand: CardSequence) -> None:
    """Sort a freshly dealt hand ascending by rank."""

    hand.sort_ascending()


def try_extend_row(row: CardSequence, card: Card) -> bool:
    """Extend ``row`` with ``card`` if it fits at either end.

    A card fits when the row is empty, when its rank is strictly below the
    current head, or when it is strictly above the current tail. Rows only
    ever grow through this function, so head and tail are their bounds.
    Returns ``False`` and leaves the row untouched otherwise.
    """

    if row.is_empty():
        row.append_unsorted(card)
        return True
    min_rank, max_rank = row.min_rank, row.max_rank
    if min_rank is not None and card.rank < min_rank:
        row.prepend(card)
        return True
    if max_rank is not None and card.rank > max_rank:
        row.append_unsorted(card)
        return True
    return False


def _row(player: "PlayerState", row_index: int) -> CardSequence:
    if not 0 <= row_index < len(player.rows):
        raise InvalidRow(f"row index {row_index} out of range")
    return player.rows[row_index]


def place_chosen_card(player: "PlayerState", row_index: int, rank: int) -> Card:
    """Move the chosen card with ``rank`` into ``row_index``.

    The card leaves the chosen pool before the row is tried. On an illegal
    placement it is sorted back into the pool and ``IllegalPlacement`` is
    raised, so the pool and the row end up exactly as before.
    """

    row = _row(player, row_index)
    card = player.chosen.find_by_rank(rank)
    if card is None:
        raise CardNotFound(f"no chosen card with rank {rank}")
    player.chosen.remove(card)
    if not try_extend_row(row, card):
        player.chosen.insert_sorted(card)
        logger.debug("player %d: %s does not fit row %d", player.player_id, card, row_index + 1)
        raise IllegalPlacement(f"{card.code} cannot extend row {row_index + 1}")
    logger.debug("player %d: placed %s in row %d", player.player_id, card, row_index + 1)
    return card


def discard_chosen_card(player: "PlayerState", rank: int) -> Card:
    """Drop the chosen card with ``rank`` from the game."""

    card = player.chosen.find_by_rank(rank)
    if card is None:
        raise CardNotFound(f"no chosen card with rank {rank}")
    player.chosen.remove(card)
    logger.debug("player %d: discarded %s", player.player_id, card)
    return card


def row_points(row: CardSequence) -> int:
    return sum(card.points for card in row)


def longest_row_index(rows: Sequence[CardSequence]) -> int:
    """Return the index of the longest row; the lowest index wins ties."""

    best_index = 0
    best_length = -1
    for index, row in enumerate(rows):
        if len(row) > best_length:
            best_index = index
            best_length = len(row)
    return best_index


def score_rows(rows: Sequence[CardSequence]) -> int:
    """Return the total points of ``rows`` with the longest row doubled."""

    if not rows:
        return 0
    points = [row_points(row) for row in rows]
    return sum(points) + points[longest_row_index(rows)]
