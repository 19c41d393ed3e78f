"""Core game state data structures for SyntaxSakura."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, Sequence

from . import rules
from .cards import Card
from .sequence import CardSequence

HAND_SIZE: Final[int] = 10
DECK_SIZE: Final[int] = 2 * HAND_SIZE

logger = logging.getLogger(__name__)


def _empty_rows() -> tuple[CardSequence, ...]:
    return tuple(CardSequence() for _ in range(rules.ROW_COUNT))


@dataclass(slots=True)
class PlayerState:
    """Cards owned by one seated player."""

    player_id: int
    hand: CardSequence = field(default_factory=CardSequence)
    chosen: CardSequence = field(default_factory=CardSequence)
    rows: tuple[CardSequence, ...] = field(default_factory=_empty_rows)

    def __post_init__(self) -> None:
        if len(self.rows) != rules.ROW_COUNT:
            raise ValueError(f"a player has exactly {rules.ROW_COUNT} rows")

    @property
    def has_cards(self) -> bool:
        """Return ``True`` while cards remain in the hand or the chosen pool."""

        return not self.hand.is_empty() or not self.chosen.is_empty()

    def choose(self, rank: int) -> Card | None:
        """Move the first hand card with ``rank`` into the chosen pool."""

        card = self.hand.find_by_rank(rank)
        if card is None:
            return None
        self.hand.remove(card)
        self.chosen.insert_sorted(card)
        logger.debug("player %d: chose %s", self.player_id, card)
        return card


@dataclass(slots=True)
class GameState:
    """Both players plus the round counter."""

    players: tuple[PlayerState, PlayerState]
    round_number: int = 0

    @property
    def is_over(self) -> bool:
        return not all(player.has_cards for player in self.players)

    def exchange_hands(self) -> None:
        """Swap the remaining hands of the two players in one step."""

        first, second = self.players
        first.hand, second.hand = second.hand, first.hand
        logger.debug(
            "hands exchanged: player %d holds %d card(s), player %d holds %d card(s)",
            first.player_id,
            len(first.hand),
            second.player_id,
            len(second.hand),
        )


def deal(cards: Sequence[Card]) -> tuple[CardSequence, CardSequence]:
    """Split the deck alternately into two hands, first card to player one."""

    if len(cards) != DECK_SIZE:
        raise ValueError(f"expected {DECK_SIZE} cards, got {len(cards)}")
    first, second = CardSequence(), CardSequence()
    for index, card in enumerate(cards):
        (first if index % 2 == 0 else second).append_unsorted(card)
    return first, second


def new_game_state(cards: Sequence[Card]) -> GameState:
    """Deal ``cards``, sort both hands and return the opening state."""

    first_hand, second_hand = deal(cards)
    rules.sort_hand(first_hand)
    rules.sort_hand(second_hand)
    logger.debug("dealt hands: [%s] / [%s]", first_hand.code(), second_hand.code())
    return GameState(
        players=(
            PlayerState(player_id=1, hand=first_hand),
            PlayerState(player_id=2, hand=second_hand),
        )
    )
