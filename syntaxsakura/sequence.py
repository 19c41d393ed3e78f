"""Ordered card sequences used for hands, chosen pools and rows."""

from __future__ import annotations

from typing import Iterable, Iterator

from .cards import Card, format_cards

__all__ = ["CardNotFound", "CardSequence"]


class CardNotFound(LookupError):
    """Raised when a card is not a member of the sequence it is looked up in."""


class CardSequence:
    """Mutable, insertion-ordered collection of cards.

    The ascending-by-rank invariant is only established on demand, through
    :meth:`sort_ascending` or :meth:`insert_sorted`. :meth:`append_unsorted`
    leaves the order exactly as the cards arrive.
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return any(member is card for member in self._cards)

    def __repr__(self) -> str:
        return f"CardSequence([{self.code()}])"

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def ranks(self) -> list[int]:
        return [card.rank for card in self._cards]

    @property
    def min_rank(self) -> int | None:
        return self._cards[0].rank if self._cards else None

    @property
    def max_rank(self) -> int | None:
        return self._cards[-1].rank if self._cards else None

    def is_empty(self) -> bool:
        return not self._cards

    def code(self) -> str:
        return format_cards(self._cards)

    def append_unsorted(self, card: Card) -> None:
        """Append ``card`` at the tail without touching the order."""

        self._cards.append(card)

    def insert_sorted(self, card: Card) -> None:
        """Insert ``card`` before the first entry with a strictly greater rank.

        Equal ranks keep their arrival order: the new card lands at the end
        of its rank's run.
        """

        for index, existing in enumerate(self._cards):
            if existing.rank > card.rank:
                self._cards.insert(index, card)
                return
        self._cards.append(card)

    def prepend(self, card: Card) -> None:
        self._cards.insert(0, card)

    def sort_ascending(self) -> None:
        """Bubble-sort the cards by rank in place.

        Only adjacent pairs with ``a.rank > b.rank`` are swapped, so cards of
        equal rank keep their relative order.
        """

        end = len(self._cards)
        swapped = True
        while swapped and end > 1:
            swapped = False
            for index in range(end - 1):
                left, right = self._cards[index], self._cards[index + 1]
                if left.rank > right.rank:
                    self._cards[index], self._cards[index + 1] = right, left
                    swapped = True
            end -= 1

    def find_by_rank(self, rank: int) -> Card | None:
        """Return the first card (head to tail) with ``rank``."""

        for card in self._cards:
            if card.rank == rank:
                return card
        return None

    def remove(self, card: Card) -> None:
        """Remove the exact ``card`` instance from the sequence."""

        for index, member in enumerate(self._cards):
            if member is card:
                del self._cards[index]
                return
        raise CardNotFound(f"card {card.code} is not in the sequence")

