"""Composable view primitives for the SyntaxSakura CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from rich import box
from rich.console import RenderableType
from rich.table import Table

from ..cards import Card
from ..rules import longest_row_index, row_points
from ..sequence import CardSequence
from ..state import PlayerState


@dataclass(slots=True)
class PlayerView:
    """Renderable summarising one player's hand, chosen pool and rows."""

    player: PlayerState
    card_formatter: Callable[[Card], str]
    show_points: bool = False

    def _cards_markup(self, cards: CardSequence) -> str:
        if cards.is_empty():
            return "[dim]—[/dim]"
        return " ".join(self.card_formatter(card) for card in cards)

    def render(self) -> RenderableType:
        table = Table(box=box.SIMPLE, expand=False, show_header=False)
        table.add_column("Pile", justify="left", style="bold")
        table.add_column("Cards", justify="left")
        if self.show_points:
            table.add_column("Points", justify="right")

        extra = [""] if self.show_points else []
        table.add_row("hand cards", self._cards_markup(self.player.hand), *extra)
        table.add_row("chosen cards", self._cards_markup(self.player.chosen), *extra)

        longest = longest_row_index(self.player.rows)
        for idx, row in enumerate(self.player.rows):
            cells = [f"row_{idx + 1}", self._cards_markup(row)]
            if self.show_points:
                points = row_points(row)
                if idx == longest and points:
                    cells.append(f"[bold]{points * 2}[/bold] (x2)")
                else:
                    cells.append(str(points))
            table.add_row(*cells)
        return table
