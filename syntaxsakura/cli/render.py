"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from rich import box
from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table

from ..cards import Card, Color
from ..scoreboard import GameResult
from ..state import PlayerState
from .views import PlayerView

_COLOR_STYLES = {
    Color.RED: "red",
    Color.GREEN: "green",
    Color.BLUE: "blue",
    Color.WHITE: "white",
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    style = _COLOR_STYLES.get(card.color, "white")
    return f"[{style}]{card.code}[/{style}]"


def render_player(player: PlayerState, *, show_points: bool = False) -> RenderableType:
    """Return a Rich panel describing ``player``'s cards."""

    view = PlayerView(player=player, card_formatter=format_card, show_points=show_points)
    return Panel(
        view.render(),
        title=f"Player {player.player_id}",
        title_align="left",
        padding=(0, 1),
        border_style="cyan",
        expand=False,
    )


def render_result(result: GameResult) -> Table:
    """Return a Rich table describing the final scores."""

    table = Table(title="Final Scores", box=box.SIMPLE_HEAVY)
    table.add_column("Player", justify="center")
    table.add_column("Points", justify="right")
    table.add_column("Result", justify="center")

    for score in result.scores:
        label = f"Player {score.player_id}"
        if result.winner_id is None:
            outcome = "Tie"
        elif score.player_id == result.winner_id:
            label = f"[bold green]{label}[/bold green]"
            outcome = "[bold green]Win[/bold green]"
        else:
            outcome = "Loss"
        table.add_row(label, str(score.points), outcome)
    return table
