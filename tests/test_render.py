from __future__ import annotations

from rich.console import Console

from syntaxsakura.cards import Card
from syntaxsakura.cli.render import format_card, render_player, render_result
from syntaxsakura.scoreboard import GameResult, PlayerScore
from syntaxsakura.state import PlayerState


def test_format_card_uses_color_markup() -> None:
    assert format_card(Card.from_code("5_r")) == "[red]5_r[/red]"
    assert format_card(Card.from_code("2_w")) == "[white]2_w[/white]"


def test_render_player_lists_every_pile(console: Console) -> None:
    player = PlayerState(player_id=2)
    for code in ("3_b", "5_r"):
        player.hand.append_unsorted(Card.from_code(code))
    player.rows[1].append_unsorted(Card.from_code("9_g"))

    console.print(render_player(player, show_points=True))

    output = console.export_text()
    assert "Player 2" in output
    assert "hand cards" in output
    assert "3_b 5_r" in output
    assert "row_2" in output
    assert "9_g" in output
    assert "8 (x2)" in output


def test_render_result_marks_winner(console: Console) -> None:
    result = GameResult(scores=(PlayerScore(1, 10), PlayerScore(2, 30)), winner_id=2)
    console.print(render_result(result))
    output = console.export_text()
    assert "Final Scores" in output
    assert "Win" in output
    assert "Loss" in output
