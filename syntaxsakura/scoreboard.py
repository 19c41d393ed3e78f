"""Helpers for turning final row states into a game result."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .rules import score_rows
from .state import PlayerState

__all__ = ["PlayerScore", "GameResult", "build_result", "format_report"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlayerScore:
    """Final points of a single player."""

    player_id: int
    points: int


@dataclass(frozen=True, slots=True)
class GameResult:
    """Scores of every player and the winner, ``None`` on a tie."""

    scores: tuple[PlayerScore, ...]
    winner_id: int | None

    def points_for(self, player_id: int) -> int:
        for score in self.scores:
            if score.player_id == player_id:
                return score.points
        raise KeyError(player_id)


def build_result(players: Sequence[PlayerState]) -> GameResult:
    """Score every player's rows and determine the winner."""

    if not players:
        raise ValueError("at least one player is required")
    scores = tuple(PlayerScore(player.player_id, score_rows(player.rows)) for player in players)
    best = max(score.points for score in scores)
    leaders = [score.player_id for score in scores if score.points == best]
    winner_id = leaders[0] if len(leaders) == 1 else None
    logger.info(
        "final scores: %s",
        ", ".join(f"player {score.player_id}={score.points}" for score in scores),
    )
    return GameResult(scores=scores, winner_id=winner_id)


def format_report(result: GameResult) -> str:
    """Return the score report shown at the end and appended to the config file."""

    lines = [f"Player {score.player_id}: {score.points} points" for score in result.scores]
    lines.append("")
    if result.winner_id is None:
        lines.append("The game ends in a tie!")
    else:
        lines.append(f"Congratulations! Player {result.winner_id} wins the game!")
    return "\n".join(lines) + "\n"
