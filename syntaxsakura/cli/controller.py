"""Turn and phase controller driving a game over the console."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Final

from rich.console import Console

from .. import commands, rules, scoreboard
from ..sequence import CardNotFound
from ..state import GameState, PlayerState
from .render import render_player, render_result

CHOICES_PER_ROUND: Final[int] = 2
_ORDINALS: Final[tuple[str, ...]] = ("first", "second")

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]


class GameQuit(RuntimeError):
    """Raised when a player ends the game with ``quit``."""


@dataclass(slots=True)
class GameController:
    """Alternates the choosing and action phases until the cards run out."""

    state: GameState
    console: Console = field(default_factory=Console)
    read_line: ReadLine | None = None

    def _say(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False)

    def _ask(self, prompt: str) -> str:
        reader = self.read_line if self.read_line is not None else self.console.input
        try:
            return reader(prompt)
        except EOFError:
            raise GameQuit("input closed") from None

    def choosing_phase(self, player: PlayerState) -> None:
        """Let ``player`` move up to two hand cards into the chosen pool."""

        picks = min(CHOICES_PER_ROUND, len(player.hand))
        for ordinal in _ORDINALS[:picks]:
            self.console.print(render_player(player))
            self._say(f"Please choose a {ordinal} card to keep:")
            while True:
                command = commands.parse_choosing_command(self._ask(" > "))
                if isinstance(command, commands.Quit):
                    raise GameQuit(f"player {player.player_id} quit while choosing")
                if isinstance(command, commands.Invalid):
                    self._say(command.reason)
                    continue
                if player.choose(command.rank) is None:
                    self._say(commands.NOT_IN_HAND)
                    continue
                break

    def action_phase(self, player: PlayerState) -> None:
        """Read commands from ``player`` until the chosen pool is empty."""

        if player.chosen.is_empty():
            return
        self.console.print(render_player(player))
        while not player.chosen.is_empty():
            command = commands.parse_action_command(self._ask(f"P{player.player_id} > "))
            if isinstance(command, commands.Quit):
                raise GameQuit(f"player {player.player_id} quit during the action phase")
            if isinstance(command, commands.Help):
                self._say(commands.HELP_TEXT)
                continue
            if isinstance(command, commands.Invalid):
                self._say(command.reason)
                continue
            try:
                if isinstance(command, commands.Place):
                    rules.place_chosen_card(player, command.row, command.rank)
                else:
                    rules.discard_chosen_card(player, command.rank)
            except CardNotFound:
                self._say(commands.NOT_IN_CHOSEN)
                continue
            except rules.IllegalPlacement:
                self._say(commands.CANNOT_EXTEND_ROW)
                continue
            self.console.print(render_player(player))

    def play_round(self) -> None:
        self.state.round_number += 1
        logger.debug("round %d starts", self.state.round_number)
        self.console.rule("CARD CHOOSING PHASE")
        for player in self.state.players:
            self.choosing_phase(player)
        self.state.exchange_hands()
        self.console.rule("ACTION PHASE")
        for player in self.state.players:
            self.action_phase(player)

    def run(self) -> scoreboard.GameResult | None:
        """Play until the game ends; return ``None`` when a player quits."""

        try:
            while not self.state.is_over:
                self.play_round()
        except GameQuit as exc:
            logger.info("game ended early: %s", exc)
            return None

        result = scoreboard.build_result(self.state.players)
        self.console.rule("GAME END")
        for player in self.state.players:
            self.console.print(render_player(player, show_points=True))
        self.console.print(render_result(result))
        self._say(scoreboard.format_report(result))
        return result
