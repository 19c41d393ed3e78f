"""Top-level package for the SyntaxSakura card game engine."""

from . import cards, commands, config, rules, scoreboard, sequence, state

__all__ = [
    "cards",
    "commands",
    "config",
    "rules",
    "scoreboard",
    "sequence",
    "state",
]
