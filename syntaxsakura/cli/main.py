"""Typer entry-point wiring for the SyntaxSakura CLI."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..config import (
    MEMORY_ALLOCATION_ERROR,
    WRONG_ARGUMENT_COUNT,
    ConfigError,
    append_results,
    load_config,
)
from ..scoreboard import format_report
from ..state import new_game_state
from .controller import GameController

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _say(message: str) -> None:
    console.print(message, markup=False, highlight=False)


@app.command()
def play(
    config_files: list[Path] | None = typer.Argument(
        None,
        help="Deck configuration file (ESP format).",
        show_default=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine events to stderr."),
) -> None:
    """Play a game of SyntaxSakura for two players at one console."""

    _configure_logging(verbose)
    if not config_files or len(config_files) != 1:
        _say("Usage: syntaxsakura <config file>")
        raise typer.Exit(code=WRONG_ARGUMENT_COUNT)
    config_path = config_files[0]

    try:
        config = load_config(config_path)
        _say(f"Welcome to SyntaxSakura ({config.player_count} players are playing)!\n")
        controller = GameController(state=new_game_state(config.cards), console=console)
        result = controller.run()
    except ConfigError as exc:
        logger.debug("rejected %s: %s", exc.path, exc.detail)
        _say(exc.message)
        raise typer.Exit(code=exc.exit_code) from None
    except MemoryError:
        _say("Error: Out of memory")
        raise typer.Exit(code=MEMORY_ALLOCATION_ERROR) from None

    if result is None:
        return
    if not append_results(config_path, format_report(result)):
        _say("Warning: Results not written to file!")


def main() -> None:
    """Entry-point for the ``syntaxsakura`` console script."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
