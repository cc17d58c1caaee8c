"""
CLI for the Connect Four game.

Usage:
    python -m connectfour.cli.main --help
    python -m connectfour.cli.main play
    python -m connectfour.cli.main play --width 7 --height 6 --no-prompt
    python -m connectfour.cli.main config
    python -m connectfour.cli.main dashboard
"""

import logging
import subprocess
import sys
from pathlib import Path
from typing import Annotated

import typer

from ..core.config import Settings, get_settings
from ..core.exceptions import GameError, InvalidConfiguration
from ..core.types import DropOutcome, DropResult
from ..display.terminal import PromptSetupProvider, TerminalDisplay, TerminalInput
from ..game.engine import GameEngine
from ..game.rules import Connect4Rules
from ..session.interface import SetupProvider
from ..session.providers import SettingsSetupProvider
from ..session.session import GameSession


logger = logging.getLogger(__name__)

app = typer.Typer(
    name="connectfour",
    help="Two-player Connect Four in the terminal.",
    add_completion=False,
)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def apply_overrides(
    settings: Settings,
    width: int | None = None,
    height: int | None = None,
    player1_color: str | None = None,
    player2_color: str | None = None,
) -> Settings:
    """Return a copy of ``settings`` with the command line options applied."""
    game_update = {k: v for k, v in {"width": width, "height": height}.items() if v is not None}
    players_update = {
        k: v
        for k, v in {
            "player1_color": player1_color,
            "player2_color": player2_color,
        }.items()
        if v is not None
    }
    return settings.model_copy(update={
        "game": settings.game.model_copy(update=game_update),
        "players": settings.players.model_copy(update=players_update),
    })


def play_game(session: GameSession) -> DropResult | None:
    """Play one game to the end. Returns None if the player quit."""
    while True:
        try:
            result = session.play_turn()
        except GameError as e:
            typer.echo(str(e), err=True)
            continue

        if result is None or result.is_game_over:
            return result
        if result.outcome == DropOutcome.COLUMN_FULL:
            logger.debug("Ignoring drop into full column %d", result.column)


@app.command()
def play(
    width: Annotated[int | None, typer.Option("--width", "-w", min=1, help="Number of columns")] = None,
    height: Annotated[int | None, typer.Option("--height", min=1, help="Number of rows")] = None,
    player1_color: Annotated[str | None, typer.Option("--player1-color", help="Color of player 1")] = None,
    player2_color: Annotated[str | None, typer.Option("--player2-color", help="Color of player 2")] = None,
    prompt: Annotated[bool, typer.Option("--prompt/--no-prompt", help="Ask for colors before the first game")] = True,
    log_level: Annotated[str | None, typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
):
    """
    Play Connect Four, two players taking turns at one keyboard.

    Examples:
        play                                  # pick colors, default 6x7 board
        play --width 7 --height 6 --no-prompt # colors from settings
    """
    settings = apply_overrides(
        get_settings(), width, height, player1_color, player2_color
    )
    setup_logging(log_level or settings.log_level)

    typer.echo("\n" + "=" * 50)
    typer.echo("  CONNECT FOUR")
    typer.echo("=" * 50)
    typer.echo("\nEnter a column number to drop a piece, 'q' to quit")

    provider: SetupProvider = PromptSetupProvider(settings) if prompt else SettingsSetupProvider(settings)
    engine = GameEngine(rules=Connect4Rules(win_length=settings.game.win_length))
    session = GameSession(engine, provider, TerminalInput(), TerminalDisplay(settings))

    try:
        while True:
            try:
                session.restart()
            except InvalidConfiguration as e:
                typer.echo(str(e), err=True)
                if not prompt:
                    raise typer.Exit(1) from e
                continue

            result = play_game(session)
            if result is None:
                typer.echo("Game quit.")
                return
            if not typer.confirm("Restart Game?", default=False):
                return
    finally:
        session.close()


@app.command()
def config():
    """Show the effective settings (environment and .env applied)."""
    typer.echo(get_settings().model_dump_json(indent=2))


@app.command()
def dashboard(
    port: Annotated[int, typer.Option("--port", help="Port for the streamlit server")] = 8501,
):
    """Launch the streamlit dashboard (color pickers, clickable columns)."""
    script = Path(__file__).resolve().parents[1] / "app" / "game_dashboard.py"
    cmd = [sys.executable, "-m", "streamlit", "run", str(script), "--server.port", str(port)]
    logger.info("Running: %s", " ".join(cmd))
    raise typer.Exit(subprocess.call(cmd))


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
