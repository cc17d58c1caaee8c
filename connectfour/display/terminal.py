"""Terminal presentation: ASCII board, event-driven display, prompt input."""

import logging

import typer

from ..core.bus import EventBus
from ..core.config import Settings, UISettings, get_settings
from ..core.events import Event, EventType
from ..core.types import Board, GameSetup, GameState, Player
from ..session.interface import DisplaySurface, InputSource, SetupProvider


logger = logging.getLogger(__name__)

# Colors the terminal can draw; anything else is shown unstyled.
TERMINAL_COLORS = {
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
    "bright_black", "bright_red", "bright_green", "bright_yellow",
    "bright_blue", "bright_magenta", "bright_cyan", "bright_white",
}


def piece_symbol(player: Player, players: tuple[Player, Player], ui: UISettings) -> str:
    """Symbol for one of ``player``'s pieces.

    The glyph comes from the player's seat, so the two players never share
    one; the color only tints it when the terminal knows that color.
    """
    symbol = ui.player_symbols[players.index(player)]
    if player.color in TERMINAL_COLORS:
        return typer.style(symbol, fg=player.color)
    return symbol


def render_board(
    board: Board, players: tuple[Player, Player], ui: UISettings | None = None
) -> str:
    """Convert board to ASCII display, column numbers on top."""
    ui = ui or get_settings().ui
    cell_width = max(3, len(str(board.width - 1)) + 2)

    lines = []
    lines.append(" " + "".join(str(col).center(cell_width) for col in range(board.width)))
    lines.append("+" + ("-" * cell_width) * board.width + "+")

    for row in board.grid:
        cells = []
        for cell in row:
            symbol = ui.empty_symbol if cell is None else piece_symbol(cell, players, ui)
            # Styled symbols carry escape codes, so pad around the visible glyph.
            visible = len(ui.empty_symbol) if cell is None else len(ui.player_symbols[players.index(cell)])
            left = (cell_width - visible) // 2
            cells.append(" " * left + symbol + " " * max(0, cell_width - visible - left))
        lines.append("|" + "".join(cells) + "|")

    lines.append("+" + ("-" * cell_width) * board.width + "+")
    return "\n".join(lines)


class TerminalDisplay(DisplaySurface):
    """Echoes engine events to the terminal.

    Keeps its own copy of the board, built from the events alone, so it
    never reads engine state.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.board: Board | None = None
        self.players: tuple[Player, Player] | None = None
        self._handlers = {
            EventType.GAME_STARTED: self._on_game_started,
            EventType.GAME_RESET: self._on_game_started,
            EventType.PIECE_PLACED: self._on_piece_placed,
            EventType.TURN_CHANGED: self._on_turn_changed,
            EventType.GAME_WON: self._on_game_won,
            EventType.GAME_DRAW: self._on_game_draw,
        }

    def attach(self, bus: EventBus) -> None:
        for event_type, handler in self._handlers.items():
            bus.subscribe(event_type, handler)

    def detach(self, bus: EventBus) -> None:
        for event_type, handler in self._handlers.items():
            bus.unsubscribe(event_type, handler)

    def _on_game_started(self, event: Event) -> None:
        self.board = Board(width=event.data["width"], height=event.data["height"])
        player1, player2 = self.players = tuple(event.data["players"])
        typer.echo(f"\n{player1.name} ({player1.color}) vs {player2.name} ({player2.color})")
        typer.echo(render_board(self.board, self.players, self.settings.ui))
        typer.echo(f"{event.data['current_player'].name} to move")

    def _on_piece_placed(self, event: Event) -> None:
        if self.board is None or self.players is None:
            logger.warning("Piece placed before any game started")
            return
        self.board.grid[event.data["row"]][event.data["column"]] = event.data["player"]
        typer.echo(render_board(self.board, self.players, self.settings.ui))

    def _on_turn_changed(self, event: Event) -> None:
        typer.echo(f"{event.data['player'].name} to move")

    def _on_game_won(self, event: Event) -> None:
        typer.echo(f"\n{event.data['winner'].name} won!")

    def _on_game_draw(self, event: Event) -> None:
        typer.echo("\nTie!")


class TerminalInput(InputSource):
    """Reads column numbers from the keyboard. 'q' quits."""

    def next_column(self, state: GameState) -> int | None:
        while True:
            user_input = typer.prompt(f"{state.current_player.name}, column")
            if user_input.strip().lower() == "q":
                return None
            try:
                return int(user_input)
            except ValueError:
                typer.echo(f"Enter a number 0-{state.board.width - 1}, or q to quit")


class PromptSetupProvider(SetupProvider):
    """Asks for both colors in the terminal.

    Colors are asked on the first start only; restarts keep them.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def get_setup(self, first_start: bool) -> GameSetup | None:
        players = self.settings.players
        if not first_start:
            return None

        color1 = typer.prompt(f"{players.player1_name} color", default=players.player1_color)
        color2 = typer.prompt(f"{players.player2_name} color", default=players.player2_color)
        return GameSetup(
            width=self.settings.game.width,
            height=self.settings.game.height,
            player1=Player(name=players.player1_name, color=color1.strip()),
            player2=Player(name=players.player2_name, color=color2.strip()),
        )
