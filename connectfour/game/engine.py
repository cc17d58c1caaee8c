"""Game engine for Connect Four state management."""

import logging

from ..core.bus import EventBus, get_event_bus
from ..core.events import Event, EventType
from ..core.exceptions import GameAlreadyFinished, InvalidColumn, InvalidConfiguration
from ..core.types import (
    Board,
    DropOutcome,
    DropResult,
    GameState,
    Player,
    Position,
)
from .rules import Connect4Rules


logger = logging.getLogger(__name__)

DEFAULT_PLAYER1_NAME = "Player 1"
DEFAULT_PLAYER2_NAME = "Player 2"


class GameEngine:
    """Creates games, applies moves and decides outcomes.

    The engine never draws anything. Each state change is returned to the
    caller as a structured result and published on the event bus, where a
    display surface can pick it up.

    The engine remembers the players of the last successful configure() so
    that reset() can start a new game with the same colors. Game state is
    passed explicitly to drop_piece(), so several independent games can be
    driven by one engine.
    """

    def __init__(self, rules: Connect4Rules | None = None, bus: EventBus | None = None):
        """Initialize game engine.

        Args:
            rules: Game rules (uses defaults if None)
            bus: Event bus (uses global if None)
        """
        self.rules = rules or Connect4Rules()
        self.bus = bus or get_event_bus()
        self._state: GameState | None = None
        self._width: int | None = None
        self._height: int | None = None
        self._players: tuple[Player, Player] | None = None

    def configure(
        self,
        width: int,
        height: int,
        player1_color: str,
        player2_color: str,
        player1_name: str = DEFAULT_PLAYER1_NAME,
        player2_name: str = DEFAULT_PLAYER2_NAME,
    ) -> GameState:
        """Start a fresh game.

        Args:
            width: Number of columns
            height: Number of rows
            player1_color: Color token of the first player (moves first)
            player2_color: Color token of the second player
            player1_name: Display name of the first player
            player2_name: Display name of the second player

        Returns:
            New game state with an empty board and player 1 to move

        Raises:
            InvalidConfiguration: Colors are equal or dimensions not positive
        """
        if player1_color == player2_color:
            raise InvalidConfiguration(
                f"Players must have different colors (both chose {player1_color!r})"
            )
        if width < 1 or height < 1:
            raise InvalidConfiguration(
                f"Board dimensions must be positive, got {width}x{height}"
            )

        player1 = Player(name=player1_name, color=player1_color)
        player2 = Player(name=player2_name, color=player2_color)
        self._width, self._height = width, height
        self._players = (player1, player2)
        logger.info(
            "Configured %dx%d board: %s=%s, %s=%s",
            width, height, player1.name, player1.color, player2.name, player2.color,
        )
        return self._new_game(EventType.GAME_STARTED)

    def reset(self) -> GameState:
        """Start a new game with the previously configured board and players.

        Raises:
            InvalidConfiguration: configure() has never succeeded
        """
        if self._players is None:
            raise InvalidConfiguration("Nothing to reset: configure a game first")
        logger.info("Restarting game with the same players")
        return self._new_game(EventType.GAME_RESET)

    def _new_game(self, event_type: EventType) -> GameState:
        assert self._players is not None and self._width is not None and self._height is not None
        player1, player2 = self._players
        self._state = GameState(
            board=Board(width=self._width, height=self._height),
            player1=player1,
            player2=player2,
            current_player=player1,
        )
        self.bus.publish(Event(
            type=event_type,
            data={
                "width": self._width,
                "height": self._height,
                "players": [player1, player2],
                "current_player": player1,
            },
            source="game_engine"
        ))
        return self._state

    def drop_piece(self, state: GameState, column: int) -> DropResult:
        """Drop the current player's piece into ``column``.

        Args:
            state: Game to play in (mutated on success)
            column: Column index, 0 = leftmost

        Returns:
            DropResult describing the filled cell and the outcome. A full
            column is reported as COLUMN_FULL and leaves the state untouched.

        Raises:
            GameAlreadyFinished: The game has already been won or drawn
            InvalidColumn: Column index is outside the board
        """
        mover = state.current_player

        if state.finished:
            self._reject(column, mover, "game_finished")
            raise GameAlreadyFinished("The game is over; reset to play again")

        try:
            row = self.rules.get_landing_row(state.board, column)
        except InvalidColumn:
            self._reject(column, mover, "invalid_column")
            raise

        if row is None:
            logger.debug("Column %d is full, ignoring drop", column)
            self.bus.publish(Event(
                type=EventType.COLUMN_FULL,
                data={"column": column, "player": mover},
                source="game_engine"
            ))
            return DropResult(outcome=DropOutcome.COLUMN_FULL, column=column, player=mover)

        position = Position(row=row, col=column)
        state.board.grid[row][column] = mover
        state.moves_played += 1
        logger.debug("%s placed at (%d, %d)", mover.name, row, column)
        self.bus.publish(Event(
            type=EventType.PIECE_PLACED,
            data={"row": row, "column": column, "player": mover},
            source="game_engine"
        ))

        winning_positions = self.rules.find_winning_line(state.board, mover)
        if winning_positions:
            state.finished = True
            state.winner = mover
            state.winning_positions = winning_positions
            logger.info("%s wins after %d moves", mover.name, state.moves_played)
            self.bus.publish(Event(
                type=EventType.GAME_WON,
                data={"winner": mover, "positions": winning_positions},
                source="game_engine"
            ))
            return DropResult(
                outcome=DropOutcome.WIN,
                column=column,
                player=mover,
                position=position,
                winning_positions=winning_positions,
            )

        if self.rules.is_draw(state.board):
            state.finished = True
            logger.info("Game ends in a draw")
            self.bus.publish(Event(
                type=EventType.GAME_DRAW,
                source="game_engine"
            ))
            return DropResult(
                outcome=DropOutcome.DRAW, column=column, player=mover, position=position
            )

        next_player = state.other_player(mover)
        state.current_player = next_player
        self.bus.publish(Event(
            type=EventType.TURN_CHANGED,
            data={"player": next_player, "turn": state.moves_played + 1},
            source="game_engine"
        ))
        return DropResult(
            outcome=DropOutcome.CONTINUE,
            column=column,
            player=mover,
            position=position,
            next_player=next_player,
        )

    def check_win(self, state: GameState) -> bool:
        """True if the current player holds a complete line on the board."""
        return self.rules.check_win(state.board, state.current_player)

    def _reject(self, column: int, player: Player, reason: str) -> None:
        logger.warning("Rejected drop in column %s by %s: %s", column, player.name, reason)
        self.bus.publish(Event(
            type=EventType.INVALID_MOVE,
            data={"column": column, "player": player, "reason": reason},
            source="game_engine"
        ))

    @property
    def state(self) -> GameState | None:
        """Most recent game created by configure() or reset()."""
        return self._state

    @property
    def players(self) -> tuple[Player, Player] | None:
        """Players of the last successful configuration."""
        return self._players

    @property
    def is_game_over(self) -> bool:
        """Check if the most recent game is over."""
        return self._state is not None and self._state.finished
