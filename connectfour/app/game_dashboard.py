"""Streamlit dashboard for Connect Four.

Run with:
    streamlit run connectfour/app/game_dashboard.py
"""

import streamlit as st

from connectfour.core.bus import EventBus
from connectfour.core.config import get_settings
from connectfour.core.events import Event, EventType
from connectfour.core.exceptions import GameError
from connectfour.core.types import DropOutcome
from connectfour.display.html import board_html
from connectfour.game.engine import GameEngine
from connectfour.game.rules import Connect4Rules


LOGGED_EVENTS = (
    EventType.GAME_STARTED,
    EventType.GAME_RESET,
    EventType.PIECE_PLACED,
    EventType.GAME_WON,
    EventType.GAME_DRAW,
)


def describe_event(event: Event) -> str:
    """One line for the game log."""
    if event.type in (EventType.GAME_STARTED, EventType.GAME_RESET):
        player1, player2 = event.data["players"]
        verb = "Started" if event.type == EventType.GAME_STARTED else "Restarted"
        return f"{verb}: {player1.name} ({player1.color}) vs {player2.name} ({player2.color})"
    if event.type == EventType.PIECE_PLACED:
        return f"{event.data['player'].name} played column {event.data['column']}"
    if event.type == EventType.GAME_WON:
        return f"{event.data['winner'].name} won!"
    if event.type == EventType.GAME_DRAW:
        return "Tie!"
    return str(event)


def init_session_state():
    """Initialize session state."""
    settings = get_settings()

    if "engine" not in st.session_state:
        bus = EventBus()
        for event_type in LOGGED_EVENTS:
            bus.subscribe(
                event_type,
                lambda event: st.session_state.game_log.append(describe_event(event)),
            )
        st.session_state.engine = GameEngine(
            rules=Connect4Rules(win_length=settings.game.win_length), bus=bus
        )
        st.session_state.game = None
    if "game_log" not in st.session_state:
        st.session_state.game_log = []
    if "colors_picked" not in st.session_state:
        st.session_state.colors_picked = False
    if "message" not in st.session_state:
        st.session_state.message = ""


def render_color_picks() -> tuple[str, str]:
    """Color pickers shown before the first game."""
    players = get_settings().players
    col_a, col_b = st.columns(2)
    with col_a:
        color1 = st.color_picker(players.player1_name, value=_hex(players.player1_color, "#ff0000"))
    with col_b:
        color2 = st.color_picker(players.player2_name, value=_hex(players.player2_color, "#0000ff"))
    return color1, color2


def _hex(color: str, fallback: str) -> str:
    return color if color.startswith("#") and len(color) == 7 else fallback


def start_game(color1: str | None = None, color2: str | None = None):
    """Start the first game, or restart with the same colors."""
    engine: GameEngine = st.session_state.engine
    settings = get_settings()
    try:
        if color1 is None or color2 is None:
            st.session_state.game = engine.reset()
        else:
            st.session_state.game = engine.configure(
                settings.game.width,
                settings.game.height,
                color1,
                color2,
                player1_name=settings.players.player1_name,
                player2_name=settings.players.player2_name,
            )
            st.session_state.colors_picked = True
        st.session_state.message = ""
    except GameError as e:
        st.session_state.message = str(e)


def render_column_tops(game) -> None:
    """Clickable column tops; a click drops a piece in that column."""
    cols = st.columns(game.board.width)
    for i in range(game.board.width):
        with cols[i]:
            disabled = game.finished or i not in game.legal_columns()
            if st.button("⬇", key=f"col_{i}", disabled=disabled, width="stretch"):
                drop(i)


def drop(column: int):
    """Handle a column click."""
    engine: GameEngine = st.session_state.engine
    game = st.session_state.game
    try:
        result = engine.drop_piece(game, column)
    except GameError as e:
        st.session_state.message = str(e)
        st.rerun()

    if result.outcome != DropOutcome.COLUMN_FULL:
        st.session_state.message = result.message
    st.rerun()


def render_game_log():
    st.subheader("📝 Game Log")
    for line in reversed(st.session_state.game_log[-20:]):
        st.text(line)


def main():
    st.set_page_config(page_title="Connect Four", layout="wide")
    init_session_state()

    st.title("Connect Four")
    col_board, col_status = st.columns([3, 1])

    with col_board:
        game = st.session_state.game
        if not st.session_state.colors_picked:
            color1, color2 = render_color_picks()
            if st.button("Start Game", type="primary"):
                start_game(color1, color2)
                st.rerun()
        elif game is not None and game.finished:
            if st.button("Restart Game", type="primary"):
                start_game()
                st.rerun()

        if st.session_state.message:
            if game is not None and game.finished:
                st.success(st.session_state.message)
            else:
                st.warning(st.session_state.message)

        if game is not None:
            render_column_tops(game)
            st.markdown(
                board_html(game, cell_size_px=get_settings().ui.cell_size_px),
                unsafe_allow_html=True,
            )

    with col_status:
        game = st.session_state.game
        if game is not None and not game.finished:
            st.markdown(f"**Turn:** {game.current_player.name}")
            st.markdown(f"**Move:** {game.moves_played + 1}")
        st.markdown("---")
        render_game_log()


if __name__ == "__main__":
    main()
