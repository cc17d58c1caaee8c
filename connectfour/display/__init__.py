"""Presentation layer for Connect Four."""

from .html import board_html
from .terminal import (
    PromptSetupProvider,
    TerminalDisplay,
    TerminalInput,
    piece_symbol,
    render_board,
)


__all__ = [
    "PromptSetupProvider",
    "TerminalDisplay",
    "TerminalInput",
    "board_html",
    "piece_symbol",
    "render_board",
]
