from __future__ import annotations

from dropfour.config import USE_COLOR
from dropfour.types import Cell

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

PIECE_COLORS = {
    Cell.EMPTY: FG_GRAY,
    Cell.PLAYER1: FG_RED,
    Cell.PLAYER2: FG_YELLOW,
}


def paint(text: str, *codes: str) -> str:
    """Wrap ``text`` in the given ANSI codes, unless colour is switched off."""
    if not USE_COLOR or not codes:
        return text
    return "".join(codes) + text + RESET
