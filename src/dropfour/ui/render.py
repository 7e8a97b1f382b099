from __future__ import annotations
from typing import Optional, Iterable, List, Tuple, Set

from dropfour.core.board import Board
from dropfour.types import Cell
from dropfour.ui.colors import BOLD, DIM, FG_CYAN, PIECE_COLORS, REVERSE, paint
from dropfour.ui.console import clear_screen

Coord = Tuple[int, int]

PLAYER_LABELS = {
    Cell.PLAYER1: "Player 1 (Red)",
    Cell.PLAYER2: "Player 2 (Yellow)",
}

SYMBOLS = {Cell.EMPTY: "·", Cell.PLAYER1: "R", Cell.PLAYER2: "Y"}


def _piece(cell: Cell, lit: bool = False) -> str:
    if lit:
        return paint(SYMBOLS[cell], PIECE_COLORS[cell], REVERSE)
    return paint(SYMBOLS[cell], PIECE_COLORS[cell])


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> List[str]:
    """Column numbers, one line per row top to bottom, then a base rule."""
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [paint("   " + " ".join(str(i + 1) for i in range(board.cols)), DIM)]
    for r, row in enumerate(board.snapshot()):
        cells = " ".join(_piece(cell, (r, col) in hl) for col, cell in enumerate(row))
        lines.append(f" | {cells} |")
    lines.append(paint("   " + "—" * (2 * board.cols - 1), DIM))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(paint("CONNECT 4", BOLD))
    print(paint(status, FG_CYAN) if status else "")

    for line in board_lines(board, highlight):
        print(line)
    print(paint(f"   Enter 1-{board.cols} to drop. Enter q to quit.", DIM))
