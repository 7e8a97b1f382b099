from __future__ import annotations
from functools import lru_cache
from typing import Optional, List, Tuple

from dropfour.config import CONNECT_N
from dropfour.core.board import Board
from dropfour.types import Cell, Player, Move

Coord = Tuple[int, int]  # (row, col)
Window = Tuple[Coord, ...]

# (d_row, d_col) for vertical, horizontal, "/" and "\"
AXES: Tuple[Coord, ...] = ((1, 0), (0, 1), (-1, 1), (1, 1))


@lru_cache(maxsize=None)
def windows(rows: int, cols: int, n: int = CONNECT_N) -> Tuple[Window, ...]:
    """Every run of ``n`` contiguous cells that fits on a rows x cols board."""
    out: List[Window] = []

    # Horizontal
    for r in range(rows):
        for c in range(cols - n + 1):
            out.append(tuple((r, c + i) for i in range(n)))

    # Vertical
    for r in range(rows - n + 1):
        for c in range(cols):
            out.append(tuple((r + i, c) for i in range(n)))

    # Diagonal down-right "\"
    for r in range(rows - n + 1):
        for c in range(cols - n + 1):
            out.append(tuple((r + i, c + i) for i in range(n)))

    # Diagonal up-right "/"
    for r in range(n - 1, rows):
        for c in range(cols - n + 1):
            out.append(tuple((r - i, c + i) for i in range(n)))

    return tuple(out)


def _run(board: Board, row: int, col: int, dr: int, dc: int, player: Player) -> int:
    n = 0
    r, c = row + dr, col + dc
    while 0 <= r < board.rows and 0 <= c < board.cols and board.grid[r][c] is player:
        n += 1
        r += dr
        c += dc
    return n


def run_length(board: Board, row: int, col: int, axis: Coord, player: Player) -> int:
    """Length of the same-player line through (row, col) along one axis, counting the cell itself."""
    dr, dc = axis
    return 1 + _run(board, row, col, dr, dc, player) + _run(board, row, col, -dr, -dc, player)


def check_win(board: Board, last_move: Move, player: Player) -> bool:
    """
    Did ``last_move`` complete a line for ``player``?
    Only the four lines through the new piece can have changed, so nothing
    else on the board is looked at.
    """
    r, c = last_move.row, last_move.column
    return any(run_length(board, r, c, axis, player) >= CONNECT_N for axis in AXES)


def winner_with_line(board: Board) -> Optional[Tuple[Player, List[Coord]]]:
    g = board.grid
    for window in windows(board.rows, board.cols):
        r0, c0 = window[0]
        p = g[r0][c0]
        if p is not Cell.EMPTY and all(g[r][c] is p for (r, c) in window[1:]):
            return p, list(window)
    return None


def has_winner(board: Board) -> bool:
    return winner_with_line(board) is not None


def is_finished(board: Board) -> bool:
    return board.is_full() or has_winner(board)


def is_draw(board: Board) -> bool:
    return board.is_full() and not has_winner(board)
