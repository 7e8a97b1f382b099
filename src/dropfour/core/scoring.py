from __future__ import annotations
from typing import Sequence

from dropfour.core.board import Board
from dropfour.core.rules import Coord, windows
from dropfour.types import Cell, Player, other

WIN_SCORE = 100
THREE_SCORE = 5
TWO_SCORE = 2
OPP_WIN_SCORE = -100
OPP_THREE_SCORE = -4
CENTER_PIECE_SCORE = 3


def _score_window(board: Board, coords: Sequence[Coord], player: Player) -> int:
    opp = other(player)
    cells = [board.grid[r][c] for (r, c) in coords]

    p_count = cells.count(player)
    o_count = cells.count(opp)
    e_count = cells.count(Cell.EMPTY)

    # mixed window: nobody can finish it
    if p_count > 0 and o_count > 0:
        return 0

    if p_count == 4:
        return WIN_SCORE
    if p_count == 3 and e_count == 1:
        return THREE_SCORE
    if p_count == 2 and e_count == 2:
        return TWO_SCORE

    if o_count == 4:
        return OPP_WIN_SCORE
    if o_count == 3 and e_count == 1:
        return OPP_THREE_SCORE

    return 0


def evaluate(board: Board, player: Player) -> int:
    """
    Static score of ``board`` from ``player``'s side.

    Every 4-cell window contributes according to who can still complete it;
    each of ``player``'s pieces in the centre column adds a small bonus since
    that column belongs to more windows than any other.
    """
    score = 0

    center = board.cols // 2
    for r in range(board.rows):
        if board.grid[r][center] is player:
            score += CENTER_PIECE_SCORE

    for coords in windows(board.rows, board.cols):
        score += _score_window(board, coords, player)

    return score
