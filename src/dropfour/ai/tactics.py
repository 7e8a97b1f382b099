from __future__ import annotations

from dropfour.core.board import Board
from dropfour.core.rules import check_win, run_length
from dropfour.types import Move, NO_MOVE, Player

# Positional bonus per column for the threat heuristic (centre-heavy)
COLUMN_BONUS = (0, 1, 2, 3, 2, 1, 0)


def find_winning_move(board: Board, player: Player) -> Move:
    """
    First column (ascending) where ``player`` would complete a line right now.
    Each candidate is placed, checked and cleared again, so the board is left
    exactly as it was.
    """
    for c in board.valid_columns():
        r = board.lowest_empty_row(c)
        board.place(r, c, player)
        wins = check_win(board, Move(r, c), player)
        board.clear(r, c)
        if wins:
            return Move(r, c)
    return NO_MOVE


def count_threats(board: Board, row: int, col: int, player: Player) -> int:
    """
    Raw adjacency score for dropping ``player`` at (row, col): the horizontal
    and vertical runs the piece would sit in, each counted only once it
    reaches two.
    """
    board.place(row, col, player)
    threats = 0
    for axis in ((0, 1), (1, 0)):
        n = run_length(board, row, col, axis, player)
        if n >= 2:
            threats += n
    board.clear(row, col)
    return threats


def column_bonus(col: int, cols: int) -> int:
    if cols == len(COLUMN_BONUS):
        return COLUMN_BONUS[col]
    return max(0, 3 - abs(col - cols // 2))


def find_best_strategic_move(board: Board, player: Player) -> tuple[Move, int]:
    """Highest threat score plus column bonus; ties keep the lowest column."""
    best_move = NO_MOVE
    best_score = -1

    for c in board.valid_columns():
        r = board.lowest_empty_row(c)
        score = count_threats(board, r, c, player) + column_bonus(c, board.cols)
        if score > best_score:
            best_score = score
            best_move = Move(r, c)

    return best_move, best_score
