from __future__ import annotations

from typing import List, Sequence, Tuple

import pytest

from dropfour.core.board import Board
from dropfour.types import Cell, Move, Player

CHARS = {".": Cell.EMPTY, "1": Cell.PLAYER1, "2": Cell.PLAYER2}

# Row-by-row fill that ends in a 42-ply draw when players alternate from Player 1
DRAW_SEQUENCE = [0, 2, 1, 3, 4, 6, 5] * 6


def make_board(*rows: str) -> Board:
    """Rows are given top (row 0) to bottom (row 5): '.', '1' or '2' per cell."""
    b = Board()
    assert len(rows) == b.rows
    for r, line in enumerate(rows):
        assert len(line) == b.cols
        for c, ch in enumerate(line):
            b.grid[r][c] = CHARS[ch]
    return b


@pytest.fixture
def board_from():
    return make_board


@pytest.fixture
def draw_sequence() -> List[int]:
    return list(DRAW_SEQUENCE)


class ScriptedInput:
    """Input source that replays a fixed list of columns."""

    def __init__(self, columns: Sequence[int]) -> None:
        self.columns = list(columns)
        self.asked: List[Player] = []
        self.rejected: List[Tuple[int, Player]] = []

    def choose_column(self, board: Board, player: Player) -> int:
        self.asked.append(player)
        return self.columns.pop(0)

    def column_rejected(self, column: int, player: Player) -> None:
        self.rejected.append((column, player))


class ColumnStrategy:
    """Strategy stub that plays a fixed list of columns."""

    def __init__(self, columns: Sequence[int], player: Player = Cell.PLAYER2, name: str = "Scripted AI") -> None:
        self.columns = list(columns)
        self.player = player
        self.name = name

    def choose_move(self, board: Board) -> Move:
        c = self.columns.pop(0)
        return Move(board.lowest_empty_row(c), c)


@pytest.fixture
def scripted_input():
    return ScriptedInput


@pytest.fixture
def column_strategy():
    return ColumnStrategy
