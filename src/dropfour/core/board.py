
# src/dropfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

from dropfour.config import ROWS, COLS
from dropfour.errors import ColumnFullError
from dropfour.types import Cell, Player, Move

Snapshot = Tuple[Tuple[Cell, ...], ...]


@dataclass(slots=True)
class Board:
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.reset()

    def reset(self) -> None:
        self.grid = [[Cell.EMPTY for _ in range(self.cols)] for _ in range(self.rows)]

    def copy(self) -> "Board":
        return Board(self.rows, self.cols, [row[:] for row in self.grid])

    def snapshot(self) -> Snapshot:
        """Read-only view of the grid for renderers."""
        return tuple(tuple(row) for row in self.grid)

    def piece_count(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell is not Cell.EMPTY)

    def valid_columns(self) -> List[int]:
        return [c for c in range(self.cols) if self.grid[0][c] is Cell.EMPTY]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not Cell.EMPTY for c in range(self.cols))

    def lowest_empty_row(self, col: int) -> int:
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][col] is Cell.EMPTY:
                return r
        return -1

    def drop(self, col: int, player: Player) -> Move:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise ValueError(f"Column must be between 1 and {self.cols}.")

        r = self.lowest_empty_row(c)
        if r < 0:
            raise ColumnFullError(c)

        self.grid[r][c] = player
        return Move(r, c)

    def place(self, row: int, col: int, player: Player) -> None:
        """
        Put a piece on a known-empty cell without re-deriving gravity.
        Search code only; the caller guarantees the target is the lowest
        empty cell of its column.
        """
        assert player is not Cell.EMPTY, "place() needs a player piece"
        assert self.grid[row][col] is Cell.EMPTY, f"cell ({row}, {col}) is occupied"
        assert row == self.rows - 1 or self.grid[row + 1][col] is not Cell.EMPTY, (
            f"cell ({row}, {col}) would float"
        )
        self.grid[row][col] = player

    def clear(self, row: int, col: int) -> None:
        """Undo a ``place``. Clearing an empty cell is a search bug."""
        assert self.grid[row][col] is not Cell.EMPTY, f"cell ({row}, {col}) is already empty"
        self.grid[row][col] = Cell.EMPTY
