from __future__ import annotations


class ColumnFullError(ValueError):
    """Raised by ``Board.drop`` when the chosen column has no empty cell."""

    def __init__(self, column: int) -> None:
        super().__init__(f"Column {column + 1} is full.")
        self.column = column
