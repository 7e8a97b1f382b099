from __future__ import annotations
from dataclasses import dataclass, field
import random

from dropfour.core.board import Board
from dropfour.types import Cell, Move, Player


@dataclass(slots=True)
class EasyAgent:
    name: str = "Easy AI"
    player: Player = Cell.PLAYER2
    rng: random.Random = field(default_factory=random.Random)

    def choose_move(self, board: Board) -> Move:
        cols = board.valid_columns()
        if not cols:
            raise RuntimeError("No valid moves.")
        c = self.rng.choice(cols)
        return Move(board.lowest_empty_row(c), c)
