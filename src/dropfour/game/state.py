from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from dropfour.core.board import Board
from dropfour.types import Cell, Move, Player


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Player = Cell.PLAYER1
    move_count: int = 0
    status: Status = Status.IN_PROGRESS
    winner: Optional[Player] = None
    last_move: Optional[Move] = None

    @property
    def finished(self) -> bool:
        return self.status is not Status.IN_PROGRESS
