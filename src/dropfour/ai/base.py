from __future__ import annotations
from typing import Protocol

from dropfour.core.board import Board
from dropfour.types import Move, Player


class Strategy(Protocol):
    name: str
    player: Player

    def choose_move(self, board: Board) -> Move:
        ...
