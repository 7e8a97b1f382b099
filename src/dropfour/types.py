# src/dropfour/types.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Cell(Enum):
    EMPTY = 0
    PLAYER1 = 1
    PLAYER2 = 2


Player = Cell  # only PLAYER1 / PLAYER2 are ever passed where a Player is expected


def other(player: Player) -> Player:
    return Cell.PLAYER2 if player is Cell.PLAYER1 else Cell.PLAYER1


@dataclass(frozen=True, slots=True)
class Move:
    row: int
    column: int

    @property
    def found(self) -> bool:
        return self.row >= 0


NO_MOVE = Move(-1, -1)


class Mode(Enum):
    PVP = "pvp"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Outcome(Enum):
    PLAYER_WIN = "player_win"
    COMPUTER_WIN = "computer_win"
    DRAW = "draw"
