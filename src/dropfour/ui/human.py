from __future__ import annotations
from typing import Callable

from dropfour.core.board import Board
from dropfour.types import Player
from dropfour.ui.prompts import parse_move
from dropfour.ui.render import PLAYER_LABELS


class GameQuit(Exception):
    """The human typed q at the move prompt."""


class ConsoleInput:
    name = "Human"

    def __init__(self, read: Callable[[str], str] = input, say: Callable[[str], None] = print) -> None:
        self.read = read
        self.say = say

    def choose_column(self, board: Board, player: Player) -> int:
        while True:
            raw = self.read(f"{PLAYER_LABELS[player]} move: ")
            try:
                col = parse_move(raw, board.cols)
            except ValueError as e:
                self.say(str(e))
                continue
            if col is None:
                raise GameQuit()
            return col

    def column_rejected(self, column: int, player: Player) -> None:
        self.say(f"Column {column + 1} is full, please choose another column.")
