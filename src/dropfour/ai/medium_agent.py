from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random

from dropfour.ai.tactics import find_best_strategic_move, find_winning_move
from dropfour.config import MEDIUM_STRATEGIC_PROBABILITY
from dropfour.core.board import Board
from dropfour.types import Cell, Move, Player, other

log = logging.getLogger(__name__)

CENTER_PREFERENCE = (3, 2, 4, 1, 5, 0, 6)


@dataclass(slots=True)
class MediumAgent:
    """
    Cheap tactical agent, re-evaluated from scratch every turn:
      1) Play an immediate winning move if available
      2) Block the opponent's immediate winning move
      3) Most of the time, take the best threat-score move
      4) Otherwise a shuffled centre-first pick
    """
    name: str = "Medium AI"
    player: Player = Cell.PLAYER2
    strategic_probability: float = MEDIUM_STRATEGIC_PROBABILITY
    rng: random.Random = field(default_factory=random.Random)

    last_info: dict = field(default_factory=dict)

    def choose_move(self, board: Board) -> Move:
        if not board.valid_columns():
            raise RuntimeError("No valid moves.")

        me = self.player
        opp = other(me)

        # 1) win now
        m = find_winning_move(board, me)
        if m.found:
            return self._chose(m, "win")

        # 2) block opponent win
        m = find_winning_move(board, opp)
        if m.found:
            return self._chose(m, "block")

        # 3) strategic
        m, score = find_best_strategic_move(board, me)
        if m.found and score > 0 and self.rng.random() < self.strategic_probability:
            return self._chose(m, "strategic")

        # 4) centre-biased random
        return self._chose(self._random_center_biased(board), "random")

    def _random_center_biased(self, board: Board) -> Move:
        order = [c for c in CENTER_PREFERENCE if c < board.cols]
        self.rng.shuffle(order)
        for c in order:
            r = board.lowest_empty_row(c)
            if r >= 0:
                return Move(r, c)

        # boards wider than the preference list
        c = self.rng.choice(board.valid_columns())
        return Move(board.lowest_empty_row(c), c)

    def _chose(self, move: Move, reason: str) -> Move:
        self.last_info = {"move_col": move.column + 1, "reason": reason}
        log.debug("%s plays column %d (%s)", self.name, move.column + 1, reason)
        return move
