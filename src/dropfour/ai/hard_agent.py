from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import logging
import time

from dropfour.ai.tactics import find_winning_move
from dropfour.config import HARD_SEARCH_DEPTH
from dropfour.core.board import Board
from dropfour.core.rules import is_finished
from dropfour.core.scoring import evaluate
from dropfour.types import Cell, Move, NO_MOVE, Player, other

log = logging.getLogger(__name__)


@dataclass(slots=True)
class HardAgent:
    """
    Depth-limited minimax with alpha-beta pruning.

    The search places and clears pieces on the board it is given instead of
    copying it, so one board must never be searched by two callers at once.
    ``prune=False`` runs the same search without cutoffs.
    """
    name: str = "Hard AI"
    player: Player = Cell.PLAYER2
    depth: int = HARD_SEARCH_DEPTH
    prune: bool = True

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0
    _cutoffs: int = 0

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {self.depth}.")

    def choose_move(self, board: Board) -> Move:
        if not board.valid_columns():
            raise RuntimeError("No valid moves.")

        start = time.perf_counter()
        self._nodes = 0
        self._cutoffs = 0

        reason = "search"
        best_score: float = 0

        move = find_winning_move(board, self.player)
        if move.found:
            reason = "win"
        else:
            move = find_winning_move(board, other(self.player))
            if move.found:
                reason = "block"
            else:
                move, best_score = self.search(board)

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": self.depth if reason == "search" else 1,
            "nodes": self._nodes,
            "cutoffs": self._cutoffs,
            "eval": int(best_score) if best_score not in (inf, -inf) else best_score,
            "move_col": move.column + 1,
            "reason": reason,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        log.debug("%s search: %s", self.name, self.last_info)
        return move

    def search(self, board: Board) -> tuple[Move, float]:
        """Root of the search: best column for ``self.player``; ties keep the lowest column."""
        me = self.player
        alpha = -inf
        beta = inf

        best_move = NO_MOVE
        best_score = -inf

        for c in board.valid_columns():
            r = board.lowest_empty_row(c)
            board.place(r, c, me)
            score = self.minimax(board, self.depth - 1, alpha, beta, False)
            board.clear(r, c)

            if score > best_score:
                best_score = score
                best_move = Move(r, c)
            if self.prune:
                alpha = max(alpha, best_score)

        return best_move, best_score

    def minimax(self, board: Board, depth: int, alpha: float, beta: float, maximizing: bool) -> float:
        self._nodes += 1

        if depth <= 0 or is_finished(board):
            return evaluate(board, self.player)

        cols = board.valid_columns()
        if not cols:
            return 0

        if maximizing:
            piece = self.player
            best = -inf
            for c in cols:
                r = board.lowest_empty_row(c)
                board.place(r, c, piece)
                best = max(best, self.minimax(board, depth - 1, alpha, beta, False))
                board.clear(r, c)

                alpha = max(alpha, best)
                if self.prune and beta <= alpha:
                    self._cutoffs += 1
                    break
            return best

        piece = other(self.player)
        worst = inf
        for c in cols:
            r = board.lowest_empty_row(c)
            board.place(r, c, piece)
            worst = min(worst, self.minimax(board, depth - 1, alpha, beta, True))
            board.clear(r, c)

            beta = min(beta, worst)
            if self.prune and beta <= alpha:
                self._cutoffs += 1
                break
        return worst
