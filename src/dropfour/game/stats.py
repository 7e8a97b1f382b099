from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, List

from dropfour.game.events import SessionEnded
from dropfour.types import Cell, Mode, Outcome


@dataclass
class ModeStats:
    games: int = 0
    player1_wins: int = 0   # PvP seat 1, or the human in a computer game
    player2_wins: int = 0   # PvP seat 2 only
    computer_wins: int = 0
    draws: int = 0


@dataclass
class StatsTracker:
    """Session-end listener that keeps per-mode counters for the stats screen."""
    by_mode: Dict[Mode, ModeStats] = field(default_factory=lambda: {m: ModeStats() for m in Mode})

    def __call__(self, event: SessionEnded) -> None:
        self.record(event)

    def record(self, event: SessionEnded) -> None:
        if event.mode is None:
            return

        s = self.by_mode[event.mode]
        s.games += 1

        if event.outcome is Outcome.DRAW:
            s.draws += 1
        elif event.outcome is Outcome.COMPUTER_WIN:
            s.computer_wins += 1
        elif event.winner is Cell.PLAYER2:
            s.player2_wins += 1
        else:
            s.player1_wins += 1

    @property
    def total_games(self) -> int:
        return sum(s.games for s in self.by_mode.values())

    def rows(self) -> List[dict]:
        return [{"mode": m.value, **asdict(s)} for m, s in self.by_mode.items()]
