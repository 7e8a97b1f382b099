from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional

from dropfour.types import Mode, Outcome, Player


@dataclass(frozen=True, slots=True)
class SessionEnded:
    mode: Optional[Mode]  # None for headless AI-vs-AI matches
    outcome: Outcome
    winner: Optional[Player]
    plies: int


Listener = Callable[[SessionEnded], None]
