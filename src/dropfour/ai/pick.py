from __future__ import annotations

import random
from typing import Optional

from dropfour.ai.base import Strategy
from dropfour.config import HARD_SEARCH_DEPTH
from dropfour.types import Cell, Mode, Player


def agent_for(
    mode: Mode,
    player: Player = Cell.PLAYER2,
    *,
    seed: Optional[int] = None,
    depth: int = HARD_SEARCH_DEPTH,
) -> Strategy:
    """Build the computer opponent for a difficulty mode."""
    from dropfour.ai.easy_agent import EasyAgent
    from dropfour.ai.medium_agent import MediumAgent
    from dropfour.ai.hard_agent import HardAgent

    if mode is Mode.EASY:
        return EasyAgent(player=player, rng=random.Random(seed))
    if mode is Mode.MEDIUM:
        return MediumAgent(player=player, rng=random.Random(seed))
    if mode is Mode.HARD:
        return HardAgent(player=player, depth=depth)

    raise ValueError(f"No computer opponent for mode {mode.value!r}.")
