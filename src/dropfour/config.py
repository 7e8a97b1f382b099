# src/dropfour/config.py

from __future__ import annotations

import logging
import os

log = logging.getLogger(__name__)

ROWS = 6
COLS = 7
CONNECT_N = 4
BOARD_CAPACITY = ROWS * COLS
CENTER_COLUMN = COLS // 2


def env_number(name, default, cast, minimum):
    """Numeric override from the environment; bad or too-small values keep ``default``."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = cast(raw)
    except ValueError:
        log.warning("Ignoring %s=%r: not a number, using %s", name, raw, default)
        return default
    if value < minimum:
        log.warning("Ignoring %s=%r: must be at least %s, using %s", name, raw, minimum, default)
        return default
    return value


# 4 pieces for the mover + 3 for the other side before that 4th lands
MIN_PLIES_FOR_WIN = 2 * CONNECT_N - 1

# UI toggles
USE_COLOR = os.environ.get("NO_COLOR") is None and os.environ.get("TERM") != "dumb"
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = env_number("DROPFOUR_THINK_DELAY", 0.6, float, minimum=0.0)

# AI tunables
HARD_SEARCH_DEPTH = env_number("DROPFOUR_HARD_DEPTH", 5, int, minimum=1)
MEDIUM_STRATEGIC_PROBABILITY = 0.7
