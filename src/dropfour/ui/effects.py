from __future__ import annotations

import sys
import time
from typing import Optional, TextIO

from dropfour.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC
from dropfour.types import Mode
from dropfour.ui.console import centered

FRAME_SEC = 0.15


def thinking_label(mode: Optional[Mode]) -> str:
    if mode is Mode.HARD:
        return "Computer is thinking hard"
    return "Computer is thinking"


def ai_thinking(label: str = "Computer is thinking", delay: Optional[float] = None,
                out: TextIO = sys.stdout) -> None:
    """Pause before a computer move, cycling trailing dots on one centred line."""
    delay = AI_THINK_DELAY_SEC if delay is None else delay
    if delay <= 0:
        return

    if not AI_THINKING_SPINNER:
        time.sleep(delay)
        return

    deadline = time.monotonic() + delay
    dots = 0
    while time.monotonic() < deadline:
        out.write("\r" + centered(f"{label}{'.' * (dots % 4):<3}"))
        out.flush()
        time.sleep(min(FRAME_SEC, max(0.0, deadline - time.monotonic())))
        dots += 1
    out.write("\r\033[K")
    out.flush()
