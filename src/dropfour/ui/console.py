from __future__ import annotations

import shutil

from dropfour.config import CLEAR_SCREEN


def term_width(default: int = 80) -> int:
    try:
        return shutil.get_terminal_size(fallback=(default, 24)).columns
    except OSError:
        return default


def centered(text: str, width: int | None = None) -> str:
    w = width or term_width()
    pad = (w - len(text)) // 2
    return (" " * pad + text) if pad > 0 else text


def print_centered(text: str) -> None:
    print(centered(text))


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")
