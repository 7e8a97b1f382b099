from __future__ import annotations
from typing import Callable, Optional

QUIT_WORDS = {"q", "quit", "exit"}


def parse_move(raw: str, cols: int) -> Optional[int]:
    """1-based column text -> 0-based column; ``None`` means the player wants out."""
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        return None
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a number or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return col


def parse_choice(raw: str, low: int, high: int) -> int:
    s = raw.strip()
    if not s.lstrip("-").isdigit():
        raise ValueError(f"Invalid input. Please enter a number ({low}-{high}).")
    value = int(s)
    if value < low or value > high:
        raise ValueError(f"Input out of range. Please enter a number ({low}-{high}).")
    return value


def ask_int(low: int, high: int, read: Callable[[str], str] = input, say: Callable[[str], None] = print) -> int:
    """Keep asking until a number in [low, high] comes back."""
    prompt = f"Please select an option ({low}-{high}): "
    while True:
        try:
            return parse_choice(read(prompt), low, high)
        except ValueError as e:
            say(str(e))
