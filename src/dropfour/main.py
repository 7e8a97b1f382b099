from __future__ import annotations

import argparse
import logging

from dropfour.config import HARD_SEARCH_DEPTH
from dropfour.ui.menu import run_menu


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="dropfour", description="Play Connect 4 in the terminal.")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the Easy/Medium opponents.")
    ap.add_argument("--depth", type=int, default=HARD_SEARCH_DEPTH, help="Search depth for the Hard opponent.")
    ap.add_argument("--log-level", type=str, default="WARNING", help="Logging level (DEBUG shows search stats).")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        run_menu(seed=args.seed, depth=max(1, args.depth))
    except (KeyboardInterrupt, EOFError):
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
