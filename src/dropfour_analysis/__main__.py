from __future__ import annotations

import sys

from .cli.analyze_csv import main as analyze_main

USAGE = """Usage:
  dropfour-analysis [analyze] [--csv PATH] [--metric ppg] [--top N]
  dropfour-analysis table [--csv PATH]"""


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    cmd, rest = (argv[0].lower(), argv[1:]) if argv else ("analyze", [])

    if cmd.startswith("-"):
        return analyze_main(argv)
    if cmd == "analyze":
        return analyze_main(rest)
    if cmd == "table":
        return analyze_main(["--no-plots", *rest])

    print(USAGE)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
