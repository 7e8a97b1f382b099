from __future__ import annotations

import argparse
from pathlib import Path

from dropfour.scripts.tournament import RESULTS_GLOB
from ..io.load_results import latest_results, load_results
from ..metrics.summarize import METRICS, RankConfig, numeric_summary, rank_entrants
from ..plots.chart import plot_scatter, plot_top_bar


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Summarize a dropfour tournament results CSV.")
    src = ap.add_argument_group("input")
    src.add_argument("--csv", type=Path, default=None, help="Results CSV. Defaults to the newest one in --results-dir.")
    src.add_argument("--results-dir", type=Path, default=Path("data/results"))
    src.add_argument("--pattern", default=RESULTS_GLOB)

    out = ap.add_argument_group("output")
    out.add_argument("--metric", choices=sorted(METRICS), default="ppg", help="Leaderboard ordering")
    out.add_argument("--top", type=int, default=20)
    out.add_argument("--min-games", type=int, default=0, help="Hide entrants with fewer games")
    out.add_argument("--outdir", type=Path, default=Path("data/figures"), help="Where figures are written")
    out.add_argument("--show", action="store_true", help="Open figures in a window instead of saving")
    out.add_argument("--no-plots", action="store_true")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = args.csv or latest_results(args.results_dir, pattern=args.pattern)
    df = load_results(csv_path)
    print(f"\nLoaded {csv_path} ({len(df)} entrants)")

    board = rank_entrants(df, RankConfig(metric=args.metric, top_n=args.top, min_games=args.min_games))
    print(f"\n=== Leaderboard by {args.metric} ===")
    print(board.to_string(index=False))

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.round(3).to_string())

    if args.no_plots:
        return 0

    saved = [
        plot_top_bar(board, args.outdir, metric=args.metric, top_n=args.top, show=args.show),
        plot_scatter(board, args.outdir, x="avg_ms_per_move", y="ppg", show=args.show),
    ]
    if not args.show:
        for path in filter(None, saved):
            print(f"Saved: {path}")

    return 0
