from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.figure import Figure


BAR_COLOR = "tab:red"
POINT_COLOR = "goldenrod"


def _numeric(df: pd.DataFrame, *cols: str) -> bool:
    return all(c in df.columns and pd.api.types.is_numeric_dtype(df[c]) for c in cols)


def _finish(fig: Figure, outdir: Path, filename: str, show: bool) -> Path | None:
    if show:
        plt.show()
        plt.close(fig)
        return None
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / filename
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_top_bar(df: pd.DataFrame, outdir: Path, metric: str, top_n: int, *, show: bool) -> Path | None:
    """Bar per entrant, best first. Returns ``None`` if the metric is missing or not numeric."""
    if "name" not in df.columns or not _numeric(df, metric):
        return None

    top = df[["name", metric]].dropna().sort_values(metric, ascending=False).head(top_n)
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.bar(top["name"], top[metric], color=BAR_COLOR)
    ax.set_title(f"Tournament: {metric} (top {len(top)})")
    ax.set_xlabel("opponent")
    ax.set_ylabel(metric)
    ax.tick_params(axis="x", labelrotation=20)

    return _finish(fig, outdir, f"top_{top_n}_{metric}.png", show)


def plot_scatter(df: pd.DataFrame, outdir: Path, x: str, y: str, *, show: bool) -> Path | None:
    """Entrants as labelled points, e.g. strength (ppg) against thinking time."""
    if not _numeric(df, x, y):
        return None

    fig, ax = plt.subplots()
    ax.scatter(df[x], df[y], color=POINT_COLOR, edgecolors="black")
    if "name" in df.columns:
        for name, xv, yv in zip(df["name"], df[x], df[y]):
            ax.annotate(str(name), (xv, yv), xytext=(4, 4), textcoords="offset points", fontsize=9)
    ax.set_title(f"{y} vs {x}")
    ax.set_xlabel(x)
    ax.set_ylabel(y)

    return _finish(fig, outdir, f"scatter_{y}_vs_{x}.png", show)
