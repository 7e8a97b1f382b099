from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from dropfour.game.stats import StatsTracker

# metric -> True when a smaller value ranks higher
METRICS = {
    "ppg": False,
    "points": False,
    "wins": False,
    "nodes": False,
    "avg_ms_per_move": True,
}

TABLE_COLS = ["name", "games", "wins", "draws", "losses", "points", "ppg", "avg_ms_per_move", "nodes"]


@dataclass(frozen=True)
class RankConfig:
    metric: str = "ppg"
    top_n: int = 20
    min_games: int = 0


def rank_entrants(df: pd.DataFrame, cfg: RankConfig) -> pd.DataFrame:
    """Leaderboard sorted on ``cfg.metric`` with a 1-based ``rk`` column in front."""
    if cfg.metric not in METRICS:
        raise ValueError(f"Unknown metric {cfg.metric!r}. Choose from {sorted(METRICS)}")
    if cfg.metric not in df.columns:
        raise ValueError(f"Results have no {cfg.metric!r} column")

    out = df
    if cfg.min_games > 0 and "games" in df.columns:
        out = out[out["games"].fillna(0) >= cfg.min_games]

    out = out.sort_values(cfg.metric, ascending=METRICS[cfg.metric], kind="stable")
    out = out[[c for c in TABLE_COLS if c in out.columns]].head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.agg(["count", "mean", "min", "median", "max"]).T


def stats_frame(tracker: StatsTracker) -> pd.DataFrame:
    """Per-mode counters from the session stats screen, with win/draw rates."""
    df = pd.DataFrame(tracker.rows()).set_index("mode")
    games = df["games"].where(df["games"] > 0)
    df["player_win_rate"] = ((df["player1_wins"] + df["player2_wins"]) / games).fillna(0.0)
    df["computer_win_rate"] = (df["computer_wins"] / games).fillna(0.0)
    df["draw_rate"] = (df["draws"] / games).fillna(0.0)
    return df
