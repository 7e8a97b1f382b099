from __future__ import annotations

from pathlib import Path

import pandas as pd

from dropfour.scripts.tournament import CSV_COLUMNS, RESULTS_GLOB

NUMERIC_COLS = [c for c in CSV_COLUMNS if c != "name"]


def load_results(csv_path: Path) -> pd.DataFrame:
    """One row per tournament entrant; numeric columns coerced, blank names dropped."""
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"Results CSV not found: {csv_path}")

    df = pd.read_csv(csv_path).rename(columns=str.strip)
    if "name" not in df.columns:
        raise ValueError(f"{csv_path.name} has no 'name' column. Columns: {list(df.columns)}")

    present = [c for c in NUMERIC_COLS if c in df.columns]
    df[present] = df[present].apply(pd.to_numeric, errors="coerce")

    df["name"] = df["name"].fillna("").astype(str).str.strip()
    return df[df["name"] != ""].reset_index(drop=True)


def latest_results(results_dir: Path, pattern: str = RESULTS_GLOB) -> Path:
    results_dir = Path(results_dir)
    if not results_dir.is_dir():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    # timestamped names sort chronologically
    files = sorted(results_dir.glob(pattern), key=lambda p: p.name)
    if not files:
        raise FileNotFoundError(f"No {pattern} in {results_dir}. Run dropfour-tournament first.")
    return files[-1]
