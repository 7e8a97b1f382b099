from __future__ import annotations

import argparse
import csv
import logging
import random
import time
from dataclasses import asdict, dataclass, fields
from datetime import datetime
from functools import partial
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Tuple

from dropfour.ai.base import Strategy
from dropfour.ai.easy_agent import EasyAgent
from dropfour.ai.hard_agent import HardAgent
from dropfour.ai.medium_agent import MediumAgent
from dropfour.config import HARD_SEARCH_DEPTH
from dropfour.game.session import GameSession
from dropfour.types import Cell, Player

log = logging.getLogger(__name__)

RESULTS_PREFIX = "tournament_results_"
RESULTS_GLOB = RESULTS_PREFIX + "*.csv"

WIN_POINTS = 1.0
DRAW_POINTS = 0.5


@dataclass(frozen=True)
class Team:
    name: str
    make: Callable[[Player, int], Strategy]  # (seat, seed) -> opponent


@dataclass
class MoveStats:
    moves: int = 0
    time_ms: int = 0
    nodes: int = 0


@dataclass
class Standing:
    """One entrant's running tally across the round robin."""
    games: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    points: float = 0.0

    moves: int = 0
    time_ms: int = 0
    nodes: int = 0

    @property
    def ppg(self) -> float:
        return self.points / self.games if self.games else 0.0

    @property
    def avg_ms_per_move(self) -> float:
        return self.time_ms / self.moves if self.moves else 0.0

    def score(self, result: str) -> None:
        """``result`` is "W", "D" or "L" from this entrant's side."""
        self.games += 1
        if result == "W":
            self.wins += 1
            self.points += WIN_POINTS
        elif result == "D":
            self.draws += 1
            self.points += DRAW_POINTS
        else:
            self.losses += 1

    def add_moves(self, side: MoveStats) -> None:
        self.moves += side.moves
        self.time_ms += side.time_ms
        self.nodes += side.nodes


CSV_COLUMNS = ["name", *(f.name for f in fields(Standing)), "ppg", "avg_ms_per_move"]


def _easy(player: Player, seed: int) -> EasyAgent:
    return EasyAgent(player=player, rng=random.Random(seed))


def _medium(player: Player, seed: int) -> MediumAgent:
    return MediumAgent(player=player, rng=random.Random(seed))


def _hard(player: Player, seed: int, depth: int) -> HardAgent:
    return HardAgent(player=player, depth=depth)


def default_roster(hard_depth: int) -> List[Team]:
    return [
        Team("Easy", _easy),
        Team("Medium", _medium),
        Team(f"Hard d{hard_depth}", partial(_hard, depth=hard_depth)),
    ]


def play_headless(team_x: Team, team_o: Team, seed: int) -> Tuple[str, Dict[str, MoveStats]]:
    """One game, Player 1 = ``team_x``. Returns ("X" | "O" | "D", per-side move stats)."""
    seats = {
        Cell.PLAYER1: team_x.make(Cell.PLAYER1, seed + 101),
        Cell.PLAYER2: team_o.make(Cell.PLAYER2, seed + 202),
    }
    sides = {Cell.PLAYER1: "X", Cell.PLAYER2: "O"}
    stats = {"X": MoveStats(), "O": MoveStats()}

    session = GameSession(seats)
    while not session.finished:
        player = session.state.current
        started = time.perf_counter()
        session.play_turn()
        elapsed_ms = int((time.perf_counter() - started) * 1000)

        side = stats[sides[player]]
        side.moves += 1
        side.time_ms += max(1, elapsed_ms)
        side.nodes += int((getattr(seats[player], "last_info", None) or {}).get("nodes", 0))

    winner = session.state.winner
    return (sides[winner] if winner is not None else "D"), stats


def add_result(a: Standing, b: Standing, outcome: str, a_is_x: bool) -> None:
    if outcome == "D":
        a.score("D")
        b.score("D")
        return

    a_won = (outcome == "X") == a_is_x
    a.score("W" if a_won else "L")
    b.score("L" if a_won else "W")


def round_robin(teams: Sequence[Team], games_per_pair: int = 2, seed: int = 0) -> Dict[str, Standing]:
    """Every pair meets ``games_per_pair`` times, alternating who moves first."""
    table = {t.name: Standing() for t in teams}

    game_no = 0
    for i, a in enumerate(teams):
        for b in teams[i + 1:]:
            for g in range(games_per_pair):
                a_is_x = g % 2 == 0
                x, o = (a, b) if a_is_x else (b, a)
                outcome, stats = play_headless(x, o, seed=seed + game_no)
                game_no += 1

                add_result(table[a.name], table[b.name], outcome, a_is_x)
                table[x.name].add_moves(stats["X"])
                table[o.name].add_moves(stats["O"])
                log.info("%s (X) vs %s (O): %s", x.name, o.name, outcome)

    return table


def result_rows(table: Dict[str, Standing]) -> List[dict]:
    """CSV-ready rows, best points-per-game first; ties go to the quicker mover."""
    rows = [
        {"name": name, **asdict(s), "ppg": round(s.ppg, 4), "avg_ms_per_move": round(s.avg_ms_per_move, 3)}
        for name, s in table.items()
    ]
    rows.sort(key=lambda r: (-r["ppg"], r["avg_ms_per_move"]))
    return rows


def write_csv(rows: Sequence[dict], outdir: Path) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{RESULTS_PREFIX}{datetime.now():%Y%m%d_%H%M%S}.csv"
    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        writer.writerows(rows)
    return path


def print_table(rows: Sequence[dict]) -> None:
    rule = "─" * 64
    print(f"{'rk':>3}  {'name':<12} {'G':>4} {'W':>4} {'D':>4} {'L':>4} {'PPG':>6} {'ms/move':>9} {'nodes':>9}")
    print(rule)
    for rk, r in enumerate(rows, start=1):
        print(
            f"{rk:>3}  {r['name']:<12} {r['games']:>4} {r['wins']:>4} {r['draws']:>4} {r['losses']:>4} "
            f"{r['ppg']:>6.3f} {r['avg_ms_per_move']:>9.1f} {r['nodes']:>9}"
        )
    print(rule)


def search_depth(text: str) -> int:
    depth = int(text)
    if depth < 1:
        raise argparse.ArgumentTypeError(f"depth must be at least 1, got {depth}")
    return depth


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Round-robin between the Easy, Medium and Hard opponents.")
    ap.add_argument("--games", type=int, default=4, help="Games per pairing (colours alternate)")
    ap.add_argument("--depth", type=search_depth, default=HARD_SEARCH_DEPTH, help="Hard opponent search depth")
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--outdir", type=Path, default=Path("data/results"))
    ap.add_argument("--no-csv", action="store_true", help="Print only; skip writing the results CSV")
    ap.add_argument("--log-level", type=str, default="WARNING")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    started = time.perf_counter()
    rows = result_rows(round_robin(default_roster(args.depth), games_per_pair=args.games, seed=args.seed))

    print(f"\nTournament: {len(rows)} entrants, {args.games} games per pairing "
          f"({time.perf_counter() - started:.1f}s)")
    print_table(rows)

    if not args.no_csv:
        print(f"Saved: {write_csv(rows, args.outdir)}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
