from __future__ import annotations

from typing import Optional

from dropfour.config import HARD_SEARCH_DEPTH
from dropfour.game.controller import run_game
from dropfour.game.session import GameSession
from dropfour.game.stats import StatsTracker
from dropfour.types import Mode
from dropfour.ui.console import clear_screen, print_centered
from dropfour.ui.human import ConsoleInput
from dropfour.ui.prompts import ask_int
from dropfour_analysis.metrics.summarize import stats_frame

DIFFICULTIES = {1: Mode.EASY, 2: Mode.MEDIUM, 3: Mode.HARD}


def print_menu() -> None:
    print_centered("=== Connect 4 ===")
    print_centered("1. Player vs Player")
    print_centered("2. Player vs Computer")
    print_centered("3. Statistics")
    print_centered("4. Exit")
    print()


def print_stats(tracker: StatsTracker) -> None:
    print_centered("=== Statistics ===")
    print_centered(f"Total games played: {tracker.total_games}")
    print()

    pvp = tracker.by_mode[Mode.PVP]
    print_centered("Player vs Player")
    print_centered(f"Games: {pvp.games}  Player 1 wins: {pvp.player1_wins}  "
                   f"Player 2 wins: {pvp.player2_wins}  Draws: {pvp.draws}")
    print()

    for mode in (Mode.EASY, Mode.MEDIUM, Mode.HARD):
        s = tracker.by_mode[mode]
        print_centered(f"Player vs Computer ({mode.value.title()})")
        print_centered(f"Games: {s.games}  Player wins: {s.player1_wins}  "
                       f"Computer wins: {s.computer_wins}  Draws: {s.draws}")
        print()

    if tracker.total_games:
        rates = stats_frame(tracker)[["games", "player_win_rate", "computer_win_rate", "draw_rate"]]
        for line in rates.round(2).to_string().splitlines():
            print_centered(line)
        print()


def press_enter() -> None:
    print_centered("Press Enter to return to main menu...")
    input()


def run_menu(tracker: Optional[StatsTracker] = None, *, seed: Optional[int] = None,
             depth: int = HARD_SEARCH_DEPTH) -> StatsTracker:
    tracker = tracker if tracker is not None else StatsTracker()
    human = ConsoleInput()

    while True:
        print_menu()
        choice = ask_int(1, 4)

        if choice == 1:
            clear_screen()
            run_game(GameSession.pvp(human, listeners=[tracker]))
            press_enter()
            clear_screen()
            continue

        if choice == 2:
            clear_screen()
            print_centered("Choose Difficulty")
            print_centered("1. Easy")
            print_centered("2. Medium")
            print_centered("3. Hard")
            print_centered("4. Back to menu")
            print()

            diff = ask_int(1, 4)
            clear_screen()
            if diff == 4:
                continue

            session = GameSession.vs_computer(
                DIFFICULTIES[diff], human, listeners=[tracker], seed=seed, depth=depth,
            )
            run_game(session)
            press_enter()
            clear_screen()
            continue

        if choice == 3:
            clear_screen()
            print_stats(tracker)
            press_enter()
            clear_screen()
            continue

        clear_screen()
        print_centered("Thanks for playing!")
        print_centered("Goodbye!")
        return tracker
