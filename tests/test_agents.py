import random

import pytest

from dropfour.ai.easy_agent import EasyAgent
from dropfour.ai.hard_agent import HardAgent
from dropfour.ai.medium_agent import MediumAgent
from dropfour.ai.pick import agent_for
from dropfour.ai.tactics import count_threats, find_best_strategic_move, find_winning_move
from dropfour.core.board import Board
from dropfour.types import Cell, Mode, Move, NO_MOVE

P1, P2 = Cell.PLAYER1, Cell.PLAYER2


def one_open_column(open_col: int) -> Board:
    board = Board()
    for c in range(board.cols):
        depth = 3 if c == open_col else board.rows
        for r in range(depth):
            board.drop(c, P1 if (r + c // 2) % 2 == 0 else P2)
    return board


def play_sequence(columns):
    board = Board()
    player = P1
    for c in columns:
        board.drop(c, player)
        player = P2 if player is P1 else P1
    return board


SEARCH_POSITIONS = [
    [],
    [3],
    [3, 3, 2, 4],
    [3, 2, 3, 3, 4, 4, 1],
    [0, 6, 1, 5, 3, 3, 2, 4, 4],
    [3, 3, 3, 3, 2, 2, 4, 4, 5, 1],
]


class TestTactics:
    def test_find_winning_move(self, board_from):
        board = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            "222.11.",
        )
        before = board.snapshot()
        assert find_winning_move(board, P2) == Move(5, 3)
        assert find_winning_move(board, P1) == NO_MOVE
        assert board.snapshot() == before

    def test_count_threats(self, board_from):
        board = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            ".22.2..",
        )
        # horizontal run of 4 through (5,3); the vertical run of 1 is ignored
        assert count_threats(board, 5, 3, P2) == 4
        # on top of (5,4): vertical run of 2; the horizontal run of 1 is ignored
        assert count_threats(board, 4, 4, P2) == 2
        assert board.grid[5][3] is Cell.EMPTY
        assert board.grid[4][4] is Cell.EMPTY

    def test_strategic_move_prefers_centre_on_empty_board(self):
        move, score = find_best_strategic_move(Board(), P2)
        assert move == Move(5, 3)
        assert score == 3

    def test_strategic_ties_keep_lowest_column(self, board_from):
        board = board_from(
            "...2...",
            "...1...",
            "...2...",
            "...1...",
            "...2...",
            "...1...",
        )
        # centre is full; columns 2 and 4 both score their +2 bonus
        move, score = find_best_strategic_move(board, P2)
        assert score == 2
        assert move == Move(5, 2)


class TestEasyAgent:
    def test_only_open_column_is_chosen(self):
        board = one_open_column(4)
        agent = EasyAgent(rng=random.Random(7))
        for _ in range(200):
            assert agent.choose_move(board) == Move(2, 4)

    def test_moves_are_always_valid(self):
        board = Board()
        agent = EasyAgent(rng=random.Random(1))
        for _ in range(100):
            move = agent.choose_move(board)
            assert move.column in board.valid_columns()
            assert move.row == board.lowest_empty_row(move.column)

    def test_full_board(self, draw_sequence):
        with pytest.raises(RuntimeError):
            EasyAgent().choose_move(play_sequence(draw_sequence))


class TestMediumAgent:
    def test_completes_own_three_every_time(self, board_from):
        board = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            "11.....",
            "222...1",
        )
        for seed in range(100):
            agent = MediumAgent(rng=random.Random(seed))
            assert agent.choose_move(board) == Move(5, 3)

    def test_blocks_opponent_three(self, board_from):
        board = board_from(
            ".......",
            ".......",
            ".......",
            "...2...",
            "...2...",
            ".111.2.",
        )
        for seed in range(50):
            agent = MediumAgent(rng=random.Random(seed))
            assert agent.choose_move(board) in (Move(5, 0), Move(5, 4))
        assert MediumAgent().choose_move(board) == Move(5, 0)

    def test_win_beats_block(self, board_from):
        board = board_from(
            ".......",
            ".......",
            ".......",
            "2......",
            "2......",
            "2111...",
        )
        assert MediumAgent().choose_move(board) == Move(2, 0)

    def test_always_strategic_takes_best_threat(self):
        agent = MediumAgent(strategic_probability=1.0, rng=random.Random(3))
        assert agent.choose_move(Board()) == Move(5, 3)
        assert agent.last_info["reason"] == "strategic"

    def test_never_strategic_still_plays_valid_column(self):
        board = one_open_column(6)
        agent = MediumAgent(strategic_probability=0.0, rng=random.Random(3))
        assert agent.choose_move(board) == Move(2, 6)

    def test_board_untouched(self, board_from):
        board = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            "...1...",
            "..212..",
        )
        before = board.snapshot()
        MediumAgent(rng=random.Random(0)).choose_move(board)
        assert board.snapshot() == before


class TestHardAgent:
    def test_default_depth(self):
        assert HardAgent().depth == 5

    def test_takes_immediate_win(self, board_from):
        board = board_from(
            ".......",
            ".......",
            ".......",
            "......1",
            "......1",
            ".222..1",
        )
        agent = HardAgent()
        assert agent.choose_move(board) in (Move(5, 0), Move(5, 4))
        assert agent.last_info["reason"] == "win"
        assert agent.choose_move(board) == Move(5, 0)

    def test_blocks_immediate_loss(self, board_from):
        board = board_from(
            ".......",
            ".......",
            ".......",
            "1......",
            "1......",
            "1.22...",
        )
        agent = HardAgent()
        assert agent.choose_move(board) == Move(2, 0)
        assert agent.last_info["reason"] == "block"

    def test_search_restores_board(self):
        board = play_sequence([3, 3, 2, 4, 2])
        before = board.snapshot()
        HardAgent(depth=3).choose_move(board)
        assert board.snapshot() == before

    def test_plays_as_player_one(self, board_from):
        board = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            "...2...",
            ".111.22",
        )
        agent = HardAgent(player=P1, depth=2)
        assert agent.choose_move(board) == Move(5, 0)

    def test_sees_two_way_threat(self, board_from):
        # P2 to move: only column 2 makes a three open at both ends
        board = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            "1..22.1",
        )
        move = HardAgent(depth=3).choose_move(board)
        assert move == Move(5, 2)

    @pytest.mark.parametrize("cols", SEARCH_POSITIONS)
    @pytest.mark.parametrize("depth", [1, 2, 3])
    def test_pruning_does_not_change_result(self, cols, depth):
        board = play_sequence(cols)
        pruned = HardAgent(depth=depth, prune=True)
        full = HardAgent(depth=depth, prune=False)

        assert pruned.search(board) == full.search(board)
        assert pruned._nodes <= full._nodes

    @pytest.mark.parametrize("cols", SEARCH_POSITIONS[2:5])
    def test_pruning_matches_exhaustive_at_default_depth(self, cols):
        board = play_sequence(cols)
        pruned = HardAgent(depth=5, prune=True)
        full = HardAgent(depth=5, prune=False)

        assert pruned.search(board) == full.search(board)
        assert pruned._nodes <= full._nodes

    @pytest.mark.parametrize("depth", [0, -1])
    def test_rejects_depth_below_one(self, depth):
        with pytest.raises(ValueError, match="at least 1"):
            HardAgent(depth=depth)

    def test_depth_one_looks_one_ply_ahead(self):
        agent = HardAgent(depth=1)
        move, _ = agent.search(Board())
        assert move == Move(5, 3)
        assert agent._nodes == 7

    def test_pruning_cuts_nodes_at_depth_four(self):
        board = play_sequence([3, 3, 2, 4])
        pruned = HardAgent(depth=4, prune=True)
        full = HardAgent(depth=4, prune=False)

        assert pruned.search(board) == full.search(board)
        assert pruned._cutoffs > 0
        assert pruned._nodes < full._nodes


class TestPick:
    @pytest.mark.parametrize(
        "mode, cls",
        [(Mode.EASY, EasyAgent), (Mode.MEDIUM, MediumAgent), (Mode.HARD, HardAgent)],
    )
    def test_agent_for(self, mode, cls):
        agent = agent_for(mode, seed=1)
        assert isinstance(agent, cls)
        assert agent.player is P2

    def test_hard_depth_is_tunable(self):
        assert agent_for(Mode.HARD, depth=3).depth == 3

    def test_hard_depth_zero_is_rejected(self):
        with pytest.raises(ValueError):
            agent_for(Mode.HARD, depth=0)

    def test_no_agent_for_pvp(self):
        with pytest.raises(ValueError):
            agent_for(Mode.PVP)
