import pytest

from dropfour.core.board import Board
from dropfour.core.rules import check_win, is_draw, is_finished, winner_with_line, windows
from dropfour.types import Cell, Move

P1, P2 = Cell.PLAYER1, Cell.PLAYER2


class TestCheckWin:
    def test_vertical(self, board_from):
        board = board_from(
            ".......",
            ".......",
            "...1...",
            "...1...",
            "...1..2",
            "...1..2",
        )
        assert check_win(board, Move(2, 3), P1)

    def test_horizontal_from_middle_piece(self, board_from):
        board = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            ".1111..",
        )
        # last piece is not at either end of the line
        assert check_win(board, Move(5, 2), P1)

    def test_diagonal_rising(self, board_from):
        board = board_from(
            ".......",
            ".......",
            "...2...",
            "..21...",
            ".212...",
            "2111...",
        )
        assert check_win(board, Move(2, 3), P2)
        assert check_win(board, Move(5, 0), P2)

    def test_diagonal_falling(self, board_from):
        board = board_from(
            ".......",
            ".......",
            "...1...",
            "...21..",
            "...221.",
            "...2121",
        )
        assert check_win(board, Move(4, 5), P1)
        assert check_win(board, Move(2, 3), P1)

    def test_three_in_a_row_is_not_a_win(self, board_from):
        board = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            "111.222",
        )
        assert not check_win(board, Move(5, 2), P1)
        assert not check_win(board, Move(5, 4), P2)

    def test_run_longer_than_four_counts(self, board_from):
        board = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            "1111111",
        )
        for c in range(7):
            assert check_win(board, Move(5, c), P1)

    def test_gap_filled_makes_five(self):
        board = Board()
        for c in (0, 1, 3, 4):
            board.drop(c, P1)
        move = board.drop(2, P1)
        assert check_win(board, move, P1)

    def test_other_players_pieces_do_not_count(self, board_from):
        board = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            "1121...",
        )
        assert not check_win(board, Move(5, 3), P1)

    def test_vertical_win_on_fourth_stacked_piece(self):
        # Player 1 stacks column 3 while Player 2 answers in 2 and 4
        board = Board()
        plies = [(3, P1), (2, P2), (3, P1), (4, P2), (3, P1), (2, P2), (3, P1)]
        results = []
        for col, player in plies:
            move = board.drop(col, player)
            results.append(check_win(board, move, player))

        assert results == [False] * 6 + [True]
        assert board.grid[2][3] is P1


class TestWholeBoard:
    def test_window_count(self):
        # 24 horizontal + 21 vertical + 12 + 12 diagonal
        assert len(windows(6, 7)) == 69
        assert all(len(w) == 4 for w in windows(6, 7))

    def test_winner_with_line(self, board_from):
        board = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            "..222..",
            ".11112.",
        )
        found = winner_with_line(board)
        assert found is not None
        player, line = found
        assert player is P1
        assert line == [(5, 1), (5, 2), (5, 3), (5, 4)]

    def test_no_winner_on_empty_board(self):
        assert winner_with_line(Board()) is None
        assert not is_finished(Board())

    def test_full_board_without_line_is_draw(self, draw_sequence):
        board = Board()
        player = P1
        for col in draw_sequence:
            move = board.drop(col, player)
            assert not check_win(board, move, player)
            player = P2 if player is P1 else P1

        assert board.is_full()
        assert is_draw(board)
        assert is_finished(board)

    def test_full_board_with_line_is_not_draw(self, board_from):
        board = board_from(
            "1221122",
            "2112211",
            "1221122",
            "2112211",
            "1221122",
            "1111211",
        )
        assert board.is_full()
        assert winner_with_line(board) is not None
        assert not is_draw(board)

    @pytest.mark.parametrize("col", range(7))
    def test_single_piece_never_finishes(self, col):
        board = Board()
        board.drop(col, P2)
        assert not is_finished(board)
