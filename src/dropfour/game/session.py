from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Protocol

from dropfour.ai.base import Strategy
from dropfour.ai.pick import agent_for
from dropfour.config import HARD_SEARCH_DEPTH, MIN_PLIES_FOR_WIN
from dropfour.core.board import Board
from dropfour.core.rules import check_win
from dropfour.errors import ColumnFullError
from dropfour.game.events import Listener, SessionEnded
from dropfour.game.state import GameState, Status
from dropfour.types import Cell, Mode, Move, Outcome, Player, other

log = logging.getLogger(__name__)


class InputSource(Protocol):
    """Where human moves come from. Columns handed back are already in range."""

    def choose_column(self, board: Board, player: Player) -> int:
        ...

    def column_rejected(self, column: int, player: Player) -> None:
        ...


Seats = Dict[Player, Optional[Strategy]]  # None marks a human seat


class GameSession:
    """
    One game from empty board to win or draw.

    The caller drives the game with ``play_turn()`` (or ``play()``) and reads
    ``state`` / ``board`` to render it. Moves come from the seat's strategy or,
    for a human seat, from the input source.
    """

    def __init__(
        self,
        seats: Seats,
        *,
        mode: Optional[Mode] = None,
        input_source: Optional[InputSource] = None,
        listeners: Iterable[Listener] = (),
        first: Player = Cell.PLAYER1,
    ) -> None:
        if any(s is None for s in seats.values()) and input_source is None:
            raise ValueError("A human seat needs an input source.")

        self.seats: Seats = {Cell.PLAYER1: seats.get(Cell.PLAYER1), Cell.PLAYER2: seats.get(Cell.PLAYER2)}
        self.mode = mode
        self.input_source = input_source
        self.listeners: List[Listener] = list(listeners)
        self.state = GameState(board=Board(), current=first)
        self.state.board.reset()

    @classmethod
    def pvp(cls, input_source: InputSource, listeners: Iterable[Listener] = ()) -> "GameSession":
        return cls(
            {Cell.PLAYER1: None, Cell.PLAYER2: None},
            mode=Mode.PVP,
            input_source=input_source,
            listeners=listeners,
        )

    @classmethod
    def vs_computer(
        cls,
        mode: Mode,
        input_source: InputSource,
        listeners: Iterable[Listener] = (),
        *,
        seed: Optional[int] = None,
        depth: int = HARD_SEARCH_DEPTH,
    ) -> "GameSession":
        computer = agent_for(mode, Cell.PLAYER2, seed=seed, depth=depth)
        return cls(
            {Cell.PLAYER1: None, Cell.PLAYER2: computer},
            mode=mode,
            input_source=input_source,
            listeners=listeners,
        )

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def finished(self) -> bool:
        return self.state.finished

    def is_human(self, player: Player) -> bool:
        return self.seats[player] is None

    def play_turn(self) -> Status:
        st = self.state
        if st.finished:
            raise RuntimeError("Game is already over.")

        capacity = st.board.rows * st.board.cols
        if st.move_count == capacity:
            return self._finish(Status.DRAW, None)

        player = st.current
        strategy = self.seats[player]
        if strategy is None:
            move = self._human_move(player)
        else:
            choice = strategy.choose_move(st.board)
            move = st.board.drop(choice.column, player)

        st.move_count += 1
        st.last_move = move
        log.debug("ply %d: %s -> column %d", st.move_count, player.name, move.column + 1)

        if st.move_count >= MIN_PLIES_FOR_WIN and check_win(st.board, move, player):
            return self._finish(Status.WIN, player)
        if st.move_count == capacity:
            return self._finish(Status.DRAW, None)

        st.current = other(player)
        return st.status

    def play(self) -> Status:
        while not self.finished:
            self.play_turn()
        return self.state.status

    def _human_move(self, player: Player) -> Move:
        assert self.input_source is not None
        while True:
            col = self.input_source.choose_column(self.state.board, player)
            try:
                return self.state.board.drop(col, player)
            except ColumnFullError as e:
                self.input_source.column_rejected(e.column, player)

    def _outcome(self, winner: Optional[Player]) -> Outcome:
        if winner is None:
            return Outcome.DRAW
        if self.is_human(winner):
            return Outcome.PLAYER_WIN
        return Outcome.COMPUTER_WIN

    def _finish(self, status: Status, winner: Optional[Player]) -> Status:
        st = self.state
        st.status = status
        st.winner = winner

        event = SessionEnded(
            mode=self.mode,
            outcome=self._outcome(winner),
            winner=winner,
            plies=st.move_count,
        )
        log.info("game over: %s after %d plies", event.outcome.value, st.move_count)
        for listener in self.listeners:
            listener(event)
        return status
