from __future__ import annotations

from typing import Optional

from dropfour.core.rules import winner_with_line
from dropfour.game.session import GameSession
from dropfour.game.state import Status
from dropfour.types import Mode, Player
from dropfour.ui.effects import ai_thinking, thinking_label
from dropfour.ui.human import GameQuit
from dropfour.ui.render import PLAYER_LABELS, render


def _seat_name(session: GameSession, player: Player) -> str:
    strategy = session.seats[player]
    return "Human" if strategy is None else strategy.name


def _status_with_seats(session: GameSession, status: str) -> str:
    """
    Prepend a persistent header showing who plays Red and Yellow.
    """
    p1, p2 = session.seats
    header = f"Red: {_seat_name(session, p1)} | Yellow: {_seat_name(session, p2)}"
    if status:
        return f"{header}\n{status}"
    return header


def _turn_status(session: GameSession) -> str:
    player = session.state.current
    if session.is_human(player):
        return f"{PLAYER_LABELS[player]}'s turn"
    return thinking_label(session.mode) + "..."


def end_message(session: GameSession) -> str:
    st = session.state
    if st.status is not Status.WIN or st.winner is None:
        return "It's a Draw!"

    hard = session.mode is Mode.HARD
    if session.is_human(st.winner):
        if hard:
            return "AMAZING! You beat the Hard AI!"
        return f"{PLAYER_LABELS[st.winner]} wins!"
    if hard:
        return "Computer Won! The AI is too strong!"
    return "Computer Won! Better luck next time!"


def run_game(session: GameSession, show_thinking: bool = True) -> Optional[Status]:
    """
    Drive one session on the console. Returns the final status, or ``None``
    if a human quit part-way.
    """
    last = ""

    while not session.finished:
        status = f"{last}\n{_turn_status(session)}" if last else _turn_status(session)
        render(session.board, _status_with_seats(session, status))

        player = session.state.current
        if show_thinking and not session.is_human(player):
            ai_thinking(thinking_label(session.mode))

        try:
            session.play_turn()
        except GameQuit:
            render(session.board, _status_with_seats(session, "Game quit."))
            return None

        move = session.state.last_move
        if move is not None:
            last = f"{_seat_name(session, player)} chose {move.column + 1}"

    found = winner_with_line(session.board) if session.state.status is Status.WIN else None
    highlight = found[1] if found else None

    render(session.board, _status_with_seats(session, end_message(session)), highlight=highlight)
    return session.state.status
