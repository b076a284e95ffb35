"""
Console rendering for a game transcript.

- format_turn:    the lines printed after each oracle reply.
- format_outcome: the one-line summary printed when the game ends.

Feedback is rendered as "letter:result; " per slot, e.g.
    "a:correct; p:present; p:absent; l:absent; e:absent; "
"""

from __future__ import annotations

from typing import List

from packages.engine import GuessFeedback
from .core import GameOutcome, WON, LOST


def format_turn(turn: int, result: GuessFeedback) -> List[str]:
    if result.is_win:
        return [f"Your guess in turn {turn} is correct: {result.guess}"]
    return [
        f"Your guess in turn {turn} is {result.guess} and is not correct",
        f"The feedback is {result.describe()}",
        "",
    ]


def print_turn(turn: int, result: GuessFeedback) -> None:
    """on_turn hook for run_game: print the turn to stdout."""
    for line in format_turn(turn, result):
        print(line)


def format_outcome(outcome: GameOutcome) -> str:
    if outcome.status == WON:
        return f"Solved in {outcome.turns} turn(s): {outcome.final_guess}"
    if outcome.status == LOST:
        return f"Not solved after {outcome.turns} turn(s)"
    return f"Game failed after {outcome.turns} turn(s): {outcome.error}"
