"""
Game loop against the remote oracle.

- run_game:    play one game until a win or the turn budget is exhausted;
               oracle failures and NoCandidatesRemaining propagate.
- run_session: same, but a WordleError becomes a "failed" GameOutcome.

State machine:
    Playing(turn, candidates) -> Won(final_guess, turns) | Lost(turns) | Failed(error)

These functions are UI-agnostic; the CLI passes an `on_turn` hook to print
each turn as it happens.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from packages.engine import GuessFeedback, WordleError, filter_candidates
from packages.solvers import BaseSolver, create_solver

log = logging.getLogger(__name__)

WON = "won"
LOST = "lost"
FAILED = "failed"

TurnHook = Callable[[int, GuessFeedback], None]


@dataclass
class TurnRecord:
    turn: int
    result: GuessFeedback
    remaining: int      # candidates left after filtering (unchanged on a win)


@dataclass
class GameOutcome:
    status: str
    turns: int
    final_guess: Optional[str] = None
    history: List[TurnRecord] = field(default_factory=list)
    error: Optional[WordleError] = None

    @property
    def won(self) -> bool:
        return self.status == WON


def _assert_turn_budget(max_turns: int) -> None:
    """Guardrail: a game needs at least one turn."""
    if not isinstance(max_turns, int) or max_turns <= 0:
        raise ValueError(f"max_turns must be a positive integer; got {max_turns!r}")


def _start(initial_candidates, max_turns, word_length, solver, seed):
    _assert_turn_budget(max_turns)

    # Start with all clean words of the requested length
    candidates = filter_candidates(initial_candidates, [], word_length)

    solver = solver or create_solver("random_consistent")
    solver.reset(candidates=candidates, N=word_length, seed=seed)
    return candidates, solver


def _play(candidates, oracle, max_turns, session_seed, word_length, solver, on_turn,
          history: List[TurnRecord]) -> GameOutcome:
    """Turn loop. Each completed turn is appended to `history` as it happens."""
    for turn in range(1, max_turns + 1):
        state = {
            "turn": turn,
            "N": word_length,
            "candidates": candidates,
            "history": [r.result for r in history],
        }
        guess = solver.next_guess(state)
        log.debug("turn %d: guessing %s from %d candidates", turn, guess, len(candidates))

        result = oracle.submit_guess(guess, session_seed, word_length)
        if on_turn is not None:
            on_turn(turn, result)

        # Win condition: every slot correct
        if result.is_win:
            history.append(TurnRecord(turn, result, len(candidates)))
            return GameOutcome(WON, turn, result.guess, history)

        # Candidates are only replaced once a full reply has been parsed
        candidates = filter_candidates(candidates, [result], word_length)
        history.append(TurnRecord(turn, result, len(candidates)))
        log.debug("turn %d: %d candidates remain", turn, len(candidates))

    return GameOutcome(LOST, max_turns, history[-1].result.guess, history)


def run_game(
        initial_candidates: Iterable[str],
        oracle,
        max_turns: int,
        session_seed: int,
        word_length: int,
        *,
        solver: BaseSolver | None = None,
        seed: int | None = None,
        on_turn: TurnHook | None = None,
) -> GameOutcome:
    """
    Execute one game until the oracle reports all-correct or turns run out.

    Args:
        initial_candidates: the loaded dictionary
        oracle:             object with submit_guess(candidate, session_seed, word_length)
        max_turns:          positive turn budget
        session_seed:       oracle session id (selects the secret word)
        word_length:        letters per word
        solver:             guess picker; random_consistent if omitted
        seed:               RNG seed for the solver's tie-breaks (None = unseeded)
        on_turn:            called with (turn, GuessFeedback) after each oracle reply

    Returns:
        GameOutcome with status "won" or "lost".

    Raises:
        TransportError, ProtocolError: from the oracle
        NoCandidatesRemaining:         feedback eliminated every word
    """
    candidates, solver = _start(initial_candidates, max_turns, word_length, solver, seed)
    return _play(candidates, oracle, max_turns, session_seed, word_length, solver, on_turn, [])


def run_session(
        initial_candidates: Iterable[str],
        oracle,
        max_turns: int,
        session_seed: int,
        word_length: int,
        *,
        solver: BaseSolver | None = None,
        seed: int | None = None,
        on_turn: TurnHook | None = None,
) -> GameOutcome:
    """
    run_game, but a WordleError ends the game in the "failed" state instead
    of propagating. Turns completed before the failure are kept in `history`.
    """
    candidates, solver = _start(initial_candidates, max_turns, word_length, solver, seed)
    history: List[TurnRecord] = []
    try:
        return _play(candidates, oracle, max_turns, session_seed, word_length, solver, on_turn,
                     history)
    except WordleError as e:
        log.error("game failed after %d turn(s): %s", len(history), e)
        last = history[-1].result.guess if history else None
        return GameOutcome(FAILED, len(history), last, history, error=e)
