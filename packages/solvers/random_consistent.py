"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (words still
    consistent with all feedback so far).
  - An empty candidate set means the feedback contradicts the dictionary
    (e.g. the secret word was never loaded); that is reported as
    NoCandidatesRemaining, never papered over with a fallback guess.

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
"""

from __future__ import annotations

import random
from typing import Sequence

from packages.engine.errors import NoCandidatesRemaining
from .base import BaseSolver, register


def pick_guess(candidates: Sequence[str], rng: random.Random | None = None) -> str:
    """
    Pick one candidate uniformly at random.

    Args:
        candidates: non-empty sequence of candidate words
        rng:        random source; a fresh unseeded one if omitted

    Raises:
        NoCandidatesRemaining: if `candidates` is empty.
    """
    if not candidates:
        raise NoCandidatesRemaining(
            "no candidate words remain; the secret word is probably not in the word list")
    rng = rng if rng is not None else random.Random()
    return candidates[rng.randrange(len(candidates))]


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"

    def next_guess(self, state: dict) -> str:
        """
        Args:
            state: dict with keys:
                - "candidates": current consistent candidate set (List[str])
                - "turn":       1-based turn number
                - "N":          word length

        Returns:
            A single lowercase guess string of length N.
        """
        return pick_guess(state["candidates"], self.rng)
