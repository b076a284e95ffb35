"""
Feedback types returned by the oracle.

Wire form (one JSON object per letter position):
  {"slot": 0, "guess": "a", "result": "correct"}

Conventions:
  - Outcome.CORRECT : letter matches at that position
  - Outcome.PRESENT : letter occurs elsewhere in the secret word
  - Outcome.ABSENT  : letter does not occur (see constraints.py for the
                      repeated-letter caveat)

The enum values ARE the wire strings; use Outcome.from_wire() to decode so an
unknown tag surfaces as ProtocolError instead of a bare ValueError.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from .errors import ProtocolError


class Outcome(Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @classmethod
    def from_wire(cls, tag) -> "Outcome":
        try:
            return cls(tag)
        except ValueError as e:
            raise ProtocolError(f"unknown result tag: {tag!r}") from e

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SlotFeedback:
    slot: int
    letter: str
    outcome: Outcome


@dataclass(frozen=True)
class GuessFeedback:
    """
    A submitted guess plus its per-slot feedback (ordered by slot).

    Construction enforces one feedback entry per letter of the guess.
    """
    guess: str
    feedback: Tuple[SlotFeedback, ...]

    def __post_init__(self):
        # Accept any iterable but store a tuple so the pair stays immutable
        object.__setattr__(self, "feedback", tuple(self.feedback))
        if len(self.feedback) != len(self.guess):
            raise ValueError(
                f"feedback has {len(self.feedback)} slots for a "
                f"{len(self.guess)}-letter guess")

    @property
    def outcomes(self) -> Tuple[Outcome, ...]:
        return tuple(f.outcome for f in self.feedback)

    @property
    def is_win(self) -> bool:
        return all(o is Outcome.CORRECT for o in self.outcomes)

    def describe(self) -> str:
        """
        Human-readable feedback, e.g. "a:correct; p:present; p:absent; ".
        Letters are taken from the guess, not from the oracle's echo.
        """
        return "".join(f"{ch}:{o}; " for ch, o in zip(self.guess, self.outcomes))


def make_feedback(guess: str, outcomes: Iterable[Outcome]) -> GuessFeedback:
    """Build a GuessFeedback from a guess and its outcomes in slot order."""
    outcomes = tuple(outcomes)
    if len(outcomes) != len(guess):
        raise ValueError(f"expected {len(guess)} outcomes, got {len(outcomes)}")
    return GuessFeedback(
        guess,
        tuple(SlotFeedback(i, ch, o) for i, (ch, o) in enumerate(zip(guess, outcomes))),
    )
