"""
Candidate filtering given oracle feedback.

Given:
  - a pool of words (e.g., the loaded dictionary)
  - a guess and the oracle's per-slot outcomes for it
  - target word length N

Return:
  - words that are consistent with ALL feedback seen so far.

Per-slot rules (positional, containment based):
  - CORRECT at i : word[i] == guess[i]
  - PRESENT at i : guess[i] in word and word[i] != guess[i]
  - ABSENT  at i : guess[i] not in word

Repeated-letter caveat:
  ABSENT tests containment, not letter counts. If the guess repeats a letter
  and the secret holds it only once, the oracle marks the extra copy ABSENT
  and that slot removes every word containing the letter, the secret
  included. Standard Wordle would need per-letter occurrence counts here.
  This is kept as-is; see test_absent_on_repeated_letter_* in tests/.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence, Union

from .feedback import GuessFeedback, Outcome, SlotFeedback

FeedbackLike = Union[GuessFeedback, Sequence[Union[SlotFeedback, Outcome]]]


def _outcomes(feedback: FeedbackLike) -> List[Outcome]:
    if isinstance(feedback, GuessFeedback):
        return list(feedback.outcomes)
    return [f.outcome if isinstance(f, SlotFeedback) else Outcome(f) for f in feedback]


def slot_predicate(i: int, letter: str, outcome: Outcome) -> Callable[[str], bool]:
    """
    Return the test a candidate must pass for one slot of feedback.
    """
    if outcome is Outcome.CORRECT:
        return lambda w: w[i] == letter
    if outcome is Outcome.PRESENT:
        return lambda w: letter in w and w[i] != letter
    # ABSENT: the letter must not occur anywhere
    return lambda w: letter not in w


def apply_feedback(candidates: Iterable[str], guess: str, feedback: FeedbackLike) -> List[str]:
    """
    Narrow `candidates` to the words consistent with one guess's feedback.

    Args:
      candidates : current candidate words
      guess      : the submitted guess
      feedback   : GuessFeedback, or one SlotFeedback/Outcome per position

    Returns:
      List[str], a subset of `candidates` in their original order.
    """
    outcomes = _outcomes(feedback)
    if len(outcomes) != len(guess):
        raise ValueError(f"feedback has {len(outcomes)} slots for guess {guess!r}")

    out = list(candidates)
    # One pass per slot; each pass narrows the previous result
    for i, (letter, outcome) in enumerate(zip(guess, outcomes)):
        keep = slot_predicate(i, letter, outcome)
        out = [w for w in out if len(w) == len(guess) and keep(w)]
    return out


def filter_candidates(words: Iterable[str], history: Iterable[GuessFeedback], N: int) -> List[str]:
    """
    Keep only clean N-letter words that satisfy every GuessFeedback in
    `history`. Order is preserved as in `words`.
    """
    out: List[str] = []
    for w in words:
        w = w.strip().lower()

        # Basic hygiene: skip anything that isn't a clean N-letter alpha token
        if len(w) != N or not w.isalpha():
            continue
        out.append(w)

    for result in history:
        out = apply_feedback(out, result.guess, result)
    return out
