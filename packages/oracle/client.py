"""
HTTP client for the remote Wordle scoring service ("oracle").

Wire contract:
  GET <url>?guess=<word>&size=<N>&seed=<seed>
  -> [{"slot": 0, "guess": "a", "result": "correct"}, ...]   (one per letter)

Failures:
  - TransportError : the request did not complete (connect, DNS, timeout)
  - ProtocolError  : the request completed but the body is not valid feedback
                     (HTTP error status, bad JSON, wrong shape/length, unknown tag)

No retries happen here; a caller that wants resilience retries the turn.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests

from packages.engine.errors import ProtocolError, TransportError
from packages.engine.feedback import GuessFeedback, Outcome, SlotFeedback
from packages.engine.validation import validate_guess

log = logging.getLogger(__name__)

DEFAULT_URL = "https://wordle.votee.dev:8000/random"
DEFAULT_TIMEOUT = 10.0

_REQUIRED_KEYS = ("slot", "guess", "result")


def parse_feedback(guess: str, payload: Any) -> GuessFeedback:
    """
    Turn a decoded JSON payload into a GuessFeedback for `guess`.

    Items may arrive in any order; they are sorted by slot and the slots must
    cover exactly 0..len(guess)-1. Each echoed letter must match the letter
    submitted at that slot.
    """
    if not isinstance(payload, list):
        raise ProtocolError(f"expected a JSON array, got {type(payload).__name__}")
    if len(payload) != len(guess):
        raise ProtocolError(f"expected {len(guess)} feedback items, got {len(payload)}")

    slots: List[SlotFeedback] = []
    for item in payload:
        if not isinstance(item, dict):
            raise ProtocolError(f"feedback item is not an object: {item!r}")
        missing = [k for k in _REQUIRED_KEYS if k not in item]
        if missing:
            raise ProtocolError(f"feedback item missing {missing}: {item!r}")

        slot, letter = item["slot"], item["guess"]
        # bool is an int subclass; reject it explicitly
        if not isinstance(slot, int) or isinstance(slot, bool):
            raise ProtocolError(f"slot is not an integer: {slot!r}")
        if not isinstance(letter, str):
            raise ProtocolError(f"letter is not a string: {letter!r}")

        slots.append(SlotFeedback(slot, letter.lower(), Outcome.from_wire(item["result"])))

    slots.sort(key=lambda f: f.slot)
    if [f.slot for f in slots] != list(range(len(guess))):
        raise ProtocolError(f"slots must be 0..{len(guess) - 1}, got {[f.slot for f in slots]}")
    for f in slots:
        if f.letter != guess[f.slot]:
            raise ProtocolError(
                f"slot {f.slot} echoes {f.letter!r} but {guess[f.slot]!r} was guessed")

    return GuessFeedback(guess, tuple(slots))


class OracleClient:
    """
    Submits guesses to the oracle over a (reusable) requests.Session.

    Usable as a context manager; the session is closed on exit only if this
    client created it.
    """

    def __init__(self, url: str = DEFAULT_URL, *, timeout: float = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = float(timeout)
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def __enter__(self) -> "OracleClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def submit_guess(self, candidate: str, session_seed: int, word_length: int) -> GuessFeedback:
        """
        Send one guess and return its parsed feedback.

        Args:
          candidate    : word of exactly `word_length` letters
          session_seed : identifies a reproducible secret-word session
          word_length  : positive word length, fixed for the game

        Raises:
          ValueError     : malformed candidate or word_length
          TransportError : network call failed to complete
          ProtocolError  : response is not valid feedback for `candidate`
        """
        if int(word_length) <= 0:
            raise ValueError(f"word_length must be positive; got {word_length}")
        if not validate_guess(candidate, word_length):
            raise ValueError(f"guess must be {word_length} letters a-z; got {candidate!r}")
        guess = candidate.strip().lower()

        params = {"guess": guess, "size": int(word_length), "seed": int(session_seed)}
        log.debug("GET %s params=%s", self.url, params)
        try:
            response = self.session.get(self.url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise TransportError(f"oracle request timed out after {self.timeout}s: {self.url}") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"oracle request to {self.url} failed: {e}") from e

        log.debug("oracle answered %s: %s", response.status_code, response.text)
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise ProtocolError(f"oracle returned HTTP {response.status_code}: {response.text!r}") from e

        try:
            payload = response.json()
        except requests.exceptions.JSONDecodeError as e:
            raise ProtocolError(f"oracle response is not JSON: {response.text!r}") from e

        return parse_feedback(guess, payload)
