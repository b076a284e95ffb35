import pytest

from packages.engine import Outcome, make_feedback


def positional_outcomes(guess, secret):
    """Slot outcomes for words without repeated letters (test oracle only)."""
    out = []
    for i, ch in enumerate(guess):
        if secret[i] == ch:
            out.append(Outcome.CORRECT)
        elif ch in secret:
            out.append(Outcome.PRESENT)
        else:
            out.append(Outcome.ABSENT)
    return out


class ScriptedOracle:
    """
    Stands in for the HTTP client. Scores against `secret`, or raises
    `fail_with` once `fail_on_call` calls have been made.
    """

    def __init__(self, secret, *, fail_with=None, fail_on_call=1):
        self.secret = secret
        self.fail_with = fail_with
        self.fail_on_call = fail_on_call
        self.calls = []

    def submit_guess(self, candidate, session_seed, word_length):
        self.calls.append((candidate, session_seed, word_length))
        if self.fail_with is not None and len(self.calls) >= self.fail_on_call:
            raise self.fail_with
        return make_feedback(candidate, positional_outcomes(candidate, self.secret))


@pytest.fixture
def oracle_for():
    return ScriptedOracle


@pytest.fixture
def words_file(tmp_path):
    def _write(lines, name="words_5.txt"):
        p = tmp_path / name
        p.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return p
    return _write
