import json

import pytest
import requests

from packages.engine import Outcome, ProtocolError, TransportError
from packages.oracle import OracleClient, parse_feedback

URL = "http://oracle.test/random"


def _response(body, status=200):
    r = requests.Response()
    r.status_code = status
    r._content = (body if isinstance(body, str) else json.dumps(body)).encode("utf-8")
    r.encoding = "utf-8"
    r.url = URL
    return r


def _wire(guess, results):
    return [{"slot": i, "guess": ch, "result": res} for i, (ch, res) in enumerate(zip(guess, results))]


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.requests = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.requests.append((url, params, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self):
        self.closed = True


def test_submit_guess_sends_query_and_parses_feedback():
    body = _wire("crane", ["correct", "absent", "present", "absent", "correct"])
    session = FakeSession(_response(body))
    client = OracleClient(URL, timeout=3, session=session)

    gf = client.submit_guess("crane", 123, 5)

    assert session.requests == [(URL, {"guess": "crane", "size": 5, "seed": 123}, 3.0)]
    assert gf.guess == "crane"
    assert gf.outcomes == (Outcome.CORRECT, Outcome.ABSENT, Outcome.PRESENT,
                           Outcome.ABSENT, Outcome.CORRECT)
    assert [f.slot for f in gf.feedback] == [0, 1, 2, 3, 4]
    assert not gf.is_win


def test_submit_guess_lowercases_the_candidate():
    session = FakeSession(_response(_wire("crane", ["correct"] * 5)))
    gf = OracleClient(URL, session=session).submit_guess("CRANE", 1, 5)
    assert session.requests[0][1]["guess"] == "crane"
    assert gf.is_win


@pytest.mark.parametrize("candidate,size", [("cranes", 5), ("cr4ne", 5), ("crane", 0)])
def test_submit_guess_rejects_malformed_input_before_any_request(candidate, size):
    session = FakeSession(_response([]))
    with pytest.raises(ValueError):
        OracleClient(URL, session=session).submit_guess(candidate, 1, size)
    assert session.requests == []


@pytest.mark.parametrize("exc", [
    requests.exceptions.ConnectionError("refused"),
    requests.exceptions.Timeout("slow"),
    requests.exceptions.TooManyRedirects("loop"),
])
def test_transport_failures_become_transport_error(exc):
    client = OracleClient(URL, session=FakeSession(exc=exc))
    with pytest.raises(TransportError) as ei:
        client.submit_guess("crane", 1, 5)
    assert ei.value.__cause__ is exc


@pytest.mark.parametrize("body,status", [
    ("not json", 200),
    ("", 200),
    ({"slot": 0}, 200),
    (_wire("crane", ["correct"] * 5), 500),
    (_wire("crane", ["correct"] * 5), 404),
])
def test_bad_responses_become_protocol_error(body, status):
    client = OracleClient(URL, session=FakeSession(_response(body, status)))
    with pytest.raises(ProtocolError):
        client.submit_guess("crane", 1, 5)


def test_parse_feedback_sorts_slots():
    body = list(reversed(_wire("crane", ["absent", "absent", "correct", "absent", "present"])))
    gf = parse_feedback("crane", body)
    assert [f.letter for f in gf.feedback] == list("crane")
    assert gf.outcomes[2] is Outcome.CORRECT


@pytest.mark.parametrize("payload", [
    _wire("cran", ["absent"] * 4),                                    # too short
    _wire("cranes", ["absent"] * 6),                                  # too long
    _wire("crane", ["absent", "absent", "green", "absent", "absent"]),  # unknown tag
    _wire("trace", ["absent"] * 5),                                   # letters don't match
    [{"slot": i, "guess": ch, "result": "absent"} for i, ch in zip([0, 1, 1, 3, 4], "crane")],
    [{"slot": str(i), "guess": ch, "result": "absent"} for i, ch in enumerate("crane")],
    [{"slot": i, "result": "absent"} for i in range(5)],
    ["c", "r", "a", "n", "e"],
    None,
])
def test_parse_feedback_rejects_malformed_payloads(payload):
    with pytest.raises(ProtocolError):
        parse_feedback("crane", payload)


def test_client_closes_only_its_own_session():
    session = FakeSession()
    with OracleClient(URL, session=session):
        pass
    assert session.closed is False

    client = OracleClient(URL)
    assert isinstance(client.session, requests.Session)
    client.close()
