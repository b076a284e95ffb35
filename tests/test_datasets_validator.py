from pathlib import Path

import pytest

from packages.datasets import validate_wordlist, pretty_summary, load_word_list
from packages.engine import StartupError


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is True
    assert rep["count"] == 5 and rep["unique_count"] == 5
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "words=5" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # wrong length, invalid chars, uppercase, blank line and a duplicate
    words = tmp_path / "words_5.txt"
    words.write_text("crane\ncranes\n???\nRAISE\n\ncrane\n", encoding="utf-8")

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_load_word_list_cleans_and_dedupes(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    words.write_text(" Crane \r\nraise\ncranes\n\ncrane\nst4re\nstare\n", encoding="utf-8")
    assert load_word_list(words, 5) == ["crane", "raise", "stare"]


def test_load_word_list_failures_are_startup_errors(tmp_path: Path):
    with pytest.raises(StartupError):
        load_word_list(tmp_path / "missing.txt", 5)

    short = tmp_path / "short.txt"
    _write(short, ["ant", "bee"])
    with pytest.raises(StartupError):
        load_word_list(short, 5)

    binary = tmp_path / "binary.txt"
    binary.write_bytes(b"\xff\xfe\x00crane")
    with pytest.raises(StartupError):
        load_word_list(binary, 5)


def test_bundled_word_list_is_clean():
    bundled = Path(__file__).resolve().parent.parent / "packages/datasets/data/words_5.txt"
    rep = validate_wordlist(5, str(bundled))
    assert rep["passed"] is True, rep["issues"]


def test_validate_wordlist_unreadable_is_a_failed_report(tmp_path: Path):
    binary = tmp_path / "binary.txt"
    binary.write_bytes(b"\xff\xfe\x00crane")
    for path in (binary, tmp_path):
        rep = validate_wordlist(5, str(path))
        assert rep["exists"] is True and rep["passed"] is False
        assert any("unreadable" in msg for msg in rep["issues"])
        assert pretty_summary(rep).endswith("FAIL")
