from __future__ import annotations
from pathlib import Path
from typing import List

from packages.engine.errors import StartupError


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def load_word_list(p: Path | str, N: int) -> List[str]:
    """
    Load the starting candidate set: one word per line, lowercased, keeping
    only N-letter alphabetic tokens, first occurrence wins.

    Raises StartupError if the file is missing, unreadable, or yields no words.
    """
    try:
        lines = read_lines(p)
    except (OSError, UnicodeDecodeError) as e:
        raise StartupError(f"cannot read word list {p}: {e}") from e

    words = [w.strip().lower() for w in lines]
    words = unique_preserve_order(w for w in words if len(w) == N and w.isalpha())
    if not words:
        raise StartupError(f"word list {p} contains no {N}-letter words")
    return words
