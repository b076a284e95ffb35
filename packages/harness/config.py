"""
Game configuration.

Every knob of a run lives here with its default; the CLI builds one of these
from argparse and hands the fields to the oracle client and the game loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from packages.oracle.client import DEFAULT_TIMEOUT, DEFAULT_URL

# Wordle's usual turn budget and word length.
WORDLE_MAX_TURNS = 6
WORDLE_N = 5

# Bundled dictionary, resolved from the installed package rather than the cwd
DEFAULT_WORDS = str(Path(__file__).resolve().parents[1] / "datasets" / "data" / "words_5.txt")


@dataclass
class GameConfig:
    max_turns: int = WORDLE_MAX_TURNS
    word_length: int = WORDLE_N
    seed: int = 123                      # oracle session (secret word) id
    url: str = DEFAULT_URL
    timeout: float = DEFAULT_TIMEOUT     # seconds per oracle request
    words: str = DEFAULT_WORDS
    solver: str = "random_consistent"
    rng_seed: int | None = None          # guess selection; None = unseeded

    def __post_init__(self):
        if self.max_turns <= 0:
            raise ValueError(f"max_turns must be positive; got {self.max_turns}")
        if self.word_length <= 0:
            raise ValueError(f"word_length must be positive; got {self.word_length}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive; got {self.timeout}")
