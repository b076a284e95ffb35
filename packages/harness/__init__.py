from .core import run_game, run_session, GameOutcome, TurnRecord, WON, LOST, FAILED
from .config import GameConfig, DEFAULT_WORDS, WORDLE_MAX_TURNS, WORDLE_N
from .io import format_turn, format_outcome, print_turn

__all__ = [
    "run_game", "run_session", "GameOutcome", "TurnRecord", "WON", "LOST", "FAILED",
    "GameConfig", "DEFAULT_WORDS", "WORDLE_MAX_TURNS", "WORDLE_N", "format_turn", "format_outcome",
    "print_turn",
]
