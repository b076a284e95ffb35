# apps/cli/run.py
"""
CLI entry point: play one game of Wordle against the remote oracle.

This script:
  1) Validates the word list (prints counts + SHA; --strict aborts on issues).
  2) Loads the word list as the starting candidate set.
  3) Plays up to --max-turns turns, printing each guess and its feedback.

Exit codes: 0 won, 2 lost, 1 failed (startup, transport, protocol or
no-candidates error), 130 interrupted.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from packages.datasets import validate_wordlist, pretty_summary, load_word_list
from packages.engine import StartupError
from packages.harness import FAILED, GameConfig, run_session, format_outcome, print_turn
from packages.oracle import OracleClient
from packages.solvers import create_solver, get_solver_ids

log = logging.getLogger("wordle")

EXIT_WON = 0
EXIT_FAILED = 1
EXIT_LOST = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    d = GameConfig()
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordle-oracle: play Wordle against a remote oracle")
    ap.add_argument("--url", default=d.url, help="oracle endpoint")
    ap.add_argument("--seed", type=int, default=d.seed,
                    help="oracle session seed (selects the secret word)")
    ap.add_argument("--N", type=int, default=d.word_length, help="word length")
    ap.add_argument("--max-turns", type=int, default=d.max_turns, help="turn budget")
    ap.add_argument("--words", default=d.words, help="path to word list (one word per line)")
    ap.add_argument("--timeout", type=float, default=d.timeout,
                    help="seconds to wait for each oracle reply")
    ap.add_argument("--solver", default=d.solver, help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--rng-seed", type=int, default=d.rng_seed,
                    help="seed for guess selection (default: unseeded)")
    ap.add_argument("--strict", action="store_true",
                    help="abort if the word list fails validation")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="diagnostic log level (stderr)")
    return ap


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        max_turns=args.max_turns,
        word_length=args.N,
        seed=args.seed,
        url=args.url,
        timeout=args.timeout,
        words=args.words,
        solver=args.solver,
        rng_seed=args.rng_seed,
    )


def load_candidates(cfg: GameConfig, *, strict: bool = False) -> List[str]:
    """
    Validate and load the starting candidate set. Raises StartupError.
    """
    rep = validate_wordlist(cfg.word_length, cfg.words)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning("word list: %s", issue)
    if strict and not rep["passed"]:
        raise StartupError(f"word list failed validation: {'; '.join(rep['issues'])}")
    return load_word_list(cfg.words, cfg.word_length)


def main(argv: Optional[List[str]] = None, *, oracle=None) -> int:
    """
    Parse CLI args, load the word list, play one game. Returns the exit code.

    `oracle` replaces the HTTP client (anything with submit_guess); mainly
    for tests.
    """
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        cfg = config_from_args(args)
        solver = create_solver(cfg.solver)
    except ValueError as e:
        ap.error(str(e))

    client = oracle if oracle is not None else OracleClient(cfg.url, timeout=cfg.timeout)
    try:
        candidates = load_candidates(cfg, strict=args.strict)
        outcome = run_session(
            candidates, client, cfg.max_turns, cfg.seed, cfg.word_length,
            solver=solver, seed=cfg.rng_seed, on_turn=print_turn,
        )
    except StartupError as e:
        sys.stderr.write(f"error: {e}\n")
        return EXIT_FAILED
    except KeyboardInterrupt:
        sys.stderr.write("interrupted\n")
        return EXIT_INTERRUPTED
    finally:
        if oracle is None:
            client.close()

    if outcome.status == FAILED:
        sys.stderr.write(f"error: {format_outcome(outcome)}\n")
        return EXIT_FAILED
    print(format_outcome(outcome))
    return EXIT_WON if outcome.won else EXIT_LOST


if __name__ == "__main__":
    sys.exit(main())
