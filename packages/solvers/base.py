from __future__ import annotations
import random
from typing import Dict, List, Type

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A solver picks the next guess from the current game state.

    `rng` is injectable: pass a seeded random.Random for reproducible games,
    or leave it None to get an unseeded generator.
    """
    id = "base"

    def __init__(self, rng: random.Random | None = None):
        self.N: int = 5
        self.candidates: List[str] = []
        self.rng = rng if rng is not None else random.Random()

    def reset(self, *, candidates: List[str], N: int, seed: int | None = None) -> None:
        self.candidates = list(candidates)
        self.N = int(N)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
