from __future__ import annotations
import random
from typing import Collection, Dict, Type

# ---- Global strategy registry ----
REGISTRY: Dict[str, Type["BaseStrategy"]] = {}


def register(cls: Type["BaseStrategy"]) -> Type["BaseStrategy"]:
    """
    Decorator: @register on a strategy class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate strategy id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that guess-selection strategies inherit ----
class BaseStrategy:
    """
    Picks the next guess from the current candidate set.

    Strategies only select; they never filter. The Solver owns the candidate
    set and the constraints, so a strategy can be swapped without touching
    the filtering engine.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def choose(self, candidates: Collection[str], rng: random.Random) -> str:
        """
        Return one element of `candidates` (never empty when called by Solver).
        Any randomness must come from `rng` so seeded runs are reproducible.
        """
        raise NotImplementedError("Override in subclass")
