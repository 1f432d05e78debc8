"""
Uniform random strategy.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (words still
    consistent with all feedback so far).

Notes:
  - Candidates are sorted before choosing: set iteration order for strings
    changes between interpreter runs, and a seeded rng should pick the same
    word every time.
  - This is the default; it does not try to maximize information gain.
"""

from __future__ import annotations

import random
from typing import Collection
from .base import BaseStrategy, register


@register
class RandomStrategy(BaseStrategy):
    id = "random"
    name = "Uniform Random"
    version = "1.0.0"

    def choose(self, candidates: Collection[str], rng: random.Random) -> str:
        if not candidates:
            raise ValueError("cannot choose from an empty candidate set")
        return rng.choice(sorted(candidates))
