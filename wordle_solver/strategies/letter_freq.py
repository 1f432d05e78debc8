"""
Letter-Frequency strategy (distinct-letter coverage).

Idea:
  - Build a letter histogram over the CURRENT candidate set (already filtered
    by past feedback). Score each candidate as the sum of its DISTINCT
    letters' frequencies (Words.unique_freq). Pick the max; break ties with
    the rng.

Why it works:
  - Early rounds: favors words that cover common letters, so the feedback
    tends to cut the candidate set harder.
  - Later rounds: the histogram reflects the constraints and the top word
    still fits them, since only candidates are ever guessed.
"""

from __future__ import annotations

import random
from typing import Collection, List

from wordle_solver.datasets.dictionary import Words
from .base import BaseStrategy, register


@register
class LetterFreqStrategy(BaseStrategy):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "1.0.0"

    def choose(self, candidates: Collection[str], rng: random.Random) -> str:
        if not candidates:
            raise ValueError("cannot choose from an empty candidate set")

        stats = Words(candidates)

        best_score = None
        best_words: List[str] = []
        for w in sorted(stats.words):
            s = stats.unique_freq(w)
            if best_score is None or s > best_score:
                best_score = s
                best_words = [w]
            elif s == best_score:
                best_words.append(w)

        return best_words[rng.randrange(len(best_words))]
