"""
A single game: one hidden word and the feedback queries against it.
"""

from __future__ import annotations

import random

from wordle_solver.datasets.dictionary import Dictionary
from wordle_solver.errors import InvalidLength, NoWordsForLength
from .feedback import WordCheck, score


class Puzzle:
    """
    Holds the hidden word. Immutable once built.

    Use Puzzle.new() to draw a word from a dictionary; Puzzle(word) is for
    callers (and tests) that already know the answer.
    """

    __slots__ = ("_word",)

    def __init__(self, word: str):
        w = word.strip().lower()
        if not w:
            raise ValueError("hidden word must not be empty")
        self._word = w

    @classmethod
    def new(cls, length: int, dictionary: Dictionary,
            rng: random.Random | None = None) -> "Puzzle":
        """
        Draw a hidden word of `length` uniformly at random.

        Args:
            length:     required word length
            dictionary: source of words
            rng:        random source; a fresh unseeded one if omitted.
                        Candidates are sorted first so a seeded rng picks the
                        same word across processes.

        Raises:
            NoWordsForLength if the dictionary has no words of that length.
        """
        words = dictionary.words_of_length(length)
        if not words:
            raise NoWordsForLength(length)
        rng = rng if rng is not None else random.Random()
        return cls(rng.choice(sorted(words)))

    @property
    def length(self) -> int:
        return len(self._word)

    def __len__(self) -> int:
        return len(self._word)

    def check(self, guess: str) -> WordCheck:
        """
        Score `guess` (case-insensitive) against the hidden word.

        Raises:
            InvalidLength if the guess has a different number of characters.
        """
        g = guess.lower()
        if len(g) != len(self._word):
            raise InvalidLength(len(self._word), len(g))
        return score(g, self._word)

    @staticmethod
    def is_solved(check: WordCheck) -> bool:
        return check.is_solved()

    def reveal(self) -> str:
        """The hidden word. Meant for reporting after a game ends."""
        return self._word

    def __repr__(self) -> str:
        return f"Puzzle(length={self.length})"
