"""
Guess / feedback / filter loop.

One call to Solver.run() is one solve attempt:
  1) candidates = every dictionary word of the puzzle's length
  2) pick a guess with the strategy, score it with the puzzle
  3) stop if solved; otherwise fold the feedback into a fresh Chooser
     and keep only the candidates it accepts
  4) repeat until solved or the candidate set is empty

There is no iteration cap. Every unsolved guess is eliminated by its own
feedback (it either has an ABSENT letter or a letter banned at its own
position), so the loop ends within |candidates| rounds.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List

from wordle_solver.datasets.dictionary import Dictionary
from wordle_solver.errors import EmptyDictionary, SolutionNotFound
from wordle_solver.strategies import BaseStrategy, create_strategy
from .constraints import Chooser
from .feedback import WordCheck
from .puzzle import Puzzle

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Guess:
    check: WordCheck   # feedback for this guess
    remaining: int     # candidates left after folding it in (0 when solved)

    @property
    def word(self) -> str:
        return self.check.word()


@dataclass
class SolveResult:
    word: str
    guesses: List[Guess] = field(default_factory=list)


class Solver:
    """
    Drives one or more solve attempts with a given strategy.

    Args:
        strategy: guess selection; uniform random when omitted
        rng:      random source for guess selection. Pass random.Random(seed)
                  for reproducible runs.
    """

    def __init__(self, strategy: BaseStrategy | None = None,
                 rng: random.Random | None = None):
        self.strategy = strategy if strategy is not None else create_strategy()
        self.rng = rng if rng is not None else random.Random()

    def solve(self, puzzle: Puzzle, dictionary: Dictionary) -> str:
        """Solve `puzzle` and return the hidden word."""
        return self.run(puzzle, dictionary).word

    def run(self, puzzle: Puzzle, dictionary: Dictionary) -> SolveResult:
        """
        Solve `puzzle` and return the word together with every guess made.

        Raises:
            EmptyDictionary  no words of the puzzle's length
            SolutionNotFound candidates ran out before a match
            InvalidLength    propagated from Puzzle.check (not expected, since
                             guesses come from the same-length bucket)
        """
        n = puzzle.length
        words = dictionary.words_of_length(n)
        if not words:
            raise EmptyDictionary(n)

        chooser = Chooser()
        candidates = set(words)
        guesses: List[Guess] = []

        iteration = 0
        while True:
            iteration += 1
            if not candidates:
                raise SolutionNotFound(guesses)

            guess = self.strategy.choose(candidates, self.rng)
            check = puzzle.check(guess)
            log.debug("%s: iteration #%d guess=%s pattern=%s candidates=%d",
                      self.strategy.id, iteration, guess, check.pattern(), len(candidates))

            if check.is_solved():
                guesses.append(Guess(check, 0))
                return SolveResult(check.word(), guesses)

            chooser.fold(check)
            candidates = chooser.filter(candidates)
            guesses.append(Guess(check, len(candidates)))
