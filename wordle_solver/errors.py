"""
Error hierarchy for the solver.

Every failure the core can report is one of these. They are raised to the
immediate caller and never logged-and-ignored inside the core:

  WordleError
    PuzzleError
      NoWordsForLength   - puzzle requested for a length with no words
    CheckWordError
      InvalidLength      - guess length differs from the hidden word
    SolveError
      EmptyDictionary    - no candidates at all for the puzzle's length
      SolutionNotFound   - constraints drove the candidate set empty
"""

from __future__ import annotations

from typing import List


class WordleError(Exception):
    """Base class for all solver errors."""


class PuzzleError(WordleError):
    pass


class NoWordsForLength(PuzzleError, LookupError):
    def __init__(self, length: int):
        super().__init__(f"no words of length {length} in dictionary")
        self.length = length


class CheckWordError(WordleError, ValueError):
    pass


class InvalidLength(CheckWordError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"guess has {actual} characters, puzzle has {expected}")
        self.expected = expected
        self.actual = actual


class SolveError(WordleError):
    """
    Terminal failure of a solve attempt.

    `guesses` holds the Guess records made before the failure (possibly empty),
    so callers such as the harness can still report the attempt.
    """

    def __init__(self, message: str, guesses: List | None = None):
        super().__init__(message)
        self.guesses = list(guesses or [])


class EmptyDictionary(SolveError):
    def __init__(self, length: int, guesses: List | None = None):
        super().__init__(f"dictionary has no words of length {length}", guesses)
        self.length = length


class SolutionNotFound(SolveError):
    def __init__(self, guesses: List | None = None):
        super().__init__("candidate set exhausted before the word was found", guesses)
