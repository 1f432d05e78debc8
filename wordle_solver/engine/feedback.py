"""
Feedback for a single (guess, answer) pair.

Conventions (pattern characters, kept compatible with the usual notation):
  - 'G'  : EXACT       = correct letter in the correct position
  - 'Y'  : WRONG_PLACE = letter occurs in the answer, but not here
  - '-'  : ABSENT      = letter does not occur in the answer at all

This implementation is per-position independent: every position is judged
on its own, and letter multiplicity is NOT capped. If the answer holds one
'a' and the guess two, both 'a's are marked (EXACT or WRONG_PLACE). As a
consequence ABSENT always means "nowhere in the answer".

Examples:
  score("bad", "abc").pattern() -> "YY-"
  score("aaa", "abc").pattern() -> "GYY"
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, List, Tuple

from wordle_solver.errors import InvalidLength


class Status(Enum):
    EXACT = "G"
    WRONG_PLACE = "Y"
    ABSENT = "-"


class WordCheck:
    """Ordered (character, Status) pairs, one per position of the guess."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Tuple[str, Status]] = ()):
        self._items: Tuple[Tuple[str, Status], ...] = tuple(items)

    def word(self) -> str:
        """The guessed word, as scored (lowercase)."""
        return "".join(ch for ch, _ in self._items)

    def pattern(self) -> str:
        """Compact feedback string, e.g. 'GY-'."""
        return "".join(st.value for _, st in self._items)

    def is_solved(self) -> bool:
        return all(st is Status.EXACT for _, st in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Tuple[str, Status]]:
        return iter(self._items)

    def __getitem__(self, i: int) -> Tuple[str, Status]:
        return self._items[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordCheck):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"WordCheck({self.word()!r}, {self.pattern()!r})"


def score(guess: str, answer: str) -> WordCheck:
    """
    Compute feedback for `guess` against `answer`.

    Preconditions:
      - both lowercase (Puzzle.check lowercases the guess)

    Raises:
      InvalidLength if the two words differ in character count.
    """
    if len(guess) != len(answer):
        raise InvalidLength(len(answer), len(guess))

    items: List[Tuple[str, Status]] = []
    for g, a in zip(guess, answer):
        if g == a:
            st = Status.EXACT
        elif g in answer:
            st = Status.WRONG_PLACE
        else:
            st = Status.ABSENT
        items.append((g, st))
    return WordCheck(items)
