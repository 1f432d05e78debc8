"""
Constraint accumulator ("Chooser") and candidate filtering.

Given:
  - the feedback of every guess made so far in one solve attempt
  - a candidate set of same-length words

Return:
  - the words still consistent with everything learned.

Feedback is folded in position by position:
  EXACT        -> fixed_position[pos] = ch
  WRONG_PLACE  -> ch is banned at pos, but required somewhere in the word
  ABSENT       -> ch is banned everywhere

A positive fact for a letter always erases an earlier "absent" deduction for
that letter, and an "absent" fact retracts any fixed position holding it, so
no letter is ever required and excluded at the same time.

This is the core step that turns feedback into a shrinking candidate set.
A Chooser belongs to a single solve attempt and is never shared.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, Set

from .feedback import Status, WordCheck


class Chooser:
    def __init__(self):
        # position -> letter known to be there
        self.fixed_position: Dict[int, str] = {}
        # position -> letters known NOT to be there (but present elsewhere)
        self.excluded_position: Dict[int, Set[str]] = defaultdict(set)
        self.required_letters: Set[str] = set()
        self.excluded_letters: Set[str] = set()

    def add_exact(self, pos: int, ch: str) -> None:
        self.fixed_position[pos] = ch
        self.excluded_letters.discard(ch)

    def add_wrong_place(self, pos: int, ch: str) -> None:
        self.excluded_position[pos].add(ch)
        self.required_letters.add(ch)
        self.excluded_letters.discard(ch)

    def add_absent(self, ch: str) -> None:
        for pos in [p for p, c in self.fixed_position.items() if c == ch]:
            del self.fixed_position[pos]
        self.required_letters.discard(ch)
        self.excluded_letters.add(ch)

    def fold(self, check: WordCheck) -> None:
        """Apply every (position, character, status) triple of one guess."""
        for pos, (ch, st) in enumerate(check):
            if st is Status.EXACT:
                self.add_exact(pos, ch)
            elif st is Status.WRONG_PLACE:
                self.add_wrong_place(pos, ch)
            else:
                self.add_absent(ch)

    def accepts(self, word: str) -> bool:
        """True if `word` satisfies every accumulated constraint."""
        for pos, ch in self.fixed_position.items():
            if pos >= len(word) or word[pos] != ch:
                return False
        for pos, banned in self.excluded_position.items():
            if pos < len(word) and word[pos] in banned:
                return False
        for ch in self.required_letters:
            if ch not in word:
                return False
        for ch in self.excluded_letters:
            if ch in word:
                return False
        return True

    def filter(self, words: Iterable[str]) -> Set[str]:
        """
        Keep only words consistent with all feedback so far.
        The result is always a subset of `words`.
        """
        return {w for w in words if self.accepts(w)}

    def __repr__(self) -> str:
        wrong = {p: sorted(s) for p, s in sorted(self.excluded_position.items()) if s}
        return (
            f"Chooser(fixed={dict(sorted(self.fixed_position.items()))}, "
            f"wrong_place={wrong}, "
            f"required={sorted(self.required_letters)}, "
            f"excluded={sorted(self.excluded_letters)})"
        )
