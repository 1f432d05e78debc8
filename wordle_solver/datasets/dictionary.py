"""
In-memory dictionary grouped by word length.

A Dictionary is built once from raw lines (one word per entry) and never
changes afterwards:
  - each entry is stripped and lowercased
  - blank entries are dropped
  - words are grouped by character count (codepoints, not bytes)
  - duplicates collapse

Each length bucket is a `Words` object that also carries a letter histogram
over the bucket, used by frequency-based strategies.

Example:
    d = Dictionary.build(["Crane", " raise\\n", "cat"])
    d.words_of_length(5)  -> frozenset({"crane", "raise"})
    d.words_of_length(4)  -> None
"""

from __future__ import annotations

from collections import Counter, defaultdict
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Set


class Words:
    """All words of a single length plus their letter frequencies."""

    __slots__ = ("_words", "_freqs")

    def __init__(self, words: Iterable[str]):
        self._words: FrozenSet[str] = frozenset(words)
        self._freqs: Counter[str] = Counter(ch for w in self._words for ch in w)

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    @property
    def freqs(self) -> Mapping[str, int]:
        return MappingProxyType(self._freqs)

    def freq(self, word: str) -> int:
        """Sum of letter counts over every character of `word` (repeats included)."""
        return sum(self._freqs.get(ch, 0) for ch in word)

    def unique_freq(self, word: str) -> int:
        """Like freq(), but each distinct character counts once."""
        return sum(self._freqs.get(ch, 0) for ch in set(word))

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words


class Dictionary:
    """Immutable mapping: word length -> Words."""

    def __init__(self, raw_words: Iterable[str]):
        groups: Dict[int, Set[str]] = defaultdict(set)
        for raw in raw_words:
            w = raw.strip().lower()
            if not w:
                continue
            groups[len(w)].add(w)

        self._by_len: Mapping[int, Words] = MappingProxyType(
            {n: Words(ws) for n, ws in groups.items()}
        )

    @classmethod
    def build(cls, raw_words: Iterable[str]) -> "Dictionary":
        return cls(raw_words)

    def get(self, length: int) -> Optional[Words]:
        """Return the Words bucket for `length`, or None if there is none."""
        return self._by_len.get(length)

    def words_of_length(self, length: int) -> Optional[FrozenSet[str]]:
        bucket = self._by_len.get(length)
        return bucket.words if bucket is not None else None

    def lengths(self) -> List[int]:
        return sorted(self._by_len)

    def __len__(self) -> int:
        return sum(len(b) for b in self._by_len.values())

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        bucket = self._by_len.get(len(word))
        return bucket is not None and word in bucket

    def __repr__(self) -> str:
        sizes = ", ".join(f"{n}: {len(self._by_len[n])}" for n in self.lengths())
        return f"Dictionary({{{sizes}}})"
