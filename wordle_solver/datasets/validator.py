"""
Word-list report for wordle_solver.

What this module does:
- Describe a raw word list (one word per line) before it is turned into a
  Dictionary: line counts, blank lines, duplicates after normalization,
  words per length, and entries containing non-alphabetic characters.
- Compute the SHA-256 of the raw file so run manifests can pin the exact input.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from wordle_solver.datasets import describe_wordlist, pretty_summary
    rep = describe_wordlist("data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict
import hashlib


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    path: str                 # file path (as given)
    exists: bool              # did the file exist on disk?
    sha256: str               # SHA-256 of raw file bytes (empty string if missing)
    lines: int                # raw line count
    blank_lines: int          # empty/whitespace-only lines (dropped)
    words: int                # non-blank entries
    unique_words: int         # distinct entries after strip + lowercase
    non_alpha: int            # entries with characters other than letters
    by_length: Dict[int, int] = field(default_factory=dict)  # unique words per length


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def describe_wordlist(path: str | Path) -> Dict:
    """
    Summarize a raw word list.

    A missing file is reported (exists=False) rather than raised, so the CLI
    can print the report before failing on the actual load.
    """
    p = Path(path)
    if not p.exists():
        return asdict(WordlistReport(str(path), False, "", 0, 0, 0, 0, 0))

    lines = 0
    blank = 0
    non_alpha = 0
    seen = set()
    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            lines += 1
            w = raw.strip().lower()
            if not w:
                blank += 1
                continue
            if not w.isalpha():
                non_alpha += 1
            seen.add(w)

    by_length = Counter(len(w) for w in seen)
    rep = WordlistReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        lines=lines,
        blank_lines=blank,
        words=lines - blank,
        unique_words=len(seen),
        non_alpha=non_alpha,
        by_length=dict(sorted(by_length.items())),
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words.txt | words=12972 (uniq=12972, sha=abc123def456) | blank=0 | non-alpha=0 | lengths=5:12972
    """
    if not report["exists"]:
        return f"{report['path']} | MISSING"
    lengths = ",".join(f"{n}:{c}" for n, c in report["by_length"].items()) or "-"
    return (
        f"{report['path']} | words={report['words']} "
        f"(uniq={report['unique_words']}, sha={report['sha256'][:12]}) "
        f"| blank={report['blank_lines']} | non-alpha={report['non_alpha']} "
        f"| lengths={lengths}"
    )
