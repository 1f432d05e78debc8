from __future__ import annotations
from pathlib import Path
from typing import List

from .dictionary import Dictionary


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_dictionary(p: Path | str) -> Dictionary:
    """
    Build a Dictionary from a word list with one word per line.
    Surrounding whitespace and mixed case are fine; Dictionary normalizes them.
    """
    return Dictionary.build(read_lines(p))
