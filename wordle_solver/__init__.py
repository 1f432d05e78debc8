from .datasets import Dictionary, load_dictionary
from .engine import Puzzle, Solver, Status, WordCheck
from .errors import (
    WordleError, NoWordsForLength, InvalidLength, EmptyDictionary, SolutionNotFound,
)

__version__ = "0.1.0"

__all__ = [
    "Dictionary", "load_dictionary", "Puzzle", "Solver", "Status", "WordCheck",
    "WordleError", "NoWordsForLength", "InvalidLength", "EmptyDictionary",
    "SolutionNotFound",
]
