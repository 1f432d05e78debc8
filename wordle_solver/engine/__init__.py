from .feedback import Status, WordCheck, score
from .puzzle import Puzzle
from .constraints import Chooser
from .solver import Guess, SolveResult, Solver

__all__ = ["Status", "WordCheck", "score", "Puzzle", "Chooser",
           "Guess", "SolveResult", "Solver"]
