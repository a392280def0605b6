"""Game solving algorithms."""

from .negamax import Outcome, evaluate
from .parallel import ParallelSolver
from .sequence import random_win_sequence

__all__ = [
    "Outcome",
    "evaluate",
    "ParallelSolver",
    "random_win_sequence",
]
