"""Strong solver for noughts and crosses (Tic-Tac-Toe)."""

from .core import Board, InvalidBoardError, InvalidMoveError, SolverError
from .solver import Outcome, evaluate

__version__ = "0.1.0"

__all__ = [
    "Board",
    "InvalidBoardError",
    "InvalidMoveError",
    "SolverError",
    "Outcome",
    "evaluate",
]
