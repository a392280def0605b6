"""Core board representation and rules."""

from .board import Board, LINE_MASKS, FULL_BOARD, has_won, lowest_bit
from .exceptions import SolverError, InvalidBoardError, InvalidMoveError

__all__ = [
    "Board",
    "LINE_MASKS",
    "FULL_BOARD",
    "has_won",
    "lowest_bit",
    "SolverError",
    "InvalidBoardError",
    "InvalidMoveError",
]
