"""
Exhaustive negamax search.

Classifies a position as a win, draw, or loss for the side to move under
perfect play by both sides. Because every Board is relative to the side
to move, a child's outcome is negated to get the parent's view, and the
parent takes the maximum over its children.
"""

import logging
from enum import IntEnum
from typing import Tuple

from ..core import Board

logger = logging.getLogger(__name__)


class Outcome(IntEnum):
    """Game-theoretic result for the side to move (Loss < Draw < Win)."""

    LOSS = -1
    DRAW = 0
    WIN = 1

    def complement(self) -> "Outcome":
        """Same result seen from the other side (Win <-> Loss)."""
        return Outcome(-self.value)


def _negamax(board: Board, prune: bool) -> Tuple[int, int]:
    """
    Recursive search on raw integer outcomes.

    Returns:
        (outcome, count) where count is the number of finished games reached
    """
    if board.has_lost():
        return Outcome.LOSS.value, 1

    best = Outcome.LOSS.value
    games = 0
    for child in board.moves():
        result, n = _negamax(child, prune)
        games += n
        if -result > best:
            best = -result
            if prune and best == Outcome.WIN.value:
                break

    # No empty cells and nobody won
    if games == 0:
        return Outcome.DRAW.value, 1
    return best, games


def evaluate(board: Board, prune: bool = True) -> Tuple[Outcome, int]:
    """
    Solve a position.

    Args:
        board: Position to solve (side to move is board.player)
        prune: Stop examining replies as soon as a winning one is found.
            With prune=False every finished game is enumerated.

    Returns:
        (outcome, positions_visited). A terminal board counts as 1; any other
        board counts the sum of its expanded successors.
    """
    result, games = _negamax(board, prune)
    outcome = Outcome(result)
    logger.debug(f"Evaluated {board!r}: {outcome.name} after {games:,} games")
    return outcome, games
