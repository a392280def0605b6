"""
Parallel solver using multiprocessing.

Splits the game tree at the root: each top-level reply is solved in its
own worker process, then the results are folded with the same
negate-and-max rule as the sequential search.
"""

import logging
from multiprocessing import Pool, cpu_count
from typing import Optional, Tuple
from tqdm import tqdm

from ..core import Board
from .negamax import Outcome, evaluate

logger = logging.getLogger(__name__)


def _solve_subtree(bits: Tuple[int, int]) -> Tuple[int, int]:
    """
    Worker function: solve one top-level reply.

    Args:
        bits: (player, opponent) of the reply board

    Returns:
        (outcome value, games) from the reply's side-to-move perspective
    """
    player, opponent = bits
    outcome, games = evaluate(Board(player=player, opponent=opponent))
    return outcome.value, games


class ParallelSolver:
    """
    Root-split parallel solver.

    Every top-level reply is evaluated (there is no cutoff between
    subtrees), so the reported count can exceed the sequential one when
    the position is a win for the side to move. The outcome always matches.
    """

    def __init__(self, num_workers: Optional[int] = None, show_progress: bool = False):
        """
        Initialize parallel solver.

        Args:
            num_workers: Number of worker processes (default: CPU count)
            show_progress: Show a tqdm bar over top-level replies
        """
        if num_workers is not None and num_workers < 1:
            raise ValueError(f"Invalid worker count {num_workers}, must be at least 1")
        self.num_workers = num_workers or cpu_count()
        self.show_progress = show_progress

    def solve(self, board: Board) -> Tuple[Outcome, int]:
        """
        Solve a position across worker processes.

        Args:
            board: Position to solve

        Returns:
            (outcome, positions_visited)
        """
        if board.has_lost():
            return Outcome.LOSS, 1

        replies = [(child.player, child.opponent) for child in board.moves()]
        if not replies:
            return Outcome.DRAW, 1

        processes = min(self.num_workers, len(replies))
        logger.info(f"Solving {len(replies)} subtrees with {processes} worker processes")

        best = Outcome.LOSS
        games = 0
        with Pool(processes=processes) as pool:
            # imap keeps results in move order
            results = pool.imap(_solve_subtree, replies)
            for result, n in tqdm(
                results,
                total=len(replies),
                desc="Subtrees",
                unit=" move",
                disable=not self.show_progress,
            ):
                games += n
                best = max(best, Outcome(result).complement())

        logger.info(f"Parallel solve complete: {best.name} after {games:,} games")
        return best, games
