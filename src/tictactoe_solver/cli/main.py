"""
Main CLI for the Tic-Tac-Toe solver.
"""

import argparse
import logging
import random
import sys
import time

from ..core import Board, InvalidBoardError
from ..solver import Outcome, ParallelSolver, evaluate, random_win_sequence
from ..utils.rich_display import SolverDisplay, setup_rich_logging

RESULT_SENTENCES = {
    Outcome.WIN: "win for the first player",
    Outcome.DRAW: "draw",
    Outcome.LOSS: "win for the second player",
}


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_bits(value: str) -> int:
    """Parse an occupancy set given as binary (0b...), hex (0x...) or decimal."""
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer bit-set: {value!r}")


def positive_int(value: str) -> int:
    """Parse a count that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value!r}")
    return number


def solve_command(args) -> int:
    """Solve the game from the empty board."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    board = Board.new()
    start = time.perf_counter_ns()

    if args.parallel:
        logger.info("Using parallel solver")
        outcome, games = ParallelSolver(
            num_workers=args.workers, show_progress=args.progress
        ).solve(board)
    else:
        logger.info(f"Using sequential solver (prune={not args.exhaustive})")
        outcome, games = evaluate(board, prune=not args.exhaustive)

    elapsed_us = (time.perf_counter_ns() - start) // 1000

    print(f"Analysed {games} games in {elapsed_us} microseconds")
    print(f"Noughts and crosses is a {RESULT_SENTENCES[outcome]} with perfect play")
    return 0


def evaluate_command(args) -> int:
    """Solve a position given as raw occupancy bits."""
    setup_rich_logging(args.log_level)
    logger = logging.getLogger(__name__)
    display = SolverDisplay()

    try:
        board = Board.from_bits(args.player, args.opponent)
    except InvalidBoardError as e:
        logger.debug(f"Rejected player={args.player:#b} opponent={args.opponent:#b}")
        display.log_error(str(e))
        return 2

    display.show_header("Tic-Tac-Toe Solver")
    display.show_board(board, title=repr(board))

    start = time.perf_counter_ns()
    outcome, games = evaluate(board, prune=not args.exhaustive)
    elapsed_us = (time.perf_counter_ns() - start) // 1000

    display.show_result(board, outcome, games, elapsed_us)
    return 0


def sample_command(args) -> int:
    """Print a random sequence of moves that ends in a win."""
    setup_rich_logging(args.log_level)
    display = SolverDisplay()

    rng = random.Random(args.seed)
    boards = random_win_sequence(Board.new(), rng)

    display.show_header("Random winning line")
    for i, board in enumerate(boards):
        display.show_board(board, title=f"{i}")
    display.log_info(f"Won after {len(boards) - 1} moves")
    return 0


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Noughts and Crosses Strong Solver")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    # Running with no command solves the empty board
    parser.set_defaults(
        func=solve_command, parallel=False, workers=None, exhaustive=False, progress=False
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve from the empty board")
    solve_parser.add_argument(
        "--parallel", action="store_true", help="Split the search across processes"
    )
    solve_parser.add_argument(
        "--workers", type=positive_int, default=None, help="Number of worker processes (default: CPU count)"
    )
    solve_parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar over subtrees (with --parallel)"
    )
    solve_parser.add_argument(
        "--exhaustive", action="store_true", help="Disable the winning-reply cutoff"
    )
    solve_parser.set_defaults(func=solve_command)

    # Evaluate command
    evaluate_parser = subparsers.add_parser("evaluate", help="Solve a given position")
    evaluate_parser.add_argument(
        "--player", type=parse_bits, required=True, help="Cells held by the side to move"
    )
    evaluate_parser.add_argument(
        "--opponent", type=parse_bits, required=True, help="Cells held by the side that moved last"
    )
    evaluate_parser.add_argument(
        "--exhaustive", action="store_true", help="Disable the winning-reply cutoff"
    )
    evaluate_parser.set_defaults(func=evaluate_command)

    # Sample command
    sample_parser = subparsers.add_parser("sample", help="Show a random game ending in a win")
    sample_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    sample_parser.set_defaults(func=sample_command)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
