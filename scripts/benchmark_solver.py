#!/usr/bin/env python3
"""
Benchmark the sequential solver from the empty board.

Runs a number of warm-up solves, then times repeated solves and reports
min/mean/max wall-clock time.
"""

import argparse
import logging
import statistics
import time

from tqdm import tqdm

from tictactoe_solver import Board, evaluate

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    force=True,
)

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Benchmark the Tic-Tac-Toe solver")
    parser.add_argument("--warmup", type=int, default=3, help="Untimed warm-up runs")
    parser.add_argument("--iterations", type=int, default=20, help="Timed runs")
    parser.add_argument(
        "--exhaustive", action="store_true", help="Disable the winning-reply cutoff"
    )
    args = parser.parse_args()

    prune = not args.exhaustive
    logger.info("=" * 70)
    logger.info(f"SOLVER BENCHMARK - empty board (prune={prune})")
    logger.info("=" * 70)

    for _ in range(args.warmup):
        evaluate(Board.new(), prune=prune)

    timings = []
    result = None
    for _ in tqdm(range(max(1, args.iterations)), desc="Benchmark", unit=" solve"):
        start = time.perf_counter()
        result = evaluate(Board.new(), prune=prune)
        timings.append(time.perf_counter() - start)

    outcome, games = result
    logger.info(f"Result: {outcome.name} after {games:,} games")
    logger.info(
        f"Time per solve: min {min(timings):.4f}s | "
        f"mean {statistics.mean(timings):.4f}s | "
        f"max {max(timings):.4f}s"
    )


if __name__ == "__main__":
    main()
