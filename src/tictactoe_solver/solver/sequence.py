"""Random play-outs that end in a win, for demonstration."""

import random
from typing import List

from ..core import Board


def random_win_sequence(board: Board, rng: random.Random) -> List[Board]:
    """
    Depth-first walk with shuffled move order, stopping at the first win.

    Args:
        board: Starting position
        rng: Random source used to shuffle each node's replies

    Returns:
        Boards from `board` to the first lost position found (inclusive),
        or an empty list if no line can be completed from `board`.
    """
    if board.has_lost():
        return [board]

    stack = [board]
    first = list(board.moves())
    rng.shuffle(first)
    move_stack = [iter(first)]

    while move_stack:
        child = next(move_stack[-1], None)
        if child is None:
            # Exhausted; back off
            move_stack.pop()
            stack.pop()
            continue

        stack.append(child)
        if child.has_lost():
            return stack

        replies = list(child.moves())
        rng.shuffle(replies)
        move_stack.append(iter(replies))

    return []
