"""Tests for random winning play-outs."""

import random

from tictactoe_solver.core import Board
from tictactoe_solver.solver import random_win_sequence


def test_sequence_from_empty_ends_in_win():
    """Test a play-out is a chain of legal moves ending at the first win."""
    boards = random_win_sequence(Board.new(), random.Random(7))

    assert boards[0] == Board.new()
    assert boards[-1].has_lost()
    # Fastest win takes 5 moves, slowest 9
    assert 6 <= len(boards) <= 10

    for parent, child in zip(boards, boards[1:]):
        assert not parent.has_lost()
        assert child in list(parent.moves())


def test_sequence_is_reproducible():
    """Test the same seed gives the same play-out."""
    first = random_win_sequence(Board.new(), random.Random(42))
    second = random_win_sequence(Board.new(), random.Random(42))

    assert first == second


def test_sequence_from_lost_board():
    """Test an already lost board is its own sequence."""
    board = Board.from_bits(0b000011000, 0b000000111)

    assert random_win_sequence(board, random.Random(0)) == [board]


def test_sequence_from_full_board():
    """Test no sequence exists when no line can be completed."""
    board = Board.from_bits(0b001110010, 0b110001101)

    assert random_win_sequence(board, random.Random(0)) == []
