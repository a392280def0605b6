"""Tests for the negamax search."""

import pytest
from tictactoe_solver.core import Board
from tictactoe_solver.solver import Outcome, evaluate


def test_outcome_ordering():
    """Test outcomes order from the mover's worst to best."""
    assert Outcome.LOSS < Outcome.DRAW < Outcome.WIN
    assert max(Outcome.LOSS, Outcome.DRAW) is Outcome.DRAW


def test_outcome_complement():
    """Test complement swaps win and loss and keeps draw."""
    assert Outcome.WIN.complement() is Outcome.LOSS
    assert Outcome.LOSS.complement() is Outcome.WIN
    assert Outcome.DRAW.complement() is Outcome.DRAW


def test_solve_from_empty():
    """Test the empty board is a draw, with the pruned game count."""
    assert evaluate(Board.new()) == (Outcome.DRAW, 38856)


def test_solve_from_empty_exhaustive():
    """Test exhaustive enumeration counts every finished game."""
    assert evaluate(Board.new(), prune=False) == (Outcome.DRAW, 255168)


def test_already_lost():
    """Test a completed top row for opponent is an immediate loss."""
    board = Board.from_bits(0b000011000, 0b000000111)

    assert evaluate(board) == (Outcome.LOSS, 1)
    assert evaluate(board, prune=False) == (Outcome.LOSS, 1)


def test_full_board_draw():
    """Test a full board with no line is a draw."""
    board = Board.from_bits(0b001110010, 0b110001101)

    assert evaluate(board) == (Outcome.DRAW, 1)


def test_immediate_win():
    """Test completing a line is found on the first reply and stops the search."""
    # Side to move holds 0 and 1; cell 2 wins
    board = Board.from_bits(0b000000011, 0b000011000)

    assert evaluate(board) == (Outcome.WIN, 1)

    outcome, games = evaluate(board, prune=False)
    assert outcome is Outcome.WIN
    assert games > 1


def test_forced_loss():
    """Test a double threat cannot be defended."""
    # Opponent holds 0, 1, 3 (threatens 2 and 6); side to move holds 4, 8
    board = Board.from_bits(0b100010000, 0b000001011)

    outcome, games = evaluate(board)
    assert outcome is Outcome.LOSS
    assert games > 0


@pytest.mark.parametrize("cell", range(9))
def test_every_opening_is_a_draw(cell):
    """Test no first move wins or loses, with or without pruning."""
    board = Board.new().with_move(cell)

    pruned_outcome, pruned_games = evaluate(board)
    full_outcome, full_games = evaluate(board, prune=False)

    assert pruned_outcome is Outcome.DRAW
    assert full_outcome is Outcome.DRAW
    assert pruned_games <= full_games


def test_exhaustive_count_is_sum_of_openings():
    """Test exhaustive counts add up across the top-level replies."""
    total = sum(evaluate(child, prune=False)[1] for child in Board.new().moves())

    assert total == 255168
