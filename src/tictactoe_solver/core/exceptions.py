"""Exceptions raised when building boards from untrusted input."""


class SolverError(Exception):
    """Base exception for all solver errors."""


class InvalidBoardError(SolverError, ValueError):
    """Raised when raw occupancy bits do not describe a reachable board."""

    def __init__(self, reason: str, player: int, opponent: int) -> None:
        self.reason = reason
        self.player = player
        self.opponent = opponent
        super().__init__(f"invalid board: {reason}")


class InvalidMoveError(SolverError, ValueError):
    """Raised when a move cannot be played on a board."""

    def __init__(self, reason: str, cell: int) -> None:
        self.reason = reason
        self.cell = cell
        super().__init__(f"invalid move {cell}: {reason}")


__all__ = ["SolverError", "InvalidBoardError", "InvalidMoveError"]
