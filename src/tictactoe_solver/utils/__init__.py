"""Utility modules for the Tic-Tac-Toe solver."""

from .rich_display import SolverDisplay, setup_rich_logging

__all__ = [
    "SolverDisplay",
    "setup_rich_logging",
]
