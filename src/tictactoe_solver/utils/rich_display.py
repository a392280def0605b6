"""
Rich-based console output for the solver.

Provides:
- Header rule
- Board panels
- Result summary table
"""

import logging
from typing import Optional
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core import Board
from ..solver import Outcome

console = Console()
logger = logging.getLogger(__name__)

OUTCOME_STYLES = {
    Outcome.WIN: "green",
    Outcome.DRAW: "yellow",
    Outcome.LOSS: "red",
}


class SolverDisplay:
    """Rich-based display for boards and solver results."""

    def __init__(self, output: Optional[Console] = None):
        """
        Initialize solver display.

        Args:
            output: Console to print to (default: shared module console)
        """
        self.console = output or console

    def log_info(self, message: str):
        """Log info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_error(self, message: str):
        """Log error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str):
        """Show solver header."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")

    def board_panel(self, board: Board, title: str = "") -> Panel:
        """Render a board as a boxed 3x3 grid."""
        rows = [" | ".join(line) for line in str(board).split("\n")]
        grid = "\n---------\n".join(rows)
        return Panel(Text(grid), title=title or None, expand=False)

    def show_board(self, board: Board, title: str = ""):
        """Print a board panel."""
        self.console.print(self.board_panel(board, title))

    def show_result(self, board: Board, outcome: Outcome, games: int, elapsed_us: int):
        """Show outcome summary table for a solved position."""
        style = OUTCOME_STYLES[outcome]

        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Position", repr(board))
        table.add_row("Marks played", str(board.move_count))
        table.add_row("Side to move", f"[{style}]{outcome.name.lower()}[/{style}]")
        table.add_row("Games analysed", f"{games:,}")
        table.add_row("Time", f"{elapsed_us:,} µs")

        self.console.print(table)


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
