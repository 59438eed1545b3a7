"""Text rendering of the wildfire grid.

The terminal renderer draws one glyph per cell and one row per line. In
overlay mode every frame is drawn over the previous one using ANSI escape
codes; in print mode frames are printed one after another under a banner.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, TextIO

if TYPE_CHECKING:
    from wildfire.config import SimulationConfig
    from wildfire.grid import Grid
    from wildfire.model import SimulationResult, StepReport

CLEAR_SCREEN = "\033[H\033[J"


def move_cursor(row: int, col: int) -> str:
    """ANSI sequence moving the cursor to a zero-based screen position."""
    return f"\033[{row + 1};{col + 1}H"


def render_grid(grid: "Grid") -> str:
    """Draw the grid as text, one line per row, each line newline-terminated."""
    return "".join(f"{row}\n" for row in grid.rows())


def status_line(config: "SimulationConfig") -> str:
    """One-line summary of the configured proportions."""
    return (
        f"size: {config.size}, "
        f"pCatch: {config.catch_fire_percent / 100.0:.2f}, "
        f"density: {config.density / 100.0:.2f}, "
        f"pBurning: {config.burning_percent / 100.0:.2f}, "
        f"pNeighbor: {config.neighbor_effect / 100.0:.2f}"
    )


def banner(cycles: int) -> str:
    return (
        "===========================\n"
        "======== Wildfire =========\n"
        "===========================\n"
        f"=== Print {cycles:02d} Time Steps ===\n"
        "===========================\n"
    )


class TerminalRenderer:
    """Writes simulation frames and reports to a text stream.

    Attributes:
        config: Configuration shown in the status line.
        overlay: Redraw in place instead of printing frames sequentially.
        stream: Output stream, standard output by default.
    """

    def __init__(
        self,
        config: "SimulationConfig",
        overlay: bool = True,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.config = config
        self.overlay = overlay
        self.stream = stream if stream is not None else sys.stdout
        self._started = False

    def _write(self, text: str) -> None:
        self.stream.write(text)

    def render(self, grid: "Grid", cycle: int) -> None:
        """Draw one frame: cycle header, grid and status line."""
        if not self._started:
            self._started = True
            if not self.overlay:
                self._write(banner(self.config.max_cycles or 0))

        if self.overlay:
            self._write(CLEAR_SCREEN + move_cursor(0, 0))

        self._write(f"Cycle: {cycle}\n")
        self._write(render_grid(grid))
        self._write(status_line(self.config) + "\n")
        self.stream.flush()

    def report_step(self, report: "StepReport") -> None:
        if report.lightning is not None:
            row, col = report.lightning
            self._write(f"Lightning struck at ({row}, {col})!\n")
        self._write(
            f"cycle: {report.cycle}, current changes: {report.changes}, "
            f"cumulative changes: {report.cumulative_changes}\n"
        )
        self.stream.flush()

    def finish(self, result: "SimulationResult") -> None:
        if result.extinguished:
            self._write("Fires are out.\n")
        self._write(f"Simulation finished after {result.cycles} cycles.\n")
        self.stream.flush()
