"""Grid rendering functionality for the wildfire simulation window.

This module provides the WindowRenderer class which draws the cellular
automaton grid in a Pygame window, with one colored square per cell.
"""

from typing import TYPE_CHECKING, Optional

import pygame

from wildfire.cell import CellState
from .colors import (
    BLACK,
    BURNED_COLOR,
    BURNING_COLOR,
    DEFAULT_CELL_SIZE,
    DEFAULT_FPS,
    EMPTY_COLOR,
    TREE_COLOR,
)

if TYPE_CHECKING:
    from wildfire.grid import Grid
    from wildfire.model import SimulationResult, StepReport


class WindowClosed(Exception):
    """Raised when the user closes the simulation window."""


class WindowRenderer:
    """Renders the wildfire grid into a Pygame window.

    The window is opened lazily on the first frame and sized to fit the grid.
    Frame pacing is done with a Pygame clock, so the simulation loop itself
    does not need to sleep.

    Attributes:
        cell_size: Size of each cell in pixels.
        fps: Maximum number of frames drawn per second.
        hold: Keep the window open after the run until the user closes it.
    """

    STATE_COLORS = {
        CellState.Empty: EMPTY_COLOR,
        CellState.Tree: TREE_COLOR,
        CellState.Burning: BURNING_COLOR,
        CellState.Burned: BURNED_COLOR,
    }

    def __init__(
        self,
        cell_size: int = DEFAULT_CELL_SIZE,
        fps: int = DEFAULT_FPS,
        hold: bool = True,
    ) -> None:
        self.cell_size = cell_size
        self.fps = fps
        self.hold = hold
        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None

    def get_cell_color(self, state: CellState) -> tuple[int, int, int]:
        """Get the RGB color for a cell state."""
        return self.STATE_COLORS.get(state, BLACK)

    def _open(self, size: int) -> None:
        pygame.init()
        side = size * self.cell_size
        self.screen = pygame.display.set_mode((side, side))
        self.clock = pygame.time.Clock()

    def _pump_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
                raise WindowClosed()

    def draw_base(self, grid: "Grid") -> None:
        """Draw every cell of the grid onto the window surface."""
        for (row, col), state in grid:
            pygame.draw.rect(
                self.screen,
                self.get_cell_color(state),
                (
                    col * self.cell_size,
                    row * self.cell_size,
                    self.cell_size,
                    self.cell_size,
                ),
            )

    def render(self, grid: "Grid", cycle: int) -> None:
        if self.screen is None:
            self._open(grid.size)
        self._pump_events()

        self.screen.fill(BLACK)
        self.draw_base(grid)
        pygame.display.set_caption(f"Wildfire - cycle {cycle}")
        pygame.display.flip()
        self.clock.tick(self.fps)

    def report_step(self, report: "StepReport") -> None:
        if report.lightning is not None:
            pygame.display.set_caption(
                f"Wildfire - cycle {report.cycle} - lightning at {report.lightning}"
            )

    def finish(self, result: "SimulationResult") -> None:
        if self.screen is None:
            return
        outcome = "fires are out" if result.extinguished else "cycle limit"
        pygame.display.set_caption(
            f"Wildfire - finished after {result.cycles} cycles ({outcome})"
        )
        pygame.display.flip()

        if not self.hold:
            self.close()
            return
        try:
            while True:
                self._pump_events()
                self.clock.tick(self.fps)
        except WindowClosed:
            pass

    def close(self) -> None:
        if self.screen is not None:
            pygame.display.quit()
            self.screen = None
