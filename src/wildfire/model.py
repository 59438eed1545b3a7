"""Wildfire simulation model: owns the grids and drives the cycle loop."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from mesa import Model

from .cell import CellState
from .config import SimulationConfig
from .grid import Grid, RandomSource, new_burn_counter
from .transition import lightning_strike, transition

logger = logging.getLogger(__name__)


class SimulationState(Enum):
    """Lifecycle of a simulation run."""
    Running = "running"
    ExtinguishedStop = "extinguished"
    CycleLimitStop = "cycle_limit"


@dataclass(frozen=True)
class StepReport:
    """Summary of one computed transition."""

    cycle: int
    changes: int
    cumulative_changes: int
    lightning: Optional[tuple[int, int]] = None


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of a finished run."""

    cycles: int
    state: SimulationState
    cumulative_changes: int

    @property
    def extinguished(self) -> bool:
        return self.state is SimulationState.ExtinguishedStop


class Renderer(Protocol):
    """Display collaborator handed the grid once per cycle."""

    def render(self, grid: Grid, cycle: int) -> None:
        ...

    def report_step(self, report: StepReport) -> None:
        ...

    def finish(self, result: SimulationResult) -> None:
        ...


class WildfireModel(Model):
    """Cellular automaton model of a wildfire spreading through a forest."""

    def __init__(
        self,
        config: SimulationConfig,
        seed: Optional[int] = None,
        grid: Optional[Grid] = None,
        rng: Optional[RandomSource] = None,
    ):
        """
        Initialize the wildfire model.

        Args:
            config: Validated simulation parameters
            seed: Seed for the model's random number generator
            grid: Optional initial grid; a random forest is generated if omitted
            rng: Optional random source replacing the model's own generator
        """
        super().__init__(seed=seed)
        self.config = config
        self.random_source: RandomSource = rng if rng is not None else self.random

        if grid is None:
            grid = Grid.random(config.size, config.density, config.burning_percent, self.random_source)
        elif grid.size != config.size:
            raise ValueError(f"Grid size {grid.size} does not match configured size {config.size}")

        self.current = grid
        self.next = Grid(config.size)
        self.burn_counter = new_burn_counter(config.size)

        self.cycle = 0
        self.cumulative_changes = 0
        self.last_report: Optional[StepReport] = None
        self.state = SimulationState.Running

        logger.info(
            "Initialized %dx%d grid: %d trees, %d burning",
            config.size,
            config.size,
            grid.count(CellState.Tree) + grid.count(CellState.Burning),
            grid.count(CellState.Burning),
        )

    def cycle_limit_reached(self) -> bool:
        max_cycles = self.config.max_cycles
        return max_cycles is not None and self.cycle >= max_cycles

    def step(self):
        """
        Execute one cycle of the simulation.

        Applies a possible lightning strike to the current grid, computes the
        next grid and then either stops (no fire left, or the cycle limit was
        already reached) or swaps the buffers and advances the cycle counter.
        """
        self.last_report = None
        if self.state is not SimulationState.Running:
            return

        if self.cycle_limit_reached():
            self._stop(SimulationState.CycleLimitStop)
            return

        strike = lightning_strike(self.current, self.burn_counter, self.config, self.random_source)
        changes = transition(self.current, self.next, self.burn_counter, self.config, self.random_source)
        self.cumulative_changes += changes
        self.last_report = StepReport(
            cycle=self.cycle,
            changes=changes,
            cumulative_changes=self.cumulative_changes,
            lightning=strike,
        )
        logger.debug(
            "Cycle %d: %d changes, %d cumulative",
            self.cycle,
            changes,
            self.cumulative_changes,
        )

        if not self.next.has_burning():
            self._stop(SimulationState.ExtinguishedStop)
            return

        self.current, self.next = self.next, self.current
        self.cycle += 1

    def _stop(self, state: SimulationState) -> None:
        self.state = state
        self.running = False
        logger.info("Simulation stopped (%s) after %d cycles", state.value, self.cycle)

    @property
    def result(self) -> SimulationResult:
        return SimulationResult(
            cycles=self.cycle,
            state=self.state,
            cumulative_changes=self.cumulative_changes,
        )

    def run(self, renderer: Optional[Renderer] = None, delay: float = 0.0) -> SimulationResult:
        """
        Run the simulation until the fire is out or the cycle limit is hit.

        Args:
            renderer: Optional display collaborator, given the grid every cycle
            delay: Seconds to pause between cycles, for animation only

        Returns:
            The final cycle count and the stop condition that fired
        """
        while self.running:
            if renderer is not None:
                renderer.render(self.current, self.cycle)

            self.step()

            if renderer is not None and self.last_report is not None:
                renderer.report_step(self.last_report)

            if self.running and delay > 0:
                time.sleep(delay)

        result = self.result
        if renderer is not None:
            renderer.finish(result)
        return result
