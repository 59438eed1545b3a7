"""Simulation configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .cell import BURN_STAGES

DEFAULT_SIZE = 10
DEFAULT_DENSITY = 50
DEFAULT_BURNING_PERCENT = 10
DEFAULT_CATCH_FIRE_PERCENT = 30
DEFAULT_NEIGHBOR_EFFECT = 25
DEFAULT_LIGHTNING_CHANCE = 0.01

MIN_SIZE, MAX_SIZE = 5, 40
MAX_PRINT_CYCLES = 10000


class ConfigError(ValueError):
    """Raised when a configuration value is outside its documented range."""


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable parameters of a single simulation run.

    Percentages are integers in the ranges accepted on the command line.
    The engine assumes the values are already valid; front ends call
    :meth:`validate` before handing the config over.
    """

    size: int = DEFAULT_SIZE
    density: int = DEFAULT_DENSITY
    burning_percent: int = DEFAULT_BURNING_PERCENT
    catch_fire_percent: int = DEFAULT_CATCH_FIRE_PERCENT
    neighbor_effect: int = DEFAULT_NEIGHBOR_EFFECT
    lightning_enabled: bool = False
    lightning_chance: float = DEFAULT_LIGHTNING_CHANCE
    max_cycles: Optional[int] = None
    burn_stages: int = BURN_STAGES

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    @property
    def target_trees(self) -> int:
        """Number of non-empty cells placed at initialization."""
        return self.density * self.total_cells // 100

    @property
    def target_burning(self) -> int:
        """Number of the initial trees that start out burning."""
        return self.burning_percent * self.target_trees // 100

    def validate(self) -> "SimulationConfig":
        """
        Check every field against its allowed range.

        Returns:
            The config itself, so construction and validation can be chained

        Raises:
            ConfigError: With a user-facing message naming the offending option
        """
        if not 1 <= self.burning_percent <= 100:
            raise ConfigError("(-bN) proportion already burning must be an integer in [1...100].")
        if not 1 <= self.catch_fire_percent <= 100:
            raise ConfigError("(-cN) probability a tree will catch fire must be an integer in [1...100].")
        if not 1 <= self.density <= 100:
            raise ConfigError("(-dN) density of trees in the grid must be an integer in [1...100].")
        if not 0 <= self.neighbor_effect <= 100:
            raise ConfigError("(-nN) %neighbors influence catching fire must be an integer in [0...100].")
        if self.max_cycles is not None and not 0 <= self.max_cycles <= MAX_PRINT_CYCLES:
            raise ConfigError(
                f"(-pN) number of states to print must be an integer in [0...{MAX_PRINT_CYCLES}]."
            )
        if not MIN_SIZE <= self.size <= MAX_SIZE:
            raise ConfigError(
                f"(-sN) simulation grid size must be an integer in [{MIN_SIZE}...{MAX_SIZE}]."
            )
        if not 0.0 <= self.lightning_chance <= 1.0:
            raise ConfigError("(-Ln) lightning probability must be a floating-point number in [0.0...1.0].")
        if self.burn_stages < 1:
            raise ConfigError("burn stages must be a positive integer.")
        return self
