"""
Wildfire Simulation using Cellular Automata.

A discrete-time stochastic cellular automaton in which a fire spreads
through a randomly planted forest, burns out and is occasionally restarted
by lightning.
"""

from .cell import BURN_STAGES, CellState
from .config import ConfigError, SimulationConfig
from .grid import Grid, RandomSource
from .model import (
    Renderer,
    SimulationResult,
    SimulationState,
    StepReport,
    WildfireModel,
)
from .neighborhood import count_neighbors
from .transition import lightning_strike, transition

__version__ = "0.1.0"

__all__ = [
    "BURN_STAGES",
    "CellState",
    "ConfigError",
    "SimulationConfig",
    "Grid",
    "RandomSource",
    "Renderer",
    "SimulationResult",
    "SimulationState",
    "StepReport",
    "WildfireModel",
    "count_neighbors",
    "lightning_strike",
    "transition",
]
