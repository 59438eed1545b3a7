"""Per-cycle state transition rule and lightning strikes."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from .cell import CellState
from .config import SimulationConfig
from .grid import Grid, RandomSource
from .neighborhood import count_neighbors

logger = logging.getLogger(__name__)

TREE = CellState.Tree.value
BURNING = CellState.Burning.value
BURNED = CellState.Burned.value


def transition(
    current: Grid,
    next_grid: Grid,
    burn_counter: NDArray[np.int64],
    config: SimulationConfig,
    rng: RandomSource,
) -> int:
    """
    Compute the next state of every cell.

    All cells are evaluated against ``current`` only, so the update is
    synchronous: a tree never sees a neighbour that ignited in the same
    cycle. ``current`` is not modified.

    Args:
        current: Grid state at the start of the cycle
        next_grid: Grid receiving the new state of every cell
        burn_counter: Cycles each burning cell has burned, updated in place
        config: Simulation parameters
        rng: Source of ignition rolls

    Returns:
        Number of cells counted as changed this cycle
    """
    changes = 0
    threshold = config.neighbor_effect / 100.0

    for row in range(current.size):
        for col in range(current.size):
            state = current.cells[row, col]

            if state == BURNING:
                burn_counter[row, col] += 1
                if burn_counter[row, col] >= config.burn_stages:
                    next_grid.cells[row, col] = BURNED
                else:
                    next_grid.cells[row, col] = BURNING
                changes += 1

            elif state == TREE:
                next_grid.cells[row, col] = TREE
                burning, fuel = count_neighbors(current, row, col)
                # Only a tree with a burning neighbour can catch fire, so
                # isolated trees never do
                if burning == 0 or burning / fuel < threshold:
                    continue
                if rng.randrange(100) < config.catch_fire_percent:
                    next_grid.cells[row, col] = BURNING
                    burn_counter[row, col] = 0
                    changes += 1

            else:
                next_grid.cells[row, col] = state

    return changes


def lightning_strike(
    grid: Grid,
    burn_counter: NDArray[np.int64],
    config: SimulationConfig,
    rng: RandomSource,
) -> Optional[tuple[int, int]]:
    """
    Possibly strike a random cell with lightning, igniting it if it is a tree.

    At most one strike is attempted. The grid is modified in place.

    Args:
        grid: Current grid state
        burn_counter: Burn counter matrix, reset for an ignited cell
        config: Simulation parameters
        rng: Source of the strike roll and the strike coordinate

    Returns:
        (row, col) of the ignited tree, or None if nothing ignited
    """
    if not config.lightning_enabled:
        return None
    if not rng.random() < config.lightning_chance:
        return None

    row = rng.randrange(grid.size)
    col = rng.randrange(grid.size)
    if grid.cells[row, col] != TREE:
        logger.debug("Lightning struck non-tree cell (%d, %d)", row, col)
        return None

    grid.cells[row, col] = BURNING
    burn_counter[row, col] = 0
    logger.info("Lightning struck at (%d, %d)", row, col)
    return row, col
