"""Moore neighbourhood queries on a grid."""

import numpy as np

from .cell import CellState
from .grid import Grid


def count_neighbors(grid: Grid, row: int, col: int) -> tuple[int, int]:
    """
    Count the burning and the tree-or-burning neighbours of a cell.

    The neighbourhood is the up to 8 cells at Chebyshev distance 1. Cells
    outside the grid are skipped, so edge and corner cells have fewer
    candidates. The grid does not wrap around.

    Args:
        grid: Grid snapshot to inspect
        row: Row of the cell
        col: Column of the cell

    Returns:
        Tuple (burning, tree_or_burning) of neighbour counts
    """
    window = grid.cells[max(row - 1, 0):row + 2, max(col - 1, 0):col + 2]
    burning = int(np.count_nonzero(window == CellState.Burning.value))
    fuel = burning + int(np.count_nonzero(window == CellState.Tree.value))

    # The window includes the cell itself
    own = grid.cells[row, col]
    if own == CellState.Burning.value:
        burning -= 1
        fuel -= 1
    elif own == CellState.Tree.value:
        fuel -= 1

    return burning, fuel
