"""Square grid of cell states backed by a numpy array."""

from __future__ import annotations

from typing import Iterable, Iterator, Protocol

import numpy as np
from numpy.typing import NDArray

from .cell import CellState


class RandomSource(Protocol):
    """Source of random draws used by the simulation.

    ``random.Random`` (and therefore ``mesa.Model.random``) satisfies it.
    """

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        ...

    def randrange(self, stop: int) -> int:
        """Uniform integer in [0, stop)."""
        ...


def new_burn_counter(size: int) -> NDArray[np.int64]:
    """Create a zeroed burn counter matrix for a grid of the given size."""
    return np.zeros((size, size), dtype=np.int64)


class Grid:
    """Square matrix of CellState values.

    Cells are stored as their integer enum values in ``cells`` and are
    addressed by ``(row, col)``.
    """

    def __init__(self, size: int):
        """
        Create a grid where every cell is Empty.

        Args:
            size: Side length of the grid (number of rows and columns)
        """
        self.size = size
        self.cells = np.full((size, size), CellState.Empty.value, dtype=np.int8)

    @classmethod
    def random(
        cls,
        size: int,
        density: int,
        burning_percent: int,
        rng: RandomSource,
    ) -> "Grid":
        """Build a grid and scatter trees over it, see :meth:`populate`."""
        grid = cls(size)
        grid.populate(density, burning_percent, rng)
        return grid

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Grid":
        """
        Build a grid from text rows drawn with the cell glyphs.

        Args:
            rows: Strings of equal length, one per grid row

        Returns:
            The grid the rows describe

        Raises:
            ValueError: If the rows do not form a square or use unknown glyphs
        """
        rows = list(rows)
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError(f"Grid rows must form a square of side {size}")
        grid = cls(size)
        for r, row in enumerate(rows):
            for c, glyph in enumerate(row):
                grid[r, c] = CellState.from_glyph(glyph)
        return grid

    def populate(self, density: int, burning_percent: int, rng: RandomSource) -> None:
        """
        Place trees on randomly chosen empty cells.

        ``density`` percent of all cells receive a tree, and
        ``burning_percent`` percent of those trees are placed already burning.
        Coordinates are drawn row first, then column, and draws landing on an
        occupied cell are rejected and redrawn.

        Args:
            density: Percentage of cells holding a tree (1-100)
            burning_percent: Percentage of placed trees that start burning (1-100)
            rng: Source of random coordinates
        """
        self.cells.fill(CellState.Empty.value)
        trees_left = density * self.size * self.size // 100
        burning_left = burning_percent * trees_left // 100

        while trees_left > 0:
            row = rng.randrange(self.size)
            col = rng.randrange(self.size)
            if self.cells[row, col] != CellState.Empty.value:
                continue
            if burning_left > 0:
                self.cells[row, col] = CellState.Burning.value
                burning_left -= 1
            else:
                self.cells[row, col] = CellState.Tree.value
            trees_left -= 1

    def __getitem__(self, pos: tuple[int, int]) -> CellState:
        return CellState(int(self.cells[pos]))

    def __setitem__(self, pos: tuple[int, int], state: CellState) -> None:
        self.cells[pos] = state.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.cells, other.cells)

    def __iter__(self) -> Iterator[tuple[tuple[int, int], CellState]]:
        """Iterate over ((row, col), state) in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield (row, col), self[row, col]

    def count(self, state: CellState) -> int:
        """Number of cells currently in the given state."""
        return int(np.count_nonzero(self.cells == state.value))

    def has_burning(self) -> bool:
        return bool(np.any(self.cells == CellState.Burning.value))

    def copy(self) -> "Grid":
        grid = Grid(self.size)
        grid.cells[:] = self.cells
        return grid

    def rows(self) -> list[str]:
        """The grid drawn as one glyph string per row."""
        return [
            "".join(CellState(int(value)).glyph for value in row)
            for row in self.cells
        ]

    def __str__(self) -> str:
        return "\n".join(self.rows())

    def __repr__(self) -> str:
        return f"Grid(size={self.size})"
