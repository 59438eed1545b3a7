"""Unit tests for Grid."""

import random

import numpy as np
import pytest
from wildfire.cell import CellState
from wildfire.grid import Grid, new_burn_counter


class TestGrid:
    """Test cases for Grid class."""

    def test_new_grid_is_empty(self):
        """Test that every cell of a new grid is Empty."""
        grid = Grid(5)
        assert grid.size == 5
        assert grid.cells.shape == (5, 5)
        assert grid.count(CellState.Empty) == 25

    def test_get_and_set(self):
        """Test reading and writing cells by (row, col)."""
        grid = Grid(5)
        grid[1, 3] = CellState.Burning
        assert grid[1, 3] is CellState.Burning
        assert grid[3, 1] is CellState.Empty

    def test_from_rows(self):
        """Test building a grid from glyph rows."""
        grid = Grid.from_rows([
            "Y*. Y",
            "     ",
            "  *  ",
            "     ",
            "YYYYY",
        ])
        assert grid[0, 0] is CellState.Tree
        assert grid[0, 1] is CellState.Burning
        assert grid[0, 2] is CellState.Burned
        assert grid[0, 3] is CellState.Empty
        assert grid.count(CellState.Tree) == 7
        assert grid.count(CellState.Burning) == 2

    def test_from_rows_requires_square(self):
        """Test that non-square rows are rejected."""
        with pytest.raises(ValueError):
            Grid.from_rows(["YY", "Y"])

    def test_rows_round_trip(self):
        """Test that drawing a grid gives back its rows."""
        rows = ["Y*.  ", " YY  ", "  *  ", ".    ", "    Y"]
        assert Grid.from_rows(rows).rows() == rows
        assert str(Grid.from_rows(rows)) == "\n".join(rows)

    def test_has_burning(self):
        """Test detection of burning cells."""
        grid = Grid(5)
        assert not grid.has_burning()
        grid[4, 4] = CellState.Burning
        assert grid.has_burning()

    def test_copy_is_independent(self):
        """Test that a copy does not share cells with the original."""
        grid = Grid(5)
        clone = grid.copy()
        clone[0, 0] = CellState.Tree
        assert grid[0, 0] is CellState.Empty
        assert clone != grid

    def test_iteration_order(self):
        """Test that iteration is row-major."""
        positions = [pos for pos, _ in Grid(5)]
        assert positions[0] == (0, 0)
        assert positions[1] == (0, 1)
        assert positions[5] == (1, 0)
        assert len(positions) == 25

    def test_burn_counter(self):
        """Test the burn counter matrix starts zeroed."""
        counter = new_burn_counter(6)
        assert counter.shape == (6, 6)
        assert not np.any(counter)


class TestPopulate:
    """Test cases for random grid initialization."""

    @pytest.mark.parametrize(
        "size, density, burning_percent",
        [(5, 1, 1), (10, 50, 10), (17, 73, 40), (40, 100, 100), (40, 99, 1), (25, 60, 100)],
    )
    def test_density_invariant(self, size, density, burning_percent):
        """Test exact tree and burning counts after initialization."""
        grid = Grid.random(size, density, burning_percent, random.Random(size * density))

        target_trees = density * size * size // 100
        target_burning = burning_percent * target_trees // 100
        non_empty = size * size - grid.count(CellState.Empty)
        assert non_empty == target_trees
        assert grid.count(CellState.Burning) == target_burning
        assert grid.count(CellState.Tree) == target_trees - target_burning
        assert grid.count(CellState.Burned) == 0

    def test_placement_follows_draws(self, scripted):
        """Test that draws are row then column and occupied cells are redrawn."""
        # 8% of 25 cells -> 2 trees, 50% of them burning -> 1
        rng = scripted(ints=[0, 0, 0, 0, 1, 2])
        grid = Grid.random(5, 8, 50, rng)

        assert grid[0, 0] is CellState.Burning
        assert grid[1, 2] is CellState.Tree
        assert grid.count(CellState.Empty) == 23
        assert rng.randrange_calls == 6

    def test_populate_clears_previous_state(self, rng):
        """Test that populating resets the grid first."""
        grid = Grid(5)
        grid.cells.fill(CellState.Burned.value)
        grid.populate(20, 10, rng)
        assert grid.count(CellState.Burned) == 0
        assert grid.count(CellState.Tree) + grid.count(CellState.Burning) == 5

    def test_same_seed_same_grid(self):
        """Test that initialization is deterministic for a seed."""
        a = Grid.random(12, 60, 20, random.Random(7))
        b = Grid.random(12, 60, 20, random.Random(7))
        assert a == b
