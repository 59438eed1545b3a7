"""Unit tests for neighbour counting."""

import pytest
from wildfire.grid import Grid
from wildfire.neighborhood import count_neighbors


class TestCountNeighbors:
    """Test cases for count_neighbors."""

    def test_all_trees_center(self):
        """Test a fully surrounded cell has 8 fuel neighbours."""
        grid = Grid.from_rows(["YYYYY"] * 5)
        assert count_neighbors(grid, 2, 2) == (0, 8)

    def test_excludes_self(self):
        """Test that a burning cell does not count itself."""
        grid = Grid.from_rows([
            "     ",
            "     ",
            "  *  ",
            "     ",
            "     ",
        ])
        assert count_neighbors(grid, 2, 2) == (0, 0)

    def test_mixed_neighbourhood(self):
        """Test counting burning, tree, burned and empty neighbours."""
        grid = Grid.from_rows([
            "     ",
            " *Y. ",
            " .Y* ",
            " Y * ",
            "     ",
        ])
        # Neighbours of (2, 2): * Y . / . * / Y _ *
        assert count_neighbors(grid, 2, 2) == (3, 5)

    @pytest.mark.parametrize("row, col", [(0, 0), (0, 4), (4, 0), (4, 4)])
    def test_corners_have_three_candidates(self, row, col):
        """Test that corner cells are clipped to 3 neighbours."""
        grid = Grid.from_rows(["*****"] * 5)
        assert count_neighbors(grid, row, col) == (3, 3)

    @pytest.mark.parametrize("row, col", [(0, 2), (2, 0), (4, 2), (2, 4)])
    def test_edges_have_five_candidates(self, row, col):
        """Test that edge cells are clipped to 5 neighbours."""
        grid = Grid.from_rows(["YYYYY"] * 5)
        assert count_neighbors(grid, row, col) == (0, 5)

    def test_no_wraparound(self):
        """Test that fire on the opposite edge is not a neighbour."""
        grid = Grid.from_rows([
            "Y   *",
            "     ",
            "     ",
            "     ",
            "*    ",
        ])
        assert count_neighbors(grid, 0, 0) == (0, 0)

    def test_burned_and_empty_are_not_fuel(self):
        """Test that burned and empty cells are ignored."""
        grid = Grid.from_rows([
            "...  ",
            ".Y.  ",
            "...  ",
            "     ",
            "     ",
        ])
        assert count_neighbors(grid, 1, 1) == (0, 0)
