"""Tests for the fixed Conway rule and hard-edged neighborhood.

Covers the birth/survival table and neighbor enumeration at corners, edges
and the last row/column, where an off-by-one would index past the grid.
"""

import pytest
import numpy as np
from lifeterm.core.conway_rules import (
    SURVIVAL_SET, BIRTH_SET, NEIGHBOR_OFFSETS,
    update_cell, neighbor_coords, count_live_neighbors
)


class TestUpdateCell:
    """Test the birth/survival/death table."""

    def test_rule_sets(self):
        assert SURVIVAL_SET == {2, 3}
        assert BIRTH_SET == {3}

    @pytest.mark.parametrize("neighbors", range(9))
    def test_dead_cell_born_only_with_three(self, neighbors):
        assert update_cell(False, neighbors) == (neighbors == 3)

    @pytest.mark.parametrize("neighbors", range(9))
    def test_live_cell_survives_with_two_or_three(self, neighbors):
        assert update_cell(True, neighbors) == (neighbors in (2, 3))

    def test_underpopulation_and_overcrowding(self):
        """Live cells die with fewer than 2 or more than 3 neighbors."""
        assert update_cell(True, 0) is False
        assert update_cell(True, 1) is False
        assert update_cell(True, 4) is False
        assert update_cell(True, 8) is False


class TestNeighborCoords:
    """Test hard-edged Moore neighborhood enumeration."""

    def test_offsets_exclude_center(self):
        assert len(NEIGHBOR_OFFSETS) == 8
        assert (0, 0) not in NEIGHBOR_OFFSETS

    def test_interior_cell_has_eight(self):
        neighbors = neighbor_coords(2, 2, 5, 5)
        assert len(neighbors) == 8
        assert neighbors == [(1, 1), (1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2), (3, 3)]

    @pytest.mark.parametrize("row,col", [(0, 0), (0, 6), (3, 0), (3, 6)])
    def test_corner_cells_have_three(self, row, col):
        neighbors = neighbor_coords(row, col, 4, 7)
        assert len(neighbors) == 3

    @pytest.mark.parametrize("row,col", [(0, 3), (3, 3), (1, 0), (2, 6)])
    def test_edge_cells_have_five(self, row, col):
        neighbors = neighbor_coords(row, col, 4, 7)
        assert len(neighbors) == 5

    def test_last_row_and_column_stay_in_bounds(self):
        """Bounds are strict: row < rows and col < cols."""
        rows, cols = 4, 7
        for row in range(rows):
            for col in range(cols):
                for nr, nc in neighbor_coords(row, col, rows, cols):
                    assert 0 <= nr < rows
                    assert 0 <= nc < cols

        assert neighbor_coords(3, 6, rows, cols) == [(2, 5), (2, 6), (3, 5)]

    def test_single_cell_grid_has_no_neighbors(self):
        assert neighbor_coords(0, 0, 1, 1) == []

    def test_single_row_grid(self):
        assert neighbor_coords(0, 2, 1, 5) == [(0, 1), (0, 3)]
        assert neighbor_coords(0, 4, 1, 5) == [(0, 3)]


class TestCountLiveNeighbors:
    """Test neighbor counting on raw boolean arrays."""

    def test_full_grid_counts(self):
        """Corner sees 3, edge sees 5, interior sees 8."""
        state = np.ones((3, 3), dtype=bool)

        assert count_live_neighbors(state, 0, 0) == 3
        assert count_live_neighbors(state, 2, 2) == 3
        assert count_live_neighbors(state, 0, 1) == 5
        assert count_live_neighbors(state, 2, 1) == 5
        assert count_live_neighbors(state, 1, 1) == 8

    def test_center_not_counted(self):
        state = np.zeros((3, 3), dtype=bool)
        state[1, 1] = True
        assert count_live_neighbors(state, 1, 1) == 0

    def test_no_wraparound(self):
        """A cell at the opposite corner is not a neighbor."""
        state = np.zeros((4, 6), dtype=bool)
        state[0, 0] = True

        assert count_live_neighbors(state, 3, 5) == 0
        assert count_live_neighbors(state, 0, 5) == 0
        assert count_live_neighbors(state, 3, 0) == 0

    def test_non_square_grid_uses_row_col_order(self):
        state = np.zeros((2, 5), dtype=bool)
        state[1, 4] = True
        state[0, 3] = True

        assert count_live_neighbors(state, 0, 4) == 2
        assert count_live_neighbors(state, 1, 3) == 2
        assert count_live_neighbors(state, 1, 2) == 1
