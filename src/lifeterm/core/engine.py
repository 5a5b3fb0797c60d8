"""Conway's Game of Life state-transition engine.

The engine owns a fixed-size grid and an explicit list of live coordinates.
Each generation only the live cells and the dead cells next to them are
evaluated, so a sparse population costs roughly its own size rather than
the full grid area.
"""

import numpy as np
from typing import Iterable, List, Sequence, Set, Tuple
import logging

from .conway_rules import update_cell, neighbor_coords, count_live_neighbors
from .grid import Grid

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


class SeedError(ValueError):
    """Seed data is malformed or does not fit the grid."""


def _validate_coordinate(cell: object, rows: int, cols: int) -> Coordinate:
    try:
        row, col = cell  # type: ignore[misc]
    except (TypeError, ValueError):
        raise SeedError(f"Seed entry {cell!r} is not a (row, col) pair") from None

    for value in (row, col):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise SeedError(f"Seed entry {cell!r} must hold integer coordinates")

    row, col = int(row), int(col)
    if not (0 <= row < rows and 0 <= col < cols):
        raise SeedError(f"Seed cell ({row}, {col}) out of bounds for {rows}x{cols} grid")
    return (row, col)


class LifeEngine:
    """Game of Life on a bounded, hard-edged grid.

    Attributes:
        generation: Number of completed step() calls
    """

    def __init__(self, seed: Iterable[Sequence[int]], rows: int, cols: int):
        """Build the engine and apply the seed.

        Args:
            seed: (row, col) coordinates of the initially live cells
            rows: Grid height in cells
            cols: Grid width in cells

        Raises:
            SeedError: If the dimensions are not positive or any seed
                coordinate falls outside the grid
        """
        if rows < 1 or cols < 1:
            raise SeedError(f"Grid dimensions must be positive, got {rows}x{cols}")

        live: List[Coordinate] = []
        seen: Set[Coordinate] = set()
        for cell in seed:
            coord = _validate_coordinate(cell, rows, cols)
            if coord not in seen:
                seen.add(coord)
                live.append(coord)

        self._grid = Grid(rows, cols)
        self._live = live
        for row, col in live:
            self._grid.state[row, col] = True

        self.generation = 0

        logger.debug(f"Created life engine {rows}x{cols} with {len(live)} seed cells")

    @property
    def rows(self) -> int:
        return self._grid.rows

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._grid.shape

    @property
    def population(self) -> int:
        """Number of live cells."""
        return len(self._live)

    @property
    def live_cells(self) -> Tuple[Coordinate, ...]:
        """Live coordinates in insertion order (snapshot copy)."""
        return tuple(self._live)

    def is_alive(self, row: int, col: int) -> bool:
        return self._grid.get(row, col)

    def count_live_neighbors(self, row: int, col: int) -> int:
        """Count live neighbors of (row, col); cells beyond the edges do not count.

        Raises:
            IndexError: If (row, col) is outside the grid
        """
        if not self._grid.contains(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.rows}x{self.cols} grid")
        return count_live_neighbors(self._grid.state, row, col)

    def _dead_candidates(self) -> List[Coordinate]:
        """Dead cells adjacent to at least one live cell, each listed once."""
        state = self._grid.state
        candidates: List[Coordinate] = []
        seen: Set[Coordinate] = set()

        for row, col in self._live:
            for neighbor in neighbor_coords(row, col, self.rows, self.cols):
                if not state[neighbor] and neighbor not in seen:
                    seen.add(neighbor)
                    candidates.append(neighbor)

        return candidates

    def step(self) -> int:
        """Advance exactly one generation.

        Births and deaths are both decided against the current generation
        before either is applied.

        Returns:
            Number of live cells after the step
        """
        state = self._grid.state

        to_insert = [
            cell for cell in self._dead_candidates()
            if update_cell(False, count_live_neighbors(state, *cell))
        ]
        to_remove = [
            cell for cell in self._live
            if not update_cell(True, count_live_neighbors(state, *cell))
        ]

        logger.debug("remove %d: %s", len(to_remove), to_remove)
        if to_remove:
            removed = set(to_remove)
            self._live = [cell for cell in self._live if cell not in removed]
            for row, col in to_remove:
                state[row, col] = False

        logger.debug("insert %d: %s", len(to_insert), to_insert)
        for row, col in to_insert:
            self._live.append((row, col))
            state[row, col] = True

        self.generation += 1
        return len(self._live)

    def step_multiple(self, steps: int) -> List[int]:
        """Advance several generations.

        Args:
            steps: Number of generations to run

        Returns:
            Live cell count after each step
        """
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")
        return [self.step() for _ in range(steps)]

    def render_view(self) -> np.ndarray:
        """Read-only (rows, cols) boolean view of the current generation."""
        return self._grid.view()

    def is_consistent(self) -> bool:
        """Check that the live cell list and the grid describe the same cells."""
        live = set(self._live)
        if len(live) != len(self._live):
            return False
        return live == set(self._grid.alive_cells())

    def __repr__(self) -> str:
        return (f"LifeEngine({self.rows}x{self.cols}, generation={self.generation}, "
                f"alive={self.population})")
