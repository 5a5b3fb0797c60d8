"""Fixed-size grid state for Conway's Game of Life.

The grid is a numpy boolean array indexed ``[row, col]``. Its dimensions are
set once at creation and never change.
"""

import numpy as np
from typing import List, Optional, Tuple
import logging

from .render import render_frame

logger = logging.getLogger(__name__)


class Grid:
    """2D boolean grid of dead/alive cells.

    Attributes:
        rows: Grid height in cells
        cols: Grid width in cells
        state: 2D numpy boolean array (True=alive, False=dead)
    """

    def __init__(self, rows: int, cols: int, initial_state: Optional[np.ndarray] = None):
        """Initialize grid with given dimensions.

        Args:
            rows: Grid height (cells)
            cols: Grid width (cells)
            initial_state: Optional initial grid state array

        Raises:
            ValueError: If dimensions are invalid or initial_state shape doesn't match
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols

        if initial_state is not None:
            if initial_state.shape != (rows, cols):
                raise ValueError(f"Initial state shape {initial_state.shape} doesn't match grid size {(rows, cols)}")
            if initial_state.dtype != bool:
                raise ValueError("Initial state must be boolean array")
            self.state = initial_state.copy()
        else:
            self.state = np.zeros((rows, cols), dtype=bool)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def copy(self) -> 'Grid':
        """Create a deep copy of the grid."""
        return Grid(self.rows, self.cols, self.state)

    def contains(self, row: int, col: int) -> bool:
        """Check whether (row, col) lies inside the grid."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> bool:
        """Get cell state at coordinates.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.contains(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.rows}x{self.cols} grid")
        return bool(self.state[row, col])

    def set(self, row: int, col: int, alive: bool) -> None:
        """Set cell state at coordinates.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.contains(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.rows}x{self.cols} grid")
        self.state[row, col] = alive

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.count_nonzero(self.state))

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self.state)

    def alive_cells(self) -> List[Tuple[int, int]]:
        """Live coordinates in row-major order."""
        alive_rows, alive_cols = np.nonzero(self.state)
        return [(int(r), int(c)) for r, c in zip(alive_rows, alive_cols)]

    def view(self) -> np.ndarray:
        """Read-only view of the state array (no copy)."""
        view = self.state.view()
        view.flags.writeable = False
        return view

    def __getitem__(self, key: Tuple[int, int]) -> bool:
        """Access cell state using grid[row, col] syntax."""
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: Tuple[int, int], value: bool) -> None:
        """Set cell state using grid[row, col] = value syntax."""
        row, col = key
        self.set(row, col, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self.state, other.state)

    def __str__(self) -> str:
        return render_frame(self.state)

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, alive={self.count_alive()})"
