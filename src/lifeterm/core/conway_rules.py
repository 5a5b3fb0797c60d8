"""
Conway's Game of Life Rules

The fixed B3/S23 rule and the hard-edged Moore neighborhood used by the
engine. Cells outside the grid do not exist: there is no wrap-around.
"""

from typing import List, Set, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np


# Standard Conway rules - not configurable
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors

# Moore neighborhood offsets in row-major order, center excluded
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc)
    for dr in (-1, 0, 1)
    for dc in (-1, 0, 1)
    if not (dr == 0 and dc == 0)
)


def update_cell(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to determine next cell state.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        # Survival rule
        return live_neighbors in SURVIVAL_SET
    else:
        # Birth rule
        return live_neighbors in BIRTH_SET


def neighbor_coords(row: int, col: int, rows: int, cols: int) -> List[Tuple[int, int]]:
    """List the in-bounds Moore neighbors of (row, col).

    Args:
        row: Cell row
        col: Cell column
        rows: Grid height
        cols: Grid width

    Returns:
        Up to 8 (row, col) pairs; 3 for a corner, 5 for an edge cell
    """
    neighbors = []
    for dr, dc in NEIGHBOR_OFFSETS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            neighbors.append((nr, nc))
    return neighbors


def count_live_neighbors(state: 'np.ndarray', row: int, col: int) -> int:
    """Count live neighbors of cell at (row, col) with hard-edge boundaries.

    Args:
        state: 2D boolean numpy array indexed [row, col]
        row: Cell row
        col: Cell column

    Returns:
        Number of live neighbors (0-8)
    """
    rows, cols = state.shape
    count = 0

    for nr, nc in neighbor_coords(row, col, rows, cols):
        if state[nr, nc]:
            count += 1

    return count
