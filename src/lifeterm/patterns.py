"""Classic Conway patterns as (row, col) coordinate lists."""

from typing import Iterable, List, Sequence, Tuple

# Stable 2x2 block still life
BLOCK: List[Tuple[int, int]] = [(0, 0), (0, 1), (1, 0), (1, 1)]

# Horizontal blinker, period 2
BLINKER: List[Tuple[int, int]] = [(0, 0), (0, 1), (0, 2)]

# Glider travelling down and to the right
#   . # .
#   . . #
#   # # #
GLIDER: List[Tuple[int, int]] = [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)]


def translate(pattern: Iterable[Sequence[int]], row: int, col: int) -> List[Tuple[int, int]]:
    """Shift a pattern so its origin lands on (row, col)."""
    return [(r + row, c + col) for r, c in pattern]
