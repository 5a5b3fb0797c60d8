"""Text rendering of grid frames.

One glyph per cell, one line per row, no trailing line break.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np

ALIVE_GLYPH = '█'
DEAD_GLYPH = '░'


def render_frame(view: 'np.ndarray') -> str:
    """Render a 2D boolean field as text.

    Args:
        view: Boolean array indexed [row, col] (True=alive)

    Returns:
        Rows of ALIVE_GLYPH/DEAD_GLYPH joined by newlines
    """
    lines = []
    for row in view:
        lines.append(''.join(ALIVE_GLYPH if cell else DEAD_GLYPH for cell in row))
    return '\n'.join(lines)
