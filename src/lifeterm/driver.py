"""Animation loop and display sizing.

The engine knows nothing about terminals or time; this module queries the
display size once, then alternates render, sleep, step.
"""

import logging
import shutil
import sys
import time
from typing import Callable, Optional, TextIO, Tuple

from .core.engine import LifeEngine
from .core.render import render_frame

logger = logging.getLogger(__name__)

FRAME_DELAY = 1.0  # seconds between generations


def detect_display_size(fallback: Tuple[int, int] = (24, 80)) -> Tuple[int, int]:
    """Get the terminal size as (rows, cols).

    Args:
        fallback: (rows, cols) used when no terminal is attached
    """
    fallback_rows, fallback_cols = fallback
    size = shutil.get_terminal_size((fallback_cols, fallback_rows))
    logger.debug(f"Display size: {size.lines} rows x {size.columns} cols")
    return (size.lines, size.columns)


def write_frame(engine: LifeEngine, out: TextIO) -> None:
    out.write(render_frame(engine.render_view()))
    out.write('\n')
    out.flush()


def run_animation(engine: LifeEngine,
                  out: Optional[TextIO] = None,
                  delay: float = FRAME_DELAY,
                  generations: Optional[int] = None,
                  sleep: Callable[[float], None] = time.sleep) -> int:
    """Render the current frame, then step and render once per delay.

    Args:
        engine: Engine to animate
        out: Stream receiving the frames (default: sys.stdout)
        delay: Seconds to sleep after each frame
        generations: Number of steps to run; None runs forever
        sleep: Sleep function (injectable for tests)

    Returns:
        Number of generations advanced
    """
    if delay < 0:
        raise ValueError(f"delay must be non-negative, got {delay}")
    if generations is not None and generations < 0:
        raise ValueError(f"generations must be non-negative, got {generations}")
    if out is None:
        out = sys.stdout

    write_frame(engine, out)
    sleep(delay)

    steps = 0
    while generations is None or steps < generations:
        live_count = engine.step()
        steps += 1
        if steps % 10 == 0:
            logger.info(f"Generation {engine.generation}: live={live_count}")
        write_frame(engine, out)
        sleep(delay)

    return steps
