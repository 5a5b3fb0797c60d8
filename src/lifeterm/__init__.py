"""
lifeterm: Conway's Game of Life in the terminal

A bounded, hard-edged Game of Life engine plus the glue that loads a JSON
seed and animates generations as text frames.
"""

from .core.engine import LifeEngine, SeedError
from .core.grid import Grid
from .core.render import render_frame, ALIVE_GLYPH, DEAD_GLYPH
from .seed import load_seed, parse_seed

__version__ = "0.1.0"

__all__ = [
    'LifeEngine',
    'SeedError',
    'Grid',
    'render_frame',
    'ALIVE_GLYPH',
    'DEAD_GLYPH',
    'load_seed',
    'parse_seed',
]
