"""Game of Life core: rules, grid and state-transition engine."""

from .engine import LifeEngine, SeedError
from .grid import Grid

__all__ = ['LifeEngine', 'SeedError', 'Grid']
