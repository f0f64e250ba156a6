"""Conway's Game of Life on an unbounded board."""

__version__ = "0.1.0"
__author__ = "Simple Life"

from .core.board import SimpleLife
from .core.row import Row

__all__ = ['SimpleLife', 'Row', '__version__']
