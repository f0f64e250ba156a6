"""Core module for the unbounded Game of Life board."""
from .bitvector import BitVector
from .board import SimpleLife
from .row import Row
from .rules import BinaryRule, get_bs_masks

__all__ = ['BitVector', 'SimpleLife', 'Row', 'BinaryRule', 'get_bs_masks']
