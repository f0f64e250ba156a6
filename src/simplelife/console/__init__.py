"""Text input, output and command-line driver."""
from .app import main, run
from .printer import format_board
from .reader import read_input

__all__ = ['main', 'run', 'format_board', 'read_input']
