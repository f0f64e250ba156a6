"""Read the initial cells of the board from text lines."""
import logging
from typing import Iterable

from ..core.board import SimpleLife
from ..utils.config import Options

LOG = logging.getLogger(__name__)


class _Cursor:
    """Position where the next cell of the input goes."""

    def __init__(self):
        self.row = 0
        self.start_col = 0
        self.first_found = False


def read_line(board: SimpleLife, cursor: _Cursor, line: str, options: Options) -> int:
    """Set the alive cells of one input line.

    Only the configured ALIVE and DEAD strings count as cells. The first
    ALIVE cell found is placed in (0, 0) and fixes the starting column of
    the following lines.

    Returns:
        Number of alive cells set
    """
    row = cursor.row
    col = cursor.start_col
    alive = 0
    k = 0
    while k < len(line):
        ia = line.find(options.in_alive, k)
        id_ = line.find(options.in_dead, k)
        if ia < 0 and id_ < 0:
            break
        if id_ < 0 or (ia > -1 and ia < id_):
            if not cursor.first_found:
                cursor.first_found = True
                cursor.start_col = -col
                row = col = 0
            board.set(row, col, True)
            col += 1
            alive += 1
            k = ia + len(options.in_alive)
        else:
            # Dead cells are the default, only advance
            col += 1
            k = id_ + len(options.in_dead)
    cursor.row = row + 1
    return alive


def read_input(board: SimpleLife, lines: Iterable[str], options: Options) -> int:
    """Clear the board and fill it with the cells read from the lines.

    Args:
        board: Board to populate
        lines: Input text lines, trailing newlines are ignored
        options: Run options holding the ALIVE and DEAD strings

    Returns:
        Number of alive cells read
    """
    board.clear()
    cursor = _Cursor()
    alive = 0
    for line in lines:
        alive += read_line(board, cursor, line.rstrip("\r\n"), options)
    LOG.debug(f"Read {alive} alive cells")
    return alive

