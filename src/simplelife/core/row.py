"""One horizontal line of cells of the board."""
from typing import Optional

from .bitvector import BitVector


class Row:
    """Cells of one board row, split into non-negative and negative columns.

    Column ``c >= 0`` is bit ``c`` of the positive part and column ``c < 0``
    is bit ``-(c + 1)`` of the negative part, so column -1 is bit 0.
    Each part is allocated on the first write that touches it.
    """

    def __init__(self):
        self.neg_cells: Optional[BitVector] = None
        self.pos_cells: Optional[BitVector] = None

    def get(self, col: int) -> bool:
        if col < 0:
            if self.neg_cells is None:
                return False
            return self.neg_cells.get(-(col + 1))
        if self.pos_cells is None:
            return False
        return self.pos_cells.get(col)

    def set(self, col: int, value: bool) -> None:
        if col < 0:
            if self.neg_cells is None:
                self.neg_cells = BitVector()
            self.neg_cells.set(-(col + 1), value)
            return
        if self.pos_cells is None:
            self.pos_cells = BitVector()
        self.pos_cells.set(col, value)

    def clear(self) -> None:
        """Set every cell dead, keeping allocated storage for reuse."""
        if self.neg_cells is not None:
            self.neg_cells.clear()
        if self.pos_cells is not None:
            self.pos_cells.clear()

    def count(self) -> int:
        """Number of live cells in the row."""
        total = 0
        if self.neg_cells is not None:
            total += self.neg_cells.count()
        if self.pos_cells is not None:
            total += self.pos_cells.count()
        return total
