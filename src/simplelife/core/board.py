"""Unbounded Game of Life board growing on demand."""
import logging
from typing import List, Optional, Tuple

from .row import Row
from .rules import BinaryRule, get_bs_masks

LOG = logging.getLogger(__name__)


class SimpleLife:
    """Conway's Game of Life (B3/S23) on a plane without fixed boundary.

    Rows with index ``r >= 0`` live in ``pos_rows[r]`` and rows with
    ``r < 0`` in ``neg_rows[-(r + 1)]``. A slot may hold None, which reads
    as an entirely dead row. The row sequences and the column window
    ``[first_column, last_column_plus_one)`` only ever widen.

    The rule is fixed: cells outside the tracked window are assumed dead
    and can only be born one step outside it, which holds for B3/S23 but
    must be re-derived before any other rule is allowed.
    """

    def __init__(self):
        self.born, self.survive = get_bs_masks(BinaryRule.CONWAY_LIFE)
        self.neg_rows: List[Optional[Row]] = []
        self.pos_rows: List[Optional[Row]] = []
        self.first_column = 0
        self.last_column_plus_one = 0
        self.generation = 0

    def _locate(self, row: int) -> Tuple[List[Optional[Row]], int]:
        if row < 0:
            return self.neg_rows, -(row + 1)
        return self.pos_rows, row

    def get(self, row: int, col: int) -> bool:
        """Get the state of a cell. Never allocates storage."""
        rows, i = self._locate(row)
        if i >= len(rows):
            return False
        cells = rows[i]
        if cells is None:
            return False
        return cells.get(col)

    def set(self, row: int, col: int, value: bool) -> None:
        """Set the state of a cell, growing the board for live cells.

        Dead cells outside the stored rows are a no-op.
        """
        rows, i = self._locate(row)
        if not value and i >= len(rows):
            return
        if i >= len(rows):
            LOG.debug(f"Growing rows to include row {row}")
            rows.extend([None] * (i + 1 - len(rows)))
        cells = rows[i]
        if cells is None:
            cells = Row()
            rows[i] = cells
        cells.set(col, value)
        if value:
            if col < self.first_column:
                self.first_column = col
            if col >= self.last_column_plus_one:
                self.last_column_plus_one = col + 1

    def next_cell(self, row: int, col: int) -> bool:
        """Return the state of the given cell in the next generation."""
        neighbours = (self.get(row - 1, col - 1)
                      + self.get(row - 1, col)
                      + self.get(row - 1, col + 1)
                      + self.get(row, col - 1)
                      + self.get(row, col + 1)
                      + self.get(row + 1, col - 1)
                      + self.get(row + 1, col)
                      + self.get(row + 1, col + 1))
        if self.get(row, col):
            return 0 != (self.survive & (1 << neighbours))
        return 0 != (self.born & (1 << neighbours))

    def next(self) -> None:
        """Advance the entire board one generation in place.

        Rows are computed top to bottom into two alternating buffers and
        each one is written back one iteration later, so a row is only
        overwritten after the row below it has read its old values.
        """
        first_row = self.first_row() - 1
        last_row_plus_one = self.last_row_plus_one() + 1
        first_col = self.first_col() - 1
        last_col_plus_one = self.last_col_plus_one() + 1

        buffers = [Row(), Row()]
        current = 0
        i = first_row
        for i in range(first_row, last_row_plus_one):
            self._compute_row(i, buffers[current], first_col, last_col_plus_one)
            self._commit_row(i - 1, buffers[1 - current], first_col, last_col_plus_one)
            current = 1 - current
        # Last computed row, still held by the previous buffer
        self._commit_row(i, buffers[1 - current], first_col, last_col_plus_one)

        self.generation += 1
        if LOG.isEnabledFor(logging.DEBUG):
            LOG.debug(f"Generation {self.generation}: population={self.population()}, "
                      f"rows=[{self.first_row()}, {self.last_row_plus_one()}), "
                      f"cols=[{self.first_col()}, {self.last_col_plus_one()})")

    def _compute_row(self, row: int, buffer: Row, first_col: int, last_col_plus_one: int) -> None:
        for col in range(first_col, last_col_plus_one):
            buffer.set(col, self.next_cell(row, col))

    def _commit_row(self, row: int, buffer: Row, first_col: int, last_col_plus_one: int) -> None:
        for col in range(first_col, last_col_plus_one):
            self.set(row, col, buffer.get(col))

    def first_row(self) -> int:
        """Index of the first stored row."""
        return -len(self.neg_rows)

    def last_row_plus_one(self) -> int:
        """Index of the last stored row plus one."""
        return len(self.pos_rows)

    def first_col(self) -> int:
        """Index of the first column ever set alive."""
        return self.first_column

    def last_col_plus_one(self) -> int:
        """Index of the last column ever set alive plus one."""
        return self.last_column_plus_one

    def population(self) -> int:
        """Number of live cells on the board."""
        return sum(cells.count() for cells in self.neg_rows + self.pos_rows
                   if cells is not None)

    def clear(self) -> None:
        """Empty the entire board, keeping bounds and allocated rows."""
        for cells in self.neg_rows:
            if cells is not None:
                cells.clear()
        for cells in self.pos_rows:
            if cells is not None:
                cells.clear()
        self.generation = 0
