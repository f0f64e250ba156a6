import pytest

from simplelife import SimpleLife

GLIDER = [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)]
BLOCK = [(0, 0), (0, 1), (1, 0), (1, 1)]
BLINKER = [(0, -1), (0, 0), (0, 1)]


def place(board, cells):
    for row, col in cells:
        board.set(row, col, True)
    return board


def live_cells(board):
    """Set of live cells inside the stored bounds."""
    return {
        (row, col)
        for row in range(board.first_row(), board.last_row_plus_one())
        for col in range(board.first_col(), board.last_col_plus_one())
        if board.get(row, col)
    }


def bounds(board):
    return (board.first_row(), board.last_row_plus_one(),
            board.first_col(), board.last_col_plus_one())


@pytest.fixture
def board():
    return SimpleLife()
