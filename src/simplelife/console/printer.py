"""Format a window of the board as text."""
from ..core.board import SimpleLife
from ..utils.config import Options


def format_board(board: SimpleLife, options: Options) -> str:
    """Render the configured window of the board.

    Each row is START + cell + [SEP + cell]... + END, where a cell is the
    ALIVE or DEAD string. The optional start and end lines surround it.
    """
    lines = []
    if options.start_line is not None:
        lines.append(options.start_line)
    first_col = options.min_col
    last_col_plus_one = options.min_col + options.num_cols
    for row in range(options.min_row, options.min_row + options.num_rows):
        cells = options.out_sep.join(
            options.out_alive if board.get(row, col) else options.out_dead
            for col in range(first_col, last_col_plus_one)
        )
        lines.append(options.out_start + cells + options.out_end)
    if options.end_line is not None:
        lines.append(options.end_line)
    return "".join(line + "\n" for line in lines)
