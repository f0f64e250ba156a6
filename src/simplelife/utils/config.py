"""Configuration constants and run options for Simple Life."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """Application defaults."""

    # Printed window
    DEFAULT_NUM_ROWS: int = 23
    DEFAULT_NUM_COLS: int = 39

    # Generations
    DEFAULT_NUM_GEN: int = 0

    # Lines around boards
    DEFAULT_START_LINE: Optional[str] = None
    DEFAULT_END_LINE: Optional[str] = None
    DEFAULT_SEP_LINE: Optional[str] = ""

    # Output format
    OUT_ALIVE: str = "o"
    OUT_DEAD: str = "."
    OUT_SEP: str = " "
    OUT_START: str = " "
    OUT_END: str = ""

    # Input format
    IN_ALIVE: str = "o"
    IN_DEAD: str = "."

    # Logging
    LOG_FORMAT: str = '%(levelname)s: %(message)s'


def centered_min(size: int) -> int:
    """First index of a window of the given size centred on 0."""
    return -((size - 1) // 2)


@dataclass
class Options:
    """Resolved settings of one run."""

    num_gen: int = Config.DEFAULT_NUM_GEN
    num_print: Optional[int] = None
    num_rows: int = Config.DEFAULT_NUM_ROWS
    num_cols: int = Config.DEFAULT_NUM_COLS
    min_row: Optional[int] = None
    min_col: Optional[int] = None
    start_line: Optional[str] = Config.DEFAULT_START_LINE
    end_line: Optional[str] = Config.DEFAULT_END_LINE
    sep_line: Optional[str] = Config.DEFAULT_SEP_LINE
    out_alive: str = Config.OUT_ALIVE
    out_dead: str = Config.OUT_DEAD
    out_sep: str = Config.OUT_SEP
    out_start: str = Config.OUT_START
    out_end: str = Config.OUT_END
    in_alive: str = Config.IN_ALIVE
    in_dead: str = Config.IN_DEAD

    def __post_init__(self):
        # Unset values follow the other settings
        if self.num_print is None:
            self.num_print = self.num_gen + 1
        if self.min_row is None:
            self.min_row = centered_min(self.num_rows)
        if self.min_col is None:
            self.min_col = centered_min(self.num_cols)

    @classmethod
    def from_args(cls, args) -> "Options":
        """Build options from a parsed argparse namespace."""
        options = cls(
            num_gen=args.gen,
            num_print=args.print,
            num_rows=args.size[0],
            num_cols=args.size[1],
            min_row=args.min[0] if args.min else None,
            min_col=args.min[1] if args.min else None,
            start_line=args.startline,
            end_line=args.endline,
            sep_line=args.sepline,
        )
        if args.outfmt is not None:
            (options.out_alive, options.out_dead, options.out_sep,
             options.out_start, options.out_end) = args.outfmt
        if args.infmt is not None:
            options.in_alive, options.in_dead = args.infmt
        return options
