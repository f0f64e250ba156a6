"""Command-line driver for Simple Life."""
import argparse
import logging
import re
import sys
import textwrap
from typing import Iterable, List, Optional, TextIO, Tuple

from ..core.board import SimpleLife
from ..utils.config import Config, Options
from .printer import format_board
from .reader import read_input

LOG = logging.getLogger(__name__)

OUT_FORMAT = ",ALIVE,DEAD[,SEP,START,END]"
IN_FORMAT = ",ALIVE,DEAD"
INVALID_ALIVE_DEAD = ("The ALIVE and DEAD arguments must not be "
                      "equal, or empty, or with different lengths")

PAIR_PATTERN = re.compile(r"-?[0-9]+,-?[0-9]+")
OPTION_PATTERN = re.compile(r"--?[A-Za-z]")

# Options followed by a value, which may itself start with "-"
VALUE_OPTIONS = ("-g", "--gen", "-p", "--print", "-s", "--size", "-m", "--min",
                 "--startline", "--endline", "--sepline",
                 "-o", "--outfmt", "-i", "--infmt")


class FormatError(ValueError):
    """Invalid input or output format string."""


def parse_format(arg: str, counts: Tuple[int, ...], name: str) -> List[str]:
    """Split a format string using its first character as separator.

    Args:
        arg: Format string such as ",o,."
        counts: Accepted numbers of separators
        name: Format description used in error messages

    Returns:
        The fields after the leading separator
    """
    if len(arg) < 2:
        raise FormatError(f"Invalid {name} format: {arg}")
    sep = arg[0]
    if arg.count(sep) not in counts:
        raise FormatError(f"Invalid {name} format: {arg}")
    fields = arg[1:].split(sep)
    alive, dead = fields[0], fields[1]
    if not alive or not dead or len(alive) != len(dead) or alive == dead:
        raise FormatError(f"Invalid {name} format: {INVALID_ALIVE_DEAD}: {arg}")
    return fields


def out_format(arg: str) -> Tuple[str, str, str, str, str]:
    """Convert ",ALIVE,DEAD[,SEP,START,END]" to its five fields."""
    try:
        fields = parse_format(arg, (2, 5), f"output {OUT_FORMAT}")
    except FormatError as e:
        raise argparse.ArgumentTypeError(str(e))
    if len(fields) == 2:
        fields += ["", "", ""]
    return tuple(fields)


def in_format(arg: str) -> Tuple[str, str]:
    """Convert ",ALIVE,DEAD" to its two fields."""
    try:
        fields = parse_format(arg, (2,), f"input {IN_FORMAT}")
    except FormatError as e:
        raise argparse.ArgumentTypeError(str(e))
    return tuple(fields)


def int_pair(arg: str) -> Tuple[int, int]:
    """Convert "A,B" to a tuple of two integers."""
    if not PAIR_PATTERN.fullmatch(arg):
        raise argparse.ArgumentTypeError(f"invalid pair of integers: {arg}")
    first, second = arg.split(",")
    return int(first), int(second)


def size(arg: str) -> Tuple[int, int]:
    """Convert "NUM_ROWS,NUM_COLS" to a tuple of two positive integers."""
    num_rows, num_cols = int_pair(arg)
    if num_rows < 1 or num_cols < 1:
        raise argparse.ArgumentTypeError(f"invalid size: {arg}")
    return num_rows, num_cols


def non_negative(arg: str) -> int:
    try:
        value = int(arg)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {arg}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"negative number: {arg}")
    return value


def positive(arg: str) -> int:
    value = non_negative(arg)
    if value < 1:
        raise argparse.ArgumentTypeError(f"number lower than 1: {arg}")
    return value


def is_option(arg: str) -> bool:
    """Return True if the argument starts with "-a" or "--a"."""
    return OPTION_PATTERN.match(arg) is not None


def join_option_values(argv: List[str]) -> List[str]:
    """Attach values starting with "-" to their option as "--opt=value".

    argparse would take a value such as -11,-19 or --- for an option, so
    every value that is not itself an option is joined to the option.
    """
    result = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if (arg in VALUE_OPTIONS and i + 1 < len(argv)
                and argv[i + 1].startswith("-") and not is_option(argv[i + 1])):
            result.append(f"{arg}={argv[i + 1]}")
            i += 2
            continue
        result.append(arg)
        i += 1
    return result


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    description = textwrap.dedent('''\
        Simple command-line version of Conway's Game of Life (B3/S23).

        Gets the cells of the board reading lines from the standard input
        interpreting by default the symbols o and . as ALIVE/DEAD cells,
        and then prints the ASCII board in each generation of cells.
        The position (0, 0) is assigned to the first ALIVE cell found, so
        the board read will be the same if the cells are just shifted.''')
    epilog = textwrap.dedent('''\
        Example of use with the default command-line options:
            $ python -m simplelife --gen 0 --print 1 --size 23,39 \\
                  --min -11,-19 --sepline "" --outfmt ",o,., , ," --infmt ",o,."''')

    parser = argparse.ArgumentParser(
        prog="simplelife",
        formatter_class=argparse.RawTextHelpFormatter,
        description=description, epilog=epilog)

    group = parser.add_argument_group("Generation options")
    group.add_argument(
        "-g", "--gen", type=non_negative, metavar="NUM_GEN",
        default=Config.DEFAULT_NUM_GEN,
        help="number of generations to calculate (default: %(default)s)")
    group.add_argument(
        "-p", "--print", type=positive, metavar="NUM_PRINT", nargs="?",
        default=None, const=None,
        help="number of boards to print counting from the last\n"
             "(default: NUM_GEN+1, to print the generation 0)")

    group = parser.add_argument_group("Display options")
    group.add_argument(
        "-s", "--size", type=size, metavar="NUM_ROWS,NUM_COLS",
        default=(Config.DEFAULT_NUM_ROWS, Config.DEFAULT_NUM_COLS),
        help="rows and columns of the printed portion of the board\n"
             "(default: %d,%d)" % (Config.DEFAULT_NUM_ROWS, Config.DEFAULT_NUM_COLS))
    group.add_argument(
        "-m", "--min", type=int_pair, metavar="MIN_ROW,MIN_COL", nargs="?",
        default=None, const=None,
        help="coordinates of the upper-left printed cell\n"
             "(default: centre the board in (0, 0))")
    group.add_argument(
        "--startline", metavar="LINE", nargs="?",
        default=Config.DEFAULT_START_LINE, const=None,
        help="line printed before each board")
    group.add_argument(
        "--endline", metavar="LINE", nargs="?",
        default=Config.DEFAULT_END_LINE, const=None,
        help="line printed after each board")
    group.add_argument(
        "--sepline", metavar="LINE", nargs="?",
        default=Config.DEFAULT_SEP_LINE, const=None,
        help="line printed between two boards (default: empty line,\n"
             "use --sepline without value to remove it)")
    group.add_argument(
        "-o", "--outfmt", type=out_format, metavar=OUT_FORMAT,
        help="fields concatenated as START + (ALIVE|DEAD) +\n"
             "[SEP + (ALIVE|DEAD)]... + END, separated by the first\n"
             "character (default: \",o,., , ,\")")
    group.add_argument(
        "-i", "--infmt", type=in_format, metavar=IN_FORMAT,
        help="strings recognized as ALIVE and DEAD cells in the\n"
             "input (default: \",o,.\")")

    group = parser.add_argument_group("Diagnostics")
    group.add_argument(
        "-v", "--verbose", action="store_true",
        help="log debug messages to stderr")
    return parser


def setup_logging(verbose: bool) -> None:
    """Attach a stderr handler to the package logger."""
    logger = logging.getLogger("simplelife")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Config.LOG_FORMAT))
        logger.addHandler(handler)


def run(options: Options, lines: Iterable[str], out: TextIO) -> SimpleLife:
    """Read the board, advance it and print the requested generations.

    Returns:
        The board after the last generation
    """
    board = SimpleLife()
    read_input(board, lines, options)
    prev_print = False
    if options.num_print > options.num_gen:
        out.write(format_board(board, options))
        prev_print = True
    for gen in range(1, options.num_gen + 1):
        if options.sep_line is not None and prev_print:
            out.write(options.sep_line + "\n")
        board.next()
        if options.num_print > options.num_gen - gen:
            out.write(format_board(board, options))
            prev_print = True
        else:
            prev_print = False
    if LOG.isEnabledFor(logging.INFO):
        LOG.info(f"Finished after {options.num_gen} generations, "
                 f"population={board.population()}")
    return board


def main(argv: Optional[List[str]] = None) -> None:
    """Run the program reading stdin and printing to stdout."""
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(join_option_values(argv))
    setup_logging(args.verbose)
    options = Options.from_args(args)
    LOG.debug(f"Options: {options}")
    run(options, sys.stdin, sys.stdout)
