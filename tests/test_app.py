import io
import logging

import pytest

from simplelife.console.app import (FormatError, build_parser, join_option_values,
                                    main, parse_format, run, setup_logging)
from simplelife.utils.config import Options

BLINKER_INPUT = ["ooo"]


def parse(*argv):
    return Options.from_args(build_parser().parse_args(list(argv)))


def test_defaults():
    options = parse()
    assert options.num_gen == 0
    assert options.num_print == 1
    assert (options.num_rows, options.num_cols) == (23, 39)
    assert (options.min_row, options.min_col) == (-11, -19)
    assert options.start_line is None
    assert options.end_line is None
    assert options.sep_line == ""
    assert (options.out_alive, options.out_dead) == ("o", ".")
    assert (options.out_sep, options.out_start, options.out_end) == (" ", " ", "")
    assert (options.in_alive, options.in_dead) == ("o", ".")


def test_num_print_follows_num_gen():
    assert parse("-g", "5").num_print == 6
    assert parse("-g", "5", "-p", "2").num_print == 2
    assert parse("-g", "5", "-p").num_print == 6


def test_size_recentres_window():
    options = parse("--size", "4,6")
    assert (options.num_rows, options.num_cols) == (4, 6)
    assert (options.min_row, options.min_col) == (-1, -2)


def test_min_cell():
    options = parse("--min=-3,7", "-s", "4,4")
    assert (options.min_row, options.min_col) == (-3, 7)
    assert parse("-m").min_row == -11


def test_lines():
    options = parse("--startline", "<", "--endline", ">", "--sepline")
    assert options.start_line == "<"
    assert options.end_line == ">"
    assert options.sep_line is None


def test_outfmt_short_form_empties_decorations():
    options = parse("-o", ";#;_")
    assert (options.out_alive, options.out_dead) == ("#", "_")
    assert (options.out_sep, options.out_start, options.out_end) == ("", "", "")


def test_outfmt_long_form():
    options = parse("--outfmt", ",@,_,|,|,|")
    assert (options.out_alive, options.out_dead, options.out_sep,
            options.out_start, options.out_end) == ("@", "_", "|", "|", "|")


def test_infmt():
    options = parse("-i", ",[],__")
    assert (options.in_alive, options.in_dead) == ("[]", "__")


@pytest.mark.parametrize("arg", [",", ",o", ",o,.,x", ",oo,.", ",o,o", ",,."])
def test_parse_format_rejects(arg):
    with pytest.raises(FormatError):
        parse_format(arg, (2, 5), "output")


@pytest.mark.parametrize("argv", [
    ["-g", "-1"],
    ["-g", "x"],
    ["-p", "0"],
    ["-s", "0,5"],
    ["-s", "5"],
    ["-m=1;2"],
    ["-o", ",o,o"],
    ["-i", ",o,.,x,y,z"],
    ["--unknown"],
])
def test_invalid_arguments_exit(argv):
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(argv)
    assert exc.value.code == 2


def test_run_prints_every_generation():
    out = io.StringIO()
    options = Options(num_gen=2, num_rows=3, num_cols=3, min_col=0,
                      out_sep="", out_start="")
    board = run(options, BLINKER_INPUT, out)
    assert out.getvalue() == (
        "...\nooo\n...\n"
        "\n"
        ".o.\n.o.\n.o.\n"
        "\n"
        "...\nooo\n...\n"
    )
    assert board.generation == 2


def test_run_prints_only_last_boards():
    out = io.StringIO()
    options = Options(num_gen=3, num_print=1, num_rows=3, num_cols=3, min_col=0,
                      out_sep="", out_start="", sep_line="--")
    run(options, BLINKER_INPUT, out)
    assert out.getvalue() == ".o.\n.o.\n.o.\n"


def test_run_without_separator():
    out = io.StringIO()
    options = Options(num_gen=1, num_rows=1, num_cols=3, min_col=0,
                      out_sep="", out_start="", sep_line=None)
    run(options, BLINKER_INPUT, out)
    assert out.getvalue() == "ooo\n.o.\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(".o.\n..o\nooo\n"))
    main(["-g", "4", "-p", "1", "-s", "4,4", "--min=0,0", "-o", ",#,."])
    assert capsys.readouterr().out == (
        "....\n"
        ".#..\n"
        "..#.\n"
        "###.\n"
    )


def test_setup_logging_levels():
    logger = logging.getLogger("simplelife")
    setup_logging(True)
    assert logger.level == logging.DEBUG
    setup_logging(False)
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_join_option_values():
    assert join_option_values(["--min", "-11,-19", "-s", "3,3"]) == ["--min=-11,-19", "-s", "3,3"]
    assert join_option_values(["--sepline", "---", "-g", "1"]) == ["--sepline=---", "-g", "1"]
    assert join_option_values(["--endline", "-=-", "-i", ",o,."]) == ["--endline=-=-", "-i", ",o,."]
    # Option-looking arguments are never taken as values
    assert join_option_values(["--sepline", "-g", "2"]) == ["--sepline", "-g", "2"]
    assert join_option_values(["-m", "--size", "3,3"]) == ["-m", "--size", "3,3"]
    assert join_option_values(["--min"]) == ["--min"]


def test_main_accepts_negative_min(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("o\n"))
    main(["-s", "3,3", "--min", "-1,-1", "-o", ",o,."])
    assert capsys.readouterr().out == "...\n.o.\n...\n"


def test_main_accepts_dash_separator_line(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ooo\n"))
    main(["-g", "1", "--sepline", "---", "-s", "1,3", "-m", "0,0", "-o", ",o,."])
    assert capsys.readouterr().out == "ooo\n---\n.o.\n"


def test_main_bare_sepline_before_option(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ooo\n"))
    main(["--sepline", "-g", "1", "-s", "1,3", "-m", "0,0", "-o", ",o,."])
    assert capsys.readouterr().out == "ooo\n.o.\n"
