import io

import pytest

from pushswap.output import print_error, put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    stream = io.StringIO()
    assert put_char("z", stream) == 1
    assert stream.getvalue() == "z"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    stream = io.StringIO()
    count = put_str("push", stream)
    assert stream.getvalue() == "push"
    assert count == len("push")


def test_put_endl_appends_newline():
    stream = io.StringIO()
    count = put_endl("pa", stream)
    assert stream.getvalue() == "pa\n"
    assert count == len("pa\n")


def test_put_endl_sequence():
    stream = io.StringIO()
    for op in ("sa", "ra", "rra"):
        put_endl(op, stream)
    assert stream.getvalue().splitlines() == ["sa", "ra", "rra"]


@pytest.mark.parametrize("n", [0, 7, 42, -5, 2147483647, -2147483648])
def test_put_nbr_round_trips(n):
    stream = io.StringIO()
    put_nbr(n, stream)
    assert int(stream.getvalue()) == n


def test_put_nbr_int_min_text():
    stream = io.StringIO()
    put_nbr(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


def test_defaults_to_stdout(capsys):
    put_endl("rb")
    assert capsys.readouterr().out == "rb\n"


def test_print_error_exits_with_failure():
    stream = io.StringIO()
    with pytest.raises(SystemExit) as excinfo:
        print_error("repeated arguments", stream)
    assert excinfo.value.code == 1
    assert stream.getvalue() == "\033[31mError: repeated arguments\n\033[0m"


def test_print_error_defaults_to_stderr(capsys):
    with pytest.raises(SystemExit):
        print_error("memory problems")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "memory problems" in captured.err
    assert captured.err.startswith("\033[31mError: ")