import random

import pytest

from pushswap.cli import main
from pushswap.stacks import Element, Stacks


def test_no_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_single_string_argument(capsys):
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_several_arguments(capsys):
    assert main(["3", "2", "1"]) == 0
    assert capsys.readouterr().out == "sa\nrra\n"


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_output_replays_to_sorted(capsys):
    values = random.Random(11).sample(range(-300, 300), 40)
    assert main([str(v) for v in values]) == 0
    moves = capsys.readouterr().out.split()
    stacks = Stacks([Element(value=v) for v in values], emit=lambda name: None)
    for move in moves:
        getattr(stacks, move)()
    assert [e.value for e in stacks.a] == sorted(values)
    assert not stacks.b


@pytest.mark.parametrize(
    "argv, message",
    [
        (["1", "1"], "repeated arguments"),
        (["0", "abc"], "repeated arguments"),
        (["1", "abc"], "not a valid number"),
        (["1", "2147483648"], "number out of range"),
        (["5 -"], "not valid number"),
    ],
)
def test_errors_exit_with_failure(capsys, argv, message):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 1
    captured = capsys.readouterr()
    assert message in captured.err
    assert captured.out == ""