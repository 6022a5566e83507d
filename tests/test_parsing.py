import pytest

from pushswap.parsing import (
    InputError,
    assign_index,
    check_repeated,
    create_elements,
    handle_args,
    validate_number,
)
from pushswap.stacks import Element


@pytest.mark.parametrize("text", ["42", "-2147483648", "2147483647", "+7", "0"])
def test_validate_number_accepts(text):
    assert validate_number(text) is True


@pytest.mark.parametrize(
    "text, message",
    [
        ("2147483648", "number out of range"),
        ("-2147483649", "number out of range"),
        ("", "not valid number"),
        ("-", "not valid number"),
        ("+", "not valid number"),
        ("12a", "not a valid number"),
        ("abc", "not a valid number"),
        (" 5", "not a valid number"),
        ("--5", "not a valid number"),
    ],
)
def test_validate_number_rejects(text, message):
    with pytest.raises(InputError) as info:
        validate_number(text)
    assert str(info.value) == message


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        validate_number("x")


@pytest.mark.parametrize(
    "args", [["1", "2", "1"], ["1", "+1"], ["0", "abc"], ["-3", "-3"]]
)
def test_check_repeated_rejects(args):
    with pytest.raises(InputError, match="repeated arguments"):
        check_repeated(args)


def test_check_repeated_accepts_distinct():
    assert check_repeated(["1", "2", "-1"]) is None


def test_handle_args_single_argument_is_split():
    assert handle_args(["3 2 1"]) == ["3", "2", "1"]


def test_handle_args_single_argument_drops_empty_pieces():
    assert handle_args(["  4   5 "]) == ["4", "5"]


def test_handle_args_several_arguments_kept():
    assert handle_args(["3", "2 1"]) == ["3", "2 1"]


def test_handle_args_empty():
    assert handle_args([]) == []
    assert handle_args([""]) == []


def test_create_elements_parses_values():
    elements = create_elements(["3", "-1", "+4"])
    assert [e.value for e in elements] == [3, -1, 4]
    assert [e.text for e in elements] == ["3", "-1", "+4"]


def test_create_elements_rejects_bad_input():
    with pytest.raises(InputError, match="not a valid number"):
        create_elements(["1", "2x"])


def test_assign_index_ranks_values():
    elements = [Element(value=v) for v in [30, -5, 10, 7, 100]]
    result = assign_index(elements)
    assert result is elements
    assert sorted(e.index for e in elements) == list(range(5))
    by_rank = sorted(elements, key=lambda e: e.index)
    values = [e.value for e in by_rank]
    assert values == sorted(values)


def test_assign_index_smallest_gets_zero():
    elements = assign_index([Element(value=v) for v in [5, -9, 2]])
    assert elements[1].index == 0