"""Turning command-line arguments into ranked stack elements."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .chars import isdigit
from .stacks import Element
from .strings import INT_MAX, INT_MIN, atoi, atol, split

__all__ = [
    "InputError",
    "validate_number",
    "check_repeated",
    "handle_args",
    "create_elements",
    "assign_index",
]


class InputError(ValueError):
    """Raised when the numbers given to the program are not acceptable."""


def validate_number(text: str) -> bool:
    """Return True when ``text`` is an optionally signed 32-bit decimal integer.

    Raises :class:`InputError` otherwise.
    """
    value = atol(text)
    if value > INT_MAX or value < INT_MIN:
        raise InputError("number out of range")
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits:
        raise InputError("not valid number")
    if not all(isdigit(ch) for ch in digits):
        raise InputError("not a valid number")
    return True


def check_repeated(args: Iterable[str]) -> None:
    """Raise :class:`InputError` when two arguments parse to the same integer."""
    seen = set()
    for arg in args:
        value = atoi(arg)
        if value in seen:
            raise InputError("repeated arguments")
        seen.add(value)


def handle_args(argv: Sequence[str]) -> List[str]:
    """Return the number texts from the arguments after the program name.

    A single argument is split on spaces; several are taken as they are.
    """
    if len(argv) == 1:
        return split(argv[0], " ")
    return list(argv)


def create_elements(args: Iterable[str]) -> List[Element]:
    """Validate every argument and return one element per argument, in order."""
    elements = []
    for arg in args:
        validate_number(arg)
        elements.append(Element(text=arg, value=atoi(arg)))
    return elements


def assign_index(elements: List[Element]) -> List[Element]:
    """Give each element its rank among all values, 0 for the smallest.

    The elements are updated in place and returned.
    """
    ranks: dict = {}
    for rank, value in enumerate(sorted(element.value for element in elements)):
        ranks.setdefault(value, rank)
    for element in elements:
        element.index = ranks[element.value]
    return elements