"""Strategies that sort stack ``a`` using the puzzle's moves."""

from __future__ import annotations

import math
from typing import Iterable, List

from .parsing import InputError, assign_index
from .stacks import Element, Stacks, get_max_index, get_min_index, is_sorted
from .strings import INT_MAX, INT_MIN

__all__ = [
    "int_sqrt",
    "sort_two",
    "sort_three",
    "sort_four",
    "sort_five",
    "move_to_b",
    "move_to_a",
    "sort_stacks",
    "push_swap",
]


def int_sqrt(num: int) -> int:
    """Return the integer square root of ``num``; -1 for a negative number."""
    if num < 0:
        return -1
    return math.isqrt(num)


def sort_two(stacks: Stacks) -> None:
    """Sort a two-element stack ``a``."""
    if stacks.a[0].value > stacks.a[1].value:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Sort a three-element stack ``a`` in at most two moves."""
    if is_sorted(stacks.a):
        return
    a, b, c = (element.value for element in list(stacks.a)[:3])
    if a > b and b < c and a < c:
        stacks.sa()
    elif a > b and b > c:
        stacks.sa()
        stacks.rra()
    elif a > b and b < c and a > c:
        stacks.ra()
    elif a < b and b > c and a < c:
        stacks.sa()
        stacks.ra()
    elif a < b and b > c and a > c:
        stacks.rra()


def _park_smallest(stacks: Stacks) -> None:
    stacks.best_rotate_a(get_min_index(stacks.a))
    stacks.pb()


def sort_four(stacks: Stacks) -> None:
    """Sort a four-element stack ``a``."""
    if is_sorted(stacks.a):
        return
    _park_smallest(stacks)
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Sort a five-element stack ``a``."""
    if is_sorted(stacks.a):
        return
    _park_smallest(stacks)
    _park_smallest(stacks)
    sort_three(stacks)
    stacks.pa()
    stacks.pa()


def move_to_b(stacks: Stacks) -> None:
    """Push every element of ``a`` to ``b`` in rank chunks of width sqrt(n)."""
    k = int_sqrt(len(stacks.a))
    size_b = 0
    while stacks.a:
        index = stacks.a[0].index
        if index <= size_b:
            stacks.pb()
            size_b += 1
        elif index <= size_b + k:
            stacks.pb()
            stacks.rb()
            size_b += 1
        else:
            stacks.ra()


def move_to_a(stacks: Stacks) -> None:
    """Bring elements back from ``b`` largest rank first, leaving ``a`` sorted."""
    while stacks.b:
        stacks.best_rotate_b(get_max_index(stacks.b))
        stacks.pa()


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a`` with the strategy suited to its size."""
    size = len(stacks.a)
    if is_sorted(stacks.a):
        return
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    elif size > 5:
        move_to_b(stacks)
        move_to_a(stacks)


def push_swap(values: Iterable[int]) -> List[str]:
    """Return the moves that sort ``values`` (first value on top)."""
    numbers = list(values)
    if any(not INT_MIN <= n <= INT_MAX for n in numbers):
        raise InputError("number out of range")
    if len(set(numbers)) != len(numbers):
        raise InputError("repeated arguments")
    elements = assign_index([Element(text=str(n), value=n) for n in numbers])
    moves: List[str] = []
    sort_stacks(Stacks(elements, emit=moves.append))
    return moves