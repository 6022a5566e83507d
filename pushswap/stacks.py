"""The two stacks of the puzzle and the eleven moves that rearrange them."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Iterable, Optional, Sequence

from .output import put_endl

__all__ = [
    "Element",
    "Stacks",
    "is_sorted",
    "get_min_index",
    "get_max_index",
    "get_position",
]

INT_MAX = (1 << 31) - 1

Emitter = Callable[[str], None]


@dataclass(eq=False)
class Element:
    """One number on a stack: its argument text, its value and its rank."""

    text: str = ""
    value: int = 0
    index: int = 0


def is_sorted(stack: Iterable[Element]) -> bool:
    """Return True when the values never decrease from top to bottom."""
    values = [element.value for element in stack]
    return all(a <= b for a, b in zip(values, values[1:]))


def get_min_index(stack: Iterable[Element]) -> int:
    """Return the rank of the element holding the smallest value.

    Values equal to the largest 32-bit integer are never chosen; when no
    element qualifies the result is 0.
    """
    smallest = INT_MAX
    index = 0
    for element in stack:
        if element.value < smallest:
            smallest = element.value
            index = element.index
    return index


def get_max_index(stack: Iterable[Element]) -> int:
    """Return the largest rank on the stack, or 0 when it is empty."""
    return max((element.index for element in stack), default=0)


def get_position(stack: Sequence[Element], index: int) -> int:
    """Return how far from the top the element of rank ``index`` lies.

    When no element has that rank the length of the stack is returned.
    """
    return next(
        (pos for pos, element in enumerate(stack) if element.index == index),
        len(stack),
    )


class Stacks:
    """Stacks ``a`` and ``b``, top first, with the moves that act on them.

    Every move that changes something reports its name to ``emit``; a move
    that cannot be made changes nothing and reports nothing.
    """

    def __init__(
        self,
        elements: Iterable[Element] = (),
        emit: Optional[Emitter] = None,
    ) -> None:
        self.a: Deque[Element] = deque(elements)
        self.b: Deque[Element] = deque()
        self._emit = emit

    def __repr__(self) -> str:
        a = [element.value for element in self.a]
        b = [element.value for element in self.b]
        return f"{type(self).__name__}(a={a!r}, b={b!r})"

    def _report(self, name: str) -> None:
        if self._emit is None:
            put_endl(name, sys.stdout)
        else:
            self._emit(name)

    @staticmethod
    def _swap(stack: Deque[Element]) -> None:
        stack[0], stack[1] = stack[1], stack[0]

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        if len(self.a) < 2:
            return
        self._swap(self.a)
        self._report("sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        if len(self.b) < 2:
            return
        self._swap(self.b)
        self._report("sb")

    def ss(self) -> None:
        """Swap the top two of both stacks; only when both hold two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self._swap(self.a)
        self._swap(self.b)
        self._report("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._report("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._report("pb")

    def ra(self) -> None:
        """Send the top of ``a`` to its bottom."""
        if len(self.a) < 2:
            return
        self.a.rotate(-1)
        self._report("ra")

    def rb(self) -> None:
        """Send the top of ``b`` to its bottom."""
        if len(self.b) < 2:
            return
        self.b.rotate(-1)
        self._report("rb")

    def rr(self) -> None:
        """Rotate both stacks upward; only when both hold two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self.a.rotate(-1)
        self.b.rotate(-1)
        self._report("rr")

    def rra(self) -> None:
        """Bring the bottom of ``a`` to its top."""
        if len(self.a) < 2:
            return
        self.a.rotate(1)
        self._report("rra")

    def rrb(self) -> None:
        """Bring the bottom of ``b`` to its top."""
        if len(self.b) < 2:
            return
        self.b.rotate(1)
        self._report("rrb")

    def rrr(self) -> None:
        """Rotate both stacks downward; only when both hold two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self.a.rotate(1)
        self.b.rotate(1)
        self._report("rrr")

    @staticmethod
    def _require(stack: Deque[Element], index: int, name: str) -> None:
        if all(element.index != index for element in stack):
            raise ValueError(f"no element of rank {index} on stack {name}")

    def best_rotate_a(self, index: int) -> None:
        """Rotate ``a`` until the element of rank ``index`` is on top.

        The direction is chosen by comparing the rank itself with half the
        stack size: ``ra`` when it is not larger, ``rra`` otherwise.
        """
        self._require(self.a, index, "a")
        move = self.ra if index <= len(self.a) // 2 else self.rra
        while self.a[0].index != index:
            move()

    def best_rotate_b(self, index: int) -> None:
        """Rotate ``b`` the shorter way until the element of rank ``index`` is on top."""
        self._require(self.b, index, "b")
        position = get_position(self.b, index)
        move = self.rb if position <= len(self.b) // 2 else self.rrb
        while self.b[0].index != index:
            move()