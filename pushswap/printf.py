"""Formatted output with a small set of conversions: %c %d %i %s %u %x %X %p %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO, Union

__all__ = [
    "format_char",
    "format_int",
    "format_str",
    "format_unsigned",
    "format_hex",
    "format_hex_upper",
    "format_pointer",
    "render",
    "printf",
]

INT_BITS = 32
POINTER_BITS = 64
_HEX_LOWER = "0123456789abcdef"
NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _to_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _hex_digits(value: int) -> str:
    digits = []
    while True:
        value, digit = divmod(value, 16)
        digits.append(_HEX_LOWER[digit])
        if value == 0:
            break
    return "".join(reversed(digits))


def format_char(c: Union[str, int]) -> str:
    """Return one character; an int gives the character of its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def format_int(n: int) -> str:
    """Return the decimal text of ``n`` taken as a 32-bit signed integer."""
    return str(_to_signed(n, INT_BITS))


def format_str(s: Optional[str]) -> str:
    """Return ``s`` itself, or ``(null)`` when it is missing."""
    return NULL_STRING if s is None else s


def format_unsigned(n: int) -> str:
    """Return the decimal text of ``n`` taken as a 32-bit unsigned integer."""
    return str(_to_unsigned(n, INT_BITS))


def format_hex(n: int) -> str:
    """Return lowercase hexadecimal of ``n`` as a 32-bit unsigned integer."""
    return _hex_digits(_to_unsigned(n, INT_BITS))


def format_hex_upper(n: int) -> str:
    """Return uppercase hexadecimal of ``n`` as a 32-bit unsigned integer."""
    return format_hex(n).upper()


def format_pointer(address: Optional[int]) -> str:
    """Return ``0x`` followed by the lowercase hex address, or ``(nil)`` for null."""
    if not address:
        return NULL_POINTER
    return "0x" + _hex_digits(_to_unsigned(address, POINTER_BITS))


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "d": format_int,
    "i": format_int,
    "s": format_str,
    "u": format_unsigned,
    "x": format_hex,
    "X": format_hex_upper,
    "p": format_pointer,
}


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise ValueError(f"not enough arguments for conversion %{spec}") from None


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument.

    ``%%`` gives a percent sign; any other unknown conversion, and a lone
    ``%`` at the end, produce nothing.
    """
    pieces = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_next_arg(remaining, spec)))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the rendered text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    (stream or sys.stdout).write(text)
    return len(text)