"""Character classification and case conversion for ASCII codes.

Every function accepts either a one-character string or an integer
character code. Classification functions return a bool; the case
conversions return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

__all__ = [
    "isalpha",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "toupper",
    "tolower",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def isalpha(c: CharLike) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def isdigit(c: CharLike) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """Return True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def toupper(c: CharLike) -> CharLike:
    """Convert an ASCII lowercase letter to uppercase; leave anything else."""
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def tolower(c: CharLike) -> CharLike:
    """Convert an ASCII uppercase letter to lowercase; leave anything else."""
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code