"""String helpers: bounded copying, searching, slicing, splitting and parsing."""

from __future__ import annotations

from itertools import islice, takewhile, zip_longest
from typing import Callable, List, MutableSequence, Optional, Tuple, Union

from .chars import isdigit

__all__ = [
    "strlcpy",
    "strlcat",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "itoa",
    "strmapi",
    "striteri",
    "atoi",
    "atol",
]

CharLike = Union[str, int]

_WHITESPACE = " \t\n\v\f\r"
_NUL = "\0"
INT_BITS = 32
LONG_BITS = 64
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _wrap(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``, so truncation
    happened when the length is not smaller than ``size``.
    """
    _check_size(size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` so that the result fits in ``size - 1`` characters.

    Returns the resulting text and the length the full concatenation would
    have had. When ``size`` does not exceed ``len(dest)``, ``dest`` is left
    unchanged and the length reported is ``size + len(src)``.
    """
    _check_size(size)
    if size <= len(dest):
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first pair of differing character codes,
    with the end of a string counting as code 0, or 0 when they agree.
    """
    _check_size(n)
    pairs = islice(zip_longest(s1, s2, fillvalue=_NUL), n)
    return next((ord(a) - ord(b) for a, b in pairs if a != b), 0)


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``n`` characters of ``haystack``.

    An empty needle is found at index 0.
    """
    _check_size(n)
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return index if index >= 0 else None


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` beginning at ``start``."""
    _check_size(start)
    _check_size(length)
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    return [word for word in s.split(_char(sep)) if word]


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], f: Callable[[int, str], str]) -> None:
    """Replace each character of ``s`` in place with ``f(index, char)``."""
    for index, ch in enumerate(s):
        s[index] = f(index, ch)


def _parse_integer(text: str, bits: int) -> int:
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(isdigit, rest))
    value = int(digits) if digits else 0
    return _wrap(sign * value, bits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Values out of range wrap around in two's complement.
    """
    return _parse_integer(text, INT_BITS)


def atol(text: str) -> int:
    """Parse a leading decimal integer as a 64-bit signed value.

    Follows the same rules as :func:`atoi` with a 64-bit range.
    """
    return _parse_integer(text, LONG_BITS)