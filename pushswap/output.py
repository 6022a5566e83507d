"""Writing characters, strings and numbers to text streams, and fatal errors."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

__all__ = ["put_char", "put_str", "put_endl", "put_nbr", "print_error"]

ERROR_PREFIX = "\033[31mError: "
COLOR_RESET = "\033[0m"
EXIT_FAILURE = 1


def put_char(c: str, stream: Optional[TextIO] = None) -> int:
    """Write one character and return the number of characters written."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    (stream or sys.stdout).write(c)
    return 1


def put_str(s: str, stream: Optional[TextIO] = None) -> int:
    """Write a string and return its length."""
    (stream or sys.stdout).write(s)
    return len(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> int:
    """Write a string followed by a newline; return the characters written."""
    out = stream or sys.stdout
    return put_str(s, out) + put_char("\n", out)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write an integer in decimal; return the characters written."""
    return put_str(str(n), stream)


def print_error(message: str, stream: Optional[TextIO] = None) -> None:
    """Report ``message`` in red on standard error and exit with failure."""
    out = stream or sys.stderr
    put_str(ERROR_PREFIX, out)
    put_endl(message, out)
    put_str(COLOR_RESET, out)
    out.flush()
    raise SystemExit(EXIT_FAILURE)