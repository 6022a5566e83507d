"""Byte-buffer helpers: filling, copying, moving, searching and comparing."""

from __future__ import annotations

from typing import Optional

__all__ = ["memset", "bzero", "calloc", "memcpy", "memmove", "memchr", "memcmp"]


def _check_length(name: str, data, n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > len(data):
        raise ValueError(f"{name} holds {len(data)} bytes, fewer than {n}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_length("buffer", buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return memset(buf, 0, n)


def calloc(n: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``n`` elements of ``size`` bytes each."""
    if n < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(n * size)


def memcpy(dest: Optional[bytearray], src, n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``.

    When both buffers are missing, nothing is copied and None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("both buffers must be given")
    _check_length("source", src, n)
    _check_length("destination", dest, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source were copied to a
    temporary first.
    """
    if n < 0 or dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets and byte count must not be negative")
    if max(dest_offset, src_offset) + n > len(buf):
        raise ValueError("region lies outside the buffer")
    if n:
        buf[dest_offset:dest_offset + n] = buf[src_offset:src_offset + n]
    return buf


def memchr(data, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` in the first ``n`` bytes."""
    _check_length("data", data, n)
    offset = bytes(data[:n]).find(c & 0xFF)
    return None if offset < 0 else offset


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_length("first buffer", a, n)
    _check_length("second buffer", b, n)
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)