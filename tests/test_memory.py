import pytest

from pushswap.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdefgh")
    result = memset(buf, 7, 5)
    assert result is buf
    assert all(b == 7 for b in buf[:5])
    assert buf[5:] == b"fgh"


def test_memset_uses_low_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytes([0x41]) * 3


def test_memset_too_long_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)


def test_bzero_zeroes_prefix():
    buf = bytearray(b"xyzw")
    bzero(buf, 2)
    assert buf[:2] == bytes(2)
    assert buf[2:] == b"zw"


@pytest.mark.parametrize("n,size", [(0, 4), (3, 1), (5, 8)])
def test_calloc_is_zero_filled(n, size):
    buf = calloc(n, size)
    assert len(buf) == n * size
    assert buf.count(0) == n * size


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memcpy_copies_prefix():
    dest = bytearray(b"........")
    src = b"hello"
    result = memcpy(dest, src, 5)
    assert result is dest
    assert dest[:5] == src
    assert dest[5:] == b"..."


def test_memcpy_both_missing_returns_none():
    assert memcpy(None, None, 4) is None


def test_memcpy_one_missing_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(4), None, 2)


def test_memmove_forward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 2, 0, 4)
    assert buf[2:] == original[0:4]
    assert buf[:2] == original[:2]


def test_memmove_backward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf[:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_zero_bytes_is_noop():
    buf = bytearray(b"abc")
    memmove(buf, 1, 0, 0)
    assert buf == b"abc"


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_occurrence():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_respects_limit():
    data = b"banana"
    assert memchr(data, ord("n"), 2) is None


def test_memchr_uses_low_byte():
    data = bytes([1, 2, 3])
    assert memchr(data, 0x103, 3) == 2


def test_memcmp_equal_prefixes():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_difference_sign_and_value():
    assert memcmp(b"abd", b"abc", 3) == ord("d") - ord("c")
    assert memcmp(b"abc", b"abd", 3) < 0


def test_memcmp_bytes_are_unsigned():
    assert memcmp(bytes([200]), bytes([10]), 1) > 0


def test_memcmp_zero_length():
    assert memcmp(b"a", b"b", 0) == 0