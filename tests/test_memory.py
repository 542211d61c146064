import pytest

from cubkit.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_bzero_zeroes_prefix_only():
    buf = bytearray(b"hello")
    result = bzero(buf, 3)
    assert result is buf
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"lo"


def test_bzero_rejects_overrun():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


def test_calloc_returns_zeroed_buffer():
    buf = calloc(4, 3)
    assert len(buf) == 4 * 3
    assert not any(buf)


def test_calloc_zero_size():
    assert calloc(10, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX, 2)


def test_memchr_finds_first():
    data = b"012345"
    index = memchr(data, ord("2"), 3)
    assert index is not None
    assert data[index] == ord("2")
    assert b"2" not in data[:index]


def test_memchr_truncates_value_to_byte():
    data = b"012345"
    assert memchr(data, 256 + ord("2"), 6) == memchr(data, ord("2"), 6)


def test_memchr_respects_limit():
    assert memchr(b"012345", ord("4"), 3) is None


def test_memcmp_equal_and_ordering():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcpy_copies():
    dst = bytearray(b"..........")
    result = memcpy(dst, b"abcdef", 4)
    assert result is dst
    assert dst[:4] == b"abcd"
    assert dst[4:] == b"......"


def test_memmove_forward_overlap():
    buf = bytearray(b"123456789")
    memmove(buf, 3, 2, 5)
    assert buf == bytearray(b"123345679")


def test_memmove_backward_overlap():
    buf = bytearray(b"123456789")
    memmove(buf, 0, 2, 5)
    assert buf[:5] == b"34567"
    assert buf[5:] == b"6789"


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memset_fills_low_byte():
    buf = bytearray(b"hello")
    memset(buf, ord("h") + 256, 3)
    assert buf == bytearray(b"hhhlo")