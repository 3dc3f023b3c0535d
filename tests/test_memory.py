import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.memory import (
    INT_MAX,
    bzero,
    calloc,
    mem_chr,
    mem_cmp,
    mem_copy,
    mem_move,
    mem_set,
)


def test_mem_set_fills_prefix_only():
    buf = bytearray(b"hello world")
    result = mem_set(buf, ord("x"), 5)
    assert result is buf
    assert buf[:5] == b"x" * 5
    assert buf[5:] == b" world"


def test_mem_set_truncates_value_to_byte():
    buf = bytearray(4)
    mem_set(buf, 0x141, 4)
    assert set(buf) == {0x41}


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_mem_set_rejects_overlong_count():
    with pytest.raises(ValueError):
        mem_set(bytearray(2), 0, 3)


@given(st.binary(min_size=1, max_size=64), st.data())
def test_mem_copy_copies_prefix(src, data):
    n = data.draw(st.integers(min_value=0, max_value=len(src)))
    dest = bytearray(len(src))
    result = mem_copy(dest, src, n)
    assert result is dest
    assert dest[:n] == src[:n]
    assert dest[n:] == bytes(len(src) - n)


def test_mem_copy_both_none():
    assert mem_copy(None, None, 4) is None
    assert mem_move(None, None, 4) is None


def test_mem_move_overlap_forward():
    buf = bytearray(b"abcdefgh")
    original = bytes(buf)
    view = memoryview(buf)
    result = mem_move(view[2:], view, 4)
    assert bytes(result[:4]) == original[0:4]
    assert buf[2:6] == original[0:4]
    assert buf[:2] == original[:2]
    assert buf[6:] == original[6:]


def test_mem_move_overlap_backward():
    buf = bytearray(b"abcdefgh")
    original = bytes(buf)
    view = memoryview(buf)
    result = mem_move(view, view[2:], 4)
    assert bytes(result[:4]) == original[2:6]
    assert buf[0:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_mem_move_rejects_short_source():
    with pytest.raises(ValueError):
        mem_move(bytearray(8), b"ab", 4)


@given(st.binary(max_size=64), st.integers(min_value=0, max_value=255))
def test_mem_chr_agrees_with_find(data, value):
    found = mem_chr(data, value, len(data))
    if value in data:
        assert found == data.index(value)
    else:
        assert found is None


def test_mem_chr_respects_limit():
    assert mem_chr(b"abcabc", ord("c"), 2) is None
    assert mem_chr(b"abcabc", ord("c"), 3) == 2
    assert mem_chr(b"abc", ord("a"), 0) is None


def test_mem_cmp_returns_byte_difference():
    assert mem_cmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert mem_cmp(b"abc", b"abd", 2) == 0
    assert mem_cmp(b"\xff", b"\x00", 1) == 0xFF


@given(st.binary(min_size=8, max_size=8), st.binary(min_size=8, max_size=8))
def test_mem_cmp_sign_matches_bytes_order(first, second):
    result = mem_cmp(first, second, 8)
    assert (result < 0) == (first < second)
    assert (result == 0) == (first == second)


def test_calloc_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_zero_sizes():
    assert calloc(0, 10) == bytearray()
    assert calloc(10, 0) == bytearray()


@pytest.mark.parametrize(
    "count, size",
    [(INT_MAX + 1, 1), (1, INT_MAX + 1), (2**16, 2**16), (-1, 4)],
)
def test_calloc_overflow(count, size):
    with pytest.raises(OverflowError):
        calloc(count, size)