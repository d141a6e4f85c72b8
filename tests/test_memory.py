import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxlo")


def test_memset_keeps_only_low_byte():
    buf = bytearray(2)
    memset(buf, 0x100 + ord("A"), 2)
    assert buf == bytearray(b"AA")


def test_memset_zero_length_changes_nothing():
    buf = bytearray(b"abc")
    memset(buf, ord("z"), 0)
    assert buf == bytearray(b"abc")


def test_memset_past_end_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcd")
    bzero(buf, 2)
    assert buf == bytearray(b"\0\0cd")


def test_memcpy_copies_prefix():
    dst = bytearray(5)
    result = memcpy(dst, b"abcdef", 3)
    assert result is dst
    assert dst == bytearray(b"abc\0\0")


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


def test_memcpy_rejects_short_destination():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_out_of_bounds_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(b"abc"), 1, 0, 3)


def test_memchr_finds_first_match():
    assert memchr(b"hello", ord("l"), 5) == 2


def test_memchr_respects_limit():
    assert memchr(b"hello", ord("o"), 4) is None
    assert memchr(b"hello", ord("o"), 5) == 4


def test_memchr_masks_value():
    assert memchr(b"hello", 0x100 + ord("h"), 5) == 0


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_follows_first_difference():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 3) == -memcmp(b"abd", b"abc", 3)


def test_memcmp_treats_bytes_as_unsigned():
    assert memcmp(b"\x80", b"\x01", 1) > 0


def test_memcmp_rejects_short_input():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_calloc_returns_zeroed_buffer():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert all(byte == 0 for byte in buf)


def test_calloc_zero_count_gives_empty_buffer():
    assert calloc(0, 5) == bytearray()


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)