import pytest

from solong.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_bzero_zero_count_is_noop():
    buf = bytearray(b"xyz")
    bzero(buf, 0)
    assert buf == b"xyz"


def test_bzero_out_of_range():
    with pytest.raises(IndexError):
        bzero(bytearray(2), 5)


def test_calloc_is_zeroed():
    block = calloc(3, 4)
    assert len(block) == 3 * 4
    assert not any(block)


def test_calloc_zero_members():
    assert len(calloc(0, 1000)) == 0


def test_calloc_too_large():
    with pytest.raises(MemoryError):
        calloc(2, 4295032592)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_count():
    data = b"hello"
    assert memchr(data, ord("o"), 3) is None


def test_memchr_value_truncated_to_byte():
    data = b"\x00\x01\x02"
    assert memchr(data, 0x102, 3) == memchr(data, 0x02, 3)


def test_memcmp_equal_prefix():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_memcmp_antisymmetric():
    first, second = b"qwerty", b"qwezzz"
    assert memcmp(first, second, 6) == -memcmp(second, first, 6)


def test_memcmp_out_of_range():
    with pytest.raises(IndexError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest[:4] == b"abcd"
    assert dest[4:] == b".."


def test_memcpy_out_of_range():
    with pytest.raises(IndexError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 2, 0, 4)
    assert buf[2:6] == original[0:4]
    assert buf[:2] == original[:2]


def test_memmove_backward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf[0:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_keeps_length():
    buf = bytearray(b"abcdef")
    assert len(memmove(buf, 1, 0, 5)) == len(b"abcdef")


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memset_fills_prefix():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("z"), 4)
    assert result is buf
    assert set(buf[:4]) == {ord("z")}
    assert buf[4:] == b"ef"


def test_memset_truncates_value():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert set(buf) == {0x41}


def test_memset_out_of_range():
    with pytest.raises(IndexError):
        memset(bytearray(1), 0, 2)