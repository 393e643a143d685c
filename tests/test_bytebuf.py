import pytest

from pipexpy.bytebuf import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_memset_truncates_value():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray([0x41] * 4)


def test_memset_out_of_range():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_bzero():
    buf = bytearray(b"hello")
    bzero(buf, 4)
    assert buf == bytearray(b"\0\0\0\0o")


@pytest.mark.parametrize("nmemb, size", [(0, 10), (3, 4), (10, 0), (1, 1)])
def test_calloc_is_zeroed(nmemb, size):
    buf = calloc(nmemb, size)
    assert len(buf) == nmemb * size
    assert not any(buf)


def test_calloc_too_large():
    with pytest.raises(MemoryError):
        calloc(2, 2147483647)


def test_memchr_finds_first():
    data = b"abcabc"
    assert memchr(data, ord("c"), 6) == 2
    assert memchr(data, ord("z"), 6) is None
    assert memchr(data, ord("c"), 2) is None


def test_memcmp_sign_and_equality():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"x", b"y", 0) == 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x00\xff\x10", b"\x00\x01\x10"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"wxyz", 3)
    assert result is dest
    assert dest == bytearray(b"wxy...")


def test_memmove_overlap_forward():
    buf = bytearray(b"123456789")
    memmove(buf, 2, 0, 5)
    assert buf[2:7] == bytearray(b"12345")
    assert buf[:2] == bytearray(b"12")


def test_memmove_overlap_backward():
    buf = bytearray(b"123456789")
    memmove(buf, 0, 3, 5)
    assert buf[:5] == bytearray(b"45678")
    assert buf[5:] == bytearray(b"6789")


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)