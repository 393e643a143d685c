"""Operations on byte buffers: filling, searching, comparing and copying."""

from __future__ import annotations

_ALLOC_LIMIT = 2147483647


def _check_span(buf_len: int, start: int, n: int, what: str) -> None:
    if n < 0 or start < 0 or start + n > buf_len:
        raise IndexError(f"{what}: range {start}..{start + n} outside buffer of {buf_len}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_span(len(buf), 0, n, "memset")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes.

    Raises MemoryError when the request exceeds the signed 32-bit limit.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("sizes must not be negative")
    if nmemb and size > _ALLOC_LIMIT // nmemb:
        raise MemoryError(f"allocation of {nmemb} x {size} bytes is too large")
    return bytearray(nmemb * size)


def memchr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` within ``n`` bytes, or None."""
    _check_span(len(data), 0, n, "memchr")
    index = bytes(data[:n]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first differing pair, or 0."""
    if n == 0:
        return 0
    _check_span(len(a), 0, n, "memcmp")
    _check_span(len(b), 0, n, "memcmp")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    _check_span(len(dest), 0, n, "memcpy")
    _check_span(len(src), 0, n, "memcpy")
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to ``dest``; regions may overlap."""
    _check_span(len(buf), dest, n, "memmove")
    _check_span(len(buf), src, n, "memmove")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf