"""String helpers with NUL-terminated string semantics.

Text arguments are treated as C strings: anything after an embedded NUL
character is ignored. Positions are returned as indices, or None where
nothing is found.
"""

from __future__ import annotations

from typing import Callable, MutableSequence

CharLike = int | str


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def _cstr(text: str) -> str:
    return text.split("\0", 1)[0]


def _cbytes(data: bytes | bytearray) -> bytes:
    return bytes(data).split(b"\0", 1)[0]


def _non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split_words(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    return [word for word in _cstr(text).split(_char(sep)) if word]


def strchr(text: str, c: CharLike) -> int | None:
    """Index of the first ``c`` in ``text``; a NUL ``c`` finds the terminator."""
    text = _cstr(text)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> int | None:
    """Index of the last ``c`` in ``text``; a NUL ``c`` finds the terminator."""
    text = _cstr(text)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strcmp(a: str, b: str) -> int:
    """Difference of the first differing character codes, or 0 when equal."""
    for x, y in zip(_cstr(a) + "\0", _cstr(b) + "\0"):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    _non_negative(n, "n")
    if n == 0:
        return 0
    return strcmp(_cstr(a)[:n], _cstr(b)[:n])


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` lying wholly within the first ``length`` characters of ``big``."""
    _non_negative(length, "length")
    little = _cstr(little)
    if not little:
        return 0
    index = _cstr(big)[:length].find(little)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    text = _cstr(text)
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    return _cstr(a) + _cstr(b)


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return _cstr(text).strip(_cstr(charset))


def strmapi(text: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character."""
    return "".join(f(index, ch) for index, ch in enumerate(_cstr(text)))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], str | None]) -> None:
    """Call ``f(index, char)`` for each character, in place.

    Iteration stops at a NUL character. When ``f`` returns a value other than
    None, it replaces the character at that index.
    """
    for index, ch in enumerate(list(chars)):
        if ch == "\0":
            break
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strlcpy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy ``src`` into ``dst`` holding at most ``size`` bytes with the NUL.

    Returns the length of ``src``, so a result of ``size`` or more means the
    copy was truncated.
    """
    _non_negative(size, "size")
    if size > len(dst):
        raise IndexError(f"size {size} exceeds buffer of {len(dst)}")
    source = _cbytes(src)
    if size == 0:
        return len(source)
    copied = source[:size - 1]
    dst[:len(copied)] = copied
    dst[len(copied)] = 0
    return len(source)


def strlcat(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dst`` within ``size`` bytes.

    Returns the length of the string it tried to create: the initial length
    of ``dst`` plus that of ``src``, or ``size`` plus the length of ``src``
    when ``dst`` holds no terminator within ``size``.
    """
    _non_negative(size, "size")
    if size > len(dst):
        raise IndexError(f"size {size} exceeds buffer of {len(dst)}")
    source = _cbytes(src)
    end = dst.find(0)
    start = len(dst) if end < 0 else end
    if size <= start:
        return size + len(source)
    copied = source[:size - 1 - start]
    dst[start:start + len(copied)] = copied
    dst[start + len(copied)] = 0
    return start + len(source)