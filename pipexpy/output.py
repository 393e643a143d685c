"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO

from pipexpy.chars import itoa

CharLike = int | str


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def put_char(c: CharLike, stream: TextIO) -> None:
    """Write one character, given as a string or a code, to ``stream``."""
    stream.write(_char(c))


def put_str(text: str, stream: TextIO) -> None:
    """Write ``text`` to ``stream``."""
    stream.write(text)


def put_endl(text: str, stream: TextIO) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    stream.write(text)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write a 32-bit signed integer in decimal to ``stream``."""
    stream.write(itoa(n))