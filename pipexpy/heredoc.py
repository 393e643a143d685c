"""Collecting here-document input up to a limiter line."""

from __future__ import annotations

import os
import sys
from typing import IO, TextIO

from pipexpy.linereader import LineReader

PROMPT = "pipe heredoc> "


def is_delimiter(line: str, limiter: str) -> bool:
    """Return True when ``line`` ends the here-document.

    The line and limiter are compared up to their first difference; the line
    ends the input when the whole limiter matched, or when the line reached
    its newline at that point.
    """
    matched = len(os.path.commonprefix([line, limiter]))
    return matched == len(limiter) or line[matched:matched + 1] == "\n"


def read_here_doc(
    limiter: str,
    stream: IO | int | None = None,
    prompt_stream: TextIO | None = None,
) -> str:
    """Read lines from ``stream`` until the limiter line or end of input.

    A prompt is written to ``prompt_stream`` before each line. The limiter
    line itself is not part of the result. Without a stream, standard input
    is read directly from its file descriptor.
    """
    if stream is None:
        stream = sys.stdin.fileno()
    if prompt_stream is None:
        prompt_stream = sys.stdout
    reader = LineReader(stream)
    parts: list[str] = []
    while True:
        prompt_stream.write(PROMPT)
        prompt_stream.flush()
        line = reader.read_line()
        if line is None:
            break
        if isinstance(line, bytes):
            line = line.decode()
        if is_delimiter(line, limiter):
            break
        parts.append(line)
    return "".join(parts)