"""Locating the executable for a command line through the PATH variable."""

from __future__ import annotations

import os
from typing import Mapping

from pipexpy.text import split_words


class CommandNotFoundError(LookupError):
    """Raised when a command line names no executable that can be found."""

    def __init__(self, command: str, reason: str) -> None:
        super().__init__(f"{command}: {reason}" if command else reason)
        self.command = command
        self.reason = reason


def get_possible_paths(env: Mapping[str, str]) -> list[str] | None:
    """Return the PATH directories, each ending in '/', or None without PATH.

    Empty entries of PATH are dropped.
    """
    path = env.get("PATH")
    if path is None:
        return None
    return [directory + "/" for directory in split_words(path, ":")]


def resolve_command(text: str, env: Mapping[str, str]) -> list[str]:
    """Split ``text`` on spaces and resolve its first word to an executable.

    The word is used as given when it is executable; otherwise each PATH
    directory is tried in order. Returns the argument vector with the
    resolved program first. Raises CommandNotFoundError when PATH is unset,
    the command is empty, or no executable is found.
    """
    words = split_words(text, " ")
    directories = get_possible_paths(env)
    if directories is None:
        raise CommandNotFoundError(words[0] if words else text, "PATH is not set")
    if not words:
        raise CommandNotFoundError(text, "empty command")
    program, *arguments = words
    if os.access(program, os.X_OK):
        return words
    for directory in directories:
        candidate = directory + program
        if os.access(candidate, os.X_OK):
            return [candidate, *arguments]
    raise CommandNotFoundError(program, "command not found")