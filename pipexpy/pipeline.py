"""Running a chain of commands between an input and an output file."""

from __future__ import annotations

import os
import signal
import subprocess
import sys
import tempfile
from contextlib import ExitStack
from dataclasses import dataclass
from typing import IO, Mapping, Sequence, TextIO

from pipexpy.command import CommandNotFoundError, resolve_command
from pipexpy.heredoc import read_here_doc

HERE_DOC = "here_doc"
_FILE_MODE = 0o644


class UsageError(ValueError):
    """Raised when the command line has too few arguments."""


@dataclass(frozen=True)
class PipexConfig:
    """Files and commands of one pipeline.

    With ``here_doc`` set, ``infile`` holds the limiter and the output file is
    appended to instead of truncated.
    """

    infile: str
    outfile: str
    commands: tuple[str, ...]
    here_doc: bool = False


def parse_args(argv: Sequence[str]) -> PipexConfig:
    """Build a configuration from ``infile cmd... outfile`` arguments.

    A leading ``here_doc`` argument switches to here-document mode, where the
    next argument is the limiter.
    """
    args = list(argv)
    if len(args) < 4:
        raise UsageError("expected: infile cmd1 cmd2 ... outfile")
    here_doc = args[0] == HERE_DOC
    if here_doc:
        if len(args) < 5:
            raise UsageError("expected: here_doc LIMITER cmd1 cmd2 ... outfile")
        args = args[1:]
    return PipexConfig(args[0], args[-1], tuple(args[1:-1]), here_doc)


def _report(label: str, message: object) -> None:
    print(f"{label}: {message}", file=sys.stderr)


def _open_output(path: str, append: bool) -> IO[bytes]:
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    return os.fdopen(os.open(path, flags, _FILE_MODE), "ab" if append else "wb")


def _start_stage(
    config: PipexConfig,
    index: int,
    upstream: IO[bytes] | None,
    env: dict[str, str],
) -> subprocess.Popen | None:
    """Start one command, or report why it cannot run and return None."""
    is_first = index == 0
    is_last = index == len(config.commands) - 1
    with ExitStack() as stage:
        if upstream is not None:
            stage.callback(upstream.close)
        if is_first and not config.here_doc:
            try:
                source = stage.enter_context(open(config.infile, "rb"))
            except OSError as exc:
                _report("open", exc.strerror or exc)
                return None
        else:
            source = upstream if upstream is not None else subprocess.DEVNULL
        if is_last:
            try:
                sink = stage.enter_context(_open_output(config.outfile, config.here_doc))
            except OSError as exc:
                _report("open", exc.strerror or exc)
                return None
        else:
            sink = subprocess.PIPE
        try:
            argv = resolve_command(config.commands[index], env)
            return subprocess.Popen(argv, stdin=source, stdout=sink, env=env)
        except CommandNotFoundError as exc:
            _report("execve", exc)
        except OSError as exc:
            _report("execve", exc.strerror or exc)
        return None


def _exit_code(returncode: int) -> int:
    if returncode < 0:
        return 128 + signal.Signals(-returncode).value
    return returncode


def run_pipeline(
    config: PipexConfig,
    env: Mapping[str, str] | None = None,
    stdin: IO | int | None = None,
    prompt_stream: TextIO | None = None,
) -> int:
    """Run the commands, each reading the previous one's output.

    The first command reads the input file, or the here-document collected
    from ``stdin``; the last writes the output file. Returns the exit status
    of the last command, 1 when it could not be started.
    """
    environment = dict(os.environ if env is None else env)
    processes: list[subprocess.Popen | None] = []
    upstream: IO[bytes] | None = None
    if config.here_doc:
        text = read_here_doc(config.infile, stdin, prompt_stream)
        upstream = tempfile.TemporaryFile()
        upstream.write(text.encode())
        upstream.seek(0)
    for index in range(len(config.commands)):
        process = _start_stage(config, index, upstream, environment)
        processes.append(process)
        upstream = process.stdout if process is not None else None
    if upstream is not None:
        upstream.close()
    status = 1
    for process in processes:
        status = 1 if process is None else _exit_code(process.wait())
    return status


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        config = parse_args(argv)
    except UsageError:
        return 1
    return run_pipeline(config, os.environ, None, sys.stdout)