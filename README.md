# pipexpy

`pipexpy` connects a chain of commands the way a shell pipe does. The first
command reads from an input file or from a here-document. The last command
writes to an output file.

## Installation

```
pip install .
```

## Command line

To run two or more commands that read `infile` and write `outfile`:

```
pipexpy infile "grep foo" "wc -l" outfile
```

This behaves like `< infile grep foo | wc -l > outfile`. The output file is
created with mode 0644 if it is missing, and truncated if it exists.

To read from a here-document, put `here_doc` and a limiter where the input
file would go:

```
pipexpy here_doc END "cat" "tr a-z A-Z" outfile
```

Input lines come from standard input. A `pipe heredoc> ` prompt is written to
standard output before each line. Reading stops at the end of input or at the
first line that either:

- begins with the limiter, or
- ends, at its newline, while it still matches the limiter. An empty line is
  such a line, and so is any leading part of the limiter.

The line that stops reading is not passed on. In this mode the output is
appended to `outfile`, as `<< END cat | tr a-z A-Z >> outfile` would do.

Each command is split on single spaces, and empty words are dropped. The
program is used as given if that path is executable. Otherwise each
directory in `PATH` is tried in order.

Some stages cannot start: the input or output file fails to open, `PATH` is
unset, or the command is not found. In that case a message labelled `open:`
or `execve:` goes to standard error, and the other stages still run.

The exit status is that of the last command. A command killed by a signal
gives 128 plus the signal number. The status is 1 when the last command
could not be started, and also when too few arguments are given. Plain mode
needs an input file, at least two commands and an output file. Here-document
mode needs `here_doc`, a limiter, at least two commands and an output file.

## Library

- `pipexpy.pipeline`: `parse_args(argv)` returns a frozen `PipexConfig`
  (`infile`, `outfile`, `commands`, `here_doc`), or raises `UsageError`.
  `run_pipeline(config, env=None, stdin=None, prompt_stream=None)` runs the
  chain and returns the exit status. `main(argv=None)` is the command-line
  entry point.
- `pipexpy.command`: `get_possible_paths(env)` returns the `PATH`
  directories, each ending in `/`. `resolve_command(text, env)` returns the
  argument vector with the resolved program first, or raises
  `CommandNotFoundError`.
- `pipexpy.heredoc`: `read_here_doc(limiter, stream=None, prompt_stream=None)`
  reads the here-document. `is_delimiter(line, limiter)` tells whether a line
  ends it.
- `pipexpy.linereader`: `LineReader(stream, buffer_size=42)` returns lines
  from a file object, text or binary, or from a file descriptor. It works
  through `read_line()` or by iteration, and each line keeps its newline.
- `pipexpy.text`: string helpers that stop at the first NUL character, such as
  `split_words`, `strchr`, `strrchr`, `strcmp`, `strncmp`, `strnstr`,
  `substr`, `strjoin`, `strtrim`, `strmapi`, `striteri`, `strlcpy` and
  `strlcat`.
- `pipexpy.chars`: `is_alpha`, `is_ascii`, `is_digit`, `is_alnum`,
  `is_print`, `to_lower`, `to_upper`, plus 32-bit `atoi` and `itoa`.
- `pipexpy.bytebuf`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy`, `memmove` on `bytes` and `bytearray`.
- `pipexpy.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, which
  write to a text stream.
- `pipexpy.linked`: `LinkedList` of `Node`s, with `push_front`, `push_back`,
  `last`, `clear`, `for_each`, `map`, `len()` and iteration.

```python
import os
from pipexpy.pipeline import parse_args, run_pipeline

config = parse_args(["infile", "cat", "wc -l", "outfile"])
status = run_pipeline(config, dict(os.environ))
```

## What it does not do

Commands are not interpreted by a shell. Quotes, escapes, globs, variables
and redirections inside a command are passed on as literal words.

## Tests

```
pip install ".[test]"
pytest
```