# pipex

Run two commands connected by a pipe, reading from one file and writing to
another, as this shell line does:

```
< infile cmd1 | cmd2 > outfile
```

## Installation

```
pip install .
```

## Command line

```
pipex infile "cmd1 args" "cmd2 args" outfile
```

The same entry point is available as `python -m pipex.cli`.

Example:

```
pipex input.txt "grep error" "wc -l" count.txt
```

How it behaves:

- Each command is split on spaces. If the whole command string is an
  executable path it is run as given; otherwise its first word is looked up in
  each directory named by `PATH`, in order.
- A command containing `./` is not looked up and is reported as not found.
- An empty command runs `cat` in its place. A command made only of spaces runs
  nothing and gives status `0`, with no message.
- A command that cannot be found writes `<cmd>: command not found` to
  standard error, and its side of the pipeline ends with status `127`.
- The input file is opened for reading and the output file is created or
  truncated with mode `0644`. If either cannot be opened, `Error: <reason>` is
  written to standard error, that side does not run and has status `1`; the
  other side still runs.
- If `PATH` is not set, nothing is run and the status is `0`.
- The exit status is that of the second command (`0` if it was killed by a
  signal). Any number of arguments other than four prints `Error: Arguments`
  and exits with `1`.

## Library use

```python
from pipex.cli import run_pipeline

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", {"PATH": "/usr/bin:/bin"})
```

`run_pipeline(infile, cmd1, cmd2, outfile, environ=None)` uses `os.environ`
when no environment is given, and passes the environment to both commands.
`main(argv=None)` takes the four arguments, or reads them from `sys.argv`.

The smaller pieces live in their own modules:

- `pipex.commands`
  - `search_path(environ=None)`: the directories in `PATH`, or `None` when it
    is not set.
  - `resolve_command(search_dirs, cmd)`: the path of the executable for a
    command; raises `CommandNotFound`.
  - `check_command(cmd)`: rejects empty commands (quietly) and commands
    containing `./`.
  - `CommandNotFound`: has `cmd`, `quiet`, `exit_status` and `message`, the
    text to write to standard error (empty when quiet).
  - `command_not_found_message(cmd)`, `permission_denied_message(cmd)`.
- `pipex.words`: `split_words` (split on one character, dropping empty
  pieces), `find_bounded` (index of a substring within the first *n*
  characters, or `None`), `trim`, `substring`, `join_with`, `count_char` and
  `compare_prefix` (a `strncmp`-style difference of character codes).
- `pipex.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper` and `to_lower` for ASCII characters given as an `int` or a
  one-character `str`; `parse_int`, which reads a leading integer like `atoi`
  and wraps to 32 bits; and `format_int`, which rejects values outside the
  32-bit signed range with `OverflowError`.
- `pipex.lines`: `LineReader(fd, buffer_size=1000)`, whose `next_line()`
  returns the next line as `bytes` (newline kept) or `None` at the end and
  which can be iterated, and `read_lines(fd, buffer_size=1000)`.

## What it does not do

- It runs exactly two commands; longer pipelines and here-documents are not
  supported.
- Commands are split on single spaces only: there is no quoting, escaping,
  globbing or variable expansion.

## Tests

```
pip install .[test]
pytest
```