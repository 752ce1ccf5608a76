"""Run two commands joined by a pipe, reading one file and writing another."""

from __future__ import annotations

import os
import subprocess
import sys
from contextlib import ExitStack
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from pipex.commands import CommandNotFound, resolve_command, search_path
from pipex.words import split_words


@dataclass
class _Stage:
    """One side of the pipeline: a running process or a status already known."""

    process: Optional[subprocess.Popen] = None
    status: int = 0

    def wait(self) -> int:
        if self.process is None:
            return self.status
        code = self.process.wait()
        # A command killed by a signal has no exit status of its own.
        return code if code >= 0 else 0


def _report(err: OSError) -> None:
    sys.stderr.write(f"Error: {err.strerror}\n")


def _launch(cmd: str, search_dirs: list[str], stdin, stdout, env: dict) -> _Stage:
    try:
        program = resolve_command(search_dirs, cmd)
    except CommandNotFound as exc:
        sys.stderr.write(exc.message)
        return _Stage(status=exc.exit_status)
    try:
        process = subprocess.Popen(
            split_words(cmd, " "),
            executable=program,
            stdin=stdin,
            stdout=stdout,
            env=env,
        )
    except OSError as err:
        _report(err)
        return _Stage(status=1)
    return _Stage(process=process)


def _first_stage(infile, cmd, search_dirs, pipe_in, env, stack) -> _Stage:
    try:
        source = stack.enter_context(open(infile, "rb"))
    except OSError as err:
        _report(err)
        return _Stage(status=1)
    return _launch(cmd or "cat", search_dirs, source, pipe_in, env)


def _second_stage(outfile, cmd, search_dirs, pipe_out, env, stack) -> _Stage:
    try:
        fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as err:
        _report(err)
        return _Stage(status=1)
    stack.callback(os.close, fd)
    return _launch(cmd or "cat", search_dirs, pipe_out, fd, env)


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Run ``cmd1 < infile | cmd2 > outfile`` and return the exit status of cmd2.

    Empty commands run as cat. Without PATH in the environment nothing is run
    and the status is 0.
    """
    env = dict(os.environ if environ is None else environ)
    search_dirs = search_path(env)
    if search_dirs is None:
        return 0
    try:
        read_end, write_end = os.pipe()
    except OSError as err:
        _report(err)
        return 1
    with ExitStack() as stack:
        stack.callback(os.close, read_end)
        stack.callback(os.close, write_end)
        first = _first_stage(infile, cmd1, search_dirs, write_end, env, stack)
        second = _second_stage(outfile, cmd2, search_dirs, read_end, env, stack)
    first.wait()
    return second.wait()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: pipex infile cmd1 cmd2 outfile."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write("Error: Arguments\n")
        return 1
    return run_pipeline(*args)


if __name__ == "__main__":
    sys.exit(main())