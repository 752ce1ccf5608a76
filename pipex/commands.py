"""Finding the executable for a pipeline command."""

from __future__ import annotations

import os
from typing import Iterable, Mapping, Optional

from pipex.words import join_with, split_words


class CommandNotFound(Exception):
    """Raised when a command cannot be resolved to an executable.

    ``quiet`` commands produce no diagnostic; ``exit_status`` is the status
    the child running the command should end with.
    """

    def __init__(self, cmd: str, *, quiet: bool = False, exit_status: int = 127) -> None:
        self.cmd = cmd
        self.quiet = quiet
        self.exit_status = exit_status
        super().__init__(command_not_found_message(cmd).rstrip("\n"))

    @property
    def message(self) -> str:
        """The diagnostic to write to standard error, empty when quiet."""
        return "" if self.quiet else command_not_found_message(self.cmd)


def command_not_found_message(cmd: str) -> str:
    """Diagnostic for a command that could not be found."""
    return f"{cmd}: command not found\n"


def permission_denied_message(cmd: str) -> str:
    """Diagnostic for a command that may not be run."""
    return f"{cmd}: Permission denied\n"


def check_command(cmd: str) -> None:
    """Reject commands that are never looked up.

    An empty command is rejected quietly; a command containing "./" is
    rejected as not found.
    """
    if cmd == "":
        raise CommandNotFound(cmd, quiet=True)
    if "./" in cmd:
        raise CommandNotFound(cmd)


def search_path(environ: Optional[Mapping[str, str]] = None) -> Optional[list[str]]:
    """Return the directories listed in PATH, or None when PATH is not set."""
    env = os.environ if environ is None else environ
    value = env.get("PATH")
    if value is None:
        return None
    return split_words(value, ":")


def resolve_command(search_dirs: Iterable[str], cmd: str) -> str:
    """Return the path of the executable that runs ``cmd``.

    The whole command is tried as a path first; otherwise its first word is
    looked up in each search directory in turn.
    """
    check_command(cmd)
    if os.access(cmd, os.X_OK):
        return cmd
    words = split_words(cmd, " ")
    if not words:
        raise CommandNotFound(cmd, quiet=True, exit_status=0)
    program = words[0]
    for directory in search_dirs:
        candidate = join_with(directory, program, "/")
        if os.access(candidate, os.X_OK):
            return candidate
    raise CommandNotFound(program)