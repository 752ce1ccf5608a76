import os

import pytest

from pipex.commands import (
    CommandNotFound,
    check_command,
    command_not_found_message,
    permission_denied_message,
    resolve_command,
    search_path,
)


def _make_executable(directory, name):
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(path, 0o755)
    return path


def test_messages():
    assert command_not_found_message("foo") == "foo: command not found\n"
    assert permission_denied_message("foo") == "foo: Permission denied\n"


def test_check_command_accepts_plain_command():
    assert check_command("ls -l") is None


def test_check_command_empty_is_quiet():
    with pytest.raises(CommandNotFound) as info:
        check_command("")
    assert info.value.quiet is True
    assert info.value.message == ""


def test_check_command_rejects_relative_dot_slash():
    with pytest.raises(CommandNotFound) as info:
        check_command("./script.sh")
    assert info.value.message == "./script.sh: command not found\n"
    assert info.value.exit_status == 127


def test_search_path_splits_and_drops_empty():
    assert search_path({"PATH": "/usr/bin::/bin:"}) == ["/usr/bin", "/bin"]


def test_search_path_missing():
    assert search_path({"HOME": "/home/user"}) is None


def test_resolve_command_in_search_dirs(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    tool = _make_executable(second, "tool")
    found = resolve_command([str(first), str(second)], "tool --flag value")
    assert found == f"{second}/tool"
    assert os.path.samefile(found, tool)


def test_resolve_command_prefers_earlier_directory(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    _make_executable(first, "tool")
    _make_executable(second, "tool")
    assert resolve_command([str(first), str(second)], "tool") == f"{first}/tool"


def test_resolve_command_absolute_path(tmp_path):
    tool = _make_executable(tmp_path, "abs")
    assert resolve_command([], str(tool)) == str(tool)


def test_resolve_command_not_found_reports_program(tmp_path):
    with pytest.raises(CommandNotFound) as info:
        resolve_command([str(tmp_path)], "nosuchprogram -x")
    assert info.value.cmd == "nosuchprogram"
    assert info.value.message == command_not_found_message("nosuchprogram")


def test_resolve_command_non_executable_is_not_found(tmp_path):
    plain = tmp_path / "plain"
    plain.write_text("data")
    os.chmod(plain, 0o644)
    with pytest.raises(CommandNotFound) as info:
        resolve_command([str(tmp_path)], "plain")
    assert info.value.exit_status == 127


def test_resolve_command_blank_exits_zero(tmp_path):
    with pytest.raises(CommandNotFound) as info:
        resolve_command([str(tmp_path)], "   ")
    assert info.value.exit_status == 0
    assert info.value.quiet is True


def test_resolve_command_empty_is_quiet(tmp_path):
    with pytest.raises(CommandNotFound) as info:
        resolve_command([str(tmp_path)], "")
    assert info.value.message == ""