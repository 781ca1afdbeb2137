import io
import os
import signal
import sys

import pytest

from mshell import shell
from mshell.shell import execute, find_executable, main, run_line, setup_signal_handlers


@pytest.fixture
def restore_signals():
    saved = {sig: signal.getsignal(sig) for sig in (signal.SIGINT, signal.SIGQUIT)}
    yield
    for sig, handler in saved.items():
        signal.signal(sig, handler)


def _make_tool(directory, name, mode):
    tool = directory / name
    tool.write_text("#!/bin/sh\nexit 0\n")
    tool.chmod(mode)
    return tool


def test_find_executable_searches_path(tmp_path):
    tool = _make_tool(tmp_path, "tool", 0o755)
    assert find_executable("tool", f"::{tmp_path}") == f"{tmp_path}/tool"
    assert os.access(tool, os.X_OK)


def test_find_executable_first_match_wins(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    _make_tool(first, "tool", 0o755)
    _make_tool(second, "tool", 0o755)
    assert find_executable("tool", f"{first}:{second}") == f"{first}/tool"


def test_find_executable_skips_non_executable(tmp_path):
    _make_tool(tmp_path, "plain", 0o644)
    assert find_executable("plain", str(tmp_path)) is None


def test_find_executable_slash_and_missing_path():
    assert find_executable("./x", "") == "./x"
    assert find_executable("ls", None) is None
    assert find_executable("", "/bin") is None


def test_execute_external_status():
    assert execute([sys.executable, "-c", "raise SystemExit(3)"]) == 3


def test_execute_external_output(capfd):
    assert execute([sys.executable, "-c", "print('from child')"]) == 0
    assert capfd.readouterr().out == "from child\n"


def test_execute_command_not_found(tmp_path, capfd):
    status = execute(["no-such-command-here"], {"PATH": str(tmp_path)})
    assert status == 127
    assert capfd.readouterr().err == "no-such-command-here: command not found\n"


def test_execute_builtin(capsys):
    assert execute(["echo", "hi", "there"]) == 0
    assert capsys.readouterr().out == "hi there\n"


def test_run_line_blank():
    assert run_line("   ") is None
    assert run_line("") is None


def test_run_line_quotes(capsys):
    assert run_line("echo 'a  b' \"c\"") == 0
    assert capsys.readouterr().out == "a  b c\n"


def test_sigint_handler(restore_signals, capsys):
    setup_signal_handlers()
    with pytest.raises(KeyboardInterrupt):
        os.kill(os.getpid(), signal.SIGINT)
        for _ in range(1000):
            pass
    assert shell.last_signal == signal.SIGINT
    assert capsys.readouterr().out == "\n"


def test_main_runs_until_eof(restore_signals, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("echo hi\n\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "hi\n" in out
    assert out.endswith("exit\n")


def test_main_exit_builtin(restore_signals, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("exit 5\necho never\n"))
    with pytest.raises(SystemExit) as info:
        main()
    assert info.value.code == 5
    assert "never" not in capsys.readouterr().out