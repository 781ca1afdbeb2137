"""Interactive shell: read a line, split it, run the command."""

import os
import signal
import subprocess
import sys

try:
    import readline  # noqa: F401  (enables line editing and history for input())
except ImportError:
    readline = None

from .builtins import is_builtin, run_builtin
from .tokenizer import tokenize

PROMPT = "minishell$ "

last_signal = 0


def find_executable(name: str, path: str | None = None) -> str | None:
    """Locate ``name`` along the colon separated ``path``.

    A name holding a slash is returned unchanged. Empty path entries are
    skipped. Returns None when nothing executable is found.
    """
    if not name:
        return None
    if "/" in name:
        return name
    if path is None:
        return None
    for directory in filter(None, path.split(":")):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def execute(argv, environ=None) -> int:
    """Run one command and return its exit status."""
    if is_builtin(argv):
        return run_builtin(argv)
    if environ is None:
        environ = os.environ
    name = argv[0]
    program = find_executable(name, environ.get("PATH"))
    if program is not None:
        try:
            completed = subprocess.run(list(argv), executable=program, env=dict(environ))
        except OSError:
            pass
        else:
            return completed.returncode if completed.returncode >= 0 else 1
    sys.stderr.write(f"{name}: command not found\n")
    sys.stderr.flush()
    return 127


def _on_sigint(signo, frame):
    global last_signal
    last_signal = signo
    sys.stdout.write("\n")
    sys.stdout.flush()
    raise KeyboardInterrupt


def _on_sigquit(signo, frame):
    """Redraw the current input line so the prompt stays clean."""
    if readline is not None:
        readline.redisplay()
    sys.stdout.flush()


def setup_signal_handlers() -> None:
    """Install the shell's handlers for SIGINT and SIGQUIT."""
    signal.signal(signal.SIGINT, _on_sigint)
    if hasattr(signal, "SIGQUIT"):
        signal.signal(signal.SIGQUIT, _on_sigquit)


def run_line(line: str, environ=None) -> int | None:
    """Split ``line`` and run it; return the status, or None if it was blank."""
    words = tokenize(line)
    if not words:
        return None
    return execute(words, environ)


def main(argv=None) -> int:
    """Read and run command lines until end of input."""
    setup_signal_handlers()
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print("exit")
            break
        except KeyboardInterrupt:
            continue
        try:
            run_line(line)
        except KeyboardInterrupt:
            continue
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())