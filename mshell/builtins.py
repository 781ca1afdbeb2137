"""Built-in commands of the shell: echo, exit, pwd and env."""

import itertools
import os
import re
import sys
from collections.abc import Iterable, Mapping

from .libft import atoi

_N_OPTION = re.compile(r"-n+")
_NUMBER = re.compile(r"[ \t-\r]*([+-]?[0-9]+)[ \t-\r]*")
_LLONG_MIN = -(1 << 63)
_LLONG_MAX = (1 << 63) - 1

_SIMPLE_BUILTINS = frozenset({"echo", "exit"})


def _stream(stream, default):
    return default if stream is None else stream


def is_n_option(arg: str | None) -> bool:
    """Return True for ``-n``, ``-nn``, ``-nnn`` and so on."""
    return bool(arg) and _N_OPTION.fullmatch(arg) is not None


def echo(args: Iterable[str], out=None) -> int:
    """Print ``args`` separated by spaces.

    Any number of leading ``-n`` style options suppress the final newline.
    """
    out = _stream(out, sys.stdout)
    words = list(args)
    rest = list(itertools.dropwhile(is_n_option, words))
    newline = len(rest) == len(words)
    out.write(" ".join(rest))
    if newline:
        out.write("\n")
    return 0


def is_valid_number(text: str | None) -> bool:
    """Return True if ``text`` is a signed decimal integer, spaces allowed around it."""
    return bool(text) and _NUMBER.fullmatch(text) is not None


def parse_exit_code(text: str) -> int:
    """Turn an ``exit`` argument into a status between 0 and 255.

    Raises ValueError if the text is not a number or does not fit in a
    signed 64-bit integer.
    """
    match = _NUMBER.fullmatch(text or "")
    if match is None:
        raise ValueError(f"numeric argument required: {text!r}")
    value = int(match.group(1))
    if not _LLONG_MIN <= value <= _LLONG_MAX:
        raise ValueError(f"numeric argument out of range: {text!r}")
    return value % 256


def exit_builtin(argv, last_status, out=None, err=None, interactive=None) -> int:
    """Run ``exit [n]``.

    Raises SystemExit with the chosen status, except when given too many
    arguments: then an error is printed and 1 is returned.
    """
    out = _stream(out, sys.stdout)
    err = _stream(err, sys.stderr)
    if interactive is None:
        interactive = sys.stdin.isatty()
    args = list(argv)[1:]
    if not args:
        if interactive:
            out.write("exit\n")
        raise SystemExit(last_status)
    if len(args) > 1:
        err.write("minishell: exit: too many arguments\n")
        return 1
    if interactive:
        out.write("exit\n")
    try:
        code = parse_exit_code(args[0])
    except ValueError:
        err.write(f"minishell: exit: {args[0]}: numeric argument required\n")
        raise SystemExit(2) from None
    raise SystemExit(code)


def pwd(argv=None, out=None, err=None) -> int:
    """Print the current working directory; return the command status."""
    out = _stream(out, sys.stdout)
    err = _stream(err, sys.stderr)
    if argv is not None and len(argv) > 1:
        err.write("pwd: too many arguments\n")
        return 1
    try:
        cwd = os.getcwd()
    except OSError as exc:
        err.write(f"pwd: {exc.strerror}\n")
        return 1
    out.write(f"{cwd}\n")
    return 0


def env(environ=None, out=None) -> int:
    """Print every environment variable as ``KEY=value``, one per line.

    ``environ`` may be a mapping or an iterable of ``KEY=value`` strings.
    """
    out = _stream(out, sys.stdout)
    if environ is None:
        environ = os.environ
    if isinstance(environ, Mapping):
        entries = (f"{key}={value}" for key, value in environ.items())
    else:
        entries = iter(environ)
    for entry in entries:
        out.write(f"{entry}\n")
    return 0


def is_builtin(argv) -> bool:
    """Return True if the command in ``argv`` is run by the shell itself."""
    return bool(argv) and argv[0] in _SIMPLE_BUILTINS


def run_builtin(argv, out=None) -> int:
    """Run the simple ``echo`` or ``exit`` built-in named by ``argv[0]``.

    ``exit`` raises SystemExit. Unknown commands give status 1.
    """
    out = _stream(out, sys.stdout)
    if not argv:
        return 1
    name, args = argv[0], list(argv[1:])
    if name == "echo":
        newline = True
        if args and args[0] == "-n":
            newline = False
            args = args[1:]
        out.write(" ".join(args))
        if newline:
            out.write("\n")
        return 0
    if name == "exit":
        raise SystemExit(atoi(args[0]) if args else 0)
    return 1