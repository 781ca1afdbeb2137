"""Parse pipeline command arguments and locate their programs."""

import os
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from .libft import split

# argv[0] is the program, argv[1] the input file (or "here_doc").
_FIRST_COMMAND = 2


@dataclass
class Command:
    """One pipeline stage: its program path and argument vector.

    Both are None when the command is empty or cannot be found.
    """

    path: str | None = None
    args: list[str] | None = None

    @property
    def found(self) -> bool:
        return self.path is not None


def command_start_index(here_doc: bool) -> int:
    """Index in argv of the first command."""
    start = _FIRST_COMMAND
    if here_doc:
        # The limiter takes one more slot before the commands.
        start += 1
    return start


def command_count(argc: int, here_doc: bool) -> int:
    """Number of commands given an argv of length ``argc``."""
    # Everything from the first command up to, not including, the output file.
    return argc - command_start_index(here_doc) - 1


def _path_variable(environ) -> tuple[bool, str]:
    if isinstance(environ, Mapping):
        if "PATH" in environ:
            return True, environ["PATH"]
        return False, ""
    for entry in environ:
        if entry.startswith("PATH="):
            return True, entry[len("PATH="):]
    return False, ""


def _is_executable(path: str) -> bool:
    return os.access(path, os.F_OK | os.X_OK)


def find_command_path(cmd: str, environ) -> str | None:
    """Return the path of the program ``cmd``, or None.

    ``environ`` is a mapping or an iterable of ``KEY=value`` strings.
    Absolute names and names starting with ``./`` are checked directly.
    Otherwise PATH is searched; without a PATH the name itself is tried.
    """
    if not cmd or environ is None:
        return None
    if cmd.startswith("/") or cmd.startswith("./"):
        return cmd if _is_executable(cmd) else None
    has_path, path = _path_variable(environ)
    if has_path:
        for directory in filter(None, path.split(":")):
            candidate = f"{directory}/{cmd}"
            if os.access(candidate, os.X_OK):
                return candidate
        return None
    return cmd if _is_executable(cmd) else None


def parse_command(cmd_str: str | None, environ) -> Command:
    """Split ``cmd_str`` on spaces and resolve its program."""
    if not cmd_str:
        return Command()
    args = split(cmd_str, " ")
    if not args:
        return Command()
    path = find_command_path(args[0], environ)
    if path is None:
        return Command()
    return Command(path, args)


def parse_commands(argv: Sequence[str], here_doc: bool, environ) -> list[Command]:
    """Parse every command between the input and the output file of ``argv``.

    Raises ValueError when there are no commands.
    """
    argc = len(argv)
    if command_count(argc, here_doc) <= 0:
        raise ValueError("No commands to process")
    start = command_start_index(here_doc)
    return [parse_command(cmd_str, environ) for cmd_str in argv[start:argc - 1]]


def _as_iterable(environ) -> Iterable[str]:
    if isinstance(environ, Mapping):
        return (f"{key}={value}" for key, value in environ.items())
    return environ