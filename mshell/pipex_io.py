"""Argument checks, here-document input and file opening for the pipeline runner."""

import os
import sys
import tempfile
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import BinaryIO

from .pipex_cmds import Command, parse_commands

HEREDOC_KEYWORD = "here_doc"
HEREDOC_PROMPT = "pipe heredoc> "
USAGE = "Usage: ./pipex infile cmd1 cmd2 ... outfile\n   or: ./pipex here_doc LIMITER cmd cmd1 ... file"
HEREDOC_USAGE = "Usage: ./pipex here_doc LIMITER cmd cmd1 ... file"
OUTPUT_MODE = 0o644


class PipexError(Exception):
    """A fatal pipeline setup error carrying the exit status to use."""

    def __init__(self, message: str, status: int = 1):
        super().__init__(message)
        self.message = message
        self.status = status


@dataclass
class Pipex:
    """The opened input and output of a pipeline and its parsed commands."""

    infile: BinaryIO | None = None
    outfile: BinaryIO | None = None
    here_doc: bool = False
    commands: list[Command] = field(default_factory=list)

    @property
    def command_count(self) -> int:
        return len(self.commands)

    def close(self) -> None:
        """Close the input and output files; safe to call more than once."""
        for name in ("infile", "outfile"):
            stream = getattr(self, name)
            if stream is not None:
                stream.close()
                setattr(self, name, None)

    def __enter__(self) -> "Pipex":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def read_lines(stream) -> Iterator:
    """Yield the lines of ``stream``, each with its newline; the last may lack one."""
    while True:
        line = stream.readline()
        if not line:
            return
        yield line


def check_args(argv: Sequence[str]) -> bool:
    """Validate the argument vector; return True for here-document mode.

    In here-document mode the output file is created (and truncated) here.
    Raises PipexError on bad usage.
    """
    if len(argv) < 5:
        raise PipexError(USAGE, 1)
    if argv[1] != HEREDOC_KEYWORD:
        return False
    if len(argv) < 6:
        raise PipexError(HEREDOC_USAGE, 1)
    if not argv[2]:
        raise PipexError("LIMITER can't be empty", 1)
    validate_output_file(argv[-1])
    return True


def is_limiter(line: str, limiter: str) -> bool:
    """Return True if ``line`` (without its newline) is exactly the limiter."""
    return line == limiter


def read_heredoc(limiter: str, stream=None, prompt_out=None) -> str:
    """Read lines from ``stream`` up to the limiter line and return them.

    A prompt is written to ``prompt_out`` before each line is read. End of
    input also ends the document.
    """
    stream = sys.stdin if stream is None else stream
    prompt_out = sys.stdout if prompt_out is None else prompt_out
    collected = []

    def prompt() -> None:
        prompt_out.write(HEREDOC_PROMPT)
        prompt_out.flush()

    prompt()
    for line in read_lines(stream):
        if line.endswith("\n"):
            line = line[:-1]
        if is_limiter(line, limiter):
            break
        collected.append(f"{line}\n")
        prompt()
    return "".join(collected)


def validate_output_file(filename: str) -> None:
    """Create or truncate ``filename``; raise PipexError if it cannot be written."""
    try:
        fd = os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OUTPUT_MODE)
    except OSError as exc:
        raise PipexError(f"{filename}: {exc.strerror}", 1) from exc
    os.close(fd)


def open_input(filename: str) -> BinaryIO:
    """Open ``filename`` for reading in binary mode."""
    try:
        return open(filename, "rb")
    except OSError as exc:
        raise PipexError("Failed to open input file", 1) from exc


def open_output(filename: str, append: bool = False) -> BinaryIO:
    """Open ``filename`` for writing, creating it; append or truncate."""
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        fd = os.open(filename, flags, OUTPUT_MODE)
    except OSError as exc:
        raise PipexError("Failed to open output file", 1) from exc
    return os.fdopen(fd, "ab" if append else "wb")


def _heredoc_input(content: str) -> BinaryIO:
    buffer = tempfile.TemporaryFile("w+b")
    buffer.write(content.encode())
    buffer.flush()
    buffer.seek(0)
    return buffer


def build_pipex(argv: Sequence[str], environ=None, stdin=None, prompt_out=None) -> Pipex:
    """Check ``argv``, open the pipeline's input and output and parse its commands.

    Raises PipexError with the status the program should exit with.
    """
    if environ is None:
        environ = os.environ
    here_doc = check_args(argv)
    pipex = Pipex(here_doc=here_doc)
    try:
        if here_doc:
            content = read_heredoc(argv[2], stdin, prompt_out)
            pipex.infile = _heredoc_input(content)
            pipex.outfile = open_output(argv[-1], append=True)
        else:
            pipex.infile = open_input(argv[1])
            pipex.outfile = open_output(argv[-1], append=False)
        try:
            pipex.commands = parse_commands(argv, here_doc, environ)
        except ValueError as exc:
            raise PipexError(str(exc), 127) from exc
    except BaseException:
        pipex.close()
        raise
    return pipex