"""Run the pipeline's commands, each feeding the next, and collect their status."""

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import BinaryIO

from .pipex_io import Pipex, PipexError, build_pipex

NOT_FOUND_MESSAGE = "command not found\n"
NOT_FOUND_STATUS = 127
SIGNAL_BASE = 128


def combine_statuses(returncodes: Sequence[int]) -> int:
    """Reduce the stages' return codes to the pipeline's exit status.

    Any stage that exited with 127 makes the whole pipeline 127. Otherwise
    the status of the last stage is used; a stage killed by a signal (a
    negative return code) counts as 128 plus the signal number.
    """
    codes = list(returncodes)
    if NOT_FOUND_STATUS in codes:
        return NOT_FOUND_STATUS
    if not codes:
        return 0
    last = codes[-1]
    if last < 0:
        return SIGNAL_BASE - last
    return last


def _environment(environ) -> dict[str, str]:
    if environ is None:
        return dict(os.environ)
    if isinstance(environ, Mapping):
        return dict(environ)
    env = {}
    for entry in environ:
        key, sep, value = entry.partition("=")
        if sep:
            env[key] = value
    return env


def _failed_stage(output: str, is_last: bool, outfile: BinaryIO | None) -> BinaryIO | None:
    """Emit a failed stage's output; return what the next stage should read."""
    data = output.encode()
    if is_last:
        if outfile is None:
            sys.stdout.write(output)
            sys.stdout.flush()
        else:
            outfile.write(data)
            outfile.flush()
        return None
    read_fd, write_fd = os.pipe()
    try:
        if data:
            os.write(write_fd, data)
    finally:
        os.close(write_fd)
    return os.fdopen(read_fd, "rb")


def run_pipeline(pipex: Pipex, environ=None) -> int:
    """Start every command of ``pipex`` connected by pipes and wait for them.

    The first command reads the pipeline's input, the last writes its
    output. A command that was not found writes ``command not found`` to
    its own output and counts as status 127. Returns the combined status.
    """
    env = _environment(environ)
    last_index = pipex.command_count - 1
    pending: list[subprocess.Popen | int] = []
    upstream = pipex.infile
    if pipex.outfile is not None:
        pipex.outfile.flush()
    try:
        for index, command in enumerate(pipex.commands):
            is_last = index == last_index
            process = None
            output = NOT_FOUND_MESSAGE
            if command.found:
                try:
                    process = subprocess.Popen(
                        command.args,
                        executable=command.path,
                        stdin=upstream,
                        stdout=pipex.outfile if is_last else subprocess.PIPE,
                        env=env,
                    )
                except OSError as exc:
                    sys.stderr.write(f"execve failed: {exc.strerror}\n")
                    sys.stderr.flush()
                    output = ""
            if process is None:
                pending.append(NOT_FOUND_STATUS)
                downstream = _failed_stage(output, is_last, pipex.outfile)
            else:
                pending.append(process)
                downstream = process.stdout
            if upstream is not None and upstream is not pipex.infile:
                upstream.close()
            upstream = downstream
    finally:
        if upstream is not None and upstream is not pipex.infile:
            upstream.close()
    returncodes = [item if isinstance(item, int) else item.wait() for item in pending]
    return combine_statuses(returncodes)


def main(argv=None) -> int:
    """Run ``infile cmd1 ... cmdN outfile`` or ``here_doc LIMITER cmd1 ... outfile``.

    ``argv`` holds the arguments without the program name; it defaults to
    the command line. Returns the exit status.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        pipex = build_pipex(["pipex", *args])
    except PipexError as exc:
        print(exc.message)
        sys.stdout.flush()
        return exc.status
    with pipex:
        return run_pipeline(pipex)


if __name__ == "__main__":
    sys.exit(main())