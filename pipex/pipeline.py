"""Running ``infile < first | second > outfile`` with two child processes."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import List, Mapping, Optional, Sequence, Tuple

from pipex.output import put_endl
from pipex.paths import PathNotFoundError, command_path, only_separators
from pipex.text import split

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 127


class PipexError(Exception):
    """A failure that ends a pipeline stage with an exit status."""

    def __init__(self, message: str, exit_status: int = EXIT_FAILURE) -> None:
        super().__init__(message)
        self.exit_status = exit_status


class CommandNotFoundError(PipexError):
    """Raised when a command is blank or cannot be found."""

    def __init__(self, message: str = "command not found") -> None:
        super().__init__(message, EXIT_NOT_FOUND)


def _perror(message: str, exc: OSError) -> None:
    reason = exc.strerror or str(exc)
    put_endl(f"{message}: {reason}", sys.stderr)


def resolve_command(command: str, env: Optional[Mapping[str, str]] = None) -> Tuple[str, List[str]]:
    """Return the executable path and the argument list for ``command``.

    The command is split on spaces; its first word is the program. Raises
    CommandNotFoundError for a blank command or a program that cannot be
    found, and PathNotFoundError when a PATH search is needed but there
    is no PATH.
    """
    if only_separators(command, " "):
        raise CommandNotFoundError()
    args = split(command, " ")
    path = command_path(args[0], env)
    if path is None:
        raise CommandNotFoundError()
    return path, args


def _launch(
    command: str,
    env: Mapping[str, str],
    stdin: int,
    stdout: int,
) -> Tuple[Optional[subprocess.Popen], int]:
    """Start one stage; on failure report it and return its exit status."""
    try:
        path, args = resolve_command(command, env)
    except PipexError as exc:
        put_endl(str(exc), sys.stderr)
        return None, exc.exit_status
    except PathNotFoundError as exc:
        put_endl(str(exc), sys.stderr)
        return None, EXIT_FAILURE
    try:
        process = subprocess.Popen(
            args, executable=path, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        _perror("execve cmd error", exc)
        return None, EXIT_FAILURE
    return process, EXIT_SUCCESS


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Run ``first`` on ``infile`` and pipe its output through ``second``
    into ``outfile``.

    Each stage fails on its own: a stage that cannot open its file or find
    its command reports the problem on stderr and does not run. Returns the
    exit status of the second stage, or 0 when it was ended by a signal.
    """
    env = os.environ if env is None else env
    try:
        read_fd, write_fd = os.pipe()
    except OSError as exc:
        raise PipexError(f"pipe error: {exc.strerror}") from exc

    first_process: Optional[subprocess.Popen] = None
    try:
        try:
            in_fd = os.open(infile, os.O_RDONLY)
        except OSError as exc:
            _perror("open infile error", exc)
        else:
            try:
                first_process, _ = _launch(first, env, in_fd, write_fd)
            finally:
                os.close(in_fd)
    finally:
        os.close(write_fd)

    second_process: Optional[subprocess.Popen] = None
    second_status = EXIT_FAILURE
    try:
        try:
            out_fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        except OSError as exc:
            _perror("open outfile error", exc)
        else:
            try:
                second_process, second_status = _launch(second, env, read_fd, out_fd)
            finally:
                os.close(out_fd)
    finally:
        os.close(read_fd)

    if first_process is not None:
        first_process.wait()
    if second_process is not None:
        second_status = second_process.wait()
    return second_status if second_status >= 0 else EXIT_SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run ``pipex infile cmd1 cmd2 outfile`` and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4 or not args[1] or not args[2]:
        put_endl("error : arguments", sys.stderr)
        return EXIT_FAILURE
    infile, first, second, outfile = args
    try:
        return run_pipeline(infile, first, second, outfile)
    except PipexError as exc:
        put_endl(str(exc), sys.stderr)
        return exc.exit_status


if __name__ == "__main__":
    raise SystemExit(main())