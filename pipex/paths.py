"""Locating executables through the PATH variable of an environment."""

from __future__ import annotations

import os
from typing import Iterable, List, Mapping, Optional

from pipex.text import split


class PathNotFoundError(LookupError):
    """Raised when an environment has no PATH variable to search."""

    def __init__(self, message: str = "Error: path not found") -> None:
        super().__init__(message)


def _is_executable(path: str) -> bool:
    return os.access(path, os.F_OK | os.X_OK)


def only_separators(text: str, separator: str) -> bool:
    """Return True when every character of ``text`` is ``separator``.

    An empty string counts as made only of separators.
    """
    return all(ch == separator for ch in text)


def search_dirs(env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return the directories listed in the PATH of ``env``.

    Empty entries are dropped. Raises PathNotFoundError when there is no
    PATH at all.
    """
    env = os.environ if env is None else env
    value = env.get("PATH")
    if value is None:
        raise PathNotFoundError()
    return split(value, ":")


def join_path(directory: str, command: str) -> str:
    """Join a directory and a command name with a slash."""
    return f"{directory}/{command}"


def try_path(directories: Iterable[str], command: str) -> Optional[str]:
    """Return the first ``directory/command`` that exists and is executable."""
    for directory in directories:
        candidate = join_path(directory, command)
        if _is_executable(candidate):
            return candidate
    return None


def command_path(command: str, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the path to execute for ``command``, or None when none is found.

    A command starting with ``/`` or ``.`` is used as it is when it names
    an executable file; otherwise, and for every other command, the first
    word is looked up in the directories of PATH.
    """
    if command[:1] in ("/", ".") and _is_executable(command):
        return command
    directories = search_dirs(env)
    words = split(command, " ")
    if not words:
        return None
    return try_path(directories, words[0])