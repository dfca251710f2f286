"""Locating commands on the search path."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from pipex.errors import PipexError


def split_fields(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty fields."""
    return [field for field in s.split(sep) if field]


def path_dirs_from_env(env: Mapping[str, str] | None = None) -> list[str]:
    """Return the directories listed in ``PATH`` of ``env`` (os.environ by default).

    Raises PipexError with exit code 5 when PATH is missing or empty.
    """
    environ = os.environ if env is None else env
    value = environ.get("PATH")
    if not value:
        raise PipexError(None, "PATH enviroment variables not found.", 5)
    return split_fields(value, ":")


def find_command(command: str, path_dirs: Iterable[str]) -> str | None:
    """Return the path to run ``command`` from, or None if it is not found.

    A command holding a slash is used as given when it is executable;
    otherwise each directory is tried in order for an existing entry.
    """
    if "/" in command and os.access(command, os.F_OK | os.X_OK):
        return command
    for directory in path_dirs:
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.F_OK):
            return candidate
    return None