"""Splitting command lines and locating executables on a search path."""

from __future__ import annotations

import errno
import os
from collections.abc import Iterable, Mapping


class CommandNotFoundError(LookupError):
    """Raised when a command cannot be resolved to an executable file."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason


def split_words(text: str, sep: str) -> list[str]:
    """Split *text* on *sep*, dropping the empty pieces between repeated separators."""
    return [word for word in text.split(sep) if word]


def find_paths(environ: Mapping[str, str]) -> list[str]:
    """Return the directories listed in the PATH entry of *environ*."""
    value = environ.get("PATH")
    if value is None:
        return []
    return split_words(value, ":")


def _is_executable(path: str) -> bool:
    return os.access(path, os.F_OK | os.X_OK)


def resolve_command(command: str, paths: Iterable[str]) -> str:
    """Return the executable that the first word of *command* names.

    A name holding a slash is used as given; any other name is looked up in
    each directory of *paths* in turn.
    """
    words = split_words(command, " ")
    if not words:
        raise CommandNotFoundError(command, "empty command")
    name = words[0]
    if "/" in name:
        if _is_executable(name):
            return name
        code = errno.EACCES if os.path.exists(name) else errno.ENOENT
        raise CommandNotFoundError(name, os.strerror(code))
    for directory in paths:
        candidate = f"{directory}/{name}"
        if _is_executable(candidate):
            return candidate
    raise CommandNotFoundError(name, os.strerror(errno.ENOENT))