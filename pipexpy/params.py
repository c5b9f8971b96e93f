"""Validation of the command-line arguments."""

from __future__ import annotations

import errno
import os
from collections.abc import Sequence

USAGE = 'Thats how yu use it ./pipex file1 "cmd" "cmd2" file2'


class UsageError(ValueError):
    """Raised when the arguments do not follow the expected usage."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


def output_file_exists(path: str) -> bool:
    """Return whether *path* already exists."""
    return os.access(path, os.F_OK)


def _check_valid_file(path: str) -> None:
    if not os.access(path, os.F_OK):
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
    if not os.access(path, os.R_OK | os.W_OK):
        raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)


def check_params(args: Sequence[str]) -> list[str]:
    """Check the arguments (without the program name) and return them.

    Every argument must be non-empty, and an existing output file (the last
    argument) must be readable and writable.
    """
    args = list(args)
    if any(not arg for arg in args):
        raise UsageError()
    if args and output_file_exists(args[-1]):
        _check_valid_file(args[-1])
    return args