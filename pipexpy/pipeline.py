"""Running commands connected by pipes between an input and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import BinaryIO

from .commands import CommandNotFoundError, find_paths, resolve_command, split_words
from .params import USAGE, UsageError, check_params

EXIT_FAILURE = 1


@dataclass
class PipelineFiles:
    """The files the first command reads from and the last command writes to."""

    infile: BinaryIO
    outfile: BinaryIO

    def close(self) -> None:
        self.infile.close()
        self.outfile.close()

    def __enter__(self) -> PipelineFiles:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _report(name: str, reason: str) -> None:
    print(f"{name}: {reason}", file=sys.stderr)


def open_files(infile: str, outfile: str) -> PipelineFiles:
    """Open the input file (or the null device if it cannot be opened) and
    create or truncate the output file."""
    try:
        source = open(infile, "r+b")
    except OSError as exc:
        _report(infile, exc.strerror or str(exc))
        source = open(os.devnull, "rb")
    try:
        fd = os.open(outfile, os.O_RDWR | os.O_TRUNC | os.O_CREAT, 0o644)
        target = os.fdopen(fd, "r+b")
    except OSError:
        source.close()
        raise
    return PipelineFiles(source, target)


def _spawn(command: str, paths: Iterable[str], stdin, stdout):
    try:
        executable = resolve_command(command, paths)
    except CommandNotFoundError as exc:
        print(exc, file=sys.stderr)
        return None
    args = split_words(command, " ")
    try:
        return subprocess.Popen(
            args, executable=executable, stdin=stdin, stdout=stdout, env={}
        )
    except OSError as exc:
        _report(args[0], exc.strerror or str(exc))
        return None


def run_pipeline(
    commands: Sequence[str], files: PipelineFiles, paths: Sequence[str]
) -> list[int]:
    """Run *commands* as a pipeline and return their exit statuses.

    A command that cannot be started is reported on standard error and counts
    as having failed; the commands after it read an empty input.
    """
    processes = []
    upstream = files.infile
    upstream_is_pipe = False
    last = len(commands) - 1
    for index, command in enumerate(commands):
        stdout = files.outfile if index == last else subprocess.PIPE
        stdin = upstream if upstream is not None else subprocess.DEVNULL
        process = _spawn(command, paths, stdin, stdout)
        if upstream_is_pipe and upstream is not None:
            upstream.close()
        if process is not None and index != last:
            upstream, upstream_is_pipe = process.stdout, True
        else:
            upstream, upstream_is_pipe = None, False
        processes.append(process)
    return [EXIT_FAILURE if p is None else p.wait() for p in processes]


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``infile cmd1 cmd2 outfile`` like ``< infile cmd1 | cmd2 > outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print(USAGE)
        return 0
    try:
        check_params(args)
    except UsageError as exc:
        print(exc)
        return EXIT_FAILURE
    except OSError as exc:
        _report(exc.filename, exc.strerror)
        return EXIT_FAILURE
    try:
        files = open_files(args[0], args[-1])
    except OSError as exc:
        _report(args[-1], exc.strerror or str(exc))
        return EXIT_FAILURE
    with files:
        run_pipeline(args[1:-1], files, find_paths(os.environ))
    return 0


if __name__ == "__main__":
    sys.exit(main())