"""Running a chain of commands connected by pipes."""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from collections.abc import Iterable, Mapping, Sequence
from contextlib import ExitStack
from typing import IO, TextIO, Union

from pipex.args import command_split
from pipex.errors import PipexError, call_error
from pipex.files import (
    open_input_file,
    open_output_file,
    read_heredoc,
)
from pipex.paths import find_command, path_dirs_from_env

HEREDOC_KEYWORD = "here_doc"

_Stream = Union[IO, int, None]


class Pipeline:
    """Commands whose outputs feed the next command's input."""

    def __init__(self, commands: Iterable[str], env: Mapping[str, str] | None,
                 path_dirs: Iterable[str]) -> None:
        self.commands = list(commands)
        self.env = None if env is None else dict(env)
        self.path_dirs = list(path_dirs)

    def _fail(self, command: str) -> int:
        error = PipexError(command, "Cannot be executed.", 6)
        call_error(error.err, error.msg)
        return error.exit_code

    def _spawn(self, command: str, stdin: _Stream,
               stdout: _Stream) -> subprocess.Popen | int:
        argv = command_split(command)
        path = find_command(argv[0], self.path_dirs) if argv else None
        if path is None:
            return self._fail(command)
        try:
            return subprocess.Popen(argv, executable=path, stdin=stdin,
                                    stdout=stdout, env=self.env)
        except OSError:
            return self._fail(command)

    def run(self, stdin: _Stream = None, stdout: _Stream = None) -> list[int]:
        """Run every command, wait for all of them, and return their statuses.

        A command that cannot be found or started is reported and gets
        status 6; the command after it then reads an empty input.
        """
        started: list[subprocess.Popen | int] = []
        upstream: _Stream = stdin
        owned_read: int | None = None
        last = len(self.commands) - 1
        try:
            for position, command in enumerate(self.commands):
                read_end: int | None = None
                if position == last:
                    target: _Stream = stdout
                else:
                    read_end, target = os.pipe()
                try:
                    started.append(self._spawn(command, upstream, target))
                finally:
                    if read_end is not None:
                        os.close(target)
                    if owned_read is not None:
                        os.close(owned_read)
                        owned_read = None
                owned_read = read_end
                upstream = read_end
        finally:
            if owned_read is not None:
                os.close(owned_read)
        return [item.wait() if isinstance(item, subprocess.Popen) else item
                for item in started]


def run_pipex(argv: Sequence[str], env: Mapping[str, str] | None = None,
              stdin: TextIO | None = None,
              prompt_stream: TextIO | None = None) -> int:
    """Run ``infile cmd... outfile`` or ``here_doc LIMITER cmd... outfile``.

    ``stdin`` is where a here-document is read from. Returns the exit code;
    raises PipexError for bad arguments or a missing PATH.
    """
    args = list(argv)
    if not args:
        raise PipexError("Pipex", "Invalid or non-sufficient arguments.", 0)
    heredoc = args[0].startswith(HEREDOC_KEYWORD)
    if len(args) < 4 or (heredoc and len(args) < 5):
        raise PipexError("Pipex", "incorrect number of arguments", 1)
    if heredoc and not args[1]:
        raise PipexError("Pipex", "incorrect here_doc delimiter", 8)
    environ = dict(os.environ if env is None else env)

    with ExitStack() as stack:
        failures: list[PipexError] = []
        infile: IO | None = None
        if heredoc:
            text = read_heredoc(args[1], stdin, prompt_stream)
            infile = stack.enter_context(tempfile.TemporaryFile())
            infile.write(text.encode())
            infile.seek(0)
        else:
            try:
                infile = stack.enter_context(open_input_file(args[0]))
            except PipexError as exc:
                failures.append(exc)
        try:
            outfile = stack.enter_context(
                open_output_file(args[-1], append=heredoc))
        except PipexError as exc:
            failures.append(exc)
        if failures:
            for failure in failures:
                call_error(failure.err, failure.msg)
            return 1
        path_dirs = path_dirs_from_env(environ)
        commands = args[1 + heredoc:-1]
        Pipeline(commands, environ, path_dirs).run(infile, outfile)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the exit code."""
    args = sys.argv[1:] if argv is None else argv
    try:
        return run_pipex(args)
    except PipexError as exc:
        call_error(exc.err, exc.msg)
        return exc.exit_code