"""Error reporting for pipex."""

from __future__ import annotations

import sys
from typing import TextIO

EMPTY_FIELD = "<Empty field>"


def _describe(exc: BaseException | None) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    if exc is not None:
        return str(exc)
    return "Unknown error"


def format_error(err: str | None, msg: str | BaseException | None) -> str:
    """Build the diagnostic line for ``err`` and ``msg``.

    A string message gives ``[!]\\t<err>: <msg>`` (or ``[!]\\t Error: <msg>``
    without ``err``). An exception, or no message at all, gives a
    system-error style line describing that exception, or the one being
    handled.
    """
    if msg is None or isinstance(msg, BaseException):
        reason = _describe(msg if msg is not None else sys.exc_info()[1])
        return f"{err}: {reason}" if err else reason
    if err is None:
        return f"[!]\t Error: {msg}"
    return f"[!]\t{err}: {msg}"


def call_error(err: str | None, msg: str | BaseException | None,
               stream: TextIO | None = None) -> str:
    """Write a diagnostic line to ``stream`` (stderr by default) and return it."""
    line = format_error(err, msg)
    target = sys.stderr if stream is None else stream
    target.write(line + "\n")
    target.flush()
    return line


class PipexError(Exception):
    """A fatal error that ends the program with ``exit_code``."""

    def __init__(self, err: str | None, msg: str | BaseException | None,
                 exit_code: int) -> None:
        if err == "":
            err = EMPTY_FIELD
        self.err = err
        self.msg = msg
        self.exit_code = exit_code
        super().__init__(format_error(err, msg))