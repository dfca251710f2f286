"""Opening the files at either end of a pipeline, and reading here-documents."""

from __future__ import annotations

import os
import sys
from typing import BinaryIO, TextIO

from pipex.errors import PipexError

HEREDOC_PROMPT = "pipe heredoc> "


def read_heredoc(delimiter: str, source: TextIO | None = None,
                 prompt_stream: TextIO | None = None) -> str:
    """Read lines from ``source`` until a line equal to ``delimiter``.

    A prompt goes to ``prompt_stream`` before every line is read. The
    delimiter line must end with a newline to count; end of input also
    stops reading. Returns the text read before the delimiter.
    """
    reader = sys.stdin if source is None else source
    prompt = sys.stdout if prompt_stream is None else prompt_stream
    terminator = delimiter + "\n"
    lines: list[str] = []
    while True:
        prompt.write(HEREDOC_PROMPT)
        prompt.flush()
        line = reader.readline()
        if not line or line == terminator:
            break
        lines.append(line)
    return "".join(lines)


def open_input_file(path: str) -> BinaryIO:
    """Open ``path`` for reading in binary mode.

    Raises PipexError with exit code 1 when the file is missing or unreadable.
    """
    error = PipexError("Invalid input file",
                       "file not found or cannot be read from.", 1)
    if not os.access(path, os.F_OK | os.R_OK):
        raise error
    try:
        return open(path, "rb")
    except OSError as exc:
        raise error from exc


def open_output_file(path: str, append: bool = False) -> BinaryIO:
    """Open ``path`` for writing, creating it with mode 0664.

    The file is truncated unless ``append`` is true. Raises PipexError with
    exit code 1 when the file cannot be written to.
    """
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    error = PipexError("Invalid output file", "cannot be written to.", 1)
    try:
        fd = os.open(path, flags, 0o664)
    except OSError as exc:
        raise error from exc
    if not os.access(path, os.F_OK | os.W_OK):
        os.close(fd)
        raise error
    return os.fdopen(fd, "wb")