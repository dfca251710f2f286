import io
import os

import pytest

from pipex.errors import PipexError
from pipex.files import (
    HEREDOC_PROMPT,
    open_input_file,
    open_output_file,
    read_heredoc,
)


def test_heredoc_stops_at_delimiter():
    prompts = io.StringIO()
    text = read_heredoc("EOF", io.StringIO("a\nb\nEOF\nc\n"), prompts)
    assert text == "a\nb\n"
    assert prompts.getvalue() == HEREDOC_PROMPT * 3


def test_heredoc_prompt_text():
    prompts = io.StringIO()
    read_heredoc("END", io.StringIO("END\n"), prompts)
    assert prompts.getvalue() == "pipe heredoc> "


def test_heredoc_reads_to_end_of_input():
    prompts = io.StringIO()
    text = read_heredoc("EOF", io.StringIO("one\ntwo"), prompts)
    assert text == "one\ntwo"
    assert prompts.getvalue().count(HEREDOC_PROMPT) == 3


def test_heredoc_delimiter_needs_newline():
    text = read_heredoc("EOF", io.StringIO("x\nEOF"), io.StringIO())
    assert text == "x\nEOF"


def test_heredoc_prefix_is_not_delimiter():
    text = read_heredoc("EOF", io.StringIO("EOFX\nEOF\n"), io.StringIO())
    assert text == "EOFX\n"


def test_open_input_file_reads(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"data\n")
    with open_input_file(str(path)) as handle:
        assert handle.read() == b"data\n"


def test_open_input_file_missing(tmp_path):
    with pytest.raises(PipexError) as info:
        open_input_file(str(tmp_path / "missing"))
    assert info.value.exit_code == 1
    assert info.value.err == "Invalid input file"
    assert info.value.msg == "file not found or cannot be read from."


def test_open_output_file_truncates(tmp_path):
    path = tmp_path / "out.txt"
    path.write_bytes(b"old contents")
    with open_output_file(str(path)) as handle:
        handle.write(b"new")
    assert path.read_bytes() == b"new"


def test_open_output_file_appends(tmp_path):
    path = tmp_path / "out.txt"
    path.write_bytes(b"old-")
    with open_output_file(str(path), append=True) as handle:
        handle.write(b"new")
    assert path.read_bytes() == b"old-new"


def test_open_output_file_creates(tmp_path):
    path = tmp_path / "fresh.txt"
    with open_output_file(str(path)) as handle:
        handle.write(b"x")
    assert os.path.isfile(path)
    assert path.read_bytes() == b"x"


def test_open_output_file_bad_directory(tmp_path):
    with pytest.raises(PipexError) as info:
        open_output_file(str(tmp_path / "nope" / "out.txt"))
    assert info.value.exit_code == 1
    assert info.value.msg == "cannot be written to."