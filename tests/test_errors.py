import io

import pytest

from pipex.errors import PipexError, call_error, format_error


def test_format_with_origin():
    assert (
        format_error("Pipex", "incorrect number of arguments")
        == "[!]\tPipex: incorrect number of arguments"
    )


def test_format_without_origin():
    assert (
        format_error(None, "PATH enviroment variables not found.")
        == "[!]\t Error: PATH enviroment variables not found."
    )


def test_format_with_os_error():
    exc = FileNotFoundError(2, "No such file or directory")
    assert format_error("infile", exc) == "infile: No such file or directory"


def test_format_uses_handled_exception_when_no_message():
    try:
        raise PermissionError(13, "Permission denied")
    except PermissionError:
        line = format_error("out", None)
    assert line == "out: Permission denied"


def test_call_error_writes_line_and_returns_it():
    stream = io.StringIO()
    line = call_error("Invalid output file", "cannot be written to.", stream)
    assert line == "[!]\tInvalid output file: cannot be written to."
    assert stream.getvalue() == line + "\n"


def test_call_error_defaults_to_stderr(capsys):
    call_error("Pipex", "failure at cloning stage.")
    assert capsys.readouterr().err == "[!]\tPipex: failure at cloning stage.\n"


def test_pipex_error_carries_exit_code_and_message():
    error = PipexError("Pipex", "failure at pipe creation.", 3)
    assert error.exit_code == 3
    assert str(error) == "[!]\tPipex: failure at pipe creation."


def test_pipex_error_empty_origin_is_named():
    error = PipexError("", "Cannot be executed.", 6)
    assert error.err == "<Empty field>"
    assert str(error) == "[!]\t<Empty field>: Cannot be executed."


def test_pipex_error_is_raisable():
    error = PipexError("Pipex", "incorrect here_doc delimiter", 8)
    with pytest.raises(PipexError) as info:
        raise error
    assert info.value is error
    assert info.value.exit_code == 8
    assert str(info.value) == "[!]\tPipex: incorrect here_doc delimiter"