# pipex

`pipex` connects a chain of commands through pipes. The first command
reads from a file (or from a here-document typed on standard input), and
the last command's output goes to another file.

## Usage

```
pipex infile "cmd1 args" "cmd2 args" ... outfile
```

works like the shell line

```
< infile cmd1 args | cmd2 args | ... > outfile
```

At least two commands are needed. The output file is created if needed
(mode 0664, less the umask) and truncated.

### Here-document mode

```
pipex here_doc LIMITER "cmd1" "cmd2" ... outfile
```

When the first argument starts with `here_doc`, lines are read from
standard input until a line equal to `LIMITER` (or end of input). A
`pipe heredoc> ` prompt is written to standard output before each line.
The lines read feed the first command, and the output is appended to
`outfile`, as in

```
cmd1 << LIMITER | cmd2 | ... >> outfile
```

### Commands

Each command string is split on spaces only. Text inside single quotes,
double quotes, parentheses, brackets or braces stays in one argument;
the quotes and brackets themselves are kept in the argument, and an
opener that is never closed takes in the rest of the string.

A command containing a `/` is run as given if it is executable. Otherwise
each directory listed in `PATH` is tried in order, and the first existing
entry named after the command is used.

### Errors

Messages go to standard error in the form `[!]\t<context>: <message>`.

| status | cause |
|-------:|-------|
| 0 | no arguments at all (a message is still printed) |
| 1 | wrong number of arguments, or an input or output file that cannot be used |
| 5 | `PATH` missing or empty in the environment |
| 8 | empty here-document delimiter |

When both the input and the output file fail, both are reported.

A command that cannot be found or started is reported as
`[!]\t<command>: Cannot be executed.`; the command after it reads an
empty input, the other commands still run, and the program still exits
with status 0.

## Library use

```python
from pipex.args import command_split
from pipex.paths import find_command, path_dirs_from_env
from pipex.runner import Pipeline, run_pipex

command_split("grep 'a b' -c")        # ['grep', "'a b'", '-c']

# Same arguments as the command line, without the program name.
run_pipex(["in.txt", "cat", "wc -l", "out.txt"])   # returns the exit code

dirs = path_dirs_from_env()            # PATH entries, empty ones dropped
find_command("ls", dirs)               # e.g. '/bin/ls', or None

with open("in.txt", "rb") as src, open("out.txt", "wb") as dst:
    statuses = Pipeline(["cat", "wc -l"], None, dirs).run(src, dst)
```

Other pieces:

- `pipex.runner.main(argv=None)` — the command-line entry point; returns
  the exit status.
- `pipex.errors.PipexError(err, msg, exit_code)` — raised for fatal
  errors; `format_error(err, msg)` builds a message line and
  `call_error(err, msg, stream=None)` writes it (to standard error by
  default).
- `pipex.files.read_heredoc(delimiter, source=None, prompt_stream=None)`,
  `open_input_file(path)` and `open_output_file(path, append=False)`.
- `pipex.paths.split_fields(s, sep)` — splits and drops empty fields.

## What it does not do

`pipex` is not a shell. Command strings get no quote removal, variable
expansion, globbing, escapes or redirections of their own; they are only
split as described above. The exit status does not reflect the status of
the commands in the chain.

## Tests

```
pip install .[test]
pytest
```