# pipex

`pipex` runs two commands as a pipeline. The first command reads its input
from a file. The second command writes its output to another file. It does
the same job as this shell line:

```
< infile cmd1 | cmd2 > outfile
```

## Installation

```
pip install .
```

## Usage

```
pipex infile "cmd1 args" "cmd2 args" outfile
```

For example:

```
pipex input.txt "grep error" "wc -l" count.txt
```

You can also start it with `python -m pipex.cli` and the same arguments.

### How commands are found

- Each command line is split on spaces. Runs of spaces give no empty
  arguments. There is no quoting or escaping.
- If the command name contains a `/`, it is used as given, and it must exist.
- Any other name is searched in the directories of `PATH`, in order. The
  first `<dir>/<name>` that exists is used.

### How the stages run

- The output file is created or truncated, with mode `0644`.
- The first command runs to completion before the second one starts.
- The environment is passed to both commands.

### Errors and exit status

- With anything other than four arguments, `pipex` prints this line to
  standard error and exits with status 1:

  ```
  Usage: ./pipex file1 cmd1 cmd2 file2
  ```

- If the pipe cannot be created, the error is reported and the exit status
  is 1.
- In the cases below, an error is printed to standard error and only the
  stage that depends on the failure is skipped. The other stage still runs,
  and the exit status is 0.

| Failure | Message on standard error |
| --- | --- |
| The input or output file is a directory | `Error: is a directory` |
| The input file cannot be opened | `input open: <reason>` |
| The output file cannot be opened | `output open: <reason>` |
| A command is not found | `Error: command not found.` |
| A name containing `/` does not exist | `Error: <reason>` |
| The program cannot be started | `Execve: <reason>` |

The exit statuses of the commands themselves are not passed on.

## Library use

Environments are given as lists of `"NAME=value"` strings, in the same form
as a process environment block. They are not given as dictionaries.

```python
from pipex.cli import run_pipeline, run_stage

run_pipeline("input.txt", "grep error", "wc -l", "count.txt",
             ["PATH=/usr/bin:/bin"])
```

If you leave out `env` or pass `None`, `run_pipeline` uses the current
process environment.

`run_stage(stdin, stdout, args, env)` runs a single command between two
open file descriptors and closes both afterwards. It returns the command's
exit status.

### Resolving commands without running them

```python
from pipex.command import resolve_command, seek_command_path

command = resolve_command("ls -l", ["PATH=:/usr/bin:/bin"])
print(command.path, command.argv, command.name)
```

`resolve_command` returns a `Command` with `argv`, `path`, `env` and `name`.
It raises `pipex.errors.CommandNotFoundError` when a name cannot be found
along the search path. It raises `FileNotFoundError` when a name containing
`/` does not exist.

The whole `PATH=` entry is split at `:`. This means the first directory
keeps the `PATH=` prefix and is never matched. That is why the example
starts the value with `:`. `fetch_paths(env)` shows the directories that are
searched.

### Opening files and reporting errors

- `pipex.files` provides `load_input` and `load_output`. Both return raw
  file descriptors and raise `IsADirectoryError` for directories.
- `pipex.errors` defines:
  - `ErrorKind`;
  - the `PipexError`, `UsageError` and `CommandNotFoundError` exceptions;
  - `report(kind, stream)`, which writes the message for a kind.

### Helpers

The package also includes small helpers:

| Module | Contents |
| --- | --- |
| `pipex.chartype` | ASCII character tests |
| `pipex.numfmt` | number formatting |
| `pipex.strtonum` | `strtol`, `strtoi` |
| `pipex.memory` | byte buffers |
| `pipex.strcompare` | C-style string comparisons |
| `pipex.strsearch` | C-style string searches |
| `pipex.strcopy` | C-style string copying |
| `pipex.strbuild` | splitting, trimming and joining |
| `pipex.linkedlist` | `Node`, `LinkedList` |
| `pipex.linereader` | `LineReader`, `get_next_line` |

## Limits

- Exactly two commands are supported.
- There is no here-document input.
- There is no append mode for the output file.

## Tests

```
pip install ".[test]"
pytest
```