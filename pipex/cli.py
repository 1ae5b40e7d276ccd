"""Command line entry: run "< file1 cmd1 | cmd2 > file2"."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Callable, Dict, List, Optional, Sequence

from pipex.command import resolve_command
from pipex.errors import CommandNotFoundError, ErrorKind, PipexError, report
from pipex.files import load_input, load_output


def _env_mapping(env: Sequence[str]) -> Dict[str, str]:
    mapping = {}
    for entry in env:
        key, sep, value = entry.partition("=")
        if sep:
            mapping[key] = value
    return mapping


def _current_env() -> List[str]:
    return [f"{key}={value}" for key, value in os.environ.items()]


def run_stage(stdin: int, stdout: int, args: str, env: Sequence[str]) -> int:
    """Run one command reading stdin and writing stdout, and wait for it.

    Both descriptors are closed afterwards. Returns the exit status of the
    command; raises CommandNotFoundError, OSError or PipexError on failure.
    """
    try:
        command = resolve_command(args, env)
        try:
            completed = subprocess.run(
                command.argv,
                executable=command.path,
                stdin=stdin,
                stdout=stdout,
                env=_env_mapping(command.env),
                check=False,
            )
        except OSError as exc:
            raise PipexError(ErrorKind.EXECVE) from exc
        return completed.returncode
    finally:
        for fd in {stdin, stdout}:
            try:
                os.close(fd)
            except OSError:
                pass


def _open_reported(loader: Callable[[str], int], path: str, label: str) -> Optional[int]:
    try:
        return loader(path)
    except IsADirectoryError:
        sys.stderr.write("Error: is a directory\n")
    except OSError as exc:
        sys.stderr.write(f"{label}: {exc.strerror or exc}\n")
    sys.stderr.flush()
    return None


def _run_reported(stdin: int, stdout: int, args: str, env: Sequence[str]) -> None:
    try:
        run_stage(stdin, stdout, args, env)
    except CommandNotFoundError:
        report(ErrorKind.COMMAND_NOT_FOUND)
    except PipexError as exc:
        report(exc.kind)
    except OSError:
        report(ErrorKind.GENERAL)


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Sequence[str]] = None,
) -> int:
    """Run cmd1 on infile and pipe its output through cmd2 into outfile.

    A stage whose file cannot be opened or whose command fails is reported
    and skipped; the other stage still runs. Returns 1 only when the pipe
    cannot be created, otherwise 0.
    """
    env = list(env) if env is not None else _current_env()
    try:
        read_end, write_end = os.pipe()
    except OSError:
        report(ErrorKind.PIPE)
        return 1
    input_fd = _open_reported(load_input, infile, "input open")
    if input_fd is None:
        os.close(write_end)
    else:
        _run_reported(input_fd, write_end, cmd1, env)
    output_fd = _open_reported(load_output, outfile, "output open")
    if output_fd is None:
        os.close(read_end)
    else:
        _run_reported(read_end, output_fd, cmd2, env)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the pipeline from "file1 cmd1 cmd2 file2" arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        report(ErrorKind.USAGE)
        return 1
    infile, cmd1, cmd2, outfile = args
    return run_pipeline(infile, cmd1, cmd2, outfile, None)


if __name__ == "__main__":
    sys.exit(main())