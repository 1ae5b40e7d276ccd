"""Error kinds of the pipeline and how they are reported."""

from __future__ import annotations

import os
import sys
from enum import IntEnum
from typing import Optional, TextIO, Union


class ErrorKind(IntEnum):
    """The failures the pipeline can report."""

    USAGE = 0
    GENERAL = 1
    PIPE = 2
    FORK = 3
    DUP2 = 4
    EXECVE = 5
    MALLOC = 6
    COMMAND_NOT_FOUND = 7


USAGE_MESSAGE = "Usage: ./pipex file1 cmd1 cmd2 file2\n"
COMMAND_NOT_FOUND_MESSAGE = "Error: command not found.\n"

_PREFIXES = {
    ErrorKind.GENERAL: "Error",
    ErrorKind.PIPE: "Pipe:",
    ErrorKind.FORK: "Fork:",
    ErrorKind.DUP2: "Dup2",
    ErrorKind.EXECVE: "Execve",
    ErrorKind.MALLOC: "Malloc",
}


class PipexError(Exception):
    """A failure of the pipeline, tagged with its kind."""

    def __init__(self, kind: ErrorKind, message: Optional[str] = None) -> None:
        self.kind = ErrorKind(kind)
        super().__init__(message or self.kind.name.lower().replace("_", " "))


class UsageError(PipexError):
    """The program was started with the wrong arguments."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(ErrorKind.USAGE, message or USAGE_MESSAGE.strip())


class CommandNotFoundError(PipexError):
    """A command could not be found in the search path."""

    def __init__(self, command: str = "") -> None:
        self.command = command
        super().__init__(
            ErrorKind.COMMAND_NOT_FOUND, f"command not found: {command!r}"
        )


def _describe_current_error() -> str:
    """Text of the exception being handled, the way perror would word it."""
    exc = sys.exc_info()[1]
    while exc is not None and not isinstance(exc, OSError) and exc.__cause__:
        exc = exc.__cause__
    if exc is None:
        return os.strerror(0)
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


def report(kind: Union[ErrorKind, int], stream: Optional[TextIO] = None) -> str:
    """Write the message of kind to stream (standard error by default).

    Kinds tied to a system call are worded from the exception being handled.
    The message is returned; a memory failure ends the program with status 1.
    """
    kind = ErrorKind(kind)
    out = stream if stream is not None else sys.stderr
    if kind is ErrorKind.USAGE:
        message = USAGE_MESSAGE
    elif kind is ErrorKind.COMMAND_NOT_FOUND:
        message = COMMAND_NOT_FOUND_MESSAGE
    else:
        message = f"{_PREFIXES[kind]}: {_describe_current_error()}\n"
    out.write(message)
    out.flush()
    if kind is ErrorKind.MALLOC:
        raise SystemExit(1)
    return message