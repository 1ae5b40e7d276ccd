"""Opening the input and output files of the pipeline."""

from __future__ import annotations

import errno
import os


def is_directory(path: str) -> bool:
    """True if path names a directory."""
    return os.path.isdir(path)


def _refuse_directory(path: str) -> None:
    if is_directory(path):
        raise IsADirectoryError(errno.EISDIR, "is a directory", path)


def load_input(path: str) -> int:
    """Open path for reading and return its descriptor.

    Raises IsADirectoryError for a directory and OSError when it cannot be opened.
    """
    _refuse_directory(path)
    return os.open(path, os.O_RDONLY)


def load_output(path: str) -> int:
    """Create or truncate path with mode 0644 and return its descriptor.

    Raises IsADirectoryError for a directory and OSError when it cannot be opened.
    """
    _refuse_directory(path)
    return os.open(path, os.O_RDWR | os.O_CREAT | os.O_TRUNC, 0o644)