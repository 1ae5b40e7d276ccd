"""Finding the program behind a command line."""

from __future__ import annotations

import errno
import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from pipex.errors import CommandNotFoundError
from pipex.strbuild import split
from pipex.strcompare import strncmp


@dataclass
class Command:
    """A command ready to run: its arguments, program path and environment."""

    argv: List[str]
    path: str
    env: List[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.argv[0]


def get_env_element(env: Sequence[str], name: str) -> str:
    """The last entry of env whose first five characters match name, or ""."""
    found = ""
    for entry in env:
        if not strncmp(entry, name, 5):
            found = entry
    return found


def fetch_paths(env: Optional[Sequence[str]]) -> Optional[List[str]]:
    """The search path of env, split at ':'.

    The whole last "PATH=" entry is split, so the first directory keeps the
    "PATH=" prefix. Without env or a PATH entry there is no search path.
    """
    if env is None:
        return None
    paths_list = None
    for entry in env:
        if entry.startswith("PATH="):
            paths_list = entry
    if paths_list is None:
        return None
    return split(paths_list, ":")


def seek_command_path(command: str, env: Optional[Sequence[str]]) -> Optional[str]:
    """The first existing "<dir>/<command>" along the search path, or None."""
    for directory in fetch_paths(env) or ():
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.F_OK):
            return candidate
    return None


def is_invalid_path(text: str) -> bool:
    """True if text contains '/' and names nothing that exists."""
    return "/" in text and not os.access(text, os.F_OK)


def resolve_command(args: str, env: Optional[Sequence[str]]) -> Command:
    """Split a command line at spaces and locate its program.

    A name holding '/' is used as it is and must exist (FileNotFoundError);
    any other name is searched along PATH (CommandNotFoundError).
    """
    argv = split(args, " ")
    if not argv:
        raise CommandNotFoundError(args)
    name = argv[0]
    if is_invalid_path(name):
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), name)
    path = name if "/" in name else seek_command_path(name, env)
    if path is None:
        raise CommandNotFoundError(name)
    return Command(argv=argv, path=path, env=list(env or []))