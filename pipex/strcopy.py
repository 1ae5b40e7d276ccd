"""Copying and concatenating strings that end at their first NUL character."""

from __future__ import annotations

from typing import NamedTuple

from pipex.strsearch import strlen


class CopyResult(NamedTuple):
    """The text written and the length the copy tried to create."""

    text: str
    length: int


def _text(s: str) -> str:
    return s[:strlen(s)]


def strcat(dest: str, src: str) -> str:
    """dest followed by src."""
    return _text(dest) + _text(src)


def strncat(dest: str, src: str, n: int) -> str:
    """dest followed by at most n characters of src."""
    return _text(dest) + _text(src)[:max(n, 0)]


def strcpy(src: str) -> str:
    """A copy of src up to its first NUL."""
    return _text(src)


def strlcpy(src: str, size: int) -> CopyResult:
    """Copy src into a buffer of size characters, NUL included.

    Returns the text that fits and the full length of src.
    """
    text = _text(src)
    if len(text) < size:
        return CopyResult(text, len(text))
    return CopyResult(text[:size - 1] if size > 0 else "", len(text))


def strlcat(dst: str, src: str, size: int) -> CopyResult:
    """Append src to dst in a buffer of size characters, NUL included.

    Returns the resulting text and the length it tried to create. When dst
    already fills the buffer, dst is unchanged and the length is size plus
    the length of src.
    """
    head, tail = _text(dst), _text(src)
    if size <= len(head):
        return CopyResult(head, size + len(tail))
    room = size - 1 - len(head)
    return CopyResult(head + tail[:room], len(head) + len(tail))


def strdup(s: str) -> str:
    """A new copy of s up to its first NUL."""
    return _text(s)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from index start; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _text(s)
    if len(text) < start:
        return ""
    return text[start:start + length]