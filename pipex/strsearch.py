"""Searching within strings that end at their first NUL character."""

from __future__ import annotations

from typing import Optional, Union

from pipex.chartype import to_lower

Char = Union[int, str]


def _char(c: Char) -> str:
    """The character c as a 1-char str; an int is taken as a code point."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c))


def _text(s: str) -> str:
    """The part of s before its first NUL."""
    return s.split("\0", 1)[0]


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_text(s))


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first c in s; searching for NUL gives the end index."""
    text, ch = _text(s), _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strchrnul(s: str, c: Char) -> int:
    """Index of the first c in s, or the end index when c is absent."""
    text, ch = _text(s), _char(c)
    index = text.find(ch) if ch != "\0" else -1
    return len(text) if index < 0 else index


def strnchr(s: str, count: int, c: Char) -> Optional[int]:
    """As strchr, looking only at the first count characters.

    The terminating NUL is found only when it lies inside those characters.
    """
    text, ch = _text(s), _char(c)
    if ch == "\0":
        return len(text) if len(text) < count else None
    index = text.find(ch, 0, max(count, 0))
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last c in s; searching for NUL gives the end index."""
    text, ch = _text(s), _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of needle; an empty needle gives 0."""
    hay, pattern = _text(haystack), _text(needle)
    if not pattern:
        return 0
    index = hay.find(pattern)
    return None if index < 0 else index


def strcasestr(haystack: str, needle: str) -> Optional[int]:
    """Index of needle in haystack ignoring ASCII case after the first character.

    The first character of a match must be equal exactly; the rest is
    compared case-insensitively. An empty needle gives 0.
    """
    hay, pattern = _text(haystack), _text(needle)
    if not pattern:
        return 0
    for start, ch in enumerate(hay):
        if ch != pattern[0]:
            continue
        tail = hay[start:start + len(pattern)]
        if len(tail) == len(pattern) and all(
            to_lower(a) == to_lower(b) for a, b in zip(tail, pattern)
        ):
            return start
    return None


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of little in the first length characters of big; empty little gives 0."""
    hay, pattern = _text(big), _text(little)
    if not pattern:
        return 0
    limit = min(max(length, 0), len(hay))
    for start in range(limit):
        if len(pattern) <= length - start and hay.startswith(pattern, start):
            return start
    return None


def ends_with(text: str, suffix: str) -> bool:
    """True if text ends with suffix; every text ends with the empty suffix."""
    return _text(text).endswith(_text(suffix))