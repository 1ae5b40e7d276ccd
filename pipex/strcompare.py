"""String comparisons with C semantics: byte-wise, stopping at NUL."""

from __future__ import annotations

from itertools import islice
from typing import Union

from pipex.chartype import to_lower

Text = Union[str, bytes]


def _terminated(s: Text) -> bytes:
    """UTF-8 bytes of s up to its first NUL, with a NUL terminator appended."""
    data = s.encode() if isinstance(s, str) else bytes(s)
    return data.split(b"\0", 1)[0] + b"\0"


def strcmp(s1: Text, s2: Text) -> int:
    """Difference of the first differing bytes, or 0 when equal."""
    for x, y in zip(_terminated(s1), _terminated(s2)):
        if not x or x != y:
            return x - y
    return 0


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """As strcmp, looking at no more than n bytes."""
    for x, y in islice(zip(_terminated(s1), _terminated(s2)), max(n, 0)):
        if x != y:
            return x - y
        if not x:
            return 0
    return 0


def strcasecmp(s1: Text, s2: Text) -> int:
    """As strcmp, ignoring ASCII case."""
    for x, y in zip(_terminated(s1), _terminated(s2)):
        lx, ly = to_lower(x), to_lower(y)
        if not x or lx != ly:
            return lx - ly
    return 0


def strcasencmp(s1: Text, s2: Text, n: int) -> int:
    """As strncmp, ignoring ASCII case."""
    if n <= 0:
        return 0
    for i, (x, y) in enumerate(zip(_terminated(s1), _terminated(s2))):
        lx, ly = to_lower(x), to_lower(y)
        if i == n - 1 or not x or lx != ly:
            return lx - ly
    return 0