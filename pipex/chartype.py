"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    """Return the integer code of a character given as an int or a 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_lower(c: Char) -> bool:
    """True for 'a' to 'z'."""
    return 97 <= _code(c) <= 122


def is_upper(c: Char) -> bool:
    """True for 'A' to 'Z'."""
    return 65 <= _code(c) <= 90


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    return is_lower(c) or is_upper(c)


def is_digit(c: Char) -> bool:
    """True for '0' to '9'."""
    return 48 <= _code(c) <= 57


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space to '~'."""
    return 32 <= _code(c) <= 126


def to_upper(c: Char) -> Char:
    """Uppercase an ASCII lowercase letter; other characters are unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    result = code - 32 if is_lower(code) else code
    return chr(result) if isinstance(c, str) else result


def to_lower(c: Char) -> Char:
    """Lowercase an ASCII uppercase letter; other characters are unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    result = code + 32 if is_upper(code) else code
    return chr(result) if isinstance(c, str) else result


def str_to_upper(text: str) -> str:
    """Return text with only the ASCII letters 'a' to 'z' uppercased."""
    return "".join(to_upper(ch) for ch in text)