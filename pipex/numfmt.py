"""Conversions between integers and their decimal or base-N text."""

from __future__ import annotations

from typing import Union

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_UINT_MAX = 2**32 - 1
_ULONG_MAX = 2**64 - 1


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a two's-complement signed integer of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def _parse_decimal(text: str) -> int:
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - 48)
    return sign * value


def _check_range(n: int, low: int, high: int, kind: str) -> None:
    if not low <= n <= high:
        raise OverflowError(f"{n} does not fit in {kind}")


def atoi(text: str) -> int:
    """Parse leading whitespace, an optional sign and decimal digits as a 32-bit int."""
    return _wrap(_parse_decimal(text), 32)


def atol(text: str) -> int:
    """Parse leading whitespace, an optional sign and decimal digits as a 64-bit int."""
    return _wrap(_parse_decimal(text), 64)


def int_len(n: int) -> int:
    """Number of characters needed to write a 32-bit int, sign included."""
    _check_range(n, _INT_MIN, _INT_MAX, "int")
    return len(str(n))


def uint_len(n: int) -> int:
    """Number of decimal digits of a 32-bit unsigned int."""
    _check_range(n, 0, _UINT_MAX, "unsigned int")
    return len(str(n))


def ulong_len(n: int) -> int:
    """Number of decimal digits of a 64-bit unsigned long."""
    _check_range(n, 0, _ULONG_MAX, "unsigned long")
    return len(str(n))


def itoa(n: int) -> str:
    """Decimal text of a 32-bit int."""
    _check_range(n, _INT_MIN, _INT_MAX, "int")
    return str(n)


def utoa(n: int) -> str:
    """Decimal text of a 32-bit unsigned int."""
    _check_range(n, 0, _UINT_MAX, "unsigned int")
    return str(n)


def ultobase(n: int, base: int) -> str:
    """Text of a 64-bit unsigned long in base 2 to 36, lowercase digits.

    Zero, or a base outside 2..36, gives "0".
    """
    _check_range(n, 0, _ULONG_MAX, "unsigned long")
    if n == 0 or not 2 <= base <= 36:
        return "0"
    digits = []
    while n:
        n, remainder = divmod(n, base)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


def char_to_str(c: Union[int, str]) -> str:
    """One-character string of an unsigned char; the NUL character gives ""."""
    code = ord(c) if isinstance(c, str) else int(c)
    code %= 256
    return chr(code) if code else ""