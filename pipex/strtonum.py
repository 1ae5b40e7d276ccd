"""Text to integer parsing with base detection, in the manner of strtol."""

from __future__ import annotations

from typing import NamedTuple

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_LONG_MIN, _LONG_MAX = -(2**63), 2**63 - 1
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


class ParseResult(NamedTuple):
    """A parsed value and the index just past the text that was consumed."""

    value: int
    end: int


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a two's-complement signed integer of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def _detect_base(text: str) -> int:
    if text.startswith(("0x", "0X")):
        return 16
    if text.startswith("0"):
        return 8
    return 10


def _limit_reached(n: int, base: int, bits: int) -> bool:
    """The overflow heuristic: a rough decimal magnitude scaled by the base."""
    magnitude = 0
    while n > 1:
        n //= 10
        magnitude += 1
    return magnitude * base == bits


def _parse(text: str, base: int, bits: int, low: int, high: int) -> ParseResult:
    text = text.split("\0", 1)[0]
    if base == 0:
        base = _detect_base(text)
    elif not 2 <= base <= 36:
        return ParseResult(0, 0)
    pos = 2 if base == 16 and text.startswith(("0x", "0X")) else 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    valid = _DIGITS[:base]
    result = 0
    while pos < len(text):
        digit = valid.find(text[pos])
        if digit < 0:
            break
        if _limit_reached(result, base, bits):
            return ParseResult(high if sign == 1 else low, len(text))
        result = _wrap(result * base + digit, 64)
        pos += 1
    return ParseResult(_wrap(result * sign, 64), pos)


def strtol(text: str, base: int) -> ParseResult:
    """Parse a 64-bit integer from text in the given base (0 detects it).

    Only lowercase letters count as digits above 9. An invalid base gives
    value 0 with nothing consumed; a value judged too large is clamped and
    the whole text counts as consumed.
    """
    return _parse(text, base, 64, _LONG_MIN, _LONG_MAX)


def strtoi(text: str, base: int) -> ParseResult:
    """Parse a 32-bit integer from text, as strtol but clamped and cut to int."""
    value, end = _parse(text, base, 32, _INT_MIN, _INT_MAX)
    return ParseResult(_wrap(value, 32), end)