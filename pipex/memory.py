"""Byte buffer operations: fill, compare, search and copy."""

from __future__ import annotations

from typing import Container, Optional, Union

Buffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_length(buf: Buffer, n: int, start: int = 0) -> None:
    if n < 0 or start < 0 or start + n > len(buf):
        raise IndexError(f"range of {n} bytes at {start} exceeds buffer of {len(buf)}")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    _check_length(buf, n)
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb elements of size bytes each."""
    if nmemb <= 0 or size <= 0:
        raise ValueError("allocation needs a positive count and size")
    if nmemb > SIZE_MAX // size:
        raise OverflowError("allocation size overflows")
    return bytearray(nmemb * size)


def memchr(data: Buffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to c (as unsigned char) in the first n bytes."""
    _check_length(data, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Difference of the first differing bytes within n, or 0."""
    _check_length(a, n)
    _check_length(b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy n bytes of src to the start of dest and return dest."""
    _check_length(dest, n)
    _check_length(src, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buf from offset src to offset dst; overlap is safe."""
    _check_length(buf, n, dst)
    _check_length(buf, n, src)
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Set the first n bytes of buf to c (as unsigned char) and return buf."""
    _check_length(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def int_in(n: int, values: Container[int]) -> bool:
    """True if n is among values."""
    return n in values