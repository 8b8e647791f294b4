"""Byte-buffer helpers working on bytes and bytearray objects."""

from __future__ import annotations

UINT_MAX = 2**32 - 1


def _check_span(length: int, start: int, n: int, name: str) -> None:
    if n < 0 or start < 0 or start + n > length:
        raise IndexError(f"{name}: span {start}..{start + n} outside buffer of {length} bytes")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c; return buf."""
    _check_span(len(buf), 0, n, "memset")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf; return buf."""
    return memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb * size bytes.

    Raises OverflowError when the product exceeds the 32-bit unsigned range.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("nmemb and size must be non-negative")
    if nmemb and size and nmemb > UINT_MAX // size:
        raise OverflowError(f"{nmemb} * {size} bytes is too large")
    return bytearray(nmemb * size)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to c & 0xFF among the first n, or None."""
    _check_span(len(data), 0, n, "memchr")
    index = data.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first n bytes; return the difference at the first mismatch, else 0."""
    _check_span(len(a), 0, n, "memcmp")
    _check_span(len(b), 0, n, "memcmp")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dest; return dest."""
    _check_span(len(src), 0, n, "memcpy")
    _check_span(len(dest), 0, n, "memcpy")
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buf from offset src to offset dest, overlap-safe; return buf."""
    _check_span(len(buf), src, n, "memmove")
    _check_span(len(buf), dest, n, "memmove")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf