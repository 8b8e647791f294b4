"""printf-style formatting and small writers for text streams."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from solong.chars import itoa

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_UINT32 = 2**32


def format_hex(n: int, upper: bool = False) -> str:
    """Render a non-negative integer in hexadecimal, without prefix."""
    if n < 0:
        raise ValueError(f"cannot render negative value {n} as unsigned hex")
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    out = []
    while True:
        n, rem = divmod(n, 16)
        out.append(digits[rem])
        if not n:
            break
    return "".join(reversed(out))


def format_address(address: int | None) -> str:
    """Render an address as 0x-prefixed lower-case hex; a null address is "(nil)"."""
    if not address:
        return "(nil)"
    return "0x" + format_hex(address, False)


def _as_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value %= _UINT32
    return value - _UINT32 if value >= 2**31 else value


def _as_char(value: int | str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def _convert(kind: str, args: Iterator[Any]) -> str:
    if kind not in "cspxXdiu":
        return kind
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{kind}") from None
    if kind == "c":
        return _as_char(value)
    if kind == "s":
        return "(null)" if value is None else str(value)
    if kind == "p":
        return format_address(value)
    if kind in "xX":
        return format_hex(value % _UINT32, kind == "X")
    if kind in "di":
        return itoa(_as_int32(value))
    return str(value % _UINT32)


def format_printf(fmt: str, *args: Any) -> str:
    """Expand %c %s %p %x %X %d %i %u in fmt; any other character after % stands for itself."""
    remaining = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        kind = next(chars, None)
        if kind is None:
            raise ValueError("format string ends with a lone '%'")
        pieces.append(_convert(kind, remaining))
    return "".join(pieces)


def print_formatted(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output; return the number of characters written."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def put_char_fd(c: int | str, stream: TextIO) -> None:
    """Write a single character to stream."""
    stream.write(_as_char(c))


def put_str_fd(s: str, stream: TextIO) -> None:
    """Write s to stream."""
    stream.write(s)


def put_endl_fd(s: str | None, stream: TextIO) -> None:
    """Write s followed by a newline; nothing is written when s is None."""
    if s is None:
        return
    stream.write(s)
    stream.write("\n")


def put_nbr_fd(n: int, stream: TextIO) -> None:
    """Write a 32-bit integer in decimal to stream."""
    stream.write(itoa(n))