"""String helpers: searching, comparing, slicing, splitting and bounded copies."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _char(c: int | str) -> str:
    """Normalise a character given as an int or one-char str; ints are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, not {type(value).__name__}")
    return value


def strlen(s: str) -> int:
    """Number of characters in s."""
    return len(_require_str(s, "s"))


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of c in s, or None.

    Searching for the NUL character finds the terminator at index len(s).
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of c in s, or None.

    Searching for the NUL character finds the terminator at index len(s).
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch, else 0.

    The end of a string compares as code 0.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    for i in range(min(n, max(len(s1), len(s2)))):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of the first occurrence of little lying wholly within the first length characters of big.

    An empty little is found at index 0.
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """Up to length characters of s starting at start; empty when start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    _require_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: int | str) -> list[str]:
    """Split s on runs of the separator character, dropping empty pieces."""
    _require_str(s, "s")
    delimiter = _char(sep)
    return [word for word in s.split(delimiter) if word]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Bounded copy of src into a buffer of size characters, terminator included.

    Returns the copied text (at most size - 1 characters; empty when size is 0)
    and the full length of src, which shows whether truncation happened.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    copied = src[:size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Bounded append of src to dst in a buffer of size characters, terminator included.

    Returns the resulting text and the length the full result would have had.
    When size cannot even hold dst and its terminator, dst is returned unchanged
    with size + len(src) as the length.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    dst_len = len(dst)
    if size < dst_len + 1:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def strdup(s: str) -> str:
    """Return a copy of s."""
    return "".join(_require_str(s, "s"))


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character of s."""
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Apply func(index, char) to each item of chars in place.

    A returned character replaces the item; None leaves it as it was.
    Returns chars.
    """
    for i, ch in enumerate(list(chars)):
        result = func(i, ch)
        if result is not None:
            chars[i] = result
    return chars