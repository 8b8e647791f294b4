"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

CharLike = "int | str"


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a one-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(c) <= 126


def _convert_case(c: int | str, low: str, high: str, shift: int) -> int | str:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; other values pass through.

    The result has the same kind (int or str) as the argument.
    """
    return _convert_case(c, "A", "Z", 32)


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; other values pass through.

    The result has the same kind (int or str) as the argument.
    """
    return _convert_case(c, "a", "z", -32)


def atol(text: str) -> int:
    """Parse an optionally signed decimal integer that fits a 32-bit int.

    Raises ValueError on any non-digit character or on overflow.
    """
    sign = 1
    digits = text
    if digits[:1] == "-":
        sign = -1
        digits = digits[1:]
    elif digits[:1] == "+":
        digits = digits[1:]
    limit = INT_MAX if sign == 1 else INT_MAX + 1
    result = 0
    for ch in digits:
        if not "0" <= ch <= "9":
            raise ValueError(f"invalid digit {ch!r} in {text!r}")
        result = result * 10 + (ord(ch) - ord("0"))
        if result > limit:
            raise ValueError(f"{text!r} does not fit in a 32-bit integer")
    return sign * result


def itoa(n: int) -> str:
    """Render a 32-bit integer in decimal.

    Raises OverflowError when the value is outside the 32-bit range.
    """
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    if n < 0:
        return "-" + _digits(-n)
    return _digits(n)


def _digits(value: int) -> str:
    out = []
    while True:
        value, rem = divmod(value, 10)
        out.append(chr(ord("0") + rem))
        if not value:
            break
    return "".join(reversed(out))