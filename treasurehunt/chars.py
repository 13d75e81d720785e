"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from itertools import takewhile
from typing import Union

Char = Union[str, int]

_WHITESPACE = " \t\r\n\v\f"
_DIGITS = "0123456789"


def _code(c: Char) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) < 128


def is_print(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) < 127


def _convert(c: Char, code: int) -> Char:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        return _convert(c, code - 32)
    return c


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        return _convert(c, code + 32)
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring what follows it.

    Leading whitespace is skipped and one optional sign is accepted.
    Text without digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, rest))
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Render an integer in decimal."""
    sign = "-" if n < 0 else ""
    magnitude = -n if n < 0 else n
    digits = []
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(_DIGITS[digit])
        if not magnitude:
            break
    return sign + "".join(reversed(digits))