"""String helpers: splitting, searching, bounded copies, comparison and trimming."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, List, Optional, Tuple

_NUL = "\0"


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _check_char(sep)
    return [piece for piece in text.split(sep) if piece]


def find_char(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for the NUL character yields the index just past the text.
    """
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return index if index >= 0 else None


def rfind_char(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None.

    Searching for the NUL character yields the index just past the text.
    """
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return index if index >= 0 else None


def join(first: str, second: str) -> str:
    """Concatenate two strings; both must be non-empty."""
    if not first or not second:
        raise ValueError("both strings must be non-empty")
    return first + second


def copy_bounded(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``, which lets the
    caller detect truncation.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def concat_bounded(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` so the result holds at most ``size - 1`` characters.

    Returns the resulting text and the length the untruncated result would
    have had. When ``dst`` already fills ``size``, it is returned unchanged
    together with ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0 or len(dst) >= size:
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying ``func(index, char)`` to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def compare(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters.

    Returns the code difference of the first differing characters, treating
    the end of a string as NUL, or 0 when they match.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    pairs = zip_longest(first, second, fillvalue=_NUL)
    for a, b in islice(pairs, length):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at 0; otherwise None when it is absent.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def trim(text: str, charset: str) -> str:
    """Strip every character of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``.

    The text must be non-empty; a start past its end yields an empty string.
    """
    if not text:
        raise ValueError("text must be non-empty")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]