"""Byte-buffer helpers: fill, zero, allocate, search, compare and copy."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_span(buf: Buffer, start: int, length: int) -> None:
    if length < 0 or start < 0:
        raise ValueError("offsets and lengths must not be negative")
    if start + length > len(buf):
        raise ValueError(
            f"span of {length} bytes at {start} exceeds buffer of {len(buf)}"
        )


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with the low byte of ``value``."""
    _check_span(buf, 0, length)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buf``."""
    if length > 0:
        memset(buf, 0, length)
    return buf


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Buffer, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_span(data, 0, length)
    target = value & 0xFF
    return next(
        (index for index, byte in enumerate(bytes(data[:length])) if byte == target),
        None,
    )


def memcmp(first: Buffer, second: Buffer, length: int) -> int:
    """Difference of the first differing bytes within ``length``, or 0."""
    _check_span(first, 0, length)
    _check_span(second, 0, length)
    for a, b in zip(bytes(first[:length]), bytes(second[:length])):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: Buffer, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    _check_span(dst, 0, length)
    _check_span(src, 0, length)
    dst[:length] = bytes(src[:length])
    return dst


def memccpy(dst: bytearray, src: Buffer, stop: int, length: int) -> Optional[int]:
    """Copy bytes up to and including ``stop``, at most ``length`` of them.

    Returns the index in ``dst`` just past the copied stop byte, or None when
    the stop byte was not met and all ``length`` bytes were copied.
    """
    _check_span(dst, 0, length)
    _check_span(src, 0, length)
    found = memchr(src, stop, length)
    count = length if found is None else found + 1
    dst[:count] = bytes(src[:count])
    return None if found is None else count


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes within ``buf`` from offset ``src`` to ``dst``.

    Overlapping ranges are handled correctly.
    """
    _check_span(buf, src, length)
    _check_span(buf, dst, length)
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf