"""Byte-buffer filling, copying, searching and comparison helpers.

Buffers are ``bytearray`` objects (or read-only bytes-like objects where
nothing is written). Positions are returned as indices rather than pointers.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_span(buf: BytesLike, start: int, n: int, what: str) -> None:
    if n < 0 or start < 0:
        raise ValueError("offsets and counts must not be negative")
    if start + n > len(buf):
        raise ValueError(f"{what} buffer is shorter than the requested span")


def fill(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_span(buf, 0, n, "destination")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def zero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return fill(buf, 0, n)


def zeroed(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer for ``count`` items of ``size`` bytes.

    A request for zero items or zero-sized items still yields one byte.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        count = size = 1
    return bytearray(count * size)


def copy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_span(src, 0, n, "source")
    _check_span(dst, 0, n, "destination")
    dst[:n] = bytes(src[:n])
    return dst


def move(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to ``dst``.

    The two regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    _check_span(buf, src, n, "source")
    _check_span(buf, dst, n, "destination")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def copy_until(dst: bytearray, src: BytesLike, ch: int, n: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dst`` up to and including byte ``ch``.

    At most ``n`` bytes are copied. Returns the index in ``dst`` just past
    the copied ``ch``, or None when ``ch`` is not among the first ``n``
    bytes (in which case all ``n`` bytes are copied).
    """
    found = find_byte(src, ch, n)
    count = n if found is None else found + 1
    _check_span(dst, 0, count, "destination")
    dst[:count] = bytes(src[:count])
    return None if found is None else count


def find_byte(buf: BytesLike, ch: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``ch`` within ``n`` bytes."""
    _check_span(buf, 0, n, "source")
    index = bytes(buf[:n]).find(ch & 0xFF)
    return None if index < 0 else index


def compare(b1: BytesLike, b2: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns zero when they match, otherwise the difference between the
    first pair of bytes that differ.
    """
    _check_span(b1, 0, n, "first")
    _check_span(b2, 0, n, "second")
    for a, b in zip(bytes(b1[:n]), bytes(b2[:n])):
        if a != b:
            return a - b
    return 0