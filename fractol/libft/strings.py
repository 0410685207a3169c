"""String searching, slicing and bounded copying helpers.

Searches return indices (or None) rather than pointers. The bounded copy
functions work on NUL-terminated byte buffers held in a bytearray.
"""

from __future__ import annotations

from typing import Callable, Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

_NUL = "\0"


def find_char(s: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Looking for the NUL character finds the end of the string.
    """
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def find_last_char(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Looking for the NUL character finds the end of the string.
    """
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def compare_prefix(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns zero when they match, otherwise the difference between the
    codes of the first characters that differ; the end of a string counts
    as code zero.
    """
    if n <= 0:
        return 0
    head1, head2 = s1[:n], s2[:n]
    width = max(len(head1), len(head2))
    for a, b in zip(head1.ljust(width, _NUL), head2.ljust(width, _NUL)):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def find_substring(big: str, little: str, length: int) -> Optional[int]:
    """Find ``little`` in ``big`` starting within the first ``length`` chars.

    An empty ``little`` is found at index 0. Returns None when not found.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    if length == 0:
        return None
    limit = length - (len(little) - 1)
    if limit < 0:
        # The unsigned bound wraps around: the whole string is searched.
        limit = len(big)
    for i in range(min(limit, len(big))):
        if big.startswith(little, i):
            return i
    return None


def substring(s: Optional[str], start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` from ``start``.

    A missing string or a start at or past the end gives the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if s is None or len(s) <= start:
        return ""
    return s[start:start + length]


def join(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing first string gives None."""
    if s1 is None:
        return None
    if s2 is None:
        return s1
    return s1 + s2


def trim(s: Optional[str], chars: str) -> Optional[str]:
    """Strip every character found in ``chars`` from both ends of ``s``."""
    if s is None:
        return None
    return s.strip(chars)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    return [piece for piece in s.split(sep) if piece]


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def _c_len(buf: BytesLike) -> int:
    """Length of the NUL-terminated string at the start of ``buf``."""
    end = bytes(buf).find(0)
    return len(buf) if end < 0 else end


def _copy_into(dst: bytearray, offset: int, src: BytesLike, size: int) -> int:
    if size < 0:
        raise ValueError("size must not be negative")
    src_len = _c_len(src)
    if size:
        if offset + size > len(dst):
            raise ValueError("destination buffer is smaller than size")
        count = min(size - 1, src_len)
        dst[offset:offset + count] = bytes(src[:count])
        dst[offset + count] = 0
    return src_len


def copy_bounded(dst: bytearray, src: BytesLike, size: int) -> int:
    """Copy ``src`` into a ``size``-byte buffer, always NUL-terminating.

    Returns the length of ``src``; a result of ``size`` or more means the
    copy was truncated.
    """
    return _copy_into(dst, 0, src, size)


def concat_bounded(dst: bytearray, src: BytesLike, size: int) -> int:
    """Append ``src`` to the string in a ``size``-byte buffer.

    Returns the length of the string it tried to create.
    """
    d_len = _c_len(dst)
    if size <= d_len:
        return size + _c_len(src)
    return d_len + _copy_into(dst, d_len, src, size - d_len)