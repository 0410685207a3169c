"""Lenient and strict conversions between decimal text and numbers."""

from __future__ import annotations

from typing import Optional

from .chars import is_digit

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_SPACES = " \n\t\v\f\r"


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def _split_sign(text: str) -> tuple[int, str]:
    """Drop leading whitespace and one optional sign; return (sign, rest)."""
    rest = text.lstrip(_SPACES)
    if rest[:1] in ("-", "+"):
        return (-1 if rest[0] == "-" else 1), rest[1:]
    return 1, rest


def atoi(text: str) -> int:
    """Read a leading integer the lenient way.

    Parsing stops at the first non-digit; text without digits gives 0.
    A value that overflows a 64-bit accumulator saturates, and the result
    is then narrowed to a signed 32-bit integer.
    """
    sign, rest = _split_sign(text)
    nb = 0
    for ch in rest:
        if not is_digit(ch):
            break
        digit = ord(ch) - ord("0")
        if (LONG_MAX - digit) // 10 < nb:
            return _to_int32(LONG_MIN if sign == -1 else LONG_MAX)
        nb = nb * 10 + digit
    return _to_int32(nb * sign)


def parse_int(text: str) -> int:
    """Parse a whole string as a signed 32-bit integer.

    Raises ValueError if there are no digits, if anything follows them,
    or if the value leaves the 32-bit range.
    """
    sign, rest = _split_sign(text)
    nb = 0
    seen_digit = False
    consumed = 0
    for ch in rest:
        if not is_digit(ch):
            break
        seen_digit = True
        consumed += 1
        nb = nb * 10 + ord(ch) - ord("0")
        if not INT_MIN <= nb * sign <= INT_MAX:
            raise ValueError(f"integer out of range: {text!r}")
    if not seen_digit or consumed != len(rest):
        raise ValueError(f"invalid integer: {text!r}")
    return nb * sign


def parse_float(text: Optional[str]) -> float:
    """Parse a whole string as a plain decimal number.

    Accepts an optional sign, digits and at most one decimal point; a lone
    point reads as zero. Raises ValueError for anything else.
    """
    if text is None:
        raise ValueError("no number given")
    sign, rest = _split_sign(text)
    nb = 0.0
    decimals = -1
    consumed = 0
    for ch in rest:
        if ch == "." and decimals == -1:
            decimals = 0
        elif is_digit(ch):
            if decimals >= 0:
                decimals += 1
            nb = nb * 10 + (ord(ch) - ord("0"))
        else:
            break
        consumed += 1
    if consumed == 0 or consumed != len(rest):
        raise ValueError(f"invalid number: {text!r}")
    for _ in range(max(decimals, 0)):
        nb /= 10
    return nb * sign


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    return f"{int(n):d}"