"""Colour schemes mapping escape counts to RGB pixel values."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

_R, _G, _B = 0, 1, 2
_SATURATION = 200.0
_VALUE = 255.0

# (upper hue bound, ramp, channel at full, channel at floor, ramping channel)
_SEGMENTS: tuple[tuple[float, Callable[[float], float], int, int, int], ...] = (
    (60, lambda h: h, _R, _B, _G),
    (120, lambda h: 120 - h, _G, _B, _R),
    (180, lambda h: h - 120, _G, _R, _B),
    (240, lambda h: 240 - h, _B, _R, _G),
    (300, lambda h: h - 240, _B, _G, _R),
    (360, lambda h: 360 - h, _R, _G, _B),
)


class ColorScheme(IntEnum):
    """Available colour schemes, in the order they are cycled."""

    GRADATION = 0
    REVERSE = 1
    BLUE = 2
    MONOCHROME = 3
    RAINBOW = 4

    @property
    def label(self) -> str:
        return self.name.lower()

    def next(self) -> "ColorScheme":
        """Return the scheme that follows, wrapping round after the last."""
        members = list(ColorScheme)
        return members[(members.index(self) + 1) % len(members)]


def gradation_color(hue: float) -> int:
    """Return the 0xRRGGBB colour for a hue in degrees, 0 to 360."""
    if not 0 <= hue <= 360:
        raise ValueError(f"hue out of range: {hue!r}")
    for upper, ramp, high, low, varying in _SEGMENTS:
        if hue <= upper:
            break
    top = _VALUE
    bottom = top - ((_SATURATION / 255) * top)
    channels = [0, 0, 0]
    channels[high] = int(top)
    channels[low] = int(bottom)
    channels[varying] = int(ramp(hue) / 60.0 * (top - bottom) + bottom)
    red, green, blue = channels
    return (red << 16) + (green << 8) + blue


def pixel_color(scheme: ColorScheme, n: int, loop: int, change: int = 0) -> int:
    """Return the 32-bit pixel value for escape count ``n`` out of ``loop``.

    ``change`` shifts the rainbow scheme's hues.
    """
    if scheme == ColorScheme.GRADATION:
        return gradation_color(n * 360.0 / loop)
    if scheme == ColorScheme.REVERSE:
        return gradation_color((loop - n) * 360.0 / loop)
    if scheme == ColorScheme.BLUE:
        return gradation_color(((n + loop) // 2) * 360.0 / loop)
    if scheme == ColorScheme.MONOCHROME:
        return 0xFFFFFFFF if n % 2 else 0
    if scheme == ColorScheme.RAINBOW:
        value = n + change
        if value > loop:
            value -= loop
        return gradation_color(value * 360.0 / loop)
    return 0