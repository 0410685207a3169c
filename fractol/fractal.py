"""Fractal view state, escape-time iteration and zooming."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .color import ColorScheme, pixel_color
from .settings import (
    DEFAULT_RESOLUTION,
    DIVERGE,
    LOOP,
    LOOP_MIN,
    MIN,
    SCREEN,
    SIZE,
    ZOOM_SPEED,
    C_IMAG,
    C_REAL,
    FractalType,
    Options,
)


@dataclass
class Fractal:
    """The visible region of the complex plane and how it is drawn."""

    fractal_type: FractalType
    x_min: float = MIN
    y_min: float = MIN
    size: float = SIZE
    c_real: float = C_REAL
    c_imag: float = C_IMAG
    screen: int = SCREEN
    resolution: int = DEFAULT_RESOLUTION
    color: ColorScheme = ColorScheme.GRADATION
    loop: int = LOOP
    change: int = 0

    @classmethod
    def from_options(cls, options: Options, screen: int) -> "Fractal":
        """Build the initial view for a window of ``screen`` pixels."""
        fractal = cls(
            fractal_type=options.fractal_type,
            c_real=options.c_real,
            c_imag=options.c_imag,
            screen=screen,
            resolution=options.resolution,
        )
        fractal.loop = fractal.calc_loop()
        return fractal

    def calc_loop(self) -> int:
        """Iteration limit suited to the current magnification."""
        if self.size <= 0:
            return LOOP_MIN
        ratio = self.screen / self.size / self.resolution
        if ratio <= 1:
            return LOOP_MIN
        return max(LOOP_MIN, int(50.0 * math.log10(ratio) ** 1.25))

    def _plane_point(self, x: float, y: float) -> tuple[float, float]:
        return (
            self.x_min + x / self.screen * self.size,
            self.y_min + (1 - y / self.screen) * self.size,
        )

    def escape_count(self, x: float, y: float) -> int:
        """Iteration at which pixel (x, y) escapes, or 0 if it stays bounded."""
        if self.fractal_type is FractalType.JULIA:
            return julia_escape(x, y, self)
        if self.fractal_type is FractalType.MANDELBROT:
            return mandelbrot_escape(x, y, self)
        return 0

    def zoom(self, x: int, y: int, direction: int) -> None:
        """Zoom in (direction 1) or out (-1), keeping pixel (x, y) in place."""
        old_px_size = self.size / self.screen
        self.size = self.size - ZOOM_SPEED * (direction * old_px_size)
        shift = old_px_size - self.size / self.screen
        self.x_min += x * shift
        self.y_min += (self.screen - y) * shift

    def color_of(self, n: int) -> int:
        """Pixel value for escape count ``n``; points in the set are black."""
        if not n:
            return 0
        return pixel_color(self.color, n, self.loop, self.change)

    def describe(self) -> str:
        """One-line summary of the view."""
        return (
            f"x: [{self.x_min:f}, {self.x_min + self.size:f}], "
            f"y: [{self.y_min:f}, {self.y_min + self.size:f}], "
            f"loop: {self.loop}, color: {self.color.label}"
        )


def julia_escape(x: float, y: float, fractal: Fractal) -> int:
    """Escape count of pixel (x, y) for the Julia set of the fractal's constant."""
    zx, zy = fractal._plane_point(x, y)
    for n in range(1, fractal.loop + 1):
        if zx * zx + zy * zy > DIVERGE:
            return n
        zx, zy = zx * zx - zy * zy + fractal.c_real, 2 * zx * zy + fractal.c_imag
    return 0


def mandelbrot_escape(x: float, y: float, fractal: Fractal) -> int:
    """Escape count of pixel (x, y) for the Mandelbrot set."""
    cx, cy = fractal._plane_point(x, y)
    zx = zy = 0.0
    for n in range(1, fractal.loop + 1):
        if zx * zx + zy * zy > DIVERGE:
            return n
        zx, zy = zx * zx - zy * zy + cx, 2 * zx * zy + cy
    return 0