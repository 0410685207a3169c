"""Turning a fractal view into rows of pixel values."""

from __future__ import annotations

from typing import Iterator

from .fractal import Fractal


def iter_pixels(fractal: Fractal) -> Iterator[tuple[int, int, int]]:
    """Yield ``(x, y, color)`` for every pixel, row by row from the top."""
    for y in range(fractal.screen):
        for x in range(fractal.screen):
            yield x, y, fractal.color_of(fractal.escape_count(x, y))


def render(fractal: Fractal) -> list[list[int]]:
    """Return the whole image as rows of 0xRRGGBB values, indexed [y][x]."""
    rows: list[list[int]] = [[] for _ in range(fractal.screen)]
    for _x, y, color in iter_pixels(fractal):
        rows[y].append(color)
    return rows