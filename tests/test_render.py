from fractol.color import ColorScheme
from fractol.fractal import Fractal
from fractol.render import iter_pixels, render
from fractol.settings import FractalType, Options


def _fractal(kind=FractalType.MANDELBROT, screen=8):
    return Fractal.from_options(Options(fractal_type=kind), screen)


def test_render_has_square_shape():
    frame = render(_fractal(screen=8))
    assert len(frame) == 8
    assert all(len(row) == 8 for row in frame)


def test_render_matches_escape_counts():
    fractal = _fractal(screen=10)
    frame = render(fractal)
    for y in range(10):
        for x in range(10):
            assert frame[y][x] == fractal.color_of(fractal.escape_count(x, y))


def test_centre_of_mandelbrot_is_black():
    fractal = _fractal(screen=8)
    frame = render(fractal)
    # Pixel (4, 4) maps to the origin, which lies in the set.
    assert frame[4][4] == 0


def test_corner_of_mandelbrot_escapes():
    fractal = _fractal(screen=8)
    assert fractal.escape_count(0, 0) > 0
    assert render(fractal)[0][0] == fractal.color_of(fractal.escape_count(0, 0))


def test_iter_pixels_is_row_major_and_complete():
    fractal = _fractal(FractalType.JULIA, screen=6)
    coords = [(x, y) for x, y, _ in iter_pixels(fractal)]
    assert coords == [(x, y) for y in range(6) for x in range(6)]


def test_iter_pixels_agrees_with_render():
    fractal = _fractal(FractalType.JULIA, screen=7)
    fractal.color = ColorScheme.MONOCHROME
    frame = render(fractal)
    for x, y, color in iter_pixels(fractal):
        assert frame[y][x] == color