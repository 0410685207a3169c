import pytest

from fractol.color import ColorScheme, pixel_color
from fractol.fractal import Fractal, julia_escape, mandelbrot_escape
from fractol.settings import LOOP_MIN, MIN, SIZE, FractalType, Options


def _view(kind=FractalType.MANDELBROT, **options):
    return Fractal.from_options(Options(kind, **options), 600)


def _point(fractal, x, y):
    return (
        fractal.x_min + x / fractal.screen * fractal.size,
        fractal.y_min + (1 - y / fractal.screen) * fractal.size,
    )


def test_initial_view():
    fractal = _view()
    assert fractal.x_min == MIN
    assert fractal.y_min == MIN
    assert fractal.size == SIZE
    assert fractal.color is ColorScheme.GRADATION
    assert fractal.change == 0
    assert fractal.loop == fractal.calc_loop() >= LOOP_MIN


def test_tiny_screen_uses_minimum_loop():
    fractal = Fractal.from_options(Options(FractalType.JULIA), 10)
    assert fractal.loop == LOOP_MIN


def test_resolution_affects_loop():
    high = _view(resolution=10).calc_loop()
    low = _view(resolution=40).calc_loop()
    assert high >= low


def test_zoom_in_raises_loop():
    fractal = _view()
    before = fractal.calc_loop()
    for _ in range(10):
        fractal.zoom(300, 300, 1)
    assert fractal.calc_loop() > before


@pytest.mark.parametrize("direction", [1, -1])
def test_zoom_keeps_cursor_point(direction):
    fractal = _view()
    before = _point(fractal, 150, 420)
    old_size = fractal.size
    fractal.zoom(150, 420, direction)
    assert _point(fractal, 150, 420) == pytest.approx(before)
    if direction == 1:
        assert fractal.size < old_size
    else:
        assert fractal.size > old_size


def test_mandelbrot_origin_in_set_and_corner_escapes():
    fractal = _view()
    assert mandelbrot_escape(300, 300, fractal) == 0
    assert 1 < mandelbrot_escape(0, 0, fractal) <= fractal.loop


def test_mandelbrot_never_escapes_first_step():
    fractal = _view()
    counts = [fractal.escape_count(x, y) for x in range(0, 600, 50) for y in range(0, 600, 50)]
    assert 1 not in counts
    assert all(0 <= n <= fractal.loop for n in counts)


def test_julia_with_zero_constant():
    fractal = _view(FractalType.JULIA, c_real=0.0, c_imag=0.0)
    assert julia_escape(300, 300, fractal) == 0
    assert 0 < julia_escape(0, 0, fractal) <= fractal.loop


def test_escape_count_dispatches():
    julia = _view(FractalType.JULIA)
    mandel = _view()
    assert julia.escape_count(10, 20) == julia_escape(10, 20, julia)
    assert mandel.escape_count(10, 20) == mandelbrot_escape(10, 20, mandel)


def test_color_of():
    fractal = _view()
    fractal.color = ColorScheme.RAINBOW
    fractal.change = 3
    assert fractal.color_of(0) == 0
    assert fractal.color_of(5) == pixel_color(ColorScheme.RAINBOW, 5, fractal.loop, 3)


def test_describe():
    fractal = _view()
    text = fractal.describe()
    assert text.startswith("x: [-2.000000, 2.000000], y: [-2.000000, 2.000000]")
    assert text.endswith(f"loop: {fractal.loop}, color: gradation")