import pytest

from fractol.color import ColorScheme, gradation_color, pixel_color


def _channels(color):
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def test_full_circle_matches_start():
    assert gradation_color(0) == gradation_color(360)


@pytest.mark.parametrize("hue, channel", [(0, 0), (120, 1), (240, 2)])
def test_primary_hues_have_full_channel(hue, channel):
    assert _channels(gradation_color(hue))[channel] == 255


@pytest.mark.parametrize("hue", [0, 30, 60, 61.5, 90, 150, 200, 270, 330, 359.9])
def test_colors_are_rgb(hue):
    color = gradation_color(hue)
    assert 0 <= color < 2**24
    assert max(_channels(color)) == 255


@pytest.mark.parametrize("hue", [-1, 361, float("nan")])
def test_hue_out_of_range(hue):
    with pytest.raises(ValueError):
        gradation_color(hue)


def test_monochrome_alternates():
    assert pixel_color(ColorScheme.MONOCHROME, 1, 10) == 0xFFFFFFFF
    assert pixel_color(ColorScheme.MONOCHROME, 2, 10) == 0


def test_gradation_at_loop_is_full_circle():
    assert pixel_color(ColorScheme.GRADATION, 10, 10) == gradation_color(360)


def test_reverse_mirrors_gradation():
    assert pixel_color(ColorScheme.REVERSE, 3, 10) == pixel_color(ColorScheme.GRADATION, 7, 10)


def test_blue_halves_towards_loop():
    assert pixel_color(ColorScheme.BLUE, 2, 10) == pixel_color(ColorScheme.BLUE, 3, 10)
    assert pixel_color(ColorScheme.BLUE, 1, 10) == pixel_color(ColorScheme.GRADATION, 5, 10)


def test_rainbow_shifts_and_wraps():
    assert pixel_color(ColorScheme.RAINBOW, 4, 10, 0) == pixel_color(ColorScheme.GRADATION, 4, 10)
    assert pixel_color(ColorScheme.RAINBOW, 8, 10, 5) == pixel_color(ColorScheme.GRADATION, 3, 10)


def test_scheme_cycle():
    assert ColorScheme.RAINBOW.next() is ColorScheme.GRADATION
    scheme = ColorScheme.BLUE
    for _ in range(len(ColorScheme)):
        scheme = scheme.next()
    assert scheme is ColorScheme.BLUE


def test_labels():
    assert ColorScheme.RAINBOW.next().label == "gradation"
    assert ColorScheme.BLUE.next().label == "monochrome"
    assert ColorScheme.GRADATION.next().label == "reverse"