"""Command-line options, defaults and usage text for the fractal viewer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence

from .libft.numbers import parse_float, parse_int

ZOOM_SPEED = 30
IGNORE_FREQ = 100
CHANGE_FREQ = 5

SCREEN = 600
LOOP = 100
LOOP_MIN = 15
DIVERGE = 9.0
MIN = -2.0
SIZE = 4.0
C_REAL = -0.3
C_IMAG = -0.63

MOUSE_UP = 4
MOUSE_DOWN = 5

_RESOLUTION_LEVELS = {"high": 0, "mid": 1, "low": 2}
DEFAULT_RESOLUTION = 10 * 2 ** _RESOLUTION_LEVELS["mid"]

INSTRUCTIONS = (
    "usage: fractol fractal-name <val real> <val imag> [-s size] [-r type]\n\n"
    "   available fractals: \n"
    "     Julia\n"
    "     Mandelbrot\n\n"
    "   basic user options, with defaults in [ ]:\n"
    "     -s (screen size) <size> size > 0 [600]\n"
    "     -r (resolution) high|mid|low [mid]\n"
)


class FractalType(Enum):
    """The fractals that can be drawn."""

    JULIA = "Julia"
    MANDELBROT = "Mandelbrot"


def usage_text(param: Optional[str] = None, option: Optional[str] = None) -> str:
    """Return the usage message, preceded by what was wrong if known."""
    lines = []
    if param is not None:
        lines.append(f"fractol: invalid type --  {param}\n")
    if option is not None:
        lines.append(f"fractol: illegal option: {option}\n")
    lines.append(INSTRUCTIONS)
    return "".join(lines)


class UsageError(Exception):
    """The command line could not be understood; carries the usage text."""

    def __init__(self, param: Optional[str] = None, option: Optional[str] = None) -> None:
        self.param = param
        self.option = option
        super().__init__(usage_text(param, option))

    @property
    def text(self) -> str:
        return usage_text(self.param, self.option)


@dataclass(frozen=True)
class Options:
    """Settings chosen on the command line."""

    fractal_type: FractalType
    c_real: float = C_REAL
    c_imag: float = C_IMAG
    screen: Optional[int] = None
    resolution: int = DEFAULT_RESOLUTION

    def screen_size(self, width: int, height: int) -> int:
        """Window side length: the requested size, limited by the display."""
        requested = self.screen if self.screen else SCREEN
        return int(min(requested, width, height))


def _parse_type(name: str) -> FractalType:
    for kind in FractalType:
        if name == kind.value:
            return kind
    raise UsageError(param=name)


def _try_float(values: Sequence[str], index: int) -> Optional[float]:
    if index >= len(values):
        return None
    try:
        return parse_float(values[index])
    except ValueError:
        return None


def _parse_constant(values: Sequence[str]) -> tuple[float, float, int]:
    """Read the optional complex constant; return (real, imag, args used)."""
    real = _try_float(values, 0)
    if real is None:
        return C_REAL, C_IMAG, 0
    imag = _try_float(values, 1)
    if imag is None:
        return real, C_IMAG, 1
    return real, imag, 2


def _parse_screen(value: str) -> int:
    try:
        size = parse_int(value)
    except ValueError:
        raise UsageError() from None
    if size <= 0:
        raise UsageError()
    return size


def _parse_resolution(value: str) -> int:
    level = _RESOLUTION_LEVELS.get(value)
    if level is None:
        raise UsageError()
    return 10 * 2**level


def parse_args(argv: Sequence[str]) -> Options:
    """Parse the arguments that follow the program name.

    The first argument names the fractal; up to two numbers after it give
    the complex constant. ``-s`` and ``-r`` take a value each; the first
    occurrence of each wins and unknown arguments are ignored.
    Raises UsageError when the command line is not valid.
    """
    args = list(argv)
    if not args:
        raise UsageError()
    fractal_type = _parse_type(args[0])
    c_real, c_imag, used = _parse_constant(args[1:3])
    screen: Optional[int] = None
    resolution: Optional[int] = None
    rest: Iterator[str] = iter(args[1 + used:])
    for arg in rest:
        if arg not in ("-s", "-r"):
            continue
        value = next(rest, None)
        if value is None:
            raise UsageError()
        if arg == "-s":
            if screen is None:
                screen = _parse_screen(value)
        elif resolution is None:
            resolution = _parse_resolution(value)
    return Options(
        fractal_type=fractal_type,
        c_real=c_real,
        c_imag=c_imag,
        screen=screen,
        resolution=DEFAULT_RESOLUTION if resolution is None else resolution,
    )