# fractol

An interactive viewer for the Julia and Mandelbrot sets. Scroll the mouse
wheel to zoom around any point of the complex plane. The iteration limit
follows the zoom level, and the colour scheme can be switched while the
window is open.

## Installation

```
pip install .
```

The window is drawn with pygame.

## Usage

```
fractol fractal-name <val real> <val imag> [-s size] [-r type]
```

Available fractals:

- `Julia`
- `Mandelbrot`

Options, with their defaults in brackets:

- `-s <size>`: window side in pixels, a whole number above zero [600]. It is
  capped at the smaller dimension of the display.
- `-r high|mid|low`: resolution, which sets how quickly the iteration limit
  grows as you zoom in; `high` gives the most iterations [mid].

Up to two numbers after the fractal name set the real and imaginary parts of
the Julia constant `c` (default `-0.3 - 0.63i`). If only one number is given,
it sets the real part. An argument that is not a plain decimal number is not
read as part of the constant. If `-s` or `-r` appears more than once, the
first value is used. Other arguments are ignored.

```
fractol Julia
fractol Julia 0.285 0.01 -s 800
fractol Mandelbrot -r high
```

If the fractal name is unknown, or if `-s` or `-r` has a missing or
malformed value, the usage text is printed and the program exits.

## Controls

| Input             | Action                                             |
|-------------------|----------------------------------------------------|
| Mouse wheel up    | Zoom in around the cursor                          |
| Mouse wheel down  | Zoom out around the cursor                         |
| Up arrow          | Raise the iteration limit by 4                     |
| Down arrow        | Lower the iteration limit by 4 (minimum 15)        |
| `c`               | Switch to the next colour scheme                   |
| `r`               | Reset the view, the colour scheme and the limit    |
| `i`               | Print the current bounds, limit and colour scheme  |
| Esc               | Quit                                               |

Closing the window also quits. The colour schemes are gradation, reverse,
blue, monochrome and rainbow, cycled in that order. In rainbow mode, every
fifth mouse movement shifts the palette by one step. Points that never
escape are drawn black.

When the iteration limit is above 100, some wheel and arrow-key events are
skipped, so that a fast scroll does not queue up many slow redraws.

## Using the modules

The drawing code works without a window:

```python
from fractol.settings import parse_args
from fractol.fractal import Fractal
from fractol.render import render

options = parse_args(["Mandelbrot", "-r", "low"])
view = Fractal.from_options(options, 200)
view.zoom(100, 100, 1)
rows = render(view)   # rows[y][x] is a 0xRRGGBB value
print(view.describe())
```

- `fractol.settings`: `parse_args`, `Options`, `FractalType`, `UsageError`
  and `usage_text`.
- `fractol.fractal`: the `Fractal` view (`escape_count`, `zoom`,
  `calc_loop`, `color_of`, `describe`) and the functions `julia_escape` and
  `mandelbrot_escape`.
- `fractol.color`: `ColorScheme`, `gradation_color` and `pixel_color`.
- `fractol.render`: `render` and `iter_pixels`.
- `fractol.app`: the `Viewer` window and `main`, the `fractol` command.
- `fractol.libft`: small helpers for characters (`chars`), number parsing
  (`numbers`), strings (`strings`), byte buffers (`memory`) and a linked
  list (`lists`).

## Running the tests

```
pip install .[test]
pytest
```