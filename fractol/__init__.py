"""Interactive Julia and Mandelbrot fractal viewer."""

__version__ = "0.1.0"