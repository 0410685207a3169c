"""Interactive window that shows a fractal and reacts to keys and mouse."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence, TextIO

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .color import ColorScheme  # noqa: E402
from .fractal import Fractal  # noqa: E402
from .render import render  # noqa: E402
from .settings import (  # noqa: E402
    CHANGE_FREQ,
    IGNORE_FREQ,
    LOOP_MIN,
    MOUSE_DOWN,
    MOUSE_UP,
    Options,
    UsageError,
    parse_args,
)

CLEAR_SCREEN = "\033[1J"
_INT_MAX = 2**31 - 1

KEY_EXIT = pygame.K_ESCAPE
KEY_RESET = pygame.K_r
KEY_INFO = pygame.K_i
KEY_COLOR = pygame.K_c
KEY_MORE_LOOPS = pygame.K_UP
KEY_FEWER_LOOPS = pygame.K_DOWN


def _frame_bytes(frame: list[list[int]]) -> bytes:
    """Pack rows of 0xRRGGBB values into packed RGB bytes."""
    return b"".join(
        (color & 0xFFFFFF).to_bytes(3, "big") for row in frame for color in row
    )


class Viewer:
    """Holds the view state and handles input events for one window."""

    def __init__(
        self,
        options: Options,
        screen: int,
        surface: Optional[pygame.Surface] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.options = options
        self.screen = screen
        self.surface = surface
        self.out = out if out is not None else sys.stdout
        self.fractal = Fractal.from_options(options, screen)
        self.frame: Optional[list[list[int]]] = None
        self.running = True
        self._ignore_count = 0
        self._motion_count = 0

    def _say(self, text: str) -> None:
        print(text, file=self.out)

    def _ignored(self) -> bool:
        """Throttle costly input when the iteration limit is high."""
        if self._ignore_count >= _INT_MAX - 1:
            self._ignore_count = 0
        else:
            self._ignore_count += 1
        loop = self.fractal.loop
        return loop > 100 and self._ignore_count % (loop // IGNORE_FREQ) != 0

    def key_release(self, key: int) -> None:
        """Handle a released key: quit, info, colour cycle or reset."""
        fractal = self.fractal
        if key == KEY_EXIT:
            self.running = False
            return
        if key == KEY_INFO:
            self._say(fractal.describe())
            return
        if key == KEY_COLOR:
            fractal.color = ColorScheme(fractal.color).next()
        elif key == KEY_RESET:
            self.fractal = Fractal.from_options(self.options, self.screen)
        self.redraw()

    def key_press(self, key: int) -> None:
        """Handle a pressed (or repeating) key: raise or lower the loop limit."""
        if self._ignored():
            return
        fractal = self.fractal
        if key not in (KEY_MORE_LOOPS, KEY_FEWER_LOOPS):
            return
        if key == KEY_MORE_LOOPS:
            fractal.loop += 4
            self._say("increasing loops ...")
        else:
            if fractal.loop == LOOP_MIN:
                return
            fractal.loop = max(LOOP_MIN, fractal.loop - 4)
            self._say("decreasing loops ...")
        self.redraw()
        self._say(CLEAR_SCREEN)

    def mouse_button(self, button: int, x: int, y: int) -> None:
        """Zoom around pixel (x, y) with the wheel, then redraw."""
        if self._ignored():
            return
        fractal = self.fractal
        if button == MOUSE_UP:
            fractal.zoom(x, y, 1)
            self._say("zooming in ...")
            fractal.loop = max(fractal.loop, fractal.calc_loop())
        elif button == MOUSE_DOWN:
            fractal.zoom(x, y, -1)
            self._say("zooming out ...")
            fractal.loop = min(fractal.loop, fractal.calc_loop())
        self.redraw()
        self._say(CLEAR_SCREEN)

    def mouse_motion(self, x: int, y: int) -> None:
        """Shift the rainbow colours as the pointer moves."""
        fractal = self.fractal
        if fractal.color != ColorScheme.RAINBOW:
            return
        if self._motion_count >= _INT_MAX - 1:
            self._motion_count = 0
        else:
            self._motion_count += 1
        if self._motion_count % CHANGE_FREQ:
            return
        fractal.change += 1
        if fractal.change >= fractal.loop:
            fractal.change = 0
        self.redraw()

    def redraw(self) -> list[list[int]]:
        """Render the current view, show it if there is a surface, return it."""
        frame = render(self.fractal)
        self.frame = frame
        if self.surface is not None:
            size = (self.fractal.screen, self.fractal.screen)
            image = pygame.image.frombuffer(_frame_bytes(frame), size, "RGB")
            self.surface.blit(image, (0, 0))
            if pygame.display.get_init() and self.surface is pygame.display.get_surface():
                pygame.display.flip()
        return frame

    def _dispatch(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYUP:
            self.key_release(event.key)
        elif event.type == pygame.KEYDOWN:
            self.key_press(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.mouse_button(event.button, *event.pos)
        elif event.type == pygame.MOUSEMOTION:
            self.mouse_motion(*event.pos)
        elif event.type == pygame.WINDOWFOCUSGAINED:
            self.redraw()

    def run(self) -> None:
        """Open the window if needed and process events until asked to stop."""
        if self.surface is None:
            pygame.init()
            self.surface = pygame.display.set_mode((self.screen, self.screen))
            pygame.display.set_caption(self.options.fractal_type.value)
        pygame.key.set_repeat(200, 30)
        self.redraw()
        while self.running:
            self._dispatch(pygame.event.wait())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line and run the viewer; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_args(args)
    except UsageError as err:
        print(err.text, end="")
        return 0
    pygame.init()
    try:
        info = pygame.display.Info()
        screen = options.screen_size(info.current_w, info.current_h)
        try:
            surface = pygame.display.set_mode((screen, screen))
        except pygame.error as err:
            print(f"fractol: window: {err}", file=sys.stderr)
            return 1
        pygame.display.set_caption(options.fractal_type.value)
        Viewer(options, screen, surface=surface).run()
    finally:
        pygame.quit()
    return 0