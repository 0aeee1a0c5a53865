"""Interactive state of the Julia set explorer: menu, zoom, panning and keys."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Sequence

from pixelplay.fractal_params import (
    ColorMode,
    FieldCheck,
    JuliaParameters,
    background_path,
    kernel_inputs,
    parse_parameters,
)

SPEED = 500
DEFAULT_INTERVAL_MS = 5
TITLE = "Julia"
ZOOM_TITLE = "Приближение"
PHOTO_SIZE = (3840, 2160)
PHOTO_PATH = "photo.jpg"


class Key(IntEnum):
    """Key codes the explorer reacts to."""

    ESCAPE = 0x01000000
    RETURN = 0x01000004
    LEFT = 0x01000012
    UP = 0x01000013
    RIGHT = 0x01000014
    DOWN = 0x01000015
    SPACE = 0x20
    PLUS = 0x2B
    MINUS = 0x2D
    DIGIT_0 = 0x30
    DIGIT_9 = 0x39
    S = 0x53


def _format_number(value: float) -> str:
    return f"{value:g}"


class JuliaExplorer:
    """Everything the explorer window keeps between frames.

    The explorer starts in the menu, where the six parameter fields are
    edited; starting leaves the menu and the view begins to zoom in.
    """

    def __init__(self, interval_ms: int = DEFAULT_INTERVAL_MS) -> None:
        if interval_ms <= 0:
            raise ValueError("timer interval must be positive")
        self.interval_ms = interval_ms
        self.zoom_title_ticks = 0
        defaults = JuliaParameters()
        self.re = defaults.re
        self.im = defaults.im
        self.size = defaults.size
        self.x0 = defaults.x0
        self.y0 = defaults.y0
        self.max_iterations = defaults.max_iterations
        self.mouse = (0, 0)
        self.typed = ""
        self._title = TITLE
        self._set_up()
        self.tick()

    def _set_up(self) -> None:
        self.fields = [
            _format_number(value)
            for value in (self.re, self.im, self.max_iterations, self.size, self.x0, self.y0)
        ]
        self.menu = True
        self.mode = ColorMode.COLORFUL
        self.pause = False

    @property
    def params(self) -> JuliaParameters:
        return JuliaParameters(
            re=self.re,
            im=self.im,
            max_iterations=self.max_iterations,
            size=self.size,
            x0=self.x0,
            y0=self.y0,
        )

    @property
    def background(self) -> Path:
        """Picture shown behind the menu for the current colour mode."""
        return background_path(self.mode)

    def start(self, texts: Sequence[str] | None = None) -> list[FieldCheck]:
        """Leave the menu, taking the fields' values if all of them are valid."""
        if texts is not None:
            self.fields = list(texts)
        checks, params = parse_parameters(self.fields)
        if params is not None:
            self.re = params.re
            self.im = params.im
            self.max_iterations = params.max_iterations
            self.size = params.size
            self.x0 = params.x0
            self.y0 = params.y0
        self.pause = False
        self.menu = False
        return checks

    def select_mode(self, mode: ColorMode) -> None:
        self.mode = mode

    def tick(self) -> None:
        """Advance one timer step: update the title and zoom in when running."""
        if self.zoom_title_ticks > 1:
            self._title = f"{ZOOM_TITLE} {_format_number(self.size)}"
            self.zoom_title_ticks -= 1
        else:
            self._title = TITLE
            self.zoom_title_ticks = 0
        if not self.menu and not self.pause:
            self.size += SPEED * self.interval_ms // 1000

    def title(self) -> str:
        return self._title

    def _pan_step(self) -> float:
        return SPEED * 10 / self.size * self.interval_ms / 1000

    def handle_key(self, key: int, text: str = "") -> bool:
        """React to a key press; return True when a snapshot should be taken."""
        photo = False
        if key == Key.RETURN:
            if self.menu:
                self.start()
            else:
                try:
                    value = float(self.typed)
                except ValueError:
                    value = None
                if value is not None and value > 0:
                    self.size = value
                self.typed = ""
        elif key == Key.SPACE:
            self.pause = not self.pause
        elif key == Key.RIGHT:
            self.x0 += self._pan_step()
        elif key == Key.LEFT:
            self.x0 -= self._pan_step()
        elif key == Key.UP:
            self.y0 -= self._pan_step()
        elif key == Key.DOWN:
            self.y0 += self._pan_step()
        elif key == Key.PLUS:
            self.size += self.size * self.interval_ms / 1000
        elif key == Key.MINUS:
            self.size -= self.size * self.interval_ms / 1000
        elif key == Key.ESCAPE:
            if not self.menu:
                self.pause = True
                self.menu = True
                self._set_up()
        elif key == Key.S:
            photo = not self.menu

        if not self.menu and Key.DIGIT_0 <= key <= Key.DIGIT_9:
            self.typed += text
        return photo

    def press(self, x: int, y: int) -> None:
        self.mouse = (x, y)

    def drag(self, x: int, y: int) -> None:
        """Pan the view by the distance the pointer moved since the last event."""
        mx, my = self.mouse
        self.x0 -= (x - mx) / self.size
        self.y0 += (-y + my) / self.size
        self.mouse = (x, y)

    def wheel(self, delta: int) -> None:
        """Zoom in for a positive wheel delta, out otherwise."""
        step = 10 * self.size * self.interval_ms / 1000
        if delta > 0:
            self.size += step
        else:
            self.size -= step

    def inputs(self, width: float, height: float) -> tuple[float, ...]:
        """The kernel inputs for the current view at the given image size."""
        return kernel_inputs(self.params, self.mode, width, height)