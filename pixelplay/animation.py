"""Frame state for the 2D zooming Julia view and the noise animation."""

from __future__ import annotations

import random

ZOOM_FACTOR = 1.004
DEFAULT_SIZE = 250.0
TIME_STEP = 0.05
NOISE_COUNT = 100
NOISE_AMPLITUDE = 0.07


class ZoomView:
    """A Julia view that zooms in a little on every frame unless paused."""

    def __init__(self, size: float = DEFAULT_SIZE, x0: float = 0.0, y0: float = 0.0) -> None:
        self.size = float(size)
        self.x0 = float(x0)
        self.y0 = float(y0)
        self.paused = False
        self.frame = 0

    def advance(self) -> None:
        """Step one frame, zooming in when not paused."""
        if not self.paused:
            self.size *= ZOOM_FACTOR
        self.frame += 1

    def uniforms(self, width: int, height: int) -> dict[str, float]:
        """The values handed to the compute shader, keyed by uniform name."""
        return {
            "size": self.size,
            "width": float(width),
            "height": float(height),
            "x0": self.x0,
            "y0": self.y0,
        }


class NoiseAnimation:
    """A time-driven animation fed a fresh array of small random offsets each frame."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.time = 0.0
        self.frame = 0
        self.random_array: tuple[float, ...] = ()

    def advance(self) -> None:
        """Step time forward and draw new random offsets."""
        self.time += TIME_STEP
        self.random_array = tuple(
            self.rng.uniform(-NOISE_AMPLITUDE, NOISE_AMPLITUDE) for _ in range(NOISE_COUNT)
        )
        self.frame += 1

    def uniforms(self) -> dict[str, object]:
        """The values handed to the compute shader, keyed by uniform name."""
        return {"time": self.time, "random_array": self.random_array}