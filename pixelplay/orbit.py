"""Camera state for the ray-marched 3D fractal views.

The view is turned by dragging with the mouse, moved along its axis with
W and S, and zooms in a little on every frame unless paused.
"""

from __future__ import annotations

import math

FRACTAL3D_PI = 3.14159
LENS_PI = 3.1415926535
ZOOM_FACTOR = 1.005
Z_STEP = 0.005
TIME_STEP = 0.01
START_TIME = -10.0
WORKGROUP_SIZE = 16
CONSTANT_LENGTH = 4
CAMERA_POINT = (0.0, 0.0, -2.0)
LENS_POINT = (0.0, 0.0, -1.6)


class OrbitView:
    """Orientation, zoom and animation state of one 3D fractal view."""

    def __init__(
        self,
        angle_y: float = LENS_PI / 2,
        z0: float = -2.5,
        size: float = 200.0,
        animate_constant: bool = False,
    ) -> None:
        self.size = float(size)
        self.angle_x = 0.0
        self.angle_y = float(angle_y)
        self.z0 = float(z0)
        self.mouse = (0.0, 0.0)
        self.pressed = False
        self.paused = False
        self.animate_constant = animate_constant
        self.time = START_TIME
        self.constant = [0.0] * CONSTANT_LENGTH
        self.frame = 0
        self.camera: tuple[float, float, float] | None = None
        self._pi = LENS_PI

    @classmethod
    def fractal3d(cls) -> OrbitView:
        """The view whose fractal constant circles the origin over time."""
        view = cls(angle_y=FRACTAL3D_PI, z0=-2.0, size=200.0, animate_constant=True)
        view._pi = FRACTAL3D_PI
        return view

    @classmethod
    def lens(cls) -> OrbitView:
        """The view rendered through a lens placed in front of the camera."""
        view = cls(angle_y=LENS_PI / 2, z0=-2.5, size=200.0, animate_constant=False)
        view.camera = LENS_POINT
        return view

    def press(self, x: float, y: float) -> None:
        """Start a drag at the given pointer position."""
        self.pressed = True
        self.mouse = (float(x), float(y))

    def move(self, x: float, y: float, width: int, height: int) -> None:
        """Turn the view by the pointer's movement while a button is held."""
        if not self.pressed:
            return
        half_w = width // 2
        half_h = height // 2
        mouse_x, mouse_y = self.mouse
        dx = float(x - half_w)
        dy = float(-y + half_h)
        self.angle_x -= 2 * (mouse_x - half_w - dx) / width * self._pi / 3
        self.angle_y += 2 * (half_h - mouse_y - dy) / height * self._pi / 3
        self.mouse = (float(x), float(y))

    def release(self) -> None:
        self.pressed = False

    def key(self, key: str) -> bool:
        """Move along the view axis for W or S; report whether the key was used."""
        name = key.lower()
        if name == "w":
            self.z0 += Z_STEP
        elif name == "s":
            self.z0 -= Z_STEP
        else:
            return False
        return True

    def advance(self) -> None:
        """Step one frame: zoom in and, if animated, move the fractal constant."""
        if not self.paused:
            self.size *= ZOOM_FACTOR
        if self.animate_constant:
            self.time += TIME_STEP
            self.constant[0] = math.sin(self.time)
            self.constant[1] = math.cos(self.time)
        self.frame += 1

    def uniforms(self, width: int, height: int) -> dict[str, object]:
        """The values handed to the compute shader, keyed by uniform name."""
        values: dict[str, object] = {
            "size": self.size,
            "width": float(width),
            "height": float(height),
            "angel_x": self.angle_x,
            "angel_y": self.angle_y,
            "z0": self.z0,
        }
        if self.animate_constant:
            values["arr"] = tuple(self.constant)
        if self.camera is not None:
            values["camera"] = self.camera
        return values


def dispatch_groups(width: int, height: int) -> tuple[int, int, int]:
    """Compute work groups of 16x16 covering a width x height image."""
    return (width // WORKGROUP_SIZE + 1, height // WORKGROUP_SIZE + 1, 1)