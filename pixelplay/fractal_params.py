"""Parameters, palette and kernel inputs for the Julia set explorer."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Sequence

VALID_COLOR = (0, 169, 28)
INVALID_COLOR = (235, 0, 0)

PALETTE = (
    (66, 30, 15),
    (25, 7, 26),
    (9, 1, 47),
    (4, 4, 73),
    (0, 7, 100),
    (12, 44, 138),
    (24, 82, 177),
    (57, 125, 209),
    (134, 181, 229),
    (211, 236, 248),
    (241, 233, 191),
    (248, 201, 95),
    (255, 170, 0),
    (204, 128, 0),
    (153, 87, 0),
    (106, 52, 3),
)
CHANNELS = 4
INPUT_COUNT = 10
FIELD_COUNT = 6
COORDINATE_LIMIT = 10000

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*")


class ColorMode(Enum):
    """How the fractal is coloured; the value is what the kernel receives."""

    COLORFUL = 0
    BLACK_WHITE = 1
    SMOOTH = 2

    @property
    def file_stem(self) -> str:
        return {
            ColorMode.COLORFUL: "colorfull",
            ColorMode.BLACK_WHITE: "black_white",
            ColorMode.SMOOTH: "smooth",
        }[self]

    @property
    def label_color(self) -> str:
        """Text colour of the menu labels over this mode's background."""
        return "black" if self is ColorMode.SMOOTH else "white"


@dataclass(frozen=True)
class JuliaParameters:
    """The constant c = re + i*im and the view onto the plane."""

    re: float = 0.3
    im: float = -0.01
    max_iterations: float = 1000.0
    size: float = 250.0
    x0: float = 0.0
    y0: float = 0.0


@dataclass(frozen=True)
class FieldCheck:
    """The outcome of reading one menu field."""

    text: str
    value: float | None
    valid: bool

    @property
    def color(self) -> tuple[int, int, int]:
        """Colour the field's text is shown in."""
        return VALID_COLOR if self.valid else INVALID_COLOR


def _to_float(text: str) -> float | None:
    match = _NUMBER.fullmatch(text)
    return float(match.group(1)) if match else None


def parse_parameters(
    texts: Sequence[str],
) -> tuple[list[FieldCheck], JuliaParameters | None]:
    """Read the six menu fields: re, im, iterations, zoom, x and y.

    Returns the check of every field and, when all are valid, the parameters
    they describe; otherwise None in their place.
    """
    if len(texts) != FIELD_COUNT:
        raise ValueError(f"expected {FIELD_COUNT} fields, got {len(texts)}")
    values = [_to_float(text) for text in texts]
    a, b, c, d, e, f = values
    iterations = c if c is not None else 0.0

    verdicts = [
        a is not None and -2 <= a <= 2,
        b is not None and -2 <= b <= 2,
        c is not None and c > 0,
        d is not None and d > 0,
        # The lower bound of the x field is checked against the iteration count.
        e is not None and e < COORDINATE_LIMIT and iterations > -COORDINATE_LIMIT,
        f is not None and -COORDINATE_LIMIT < f < COORDINATE_LIMIT,
    ]
    checks = [
        FieldCheck(text, value, ok) for text, value, ok in zip(texts, values, verdicts)
    ]
    if not all(verdicts):
        return checks, None
    return checks, JuliaParameters(re=a, im=b, max_iterations=c, size=d, x0=e, y0=f)


def palette_bytes() -> bytes:
    """The sixteen palette colours as RGBA bytes, alpha left at zero."""
    return b"".join(bytes((r, g, b, 0)) for r, g, b in PALETTE)


def kernel_source_path(mode: ColorMode) -> Path:
    """Path of the kernel source used for a colour mode."""
    return Path("source") / f"GPU_{mode.file_stem}.cl"


def background_path(mode: ColorMode) -> Path:
    """Path of the menu background picture for a colour mode."""
    return Path("source") / "images" / f"{mode.file_stem}_img.png"


def kernel_inputs(
    params: JuliaParameters, mode: ColorMode, width: float, height: float
) -> tuple[float, ...]:
    """The ten numbers handed to the kernel, in the kernel's order."""
    return (
        float(params.re),
        float(params.im),
        float(params.x0),
        float(params.y0),
        float(params.size),
        float(params.max_iterations),
        float(width),
        float(height),
        float(mode.value),
        0.0,
    )


def work_sizes(
    width: int, height: int, local_size: int
) -> tuple[tuple[int, int], tuple[int, int]]:
    """Global and local work sizes covering a width x height image.

    Rows are split into groups of local_size items; the global width is
    rounded up to a whole number of groups.
    """
    if local_size <= 0:
        raise ValueError("local work size must be positive")
    if width < 0 or height < 0:
        raise ValueError("image size must not be negative")
    global_width = (width + local_size - 1) // local_size * local_size
    return (global_width, height), (local_size, 1)