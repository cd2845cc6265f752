"""Point and axis-aligned box value types."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


def to_f32(value: float) -> float:
    """Round a number to the nearest IEEE-754 single-precision value.

    Magnitudes beyond the single-precision range become infinities, including
    integers too large to convert to a Python float.
    """
    try:
        value = float(value)
    except OverflowError:
        value = math.inf if value > 0 else -math.inf
    with np.errstate(over="ignore"):
        return float(np.float32(value))


def format_coord(value: float) -> str:
    """Format a coordinate the way a C++ output stream prints a float."""
    return format(value, "g")


@dataclass(frozen=True, slots=True)
class Point:
    """Immutable single-precision 2D point."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", to_f32(self.x))
        object.__setattr__(self, "y", to_f32(self.y))

    def __str__(self) -> str:
        return f"Point({format_coord(self.x)}, {format_coord(self.y)})"


@dataclass(frozen=True, slots=True)
class Box:
    """Axis-aligned box stored as a top-left and a bottom-right corner.

    ``width`` and ``height`` add the two corners together, so ``bottom_right``
    behaves as an offset from ``top_left`` rather than an absolute position.
    """

    top_left: Point
    bottom_right: Point

    @property
    def width(self) -> float:
        return to_f32(self.top_left.x + self.bottom_right.x)

    @property
    def height(self) -> float:
        return to_f32(self.top_left.y + self.bottom_right.y)

    @property
    def top_right(self) -> Point:
        return Point(self.width, self.top_left.y)

    @property
    def bottom_left(self) -> Point:
        return Point(self.top_left.x, self.height)

    def __str__(self) -> str:
        return f"Box({self.top_left}, {self.bottom_right})"
