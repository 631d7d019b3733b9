"""Complex-plane values and the screen-to-plane mapping."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .config import ConfigurationError

X_INTERVAL = (-1.5, 1.5)
Y_INTERVAL = (-1.5, 1.5)


@dataclass(frozen=True)
class ComplexPoint:
    """A point ``re + im*i`` in the complex plane."""

    re: float
    im: float

    def add(self, other: ComplexPoint) -> ComplexPoint:
        return ComplexPoint(self.re + other.re, self.im + other.im)

    def square(self) -> ComplexPoint:
        return ComplexPoint(self.re * self.re - self.im * self.im, 2.0 * self.re * self.im)

    def magnitude_squared(self) -> float:
        return self.re * self.re + self.im * self.im

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())


ORIGIN = ComplexPoint(0.0, 0.0)


def map_screen_to_complex(x: int, y: int, width: int, height: int) -> ComplexPoint:
    """Map pixel ``(x, y)`` of a ``width`` x ``height`` grid onto the sampled window.

    Pixel ``(0, 0)`` lands on the lower corner of both intervals; the upper
    bound is only approached as the grid grows.
    """

    if width < 1 or height < 1:
        raise ConfigurationError(f"grid must be at least 1x1, got {width}x{height}")

    x_min, x_max = X_INTERVAL
    y_min, y_max = Y_INTERVAL
    re = (x / width) * (x_max - x_min) + x_min
    im = (y / height) * (y_max - y_min) + y_min
    return ComplexPoint(re, im)
