"""Escape-time evaluation of the quadratic Mandelbrot recurrence."""

from __future__ import annotations

import math
from typing import Optional

from .complex_plane import ORIGIN, ComplexPoint
from .config import ConfigurationError

# |z|^2 threshold, i.e. escape radius 2
HORIZON = 4.0

LOG2 = math.log(2.0)


def smooth_escape(step: int, magnitude: float) -> float:
    """Continuous escape time for an orbit that left at ``step`` with ``|z| = magnitude``.

    ``ln(ln(|z|))`` is undefined for ``|z| <= 1``; those orbits get ``nan``
    instead of an exception and are coloured by the non-finite fallback.
    """

    log_magnitude = math.log(magnitude) if magnitude > 0.0 else -math.inf
    if not log_magnitude > 0.0:
        return math.nan
    nu = math.log(log_magnitude) / LOG2
    return step + 1 - nu


def escape_time(c: ComplexPoint, max_iter: int) -> Optional[float]:
    """Iterate ``z <- z^2 + c`` from ``z = 0`` for at most ``max_iter`` steps.

    Returns the smoothed escape time of the first step whose ``|z|^2``
    exceeds :data:`HORIZON`, or ``None`` when the orbit stays bounded.
    """

    if max_iter < 1:
        raise ConfigurationError(f"max_iter must be at least 1, got {max_iter}")

    z = ORIGIN
    for step in range(max_iter):
        z = z.square().add(c)
        magnitude_squared = z.magnitude_squared()
        if magnitude_squared > HORIZON:
            return smooth_escape(step, math.sqrt(magnitude_squared))
    return None
