"""Fixed linear colouring of smoothed escape times."""

from __future__ import annotations

import math
from typing import NamedTuple, Optional

import numpy as np

CHANNEL_SCALES = (9.0, 7.0, 5.0)


class Color(NamedTuple):
    red: int
    green: int
    blue: int


INSIDE_COLOR = Color(0, 0, 0)


def _narrow(value: float) -> int:
    # Truncate toward zero, then wrap into 0..255 like a u8 cast that overflows.
    # Non-finite values have no integer part and become 0.
    if not math.isfinite(value):
        return 0
    return math.trunc(value) % 256


def color_for(time: Optional[float]) -> Color:
    """Colour for a smoothed escape time; ``None`` (bounded) is always black."""

    if time is None:
        return INSIDE_COLOR
    red_scale, green_scale, blue_scale = CHANNEL_SCALES
    return Color(
        _narrow(time * red_scale),
        _narrow(time * green_scale),
        _narrow(time * blue_scale),
    )


def colorize(smooth: np.ndarray, inside: np.ndarray) -> np.ndarray:
    """Apply :func:`color_for` to a whole grid.

    ``smooth`` holds escape times (any value where ``inside`` is set) and the
    result is a ``uint8`` array with a trailing RGB axis.
    """

    smooth = np.asarray(smooth, dtype=np.float64)
    inside = np.asarray(inside, dtype=bool)

    scaled = smooth[..., np.newaxis] * np.asarray(CHANNEL_SCALES, dtype=np.float64)
    finite = np.isfinite(scaled)
    truncated = np.trunc(np.where(finite, scaled, 0.0)).astype(np.int64)
    pixels = np.mod(truncated, 256).astype(np.uint8)
    pixels[inside] = INSIDE_COLOR
    return pixels
