"""Rendering of a full Mandelbrot frame into a pixel buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from .complex_plane import map_screen_to_complex
from .config import BACKENDS, ConfigurationError, RenderParameters
from .escape import escape_time
from .log import log
from .palette import Color, color_for, colorize

ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class RenderResult:
    """Container for the numerical results of a Mandelbrot render."""

    params: RenderParameters
    smooth: np.ndarray
    inside: np.ndarray
    pixels: np.ndarray

    @property
    def buffer(self) -> np.ndarray:
        """Pixels as a flat ``(width * height, 3)`` row-major sequence."""

        return self.pixels.reshape(-1, 3)

    def colors(self) -> list[Color]:
        return [Color(int(r), int(g), int(b)) for r, g, b in self.buffer]


def _render_python(params: RenderParameters, progress: Optional[ProgressCallback]) -> RenderResult:
    width, height = params.width, params.height
    total = params.pixel_count

    smooth = np.full((height, width), np.nan, dtype=np.float64)
    inside = np.zeros((height, width), dtype=bool)
    pixels = np.zeros((height, width, 3), dtype=np.uint8)

    for y in range(height):
        for x in range(width):
            time = escape_time(map_screen_to_complex(x, y, width, height), params.max_iter)
            if time is None:
                inside[y, x] = True
            else:
                smooth[y, x] = time
            pixels[y, x] = color_for(time)
        if progress is not None:
            progress((y + 1) * width, total)

    return RenderResult(params=params, smooth=smooth, inside=inside, pixels=pixels)


def _render_tensorflow(params: RenderParameters, progress: Optional[ProgressCallback]) -> RenderResult:
    from .vectorized import evaluate_grid

    grid = evaluate_grid(params)
    smooth = np.where(grid.inside, np.nan, grid.smooth())
    pixels = colorize(smooth, grid.inside)
    if progress is not None:
        progress(params.pixel_count, params.pixel_count)
    return RenderResult(params=params, smooth=smooth, inside=grid.inside, pixels=pixels)


_RENDERERS = {
    "python": _render_python,
    "tensorflow": _render_tensorflow,
}


def render_image(
    params: RenderParameters,
    *,
    progress: Optional[ProgressCallback] = None,
    backend: str = "python",
) -> RenderResult:
    """Render every pixel of ``params`` in row-major order.

    ``progress`` is called with ``(pixels completed, pixels total)`` and has no
    influence on the computed image.
    """

    if backend not in BACKENDS:
        raise ConfigurationError(f"unknown backend {backend!r}")

    log("Rendering {0}x{1}, max_iter={2}, backend={3}".format(
        params.width, params.height, params.max_iter, backend))
    result = _RENDERERS[backend](params, progress)
    log("Rendered {0} pixels, {1} inside the set".format(
        params.pixel_count, int(np.count_nonzero(result.inside))))
    return result
