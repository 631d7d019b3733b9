"""Whole-grid escape-time evaluation with TensorFlow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .log import log, quiet_tensorflow

quiet_tensorflow()

import tensorflow as tf  # noqa: E402

from .complex_plane import X_INTERVAL, Y_INTERVAL  # noqa: E402
from .config import RenderParameters  # noqa: E402
from .escape import HORIZON, LOG2  # noqa: E402
from . import log as _log  # noqa: E402

if not _log.VERBOSE:
    tf.get_logger().setLevel("ERROR")


@dataclass(frozen=True)
class GridEscape:
    """Per-pixel escape data for a full grid, indexed ``[y, x]``."""

    steps: np.ndarray
    magnitude_squared: np.ndarray
    inside: np.ndarray

    def smooth(self) -> np.ndarray:
        """Smoothed escape times; entries under ``inside`` are meaningless."""

        with np.errstate(divide="ignore", invalid="ignore"):
            magnitude = np.sqrt(self.magnitude_squared)
            nu = np.log(np.log(magnitude)) / LOG2
        return self.steps.astype(np.float64) + 1.0 - nu


@tf.function
def _mandelbrot_step(
    zr: tf.Tensor,
    zi: tf.Tensor,
    cr: tf.Tensor,
    ci: tf.Tensor,
    active: tf.Tensor,
) -> tuple[tf.Tensor, tf.Tensor, tf.Tensor]:
    """Advance every pixel that has not escaped yet by one iteration."""

    zr_new = (zr * zr - zi * zi) + cr
    zi_new = (2.0 * zr * zi) + ci
    zr = tf.where(active, zr_new, zr)
    zi = tf.where(active, zi_new, zi)
    return zr, zi, zr * zr + zi * zi


@tf.function
def _mandelbrot_run(cr: tf.Tensor, ci: tf.Tensor, max_iterations: tf.Tensor) -> tuple[tf.Tensor, ...]:
    """Iterate the Mandelbrot formula using a TensorFlow while loop."""

    max_iterations = tf.cast(max_iterations, tf.int32)
    i = tf.constant(0, dtype=tf.int32)
    zr = tf.zeros_like(cr)
    zi = tf.zeros_like(ci)
    mag2 = tf.zeros_like(cr)
    steps = tf.fill(tf.shape(cr), max_iterations)
    active = tf.ones_like(cr, tf.bool)
    horizon = tf.constant(HORIZON, dtype=cr.dtype)

    def cond(i, zr, zi, mag2, steps, active):
        return tf.logical_and(tf.less(i, max_iterations), tf.reduce_any(active))

    def body(i, zr, zi, mag2, steps, active):
        zr, zi, new_mag2 = _mandelbrot_step(zr, zi, cr, ci, active)
        mag2 = tf.where(active, new_mag2, mag2)
        escaped_now = tf.logical_and(active, new_mag2 > horizon)
        steps = tf.where(escaped_now, tf.fill(tf.shape(steps), i), steps)
        active = tf.logical_and(active, tf.logical_not(escaped_now))
        return i + 1, zr, zi, mag2, steps, active

    return tf.while_loop(cond, body, (i, zr, zi, mag2, steps, active))


def default_device() -> str:
    """Use the first visible GPU when TensorFlow can claim it, else the CPU."""

    gpus = tf.config.list_physical_devices('GPU')
    if not gpus:
        log("No GPU found, using CPU")
        return '/CPU:0'
    try:
        for gpu in gpus:
            tf.config.experimental.set_memory_growth(gpu, True)
    except RuntimeError as e:
        # memory growth can only be set before the GPUs are initialized
        log(e)
        return '/CPU:0'
    log("GPU found, using %s" % gpus[0].name)
    return '/GPU:0'


def _sample_axis(count: int, interval: tuple[float, float]) -> np.ndarray:
    low, high = interval
    index = np.arange(count, dtype=np.float64)
    return (index / np.float64(count)) * (high - low) + low


def evaluate_grid(params: RenderParameters, *, device: Optional[str] = None) -> GridEscape:
    """Evaluate the escape step of every pixel of ``params`` at once."""

    xs = _sample_axis(params.width, X_INTERVAL)
    ys = _sample_axis(params.height, Y_INTERVAL)
    device = device if device is not None else default_device()
    log("Evaluating {0}x{1} grid on {2}".format(params.width, params.height, device))

    with tf.device(device):
        X, Y = tf.meshgrid(
            tf.convert_to_tensor(xs, dtype=tf.float64),
            tf.convert_to_tensor(ys, dtype=tf.float64),
        )
        max_iterations = tf.constant(params.max_iter, dtype=tf.int32)
        iterations, _, _, mag2, steps, active = _mandelbrot_run(X, Y, max_iterations)

    log("Grid finished after {0} iterations".format(int(iterations.numpy())))
    return GridEscape(
        steps=steps.numpy(),
        magnitude_squared=mag2.numpy(),
        inside=active.numpy(),
    )
