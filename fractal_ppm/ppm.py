"""Binary PPM (P6) encoding and writing."""

from __future__ import annotations

from pathlib import Path

import numpy as np


class EncodingError(ValueError):
    """Raised when a pixel buffer does not match the declared dimensions."""


def ppm_header(width: int, height: int) -> bytes:
    return "P6\n{0} {1}\n255\n".format(width, height).encode("ascii")


def ppm_bytes(width: int, height: int, pixels) -> bytes:
    """Encode ``pixels`` (row-major RGB triples) as a P6 image.

    ``pixels`` may be a ``(height, width, 3)`` array, a flat ``(n, 3)`` array
    or any sequence of ``(red, green, blue)`` triples.
    """

    data = np.asarray(pixels, dtype=np.uint8)
    if data.size == 0:
        data = data.reshape(0, 3)
    if data.shape[-1] != 3:
        raise EncodingError(f"pixels must be RGB triples, got shape {data.shape}")
    data = data.reshape(-1, 3)
    if data.shape[0] != width * height:
        raise EncodingError(
            f"buffer holds {data.shape[0]} pixels, expected {width}x{height}={width * height}"
        )
    return ppm_header(width, height) + data.tobytes()


def write_ppm_p6(path, width: int, height: int, pixels) -> Path:
    """Write a PPM P6 image file and return its resolved path."""

    encoded = ppm_bytes(width, height, pixels)
    output_path = Path(path).expanduser().resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(encoded)
    return output_path
