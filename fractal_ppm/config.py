"""Render parameters and environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

BACKENDS = ("python", "tensorflow")

VERBOSE_ENV = "FRACTAL_PPM_VERBOSE"
BACKEND_ENV = "FRACTAL_PPM_BACKEND"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}


class ConfigurationError(ValueError):
    """Raised when render dimensions or settings are unusable."""


def require_positive(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise ConfigurationError(f"{name} must be at least 1, got {value}")
    return value


@dataclass(frozen=True)
class RenderParameters:
    """Parameters that describe a single render of the Mandelbrot set."""

    width: int
    height: int
    max_iter: int

    def __post_init__(self) -> None:
        require_positive("width", self.width)
        require_positive("height", self.height)
        require_positive("max_iter", self.max_iter)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class Settings:
    verbose: bool = False
    backend: str = "python"


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {raw!r}")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read :class:`Settings` from ``environ`` (defaults to ``os.environ``)."""

    if environ is None:
        environ = os.environ

    verbose = _parse_flag(VERBOSE_ENV, environ.get(VERBOSE_ENV, ""))
    backend = environ.get(BACKEND_ENV, "python").strip().lower() or "python"
    if backend not in BACKENDS:
        raise ConfigurationError(
            f"{BACKEND_ENV} must be one of {', '.join(BACKENDS)}, got {backend!r}"
        )
    return Settings(verbose=verbose, backend=backend)
