"""Public API for Mandelbrot escape-time rendering to PPM."""

from .complex_plane import ComplexPoint, X_INTERVAL, Y_INTERVAL, map_screen_to_complex
from .config import ConfigurationError, RenderParameters, Settings, load_settings
from .escape import HORIZON, escape_time, smooth_escape
from .palette import INSIDE_COLOR, Color, color_for, colorize
from .ppm import EncodingError, ppm_bytes, write_ppm_p6
from .renderer import RenderResult, render_image

__all__ = [
    "Color",
    "ComplexPoint",
    "ConfigurationError",
    "EncodingError",
    "HORIZON",
    "INSIDE_COLOR",
    "RenderParameters",
    "RenderResult",
    "Settings",
    "X_INTERVAL",
    "Y_INTERVAL",
    "color_for",
    "colorize",
    "escape_time",
    "load_settings",
    "map_screen_to_complex",
    "ppm_bytes",
    "render_image",
    "smooth_escape",
    "write_ppm_p6",
]
