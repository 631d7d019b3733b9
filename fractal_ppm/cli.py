"""Command-line entry point: render the Mandelbrot set to a PPM file."""

from __future__ import annotations

import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Optional, Sequence

from .config import ConfigurationError, RenderParameters, load_settings
from .log import ProgressPrinter, log, set_verbose
from .ppm import write_ppm_p6
from .renderer import render_image


def build_parser():
    parser = ArgumentParser(prog="fractal-ppm",
                            description="Render the Mandelbrot set as a binary PPM (P6) image.")

    parser.add_argument('--width', type=int,
                        dest='width', help='number of pixel columns',
                        metavar='WIDTH', default=1000)

    parser.add_argument('--height', type=int,
                        dest='height', help='number of pixel rows',
                        metavar='HEIGHT', default=1000)

    parser.add_argument('--max-iter', type=int,
                        dest='max_iter', help='maximum number of iterations before a point counts as inside the set',
                        metavar='MAX_ITER', default=1000)

    parser.add_argument('--output', type=str,
                        dest='output', help='destination file for the PPM image',
                        metavar='OUTPUT', default='fractal.ppm')

    return parser


def resolve_parameters(opt: Namespace, parser: ArgumentParser) -> RenderParameters:
    """Validate parsed options, reporting problems through ``parser.error``."""

    for name in ("width", "height", "max_iter"):
        value = getattr(opt, name)
        if value < 1:
            flag = "--" + name.replace("_", "-")
            parser.error(f"{flag} must be a positive integer, got {value}.")

    if not opt.output or str(opt.output).endswith(("/", "\\")):
        parser.error("--output must be a file path.")
    output_path = Path(opt.output).expanduser()
    if output_path.exists() and output_path.is_dir():
        parser.error("--output must point to a file, not a directory.")

    return RenderParameters(width=opt.width, height=opt.height, max_iter=opt.max_iter)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    opt = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        parser.error(str(exc))

    set_verbose(settings.verbose)
    params = resolve_parameters(opt, parser)

    result = render_image(params, progress=ProgressPrinter(), backend=settings.backend)

    try:
        written = write_ppm_p6(opt.output, params.width, params.height, result.pixels)
    except OSError as exc:
        print(f"Failed to write {opt.output}: {exc}", file=sys.stderr)
        return 1

    log("Image saved to %s" % written)
    return 0
