"""Verbose logging and progress display."""

from __future__ import annotations

import os
import sys
import warnings

VERBOSE = False


def set_verbose(enabled: bool) -> None:
    global VERBOSE
    VERBOSE = bool(enabled)


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


def quiet_tensorflow() -> None:
    """Silence TensorFlow start-up chatter unless verbose output was requested.

    Must run before ``tensorflow`` is imported for the C++ log level to apply.
    """

    if VERBOSE:
        return
    os.environ.setdefault("TF_CPP_MIN_LOG_LEVEL", "3")
    warnings.filterwarnings(
        "ignore",
        message=r"Protobuf gencode version .* is exactly one major version older than the runtime version .*",
        category=UserWarning,
        module="google.protobuf",
    )


class ProgressPrinter:
    """Progress callback that keeps a single status line up to date."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout
        self._last = -1

    def __call__(self, completed: int, total: int) -> None:
        if completed == self._last:
            return
        self._last = completed
        print("pixel {0} out of {1}".format(completed, total), end='\r', file=self.stream)
        if completed >= total:
            print(file=self.stream)
