"""Logging setup for the dynalist-api command line."""

import sys
from typing import TextIO

from loguru import logger


def configure_logging(*, verbose: bool = False, sink: TextIO | None = None) -> int:
    """Route this package's records to ``sink`` (stderr by default).

    The package logs nothing until this is called. Request-level detail is
    logged at DEBUG, so it only shows with ``verbose``. Returns the loguru
    handler id.
    """
    logger.remove()
    logger.enable("dynalist_api")
    level = "DEBUG" if verbose else "INFO"
    return logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format="{level.icon} {message}",
        filter="dynalist_api",
    )
