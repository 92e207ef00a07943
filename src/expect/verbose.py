"""Debug logging for expectation evaluation.

Expectations log each evaluation at DEBUG and each failure at INFO under
the ``expect`` logger. Nothing is written anywhere until ``setup_logger``
(usually through ``configure``) attaches handlers.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "expect"

_FORMATTER = logging.Formatter(
    fmt="[%(asctime)s] %(message)s", datefmt="%Y-%m-%dT%H:%M:%S"
)


def reset_logger(logger_name: str = LOGGER_NAME) -> logging.Logger:
    """Detach and close every handler on the logger and drop its level."""
    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    return logger


def _attach(logger: logging.Logger, handler: logging.Handler) -> None:
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(_FORMATTER)
    logger.addHandler(handler)


def setup_logger(
    debug_file: Path, verbose: bool = False, logger_name: str = LOGGER_NAME
) -> logging.Logger:
    """
    Send evaluation records to *debug_file*, and to stderr when *verbose*.

    Handlers from an earlier call are closed first, so reconfiguring never
    duplicates lines or leaks open files. Passing a child name such as
    ``expect.expectation`` narrows the output to one module.
    """
    logger = reset_logger(logger_name)
    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    debug_file.parent.mkdir(parents=True, exist_ok=True)
    _attach(logger, logging.FileHandler(debug_file, mode="a"))
    if verbose:
        _attach(logger, logging.StreamHandler(sys.stderr))

    return logger
