# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Logging setup for the proxy-regression CLI."""

import logging
import sys
from enum import Enum

import errorhandler


class VerbosityLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(
    level: VerbosityLevel | str, error_handler: errorhandler.ErrorHandler
) -> None:
    """Configure the root logger and reset the error handler.

    Args:
        level: Verbosity level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        error_handler: Handler whose `fired` flag records ERROR log records.
    """
    log_level = getattr(logging, VerbosityLevel(level).value)

    logger = logging.getLogger()
    for handler in list(logger.handlers):
        if not isinstance(handler, errorhandler.ErrorHandler):
            logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(stream_handler)
    logger.setLevel(log_level)

    error_handler.reset()
