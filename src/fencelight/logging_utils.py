#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the fencelight command line.

Library modules only create module-level loggers under the ``fencelight``
namespace. The CLI attaches handlers to that namespace logger, so
``--log-level DEBUG`` shows why individual blocks fell back to plain
output without also enabling debug output from mistune or pygments.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "fencelight"

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(log_level: int | str) -> int:
    """Return the numeric level for a level name or number; unknown names map to INFO."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the package logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g. ``"DEBUG"``)
    log_file : str, optional
        Also append log records to this file
    trace_mode : bool, default False
        Include timestamps and logger names in each record

    Returns
    -------
    logging.Logger
        The configured ``fencelight`` logger

    """
    level = resolve_level(log_level)
    formatter = (
        logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT) if trace_mode else logging.Formatter(_PLAIN_FORMAT)
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(level)
    package_logger.propagate = False

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    package_logger.addHandler(console)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            package_logger.warning("Cannot open log file %s: %s", log_file, e)
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.debug("Appending log output to %s", log_file)

    return package_logger
