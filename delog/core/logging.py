# delog/core/logging.py
"""
delog's own operational logging.

The records an application emits through delog go to the log file. This
module is about the library itself: opening, closing, reopening files and
swallowed write failures are reported on stdlib `logging` under the `delog`
namespace. The package installs a NullHandler, so nothing shows unless the
host application (or `configure_logging`) adds a handler.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "delog"

_console_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under 'delog'."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: str = "INFO") -> logging.Handler:
    """
    Send delog's operational messages to stderr.

    Args:
        level: Logging level as a string (e.g. "INFO", "DEBUG", "WARNING").

    Behavior:
    - Replaces the handler installed by an earlier call
    - Does not touch the root logger
    - Returns the installed handler
    """
    global _console_handler

    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _console_handler is not None:
        logger.removeHandler(_console_handler)

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.setLevel(log_level)
    _console_handler = handler
    return handler
