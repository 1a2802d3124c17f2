"""
delog - simple leveled logging to a log file and the standard output.

Records look like:

    10-18 14:03:07 [WARN] (Network) retrying in 5s

Levels are switched on with `set_log_level` or the per-level setters; each
level can additionally be mirrored to stdout.

`delog.open` is left out of `__all__` so a star import does not shadow the
builtin `open`; call it as `delog.open()`.
"""

import logging

__version__ = "1.0.0"

from delog.core.config import LoggerSettings, get_settings
from delog.core.errors import DelogError, InvalidLogLevel, LogFileError
from delog.core.levels import Level
from delog.core.logger import Logger
from delog.core.logging import configure_logging

from delog.api import (
    get_default_logger,
    log,
    d,
    i,
    w,
    e,
    debug,
    info,
    warning,
    error,
    set_log_level,
    set_level_enabled,
    set_debug_enabled,
    set_info_enabled,
    set_warning_enabled,
    set_error_enabled,
    set_mirror_to_stdout,
    set_debug_to_stdout,
    set_info_to_stdout,
    set_warning_to_stdout,
    set_error_to_stdout,
    set_all_to_stdout,
    set_log_file,
    configure,
    open,
    close,
    opened,
)

from delog.utils.parsers import (
    ParsedRecord,
    parse_log_line,
    parse_log_text,
    read_log_file,
)

logging.getLogger("delog").addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core
    "Logger",
    "Level",
    "LoggerSettings",
    "get_settings",
    "configure_logging",
    # Errors
    "DelogError",
    "InvalidLogLevel",
    "LogFileError",
    # Process-wide logger
    "get_default_logger",
    "log",
    "d",
    "i",
    "w",
    "e",
    "debug",
    "info",
    "warning",
    "error",
    "set_log_level",
    "set_level_enabled",
    "set_debug_enabled",
    "set_info_enabled",
    "set_warning_enabled",
    "set_error_enabled",
    "set_mirror_to_stdout",
    "set_debug_to_stdout",
    "set_info_to_stdout",
    "set_warning_to_stdout",
    "set_error_to_stdout",
    "set_all_to_stdout",
    "set_log_file",
    "configure",
    "close",
    "opened",
    # Reading logs back
    "ParsedRecord",
    "parse_log_line",
    "parse_log_text",
    "read_log_file",
]
