# delog/api.py
"""
Process-wide logger.

One default `Logger` is created at import time, with every level disabled
and no file open. The module-level functions below forward to it, so callers
never instantiate anything:

    import delog

    delog.set_log_level("info")     # opens log.log
    delog.set_all_to_stdout(True)
    delog.i("Main", "started")
    ...
    delog.close()
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from delog.core.config import LoggerSettings, get_settings
from delog.core.levels import Level
from delog.core.logger import Logger, PathLike

_default_logger = Logger()


def get_default_logger() -> Logger:
    """The logger behind the module-level functions."""
    return _default_logger


# -------------------------
# Emit
# -------------------------
def log(level: Level, tag: str, message: str, error: Optional[BaseException] = None) -> None:
    _default_logger.log(level, tag, message, error)


def d(tag: str, message: str, error: Optional[BaseException] = None) -> None:
    _default_logger.d(tag, message, error)


def i(tag: str, message: str, error: Optional[BaseException] = None) -> None:
    _default_logger.i(tag, message, error)


def w(tag: str, message: str, error: Optional[BaseException] = None) -> None:
    _default_logger.w(tag, message, error)


def e(tag: str, message: str, error: Optional[BaseException] = None) -> None:
    _default_logger.e(tag, message, error)


debug = d
info = i
warning = w
error = e


# -------------------------
# Configuration
# -------------------------
def set_log_level(name: str) -> None:
    _default_logger.set_log_level(name)


def set_level_enabled(level: Level, enabled: bool) -> None:
    _default_logger.set_level_enabled(level, enabled)


def set_debug_enabled(enabled: bool) -> None:
    _default_logger.set_debug_enabled(enabled)


def set_info_enabled(enabled: bool) -> None:
    _default_logger.set_info_enabled(enabled)


def set_warning_enabled(enabled: bool) -> None:
    _default_logger.set_warning_enabled(enabled)


def set_error_enabled(enabled: bool) -> None:
    _default_logger.set_error_enabled(enabled)


def set_mirror_to_stdout(level: Level, enabled: bool) -> None:
    _default_logger.set_mirror_to_stdout(level, enabled)


def set_debug_to_stdout(enabled: bool) -> None:
    _default_logger.set_debug_to_stdout(enabled)


def set_info_to_stdout(enabled: bool) -> None:
    _default_logger.set_info_to_stdout(enabled)


def set_warning_to_stdout(enabled: bool) -> None:
    _default_logger.set_warning_to_stdout(enabled)


def set_error_to_stdout(enabled: bool) -> None:
    _default_logger.set_error_to_stdout(enabled)


def set_all_to_stdout(enabled: bool) -> None:
    _default_logger.set_all_to_stdout(enabled)


def configure(settings: Optional[LoggerSettings] = None) -> None:
    """Apply `settings`, or the ones read from DELOG_* environment variables."""
    _default_logger.configure(settings if settings is not None else get_settings())


# -------------------------
# File lifecycle
# -------------------------
def set_log_file(path: PathLike) -> None:
    _default_logger.set_log_file(path)


def open() -> None:
    _default_logger.open()


def close() -> None:
    _default_logger.close()


@contextmanager
def opened() -> Iterator[Logger]:
    """Keep the default logger's file open for the duration of a block."""
    with _default_logger as active:
        yield active
