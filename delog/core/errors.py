# delog/core/errors.py
"""
Exceptions raised by delog.

Only configuration and file lifecycle calls raise. Emitting a record never
raises to the caller; write problems are reported on stderr instead.
"""

from __future__ import annotations

import os


class DelogError(Exception):
    """Base class for delog errors."""
    pass


class InvalidLogLevel(DelogError, ValueError):
    """Raised when a log level name is not one of none/error/warning/info/debug."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"LogLevel not recognized: {name!r}")


class LogFileError(DelogError, OSError):
    """Raised when the log file cannot be opened, closed or reopened."""

    def __init__(self, action: str, path: str, reason: str = ""):
        self.action = action
        self.path = os.path.abspath(path)
        message = f"Could not {action} log file: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
