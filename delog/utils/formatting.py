# delog/utils/formatting.py
"""
Record formatting helpers.

Line layout:
    MM-dd HH:mm:ss [LABEL] (tag) message

No year, no timezone, no escaping. A message with embedded newlines is
written as-is and spans several physical lines.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from delog.core.levels import Level

TIMESTAMP_FORMAT = "%m-%d %H:%M:%S"

# Tag used for delog's own stderr diagnostics.
INTERNAL_TAG = "LOGGING"


@dataclass(frozen=True)
class LogRecord:
    """One emitted record. Built per call, formatted, written, discarded."""
    timestamp: datetime
    level: Level
    tag: str
    message: str
    error: Optional[BaseException] = None

    def format_line(self) -> str:
        return format_line(self.timestamp, self.level.label, self.tag, self.message)


def format_timestamp(ts: datetime) -> str:
    return ts.strftime(TIMESTAMP_FORMAT)


def format_line(ts: datetime, label: str, tag: str, message: str) -> str:
    """Format a single record line, trailing newline included."""
    return f"{format_timestamp(ts)} [{label}] ({tag}) {message}\n"


def format_diagnostic(ts: datetime, message: str) -> str:
    """Line for delog's own problems; always labelled ERROR with the LOGGING tag."""
    return format_line(ts, Level.ERROR.label, INTERNAL_TAG, message)


def render_trace(error: BaseException) -> str:
    """
    Render an exception the way the interpreter prints uncaught ones:
    traceback frames (if any), then `Type: message`, chained causes included.
    """
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))
