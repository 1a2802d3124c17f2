# delog/core/levels.py
"""
Severity levels and the level-name table.

Order, from highest to lowest: ERROR -> WARNING -> INFO -> DEBUG.
`set_log_level` enables the named level and every level above it.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, FrozenSet

from delog.core.errors import InvalidLogLevel


class Level(IntEnum):
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @property
    def label(self) -> str:
        """Label written between the brackets of a record line."""
        return _LABELS[self]


_LABELS: Dict[Level, str] = {
    Level.DEBUG: "DEBUG",
    Level.INFO: "INFO",
    Level.WARNING: "WARN",
    Level.ERROR: "ERROR",
}

LABEL_TO_LEVEL: Dict[str, Level] = {label: level for level, label in _LABELS.items()}

ALL_LEVELS = tuple(Level)


def _at_or_above(threshold: Level) -> FrozenSet[Level]:
    return frozenset(level for level in Level if level >= threshold)


# Accepted names for set_log_level -> levels that end up enabled.
LEVEL_NAMES: Dict[str, FrozenSet[Level]] = {
    "none": frozenset(),
    "error": _at_or_above(Level.ERROR),
    "warning": _at_or_above(Level.WARNING),
    "info": _at_or_above(Level.INFO),
    "debug": _at_or_above(Level.DEBUG),
}


def parse_level_name(name: str) -> FrozenSet[Level]:
    """
    Resolve a level name (case-insensitive) to the set of enabled levels.

    Raises:
        InvalidLogLevel: if the name is not in LEVEL_NAMES.
    """
    key = (name or "").strip().lower()
    try:
        return LEVEL_NAMES[key]
    except KeyError:
        raise InvalidLogLevel(name) from None
