"""
delog core - levels, errors, settings and the Logger itself.
"""

from delog.core.config import LoggerSettings, get_settings
from delog.core.errors import DelogError, InvalidLogLevel, LogFileError
from delog.core.levels import Level, parse_level_name
from delog.core.logger import Logger

__all__ = [
    "LoggerSettings",
    "get_settings",
    "DelogError",
    "InvalidLogLevel",
    "LogFileError",
    "Level",
    "parse_level_name",
    "Logger",
]
