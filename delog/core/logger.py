# delog/core/logger.py
"""
The leveled logger.

A `Logger` holds:
- the log file path (default "log.log")
- one enable flag and one stdout-mirror flag per level
- two handles on the log file, opened and closed together: a buffered
  append-mode text writer, and a raw read/write OS descriptor that is
  never written to

Flow of an emit call:
1) Disabled level -> return, nothing happens
2) Format "MM-dd HH:mm:ss [LABEL] (tag) message"
3) Write + flush to the file, then mirror to stdout if asked
4) Attached exception -> trace to the file, and again to stdout if mirrored

Emit calls never raise. A missing writer or a failing write is reported on
stderr and swallowed. Configuration and lifecycle calls do raise
(`InvalidLogLevel`, `LogFileError`).

All state is guarded by a single re-entrant lock per instance.
"""

from __future__ import annotations

import os
import sys
import threading
import traceback
from datetime import datetime
from typing import Callable, Dict, Optional, TextIO, Union

from delog.core.config import DEFAULT_LOG_FILE, LoggerSettings
from delog.core.errors import LogFileError
from delog.core.levels import ALL_LEVELS, Level, parse_level_name
from delog.core.logging import configure_logging, get_logger
from delog.utils.formatting import LogRecord, format_diagnostic, render_trace

PathLike = Union[str, "os.PathLike[str]"]

logger = get_logger(__name__)


def _console_write(stream: Optional[TextIO], *chunks: str) -> None:
    """
    Write to a console stream without ever raising.

    - stream is None (pythonw, detached daemons) -> nothing is written
    - text the stream cannot encode is written backslash-escaped
    - any other failure (closed or broken stream) is logged and dropped
    """
    if stream is None:
        return
    try:
        for chunk in chunks:
            try:
                stream.write(chunk)
            except UnicodeEncodeError:
                encoding = getattr(stream, "encoding", None) or "ascii"
                stream.write(chunk.encode(encoding, "backslashreplace").decode(encoding))
        stream.flush()
    except (OSError, ValueError, AttributeError) as exc:
        logger.warning("Could not write to %r: %s", stream, exc)


def _to_stdout(*chunks: str) -> None:
    _console_write(sys.stdout, *chunks)


def _to_stderr(*chunks: str) -> None:
    _console_write(sys.stderr, *chunks)


class Logger:
    """Leveled logger writing to one file and, per level, to stdout."""

    def __init__(
        self,
        log_file_path: PathLike = DEFAULT_LOG_FILE,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._lock = threading.RLock()
        self._log_file_path = os.fspath(log_file_path)
        self._enabled: Dict[Level, bool] = {level: False for level in ALL_LEVELS}
        self._mirror: Dict[Level, bool] = {level: False for level in ALL_LEVELS}
        self._writer: Optional[TextIO] = None
        self._raw_handle: Optional[int] = None
        self._clock = clock

    def __repr__(self) -> str:
        enabled = ",".join(level.label for level in ALL_LEVELS if self._enabled[level])
        state = "open" if self.is_open else "closed"
        return f"<Logger {self._log_file_path!r} {state} levels=[{enabled}]>"

    # -------------------------
    # Introspection
    # -------------------------
    @property
    def log_file_path(self) -> str:
        return self._log_file_path

    @property
    def is_open(self) -> bool:
        return self._writer is not None

    def is_enabled(self, level: Level) -> bool:
        return self._enabled[Level(level)]

    def mirrors_to_stdout(self, level: Level) -> bool:
        return self._mirror[Level(level)]

    # -------------------------
    # Emit
    # -------------------------
    def log(
        self,
        level: Level,
        tag: str,
        message: str,
        error: Optional[BaseException] = None,
    ) -> None:
        """Emit a record at `level`. Silent when the level is disabled."""
        level = Level(level)
        with self._lock:
            if not self._enabled[level]:
                return
            record = LogRecord(
                timestamp=self._clock(),
                level=level,
                tag=tag,
                message=message,
                error=error,
            )
            self._write(record, self._mirror[level])

    def d(self, tag: str, message: str, error: Optional[BaseException] = None) -> None:
        """Log a debug message, optionally with an exception's trace."""
        self.log(Level.DEBUG, tag, message, error)

    def i(self, tag: str, message: str, error: Optional[BaseException] = None) -> None:
        """Log an information message, optionally with an exception's trace."""
        self.log(Level.INFO, tag, message, error)

    def w(self, tag: str, message: str, error: Optional[BaseException] = None) -> None:
        """Log a warning, optionally with an exception's trace."""
        self.log(Level.WARNING, tag, message, error)

    def e(self, tag: str, message: str, error: Optional[BaseException] = None) -> None:
        """Log an error, optionally with an exception's trace."""
        self.log(Level.ERROR, tag, message, error)

    debug = d
    info = i
    warning = w
    error = e

    def _write(self, record: LogRecord, mirror: bool) -> None:
        if self._writer is None:
            _to_stderr(format_diagnostic(record.timestamp, "Logfile was not correctly opened!"))
            return

        out = record.format_line()
        try:
            self._writer.write(out)
            self._writer.flush()
            if mirror:
                _to_stdout(out)
            if record.error is not None:
                self._writer.write(render_trace(record.error))
                self._writer.flush()
                if mirror:
                    # Rendered again rather than reusing the file copy.
                    _to_stdout(render_trace(record.error))
        except OSError as exc:
            path = os.path.abspath(self._log_file_path)
            _to_stderr(
                format_diagnostic(record.timestamp, f"Could not write to log file: {path}"),
                "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            )
            logger.warning("Dropped record for %s: %s", path, exc)

    # -------------------------
    # Level configuration
    # -------------------------
    def set_log_level(self, name: str) -> None:
        """
        Enable `name` and every level above it; "none" disables all.

        Order, from highest to lowest: ERROR -> WARNING -> INFO -> DEBUG.
        Goes through the per-level setters, so it opens the log file if needed.

        Raises:
            InvalidLogLevel: unknown name; nothing is changed.
            LogFileError: the log file could not be opened.
        """
        enabled = parse_level_name(name)
        with self._lock:
            for level in ALL_LEVELS:
                self.set_level_enabled(level, level in enabled)

    def set_level_enabled(self, level: Level, enabled: bool) -> None:
        """
        Enable or disable one level, then open the log file if it is not open.

        The file is opened even when disabling.
        """
        with self._lock:
            self._enabled[Level(level)] = bool(enabled)
            self._ensure_open()

    def set_debug_enabled(self, enabled: bool) -> None:
        self.set_level_enabled(Level.DEBUG, enabled)

    def set_info_enabled(self, enabled: bool) -> None:
        self.set_level_enabled(Level.INFO, enabled)

    def set_warning_enabled(self, enabled: bool) -> None:
        self.set_level_enabled(Level.WARNING, enabled)

    def set_error_enabled(self, enabled: bool) -> None:
        self.set_level_enabled(Level.ERROR, enabled)

    # -------------------------
    # Stdout mirroring
    # -------------------------
    def set_mirror_to_stdout(self, level: Level, enabled: bool) -> None:
        """Show records of `level` on stdout too. The file gets them regardless."""
        with self._lock:
            self._mirror[Level(level)] = bool(enabled)

    def set_debug_to_stdout(self, enabled: bool) -> None:
        self.set_mirror_to_stdout(Level.DEBUG, enabled)

    def set_info_to_stdout(self, enabled: bool) -> None:
        self.set_mirror_to_stdout(Level.INFO, enabled)

    def set_warning_to_stdout(self, enabled: bool) -> None:
        self.set_mirror_to_stdout(Level.WARNING, enabled)

    def set_error_to_stdout(self, enabled: bool) -> None:
        self.set_mirror_to_stdout(Level.ERROR, enabled)

    def set_all_to_stdout(self, enabled: bool) -> None:
        with self._lock:
            for level in ALL_LEVELS:
                self._mirror[level] = bool(enabled)

    # -------------------------
    # File lifecycle
    # -------------------------
    def set_log_file(self, path: PathLike) -> None:
        """
        Point the logger at another file.

        If a file is open it is closed and the new path opened before returning.

        Raises:
            LogFileError: closing the old file or opening the new one failed.
        """
        new_path = os.fspath(path)
        with self._lock:
            old_path = self._log_file_path
            self._log_file_path = new_path
            if self._writer is not None or self._raw_handle is not None:
                self._close_handles(old_path)
                self.open()
                logger.debug("Switched log file %s -> %s", old_path, new_path)

    def open(self) -> None:
        """
        Open (or create) the log file for appending.

        Handles from an earlier open are closed first.

        Raises:
            LogFileError: the file could not be opened.
        """
        with self._lock:
            if self._writer is not None or self._raw_handle is not None:
                self._close_handles(self._log_file_path)

            path = self._log_file_path
            try:
                writer = open(
                    path, "a", encoding="utf-8", errors="backslashreplace", newline=""
                )
            except OSError as exc:
                raise LogFileError("open", path, exc.strerror or str(exc)) from exc

            try:
                raw_handle = os.open(path, os.O_RDWR | os.O_CREAT, 0o666)
            except OSError as exc:
                writer.close()
                raise LogFileError("open", path, exc.strerror or str(exc)) from exc

            self._writer = writer
            self._raw_handle = raw_handle
            logger.debug("Opened log file %s", os.path.abspath(path))

    def close(self) -> None:
        """
        Flush and close the log file. Does nothing if it is not open.

        Raises:
            LogFileError: flushing or closing failed. The logger is closed anyway.
        """
        with self._lock:
            if self._writer is None and self._raw_handle is None:
                return
            self._close_handles(self._log_file_path)

    def _ensure_open(self) -> None:
        if self._writer is None or self._raw_handle is None:
            self.open()

    def _close_handles(self, path: str) -> None:
        writer, raw_handle = self._writer, self._raw_handle
        self._writer = None
        self._raw_handle = None

        failure: Optional[OSError] = None
        if writer is not None:
            try:
                writer.close()
            except OSError as exc:
                failure = exc
        if raw_handle is not None:
            try:
                os.close(raw_handle)
            except OSError as exc:
                failure = failure or exc

        if failure is not None:
            raise LogFileError("close", path, failure.strerror or str(failure)) from failure
        logger.debug("Closed log file %s", os.path.abspath(path))

    # -------------------------
    # Scoped use + settings
    # -------------------------
    def __enter__(self) -> "Logger":
        with self._lock:
            self._ensure_open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def configure(self, settings: LoggerSettings) -> None:
        """
        Apply settings: file path, stdout mirroring, then level.

        Setting the level opens the file, even for "none".
        """
        if settings.INTERNAL_LOG_LEVEL:
            configure_logging(settings.INTERNAL_LOG_LEVEL)
        with self._lock:
            self.set_log_file(settings.LOG_FILE)
            self.set_all_to_stdout(settings.STDOUT)
            self.set_log_level(settings.LOG_LEVEL)
