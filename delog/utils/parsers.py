# delog/utils/parsers.py
"""
Reading delog files back.

A log file is line-oriented but not strictly parseable:
- a record line is "MM-dd HH:mm:ss [LABEL] (tag) message"
- an attached exception adds trace lines with no prefix
- messages with embedded newlines continue on lines that look like traces

Strategy:
1) Lines matching the record layout start a new record.
2) Any other line is attached to the preceding record as a trace line.
3) Lines before the first record have nothing to attach to and are dropped.

The layout carries no year. Timestamps are completed with `year`
(default: the current one).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from delog.core.levels import LABEL_TO_LEVEL, Level

RECORD_RE = re.compile(
    r"^(?P<ts>\d{2}-\d{2} \d{2}:\d{2}:\d{2}) "
    r"\[(?P<label>DEBUG|INFO|WARN|ERROR)\] "
    r"\((?P<tag>.*?)\) "
    r"(?P<message>.*)$"
)


@dataclass(frozen=True)
class ParsedRecord:
    """A record read back from a log file."""
    timestamp: datetime
    level: Level
    tag: str
    message: str
    trace: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def label(self) -> str:
        return self.level.label


def _parse_timestamp(value: str, year: int) -> Optional[datetime]:
    # Year goes in before parsing so 02-29 resolves in leap years.
    try:
        return datetime.strptime(f"{year:04d}-{value}", "%Y-%m-%d %H:%M:%S")
    except ValueError:
        return None


def parse_log_line(line: str, year: Optional[int] = None) -> Optional[ParsedRecord]:
    """
    Parse one record line. Returns None if the line is not a record line.
    """
    m = RECORD_RE.match(line.rstrip("\r\n"))
    if not m:
        return None

    ts = _parse_timestamp(m.group("ts"), year if year is not None else datetime.now().year)
    if ts is None:
        return None

    return ParsedRecord(
        timestamp=ts,
        level=LABEL_TO_LEVEL[m.group("label")],
        tag=m.group("tag"),
        message=m.group("message"),
    )


def parse_log_text(text: Union[str, Iterable[str]], year: Optional[int] = None) -> List[ParsedRecord]:
    """
    Group lines into records, attaching non-record lines as trace lines.
    """
    lines = text.splitlines() if isinstance(text, str) else text

    records: List[ParsedRecord] = []
    current: Optional[ParsedRecord] = None
    trace: List[str] = []

    for raw in lines:
        line = raw.rstrip("\r\n")
        parsed = parse_log_line(line, year)
        if parsed is not None:
            if current is not None:
                records.append(_with_trace(current, trace))
            current, trace = parsed, []
            continue
        if current is not None:
            trace.append(line)

    if current is not None:
        records.append(_with_trace(current, trace))

    return records


def _with_trace(record: ParsedRecord, trace: List[str]) -> ParsedRecord:
    if not trace:
        return record
    return ParsedRecord(
        timestamp=record.timestamp,
        level=record.level,
        tag=record.tag,
        message=record.message,
        trace=tuple(trace),
    )


def read_log_file(path: Union[str, Path], year: Optional[int] = None) -> List[ParsedRecord]:
    """Read and parse a whole log file (UTF-8, undecodable bytes replaced)."""
    text = Path(path).read_text(encoding="utf-8", errors="replace")
    return parse_log_text(text, year)
