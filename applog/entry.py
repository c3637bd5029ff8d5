"""Log levels and log entry records."""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional


SUCCESS_LEVEL = 25
logging.addLevelName(SUCCESS_LEVEL, "SUCCESS")


class LogLevel(Enum):
    """Severity levels with their console decoration."""

    INFO = ("📘", logging.INFO)
    ERROR = ("🔴", logging.ERROR)
    WARN = ("🟡", logging.WARNING)
    DEBUG = ("🔍", logging.DEBUG)
    SUCCESS = ("✅", SUCCESS_LEVEL)

    def __init__(self, glyph: str, levelno: int):
        self.glyph = glyph
        self.levelno = levelno

    @property
    def to_stderr(self) -> bool:
        """WARN and ERROR go to stderr, everything else to stdout."""
        return self.levelno >= logging.WARNING

    @classmethod
    def parse(cls, value) -> "LogLevel":
        """Resolve a level from a LogLevel or a case-insensitive name.

        Raises:
            ValueError: If the name is not a known level
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown log level: {value!r}") from None


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T12:00:00.000Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class LogEntry:
    """One record of the log file."""

    level: LogLevel
    message: str
    data: Any = None
    timestamp: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> dict:
        """Convert to dictionary, omitting data when there is none."""
        record = {
            "timestamp": self.timestamp,
            "level": self.level.name,
            "message": self.message,
        }
        if self.data is not None:
            record["data"] = self.data
        return record

    def serialize(self) -> str:
        """Pretty-printed JSON record terminated by a newline.

        A payload json cannot encode (non-string keys, circular references)
        is recorded as its ``str()`` form.
        """
        try:
            text = json.dumps(self.to_dict(), indent=2, ensure_ascii=False, default=str)
        except (TypeError, ValueError):
            record = self.to_dict()
            record["data"] = str(self.data)
            text = json.dumps(record, indent=2, ensure_ascii=False)
        return text + "\n"

    def summary(self) -> str:
        """One-line console rendering: '<glyph> <LEVEL>: <message>[ <data>]'."""
        line = f"{self.level.glyph} {self.level.name}: {self.message}"
        if self.data is not None:
            line += " " + render_data(self.data)
        return line


def render_data(data: Any) -> str:
    """Inline rendering of a data payload for the console."""
    if isinstance(data, str):
        return data
    try:
        return json.dumps(data, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return str(data)


@dataclass(frozen=True)
class LogWriteResult:
    """Outcome of a logging call.

    ``written`` is False for gated debug calls and failed appends; ``error``
    holds the failure of an append.
    """

    entry: LogEntry
    written: bool
    error: Optional[OSError] = None

    @property
    def ok(self) -> bool:
        """True when the entry reached the log file."""
        return self.written and self.error is None
