"""Application logger with JSON file records and console mirroring."""

from .entry import LogEntry, LogLevel, LogWriteResult
from .logger import AppLogger

__all__ = ["AppLogger", "LogEntry", "LogLevel", "LogWriteResult"]
