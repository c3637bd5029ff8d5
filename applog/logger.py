"""Application logger writing JSON records to a file and a console summary."""

import logging
import sys
from pathlib import Path
from typing import Any, Optional, TextIO, Union

from .entry import LogEntry, LogLevel, LogWriteResult


class ConsoleHandler(logging.StreamHandler):
    """Stream handler bound to stdout or stderr.

    Without an explicit stream the process stream is looked up on every
    emit, so replacing ``sys.stdout``/``sys.stderr`` takes effect.
    """

    def __init__(self, to_stderr: bool, stream: Optional[TextIO] = None):
        super().__init__(stream)
        self.to_stderr = to_stderr
        self._fixed_stream = stream is not None
        self.addFilter(self._accepts)

    def _accepts(self, record: logging.LogRecord) -> bool:
        return (record.levelno >= logging.WARNING) == self.to_stderr

    def emit(self, record: logging.LogRecord) -> None:
        if not self._fixed_stream:
            self.stream = sys.stderr if self.to_stderr else sys.stdout
        super().emit(record)


class AppLogger:
    """Records events to ``<log_dir>/app.log`` and mirrors them to the console.

    Every call appends one pretty-printed JSON record and writes one line to
    stdout (INFO, DEBUG, SUCCESS) or stderr (WARN, ERROR). Debug calls do
    nothing unless ``dev_mode`` is set. A failed append is reported once on
    stderr and returned in the result; it never raises.
    """

    def __init__(
        self,
        log_dir: Union[str, Path],
        dev_mode: bool = False,
        log_file_name: str = "app.log",
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        """Initialize logger and create the log directory.

        Args:
            log_dir: Directory holding the log file, created with parents if missing
            dev_mode: Whether debug calls produce output
            log_file_name: Name of the log file inside log_dir
            stdout: Stream for INFO/DEBUG/SUCCESS lines (process stdout if None)
            stderr: Stream for WARN/ERROR lines (process stderr if None)
        """
        self._log_dir = Path(log_dir).resolve()
        self._log_file = self._log_dir / log_file_name
        self._dev_mode = dev_mode

        self._log_dir.mkdir(parents=True, exist_ok=True)

        self._console = logging.Logger("applog.console", level=logging.DEBUG)
        self._console.propagate = False
        for to_stderr, stream in ((False, stdout), (True, stderr)):
            handler = ConsoleHandler(to_stderr=to_stderr, stream=stream)
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._console.addHandler(handler)

    @classmethod
    def from_config(cls, config, **kwargs) -> "AppLogger":
        """Create logger from application configuration."""
        return cls(
            log_dir=config.resolved_log_dir,
            dev_mode=config.is_development,
            log_file_name=config.log_file_name,
            **kwargs,
        )

    @property
    def log_dir(self) -> Path:
        """Absolute directory holding the log file."""
        return self._log_dir

    @property
    def log_file(self) -> Path:
        """Absolute path of the log file."""
        return self._log_file

    @property
    def dev_mode(self) -> bool:
        """Whether debug calls produce output."""
        return self._dev_mode

    def info(self, message: str, data: Any = None) -> LogWriteResult:
        """Log at INFO level to the file and stdout.

        Args:
            message: Message text
            data: Optional JSON-compatible payload

        Returns:
            LogWriteResult of the append
        """
        return self.log(LogLevel.INFO, message, data)

    def warn(self, message: str, data: Any = None) -> LogWriteResult:
        """Log at WARN level to the file and stderr."""
        return self.log(LogLevel.WARN, message, data)

    def error(self, message: str, data: Any = None) -> LogWriteResult:
        """Log at ERROR level to the file and stderr."""
        return self.log(LogLevel.ERROR, message, data)

    def success(self, message: str, data: Any = None) -> LogWriteResult:
        """Log at SUCCESS level to the file and stdout."""
        return self.log(LogLevel.SUCCESS, message, data)

    def debug(self, message: str, data: Any = None) -> LogWriteResult:
        """Log at DEBUG level; a no-op outside development mode."""
        return self.log(LogLevel.DEBUG, message, data)

    def log(self, level: Union[LogLevel, str], message: str, data: Any = None) -> LogWriteResult:
        """Record one entry at the given level.

        Args:
            level: LogLevel or level name (case-insensitive)
            message: Message text
            data: Optional JSON-compatible payload

        Returns:
            LogWriteResult describing whether the record reached the file

        Raises:
            ValueError: If level is not a known level name
        """
        level = LogLevel.parse(level)
        entry = LogEntry(level=level, message=message, data=data)

        if level is LogLevel.DEBUG and not self._dev_mode:
            return LogWriteResult(entry=entry, written=False)

        error = self._write(entry.serialize())
        self._console.log(level.levelno, entry.summary())

        return LogWriteResult(entry=entry, written=error is None, error=error)

    def _write(self, content: str) -> Optional[OSError]:
        """Append content to the log file with a single write."""
        try:
            with open(self._log_file, "a", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            diagnostic = LogEntry(level=LogLevel.ERROR, message=f"Failed to write to log file: {e}")
            self._console.error(diagnostic.summary())
            return e
        return None
