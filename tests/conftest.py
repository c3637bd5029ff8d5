"""Pytest configuration and fixtures."""

import io
import json
import pytest
from pathlib import Path
from typing import List

from applog import AppLogger


def parse_records(text: str) -> List[dict]:
    """Split a log file's text into its JSON records."""
    decoder = json.JSONDecoder()
    records = []
    pos = 0
    text = text.strip()
    while pos < len(text):
        record, pos = decoder.raw_decode(text, pos)
        records.append(record)
        while pos < len(text) and text[pos].isspace():
            pos += 1
    return records


@pytest.fixture
def log_dir(tmp_path) -> Path:
    """Log directory that does not exist yet."""
    return tmp_path / "logs"


@pytest.fixture
def stdout():
    """Captured stdout stream."""
    return io.StringIO()


@pytest.fixture
def stderr():
    """Captured stderr stream."""
    return io.StringIO()


@pytest.fixture
def logger(log_dir, stdout, stderr) -> AppLogger:
    """Create test logger with development mode off."""
    return AppLogger(log_dir=log_dir, stdout=stdout, stderr=stderr)


@pytest.fixture
def dev_logger(log_dir, stdout, stderr) -> AppLogger:
    """Create test logger with development mode on."""
    return AppLogger(log_dir=log_dir, dev_mode=True, stdout=stdout, stderr=stderr)


@pytest.fixture
def read_records():
    """Read all records of a log file (empty list if it does not exist)."""
    def _read(path: Path) -> List[dict]:
        if not path.exists():
            return []
        return parse_records(path.read_text(encoding="utf-8"))
    return _read
