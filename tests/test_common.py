"""Tests for common utilities."""

import logging

from applog.common.headers import first_forwarded_hop, resolve_client_ip
from applog.common.logging_config import setup_logging, get_logger


class TestHeaders:
    """Test header utilities."""

    def test_first_forwarded_hop(self):
        """Test originating client extraction."""
        assert first_forwarded_hop("203.0.113.7, 10.0.0.1") == "203.0.113.7"
        assert first_forwarded_hop("203.0.113.7") == "203.0.113.7"
        assert first_forwarded_hop(" , 10.0.0.1") is None
        assert first_forwarded_hop("") is None
        assert first_forwarded_hop(None) is None


class TestResolveClientIP:
    """Test client address resolution priority."""

    def test_peer_address(self):
        assert resolve_client_ip(None, "10.0.0.5") == "10.0.0.5"

    def test_forwarded_ignored_without_trust(self):
        assert resolve_client_ip("203.0.113.7", "10.0.0.5") == "10.0.0.5"

    def test_forwarded_trusted(self):
        assert resolve_client_ip("203.0.113.7, 10.0.0.1", "10.0.0.5", trust_proxy=True) == "203.0.113.7"

    def test_forwarded_missing_falls_back(self):
        assert resolve_client_ip(None, "10.0.0.5", trust_proxy=True) == "10.0.0.5"

    def test_unknown(self):
        """Test both addresses absent."""
        assert resolve_client_ip(None, None) == "unknown"
        assert resolve_client_ip("", "", trust_proxy=True) == "unknown"


class TestLoggingConfig:
    """Test operational logger setup."""

    def test_setup_logging_level(self):
        """Test level and single console handler."""
        logger = setup_logging(level="debug")
        assert logger.name == "applog"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_setup_logging_file(self, tmp_path):
        """Test optional file handler."""
        log_file = tmp_path / "ops.log"
        logger = setup_logging(level="INFO", log_file=str(log_file))
        logger.info("server up")

        for handler in logger.handlers:
            handler.flush()
        assert "server up" in log_file.read_text(encoding="utf-8")

        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_unknown_level_defaults_to_info(self):
        logger = setup_logging(level="chatty")
        assert logger.level == logging.INFO

    def test_get_logger(self):
        assert get_logger() is logging.getLogger("applog")
        assert get_logger("applog.web").name == "applog.web"
