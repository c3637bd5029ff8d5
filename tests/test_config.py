"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from config import Config, INSTALL_ROOT, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the process environment and any .env file."""
    for name in ("APP_ENV", "LOG_DIR", "LOG_FILE_NAME", "LOG_LEVEL", "TRUST_PROXY", "HOST", "PORT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestConfig:
    """Test configuration values."""

    def test_defaults(self):
        """Test default configuration."""
        config = load_config()

        assert config.app_env == "production"
        assert not config.is_development
        assert config.log_file_name == "app.log"
        assert config.resolved_log_dir == INSTALL_ROOT / "logs"
        assert config.trust_proxy is False
        assert config.port == 3000

    def test_development_from_env(self, monkeypatch):
        """Test APP_ENV=development enables dev mode."""
        monkeypatch.setenv("APP_ENV", "Development")
        assert load_config().is_development

    def test_other_env_is_not_development(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "staging")
        assert not load_config().is_development

    def test_log_dir_from_env(self, monkeypatch, tmp_path):
        """Test LOG_DIR override resolves to an absolute path."""
        monkeypatch.setenv("LOG_DIR", "custom-logs")
        assert load_config().resolved_log_dir == (tmp_path / "custom-logs").resolve()

    def test_trust_proxy_from_env(self, monkeypatch):
        monkeypatch.setenv("TRUST_PROXY", "true")
        assert load_config().trust_proxy is True

    def test_env_file(self, tmp_path):
        """Test values read from .env in the working directory."""
        (tmp_path / ".env").write_text("APP_ENV=development\nPORT=8080\n", encoding="utf-8")

        config = load_config()
        assert config.is_development
        assert config.port == 8080

    def test_invalid_port(self, monkeypatch):
        """Test out-of-range port is rejected."""
        monkeypatch.setenv("PORT", "70000")
        with pytest.raises(ValidationError):
            load_config()
