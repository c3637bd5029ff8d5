"""Configuration management for applog."""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


INSTALL_ROOT = Path(__file__).resolve().parent


class Config(BaseSettings):
    """Application configuration."""

    # Environment settings
    app_env: str = Field(
        default="production",
        description="Runtime environment; 'development' enables debug logging"
    )

    # Logging settings
    log_dir: Optional[str] = Field(
        default=None,
        description="Log directory (defaults to <install-root>/logs)"
    )

    log_file_name: str = Field(
        default="app.log",
        min_length=1,
        description="Name of the append-only log file"
    )

    log_level: str = Field(
        default="INFO",
        description="Level of the operational logger (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # Request settings
    trust_proxy: bool = Field(
        default=False,
        description="Record the first X-Forwarded-For hop as the client address"
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port to listen on"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @property
    def is_development(self) -> bool:
        """Whether debug-level logging is enabled."""
        return self.app_env.strip().lower() == "development"

    @property
    def resolved_log_dir(self) -> Path:
        """Absolute log directory."""
        if self.log_dir:
            return Path(self.log_dir).expanduser().resolve()
        return INSTALL_ROOT / "logs"


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
