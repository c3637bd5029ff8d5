"""Common utilities for applog."""

from .headers import first_forwarded_hop, resolve_client_ip
from .logging_config import setup_logging, get_logger

__all__ = [
    "first_forwarded_hop",
    "resolve_client_ip",
    "setup_logging",
    "get_logger",
]
