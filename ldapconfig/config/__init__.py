"""Connection configuration model and YAML loading."""

from .connection import (
    DEFAULT_PORT,
    DEFAULT_SSL_PORT,
    AdminCredentials,
    ConnectionConfig,
    ConnectionSnapshot,
    normalize_key,
)
from .loader import initialize_config, load_config
from .schema import AppConfig, LoggingConfig, parse_config

__all__ = [
    "DEFAULT_PORT",
    "DEFAULT_SSL_PORT",
    "AdminCredentials",
    "AppConfig",
    "ConnectionConfig",
    "ConnectionSnapshot",
    "LoggingConfig",
    "initialize_config",
    "load_config",
    "normalize_key",
    "parse_config",
]
