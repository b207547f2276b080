"""Dataclasses for top-level application config."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ldapconfig.config.connection import ConnectionConfig
from ldapconfig.exceptions import ConfigurationError


@dataclass(slots=True)
class LoggingConfig:
    level: str = "INFO"
    fmt: str = "ecs_json"
    sink: str = "stdout"
    file_path: str | None = None
    service_name: str = "ldapconfig"


@dataclass(slots=True)
class AppConfig:
    environment: str
    ldap: ConnectionConfig
    logging: LoggingConfig = field(default_factory=LoggingConfig)


VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
VALID_LOG_FORMATS = {"json", "ecs_json", "text"}
VALID_LOG_SINKS = {"stdout", "file"}


def _parse_logging(raw: Any) -> LoggingConfig:
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError("'logging' must be an object")
    level = str(raw.get("level", "INFO")).upper()
    if level not in VALID_LOG_LEVELS:
        raise ConfigurationError(f"invalid log level '{level}'")
    log_format = str(raw.get("format", "ecs_json"))
    if log_format not in VALID_LOG_FORMATS:
        raise ConfigurationError(f"invalid log format '{log_format}'")
    sink = str(raw.get("sink", "stdout"))
    if sink not in VALID_LOG_SINKS:
        raise ConfigurationError(f"invalid log sink '{sink}'")
    file_path = raw.get("file_path")
    if sink == "file" and not file_path:
        raise ConfigurationError("logging.file_path is required when logging.sink is 'file'")
    return LoggingConfig(
        level=level,
        fmt=log_format,
        sink=sink,
        file_path=str(file_path) if file_path else None,
        service_name=str(raw.get("service_name", "ldapconfig")).strip() or "ldapconfig",
    )


def parse_config(data: Any) -> AppConfig:
    if not isinstance(data, dict):
        raise ConfigurationError("config document must be an object")
    environment = str(data.get("environment", "development"))

    ldap_raw = data.get("ldap", {})
    if ldap_raw is None:
        ldap_raw = {}
    if not isinstance(ldap_raw, dict):
        raise ConfigurationError("'ldap' must be an object")

    return AppConfig(
        environment=environment,
        ldap=ConnectionConfig(ldap_raw),
        logging=_parse_logging(data.get("logging")),
    )
