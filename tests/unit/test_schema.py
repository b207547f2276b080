from __future__ import annotations

import pytest

from ldapconfig.config.connection import DEFAULT_PORT
from ldapconfig.config.schema import LoggingConfig, parse_config
from ldapconfig.exceptions import ConfigurationError


def test_parse_config_defaults() -> None:
    config = parse_config({})
    assert config.environment == "development"
    assert config.ldap.get_port() == DEFAULT_PORT
    assert config.ldap.get_domain_controllers() == []
    assert config.logging == LoggingConfig()


def test_parse_config_passes_ldap_section_through() -> None:
    config = parse_config(
        {
            "environment": "production",
            "ldap": {
                "DomainControllers": ["dc1.corp.local", "dc2.corp.local"],
                "BASE_DN": "dc=corp,dc=local",
                "port": "636",
                "use_tls": True,
                "future_option": "ignored",
            },
        }
    )
    assert config.environment == "production"
    assert config.ldap.get_domain_controllers() == ["dc1.corp.local", "dc2.corp.local"]
    assert config.ldap.get_base_dn() == "dc=corp,dc=local"
    assert config.ldap.get_port() == "636"
    assert config.ldap.get_use_tls() is True


def test_parse_config_allows_null_sections() -> None:
    config = parse_config({"ldap": None, "logging": None})
    assert config.ldap.get_port() == DEFAULT_PORT
    assert config.logging.level == "INFO"


def test_parse_config_rejects_non_object_sections() -> None:
    with pytest.raises(ConfigurationError, match="config document must be an object"):
        parse_config(["ldap"])
    with pytest.raises(ConfigurationError, match="'ldap' must be an object"):
        parse_config({"ldap": ["dc1"]})
    with pytest.raises(ConfigurationError, match="'logging' must be an object"):
        parse_config({"logging": "debug"})


def test_parse_config_surfaces_setter_errors() -> None:
    with pytest.raises(ConfigurationError, match="port must be an integer"):
        parse_config({"ldap": {"port": "ldaps"}})


def test_parse_logging_section() -> None:
    config = parse_config(
        {
            "logging": {
                "level": "debug",
                "format": "text",
                "sink": "file",
                "file_path": "logs/ldap.log",
                "service_name": "bind-checker",
            }
        }
    )
    assert config.logging.level == "DEBUG"
    assert config.logging.fmt == "text"
    assert config.logging.sink == "file"
    assert config.logging.file_path == "logs/ldap.log"
    assert config.logging.service_name == "bind-checker"


def test_parse_logging_rejects_invalid_values() -> None:
    with pytest.raises(ConfigurationError, match="invalid log level"):
        parse_config({"logging": {"level": "chatty"}})
    with pytest.raises(ConfigurationError, match="invalid log format"):
        parse_config({"logging": {"format": "xml"}})
    with pytest.raises(ConfigurationError, match="invalid log sink"):
        parse_config({"logging": {"sink": "syslog"}})
    with pytest.raises(ConfigurationError, match="file_path is required"):
        parse_config({"logging": {"sink": "file"}})


def test_parse_config_blank_text_values_stay_empty() -> None:
    config = parse_config({"ldap": {"account_prefix": None, "admin_password": None}})
    assert config.ldap.get_account_prefix() == ""
    assert config.ldap.get_admin_credentials() == (None, "", None)
