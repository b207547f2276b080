"""Validated connection settings for LDAP / Active Directory clients."""

from .config.connection import AdminCredentials, ConnectionConfig, ConnectionSnapshot
from .exceptions import ConfigurationError, InvalidArgumentError, LdapConfigError

__version__ = "0.1.0"

__all__ = [
    "AdminCredentials",
    "ConfigurationError",
    "ConnectionConfig",
    "ConnectionSnapshot",
    "InvalidArgumentError",
    "LdapConfigError",
]
