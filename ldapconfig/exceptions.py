"""Error types raised while building LDAP connection configuration."""

from __future__ import annotations


class LdapConfigError(Exception):
    """Base class for every error raised by ldapconfig."""


class ConfigurationError(LdapConfigError, ValueError):
    """A configuration value was rejected by its setter or section parser."""


class InvalidArgumentError(LdapConfigError, TypeError):
    """The option set handed to a config object has an unsupported shape."""
