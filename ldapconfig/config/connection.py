"""Connection settings for directory (LDAP / Active Directory) clients."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
import numbers
import re
from typing import Any, Callable

from ldapconfig.exceptions import ConfigurationError, InvalidArgumentError


DEFAULT_PORT = "389"
DEFAULT_SSL_PORT = "636"

_INTEGER_TEXT_RE = re.compile(r"[+-]?\d+")


def normalize_key(key: Any) -> str:
    return str(key).replace("_", "").lower()


def _coerce_text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(slots=True)
class AdminCredentials:
    """Administrator bind identity, always handed out as one unit."""

    username: str | None = None
    password: str | None = field(default=None, repr=False)
    account_suffix: str | None = None

    def as_tuple(self) -> tuple[str | None, str | None, str | None]:
        return (self.username, self.password, self.account_suffix)


@dataclass(frozen=True, slots=True)
class ConnectionSnapshot:
    base_dn: str | None
    follow_referrals: bool
    port: str
    use_tls: bool
    domain_controllers: tuple[str, ...]
    account_prefix: str | None
    account_suffix: str | None
    admin_credentials: tuple[str | None, str | None, str | None] = field(repr=False)


class ConnectionConfig:
    """Validated holder for everything needed to open and bind a directory session.

    Options may be given as a mapping or as an iterable of ``(key, value)``
    pairs. Keys are matched case-insensitively with underscores ignored, so
    ``domain_controllers``, ``DomainControllers`` and ``DOMAIN_CONTROLLERS``
    all reach the same setter. Keys without a setter are ignored.

    Options are applied in input order. If a setter rejects a value the
    constructor raises straight away; options after the failing one are never
    applied.
    """

    def __init__(self, options: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None) -> None:
        self._base_dn: str | None = None
        self._follow_referrals = False
        self._port = DEFAULT_PORT
        self._use_tls = False
        self._domain_controllers: list[str] = []
        self._account_prefix: str | None = None
        self._account_suffix: str | None = None
        self._admin = AdminCredentials()
        self._fill({} if options is None else options)

    def set_base_dn(self, dn: str | None) -> None:
        self._base_dn = dn

    def get_base_dn(self) -> str | None:
        return self._base_dn

    def set_follow_referrals(self, value: Any) -> None:
        self._follow_referrals = bool(value)

    def get_follow_referrals(self) -> bool:
        return self._follow_referrals

    def set_port(self, value: Any) -> None:
        self._port = _coerce_port(value)

    def get_port(self) -> str:
        return self._port

    def set_use_tls(self, value: Any) -> None:
        self._use_tls = bool(value)

    def get_use_tls(self) -> bool:
        return self._use_tls

    def set_domain_controllers(self, hosts: Iterable[str]) -> None:
        if isinstance(hosts, (str, bytes)) or not isinstance(hosts, Iterable):
            raise ConfigurationError("Domain controllers must be given as a list of hosts.")
        controllers = list(hosts)
        if not controllers:
            raise ConfigurationError("You must specify at least one domain controller.")
        self._domain_controllers = controllers

    def get_domain_controllers(self) -> list[str]:
        return list(self._domain_controllers)

    def set_account_prefix(self, value: Any) -> None:
        self._account_prefix = _coerce_text(value)

    def get_account_prefix(self) -> str | None:
        return self._account_prefix

    def set_account_suffix(self, value: Any) -> None:
        self._account_suffix = _coerce_text(value)

    def get_account_suffix(self) -> str | None:
        return self._account_suffix

    def set_admin_username(self, value: Any) -> None:
        self._admin.username = _coerce_text(value)

    def set_admin_password(self, value: Any) -> None:
        self._admin.password = _coerce_text(value)

    def set_admin_account_suffix(self, value: Any) -> None:
        self._admin.account_suffix = _coerce_text(value)

    def get_admin_credentials(self) -> tuple[str | None, str | None, str | None]:
        return self._admin.as_tuple()

    def snapshot(self) -> ConnectionSnapshot:
        return ConnectionSnapshot(
            base_dn=self._base_dn,
            follow_referrals=self._follow_referrals,
            port=self._port,
            use_tls=self._use_tls,
            domain_controllers=tuple(self._domain_controllers),
            account_prefix=self._account_prefix,
            account_suffix=self._account_suffix,
            admin_credentials=self._admin.as_tuple(),
        )

    def issues(self) -> list[str]:
        issues: list[str] = []
        if not self._domain_controllers:
            issues.append("no domain controllers configured")
        if self._base_dn is None or not str(self._base_dn).strip():
            issues.append("base_dn is not set")
        return issues

    def status(self) -> dict[str, Any]:
        issues = self.issues()
        return {
            "ready": not issues,
            "base_dn": self._base_dn,
            "port": self._port,
            "use_tls": self._use_tls,
            "follow_referrals": self._follow_referrals,
            "domain_controllers": list(self._domain_controllers),
            "account_prefix": self._account_prefix,
            "account_suffix": self._account_suffix,
            "admin_username": self._admin.username,
            "admin_password_present": bool(self._admin.password),
            "issues": issues,
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_dn={self._base_dn!r}, port={self._port!r}, "
            f"use_tls={self._use_tls!r}, follow_referrals={self._follow_referrals!r}, "
            f"domain_controllers={self._domain_controllers!r}, admin={self._admin!r})"
        )

    def _fill(self, options: Any) -> None:
        for key, value in _iter_option_pairs(options):
            setter = _SETTERS.get(normalize_key(key))
            if setter is not None:
                setter(self, value)


def _coerce_port(value: Any) -> str:
    if isinstance(value, bool):
        raise ConfigurationError("Your configured LDAP port must be an integer.")
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, (numbers.Real, Decimal)):
        try:
            integral = int(value)
        except (ValueError, OverflowError) as exc:
            raise ConfigurationError("Your configured LDAP port must be an integer.") from exc
        if integral == value:
            return str(integral)
    if isinstance(value, str) and _INTEGER_TEXT_RE.fullmatch(value):
        return value
    raise ConfigurationError("Your configured LDAP port must be an integer.")


def _iter_option_pairs(options: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(options, Mapping):
        return options.items()
    if isinstance(options, Iterable) and not isinstance(options, (str, bytes)):
        return _pairs_from_iterable(options)
    raise InvalidArgumentError(
        f'ConnectionConfig expects a mapping or iterable of key/value pairs; received "{type(options).__name__}"'
    )


def _pairs_from_iterable(options: Iterable[Any]) -> Iterable[tuple[Any, Any]]:
    for item in options:
        if isinstance(item, (str, bytes)) or not isinstance(item, Iterable):
            raise InvalidArgumentError(f'option entries must be (key, value) pairs; received "{type(item).__name__}"')
        pair = tuple(item)
        if len(pair) != 2:
            raise InvalidArgumentError(f"option entries must be (key, value) pairs; received {len(pair)} items")
        yield pair[0], pair[1]


_SETTERS: dict[str, Callable[[ConnectionConfig, Any], None]] = {
    "basedn": ConnectionConfig.set_base_dn,
    "followreferrals": ConnectionConfig.set_follow_referrals,
    "port": ConnectionConfig.set_port,
    "usetls": ConnectionConfig.set_use_tls,
    "domaincontrollers": ConnectionConfig.set_domain_controllers,
    "accountprefix": ConnectionConfig.set_account_prefix,
    "accountsuffix": ConnectionConfig.set_account_suffix,
    "adminusername": ConnectionConfig.set_admin_username,
    "adminpassword": ConnectionConfig.set_admin_password,
    "adminaccountsuffix": ConnectionConfig.set_admin_account_suffix,
}
