"""CLI entry point for ldapconfig."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Sequence

from ldapconfig.config.loader import initialize_config, load_config
from ldapconfig.core.logging import configure_logging, get_logger
from ldapconfig.exceptions import LdapConfigError


DEFAULT_CONFIG = Path(__file__).parent / "config" / "defaults.yml"
EXIT_NOT_READY = 3
REDACTED = "********"

logger = get_logger("ldapconfig.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ldapconfig")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="Create starter config")
    init_parser.add_argument("--config", type=Path, default=Path("./config/ldapconfig.yml"))
    init_parser.add_argument("--force", action="store_true")

    check_parser = subparsers.add_parser("check", help="Validate config and report readiness")
    check_parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG)

    show_parser = subparsers.add_parser("show", help="Print resolved connection settings")
    show_parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG)

    return parser


def cmd_init(config_path: Path, force: bool) -> int:
    initialize_config(config_path, force=force)
    print(f"wrote config: {config_path}")
    return 0


def cmd_check(config_path: Path) -> int:
    try:
        config = load_config(config_path)
    except LdapConfigError as exc:
        print(str(exc))
        return 1
    configure_logging(config.logging, force=True)
    status = config.ldap.status()
    logger.info(
        "ldap config checked",
        extra={
            "event_action": "config_check",
            "event_outcome": "success" if status["ready"] else "failure",
            "payload": {"path": str(config_path), "issues": status["issues"]},
        },
    )
    print(json.dumps(status, indent=2))
    return 0 if status["ready"] else EXIT_NOT_READY


def cmd_show(config_path: Path) -> int:
    try:
        config = load_config(config_path)
    except LdapConfigError as exc:
        print(str(exc))
        return 1
    snapshot = config.ldap.snapshot()
    username, password, admin_suffix = snapshot.admin_credentials
    payload: dict[str, Any] = {
        "environment": config.environment,
        "base_dn": snapshot.base_dn,
        "domain_controllers": list(snapshot.domain_controllers),
        "port": snapshot.port,
        "use_tls": snapshot.use_tls,
        "follow_referrals": snapshot.follow_referrals,
        "account_prefix": snapshot.account_prefix,
        "account_suffix": snapshot.account_suffix,
        "admin": {
            "username": username,
            "password": REDACTED if password else None,
            "account_suffix": admin_suffix,
        },
    }
    print(json.dumps(payload, indent=2))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "init":
        return cmd_init(args.config, args.force)
    if args.command == "check":
        return cmd_check(args.config)
    if args.command == "show":
        return cmd_show(args.config)

    parser.error(f"unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
