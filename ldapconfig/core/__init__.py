"""Logging helpers shared by the CLI and loader."""

from .logging import ECSJsonFormatter, configure_logging, get_logger

__all__ = ["ECSJsonFormatter", "configure_logging", "get_logger"]
