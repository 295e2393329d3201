"""Shared utilities."""

from decimoney.utils.logging import JSONFormatter, TextFormatter, get_logger, setup_logging

__all__ = ["JSONFormatter", "TextFormatter", "get_logger", "setup_logging"]
