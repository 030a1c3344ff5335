"""Helpers shared across killallgit (currently logging setup)."""

from .logging import ColoredFormatter, get_logger, setup_logging

__all__ = [
    "ColoredFormatter",
    "get_logger",
    "setup_logging",
]
