"""Utility modules for tinysh."""

from tinysh.utils.logging import close_logging, configure_logging

__all__ = ["configure_logging", "close_logging"]
