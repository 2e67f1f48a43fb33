"""File logging for tinysh.

The terminal belongs to the operator and to child programs, so log records
only go to ~/.tinysh/logs/tinysh.log.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

# Directory for log files
LOGS_DIR = Path.home() / ".tinysh" / "logs"

# Module-level state
_file_handler: Optional[logging.FileHandler] = None
_log_path: Optional[Path] = None


def get_log_path() -> Path:
    """Get the default log file path, creating its directory."""
    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    return LOGS_DIR / "tinysh.log"


def parse_level(level: int | str) -> int:
    """Turn "DEBUG"/"info"/10 into a logging level, WARNING if unknown."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.WARNING


def configure_logging(
    level: int | str = logging.WARNING,
    log_path: Optional[Path] = None,
) -> Path:
    """Configure file logging for the tinysh package loggers.

    Args:
        level: Logging level for file output
        log_path: Log file (default ~/.tinysh/logs/tinysh.log)

    Returns:
        Path to the log file
    """
    global _file_handler, _log_path

    log_path = log_path or get_log_path()
    level = parse_level(level)

    # Remove existing handler if any
    close_logging()

    _file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    _file_handler.setLevel(level)
    _file_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    pkg_logger = logging.getLogger("tinysh")
    pkg_logger.addHandler(_file_handler)
    pkg_logger.setLevel(level)

    _log_path = log_path
    return log_path


def close_logging() -> None:
    """Detach and close the file handler."""
    global _file_handler, _log_path

    if _file_handler is not None:
        logging.getLogger("tinysh").removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None
        _log_path = None


def get_current_log_path() -> Optional[Path]:
    """Get the active log file path, if logging is configured."""
    return _log_path
