"""
Helper functions for writing shell diagnostics.
"""

from __future__ import annotations

import sys

# Prefix of every diagnostic line written by the shell itself
DIAGNOSTIC_PREFIX = "tinysh"


def report_error(msg: str) -> None:
    """Print a diagnostic line to stderr."""
    print(f"{DIAGNOSTIC_PREFIX}: {msg}", file=sys.stderr)


def report_os_error(error: OSError, path: str | None = None) -> None:
    """Print an OSError the way perror() would, optionally naming the path."""
    reason = error.strerror or str(error)
    if path is not None:
        report_error(f"{reason}: {path}")
    else:
        report_error(reason)
