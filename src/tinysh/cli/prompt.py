"""
Prompt rendering and screen handling for the interactive shell.
"""

from __future__ import annotations

import getpass
import logging
import socket
import sys
from typing import TextIO

logger = logging.getLogger(__name__)

# ANSI escape codes for the prompt
GREEN = "\033[0;32m"
WHITE = "\033[0;37m"
CLEAR = "\033[H\033[2J"


def get_username() -> str:
    """Login name of the current user, empty if it cannot be found."""
    try:
        return getpass.getuser()
    except (KeyError, OSError) as e:
        logger.debug(f"Could not look up user name: {e}")
        return ""


def get_hostname() -> str:
    """Host name, empty if it cannot be found."""
    try:
        return socket.gethostname()
    except OSError as e:
        logger.debug(f"Could not look up host name: {e}")
        return ""


def render_prompt(color: bool = True) -> str:
    """Build the user@host:~$ prompt string.

    Args:
        color: Wrap the identity in ANSI color codes.
    """
    identity = f"{get_username()}@{get_hostname()}"
    if color:
        return f"{GREEN}{identity}{WHITE}:~$ "
    return f"{identity}:~$ "


def clear_screen(stream: TextIO | None = None) -> None:
    """Clear the terminal if the stream is one."""
    stream = stream or sys.stdout
    if stream.isatty():
        stream.write(CLEAR)
        stream.flush()
