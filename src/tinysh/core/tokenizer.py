"""
Tokenizer - splits an input line into command name and arguments.
"""

from __future__ import annotations

import re

from tinysh.core.exceptions import AllocationError

# Space, tab, carriage return, newline and bell
TOKEN_DELIMITERS = " \t\r\n\a"

_TOKEN_RE = re.compile(f"[^{re.escape(TOKEN_DELIMITERS)}]+")


def split_line(line: str) -> list[str]:
    """Split a line into tokens on runs of delimiter characters.

    Consecutive delimiters collapse, so empty tokens are never produced.
    Only the characters in TOKEN_DELIMITERS separate tokens; there is no
    quoting or escaping.

    Args:
        line: Raw input line.

    Returns:
        List of tokens in input order. Empty if the line holds only
        delimiters.

    Raises:
        AllocationError: If the token list could not be allocated.

    Example:
        >>> split_line("plus  2\\t3\\n")
        ['plus', '2', '3']
    """
    try:
        return _TOKEN_RE.findall(line)
    except MemoryError as e:
        raise AllocationError("token list") from e
