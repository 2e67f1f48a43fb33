"""
Engine module for the tinysh package.

Ties the core pieces together: the dispatcher and the command loop.
"""

from tinysh.engine.dispatch import execute
from tinysh.engine.loop import LineReader, ShellLoop

__all__ = ["execute", "ShellLoop", "LineReader"]
