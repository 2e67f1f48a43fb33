"""
CLI module for the tinysh package.

Provides the tinysh entry point and its interactive front-ends.
"""

from tinysh.cli._simple_repl import repl as simple_repl
from tinysh.cli.prompt import clear_screen, render_prompt
from tinysh.cli.shell import main

__all__ = [
    "main",
    "simple_repl",
    "render_prompt",
    "clear_screen",
]
