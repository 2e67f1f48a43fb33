"""
Builtin command system for tinysh.

Builtins run in-process and take priority over external programs of the
same name. They are loaded from:
1. Package builtins (tinysh/commands/builtins/)
2. ~/.tinysh/commands/ (optional, user-hackable)
"""

from __future__ import annotations

from tinysh.commands.registry import BuiltinEntry, BuiltinRegistry, builtin_registry
from tinysh.commands.loader import load_builtin_commands, load_user_commands

__all__ = [
    "BuiltinEntry",
    "BuiltinRegistry",
    "builtin_registry",
    "load_builtin_commands",
    "load_user_commands",
]
