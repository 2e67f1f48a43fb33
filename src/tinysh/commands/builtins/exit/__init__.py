"""Exit command - leave the shell."""
from __future__ import annotations

from tinysh.commands.registry import builtin_registry
from tinysh.core.datamodels import STOP


@builtin_registry.register("exit", "Exit the shell")
def cmd_exit(tokens: list[str]) -> int:
    """Stop the loop. Arguments are ignored."""
    return STOP
