"""Help command - list the builtins."""
from __future__ import annotations

from tinysh.commands.registry import builtin_registry
from tinysh.core.datamodels import CONTINUE


@builtin_registry.register("help", "Show this help")
def cmd_help(tokens: list[str]) -> int:
    """Print the usage banner followed by every registered builtin."""
    print("TINYSH")
    print("Type program names and arguments, and hit enter.")
    print("The following are built in:")
    for entry in builtin_registry.all_builtins():
        print(f"    {entry.usage:<16} {entry.description}")
    print("Use the man command for information on other programs.")
    return CONTINUE
