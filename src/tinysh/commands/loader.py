"""
Builtin loader - registers package builtins and user builtins.

Package builtins live in tinysh/commands/builtins/, one subpackage per
command. Extra builtins can be dropped into ~/.tinysh/commands/ when the
`user_commands` config option is enabled. Each must be in its own
subdirectory with an __init__.py file that registers itself:

    # ~/.tinysh/commands/hello/__init__.py
    from tinysh.commands import builtin_registry
    from tinysh.core import CONTINUE

    @builtin_registry.register("hello", "Say hello")
    def cmd_hello(tokens):
        print("Hello from my builtin!")
        return CONTINUE
"""

from __future__ import annotations

import importlib
import logging
import sys
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path

logger = logging.getLogger(__name__)

# Default user commands directory
USER_COMMANDS_DIR = Path.home() / ".tinysh" / "commands"

# Package builtins, in the order help lists them
PACKAGE_BUILTINS = ("cd", "help", "plus", "exit")
PACKAGE_BUILTINS_MODULE = "tinysh.commands.builtins"


def load_builtin_commands() -> int:
    """Import the package builtins so they register themselves.

    Safe to call more than once; modules are only executed on first import.

    Returns:
        Number of builtin modules loaded.
    """
    for name in PACKAGE_BUILTINS:
        importlib.import_module(f"{PACKAGE_BUILTINS_MODULE}.{name}")
    return len(PACKAGE_BUILTINS)


def discover_commands(commands_dir: Path) -> list[Path]:
    """
    Discover command directories in the given path.

    Args:
        commands_dir: Directory to search

    Returns:
        List of __init__.py paths for valid commands.
    """
    if not commands_dir.exists():
        return []

    if not commands_dir.is_dir():
        logger.warning(f"Commands path is not a directory: {commands_dir}")
        return []

    cmd_paths = []
    for subdir in sorted(commands_dir.iterdir()):
        if not subdir.is_dir():
            continue
        # Skip hidden and private directories
        if subdir.name.startswith((".", "_")):
            continue
        init_file = subdir / "__init__.py"
        if init_file.exists():
            cmd_paths.append(init_file)
        else:
            logger.debug(f"Skipping {subdir.name}: no __init__.py")

    return cmd_paths


def load_command(cmd_path: Path, prefix: str = "tinysh_cmd") -> tuple[str, bool, str]:
    """
    Load a single command module.

    Args:
        cmd_path: Path to the command's __init__.py file.
        prefix: Module name prefix for sys.modules

    Returns:
        Tuple of (cmd_name, success, error_message)
    """
    cmd_name = cmd_path.parent.name
    module_name = f"{prefix}.{cmd_name}"

    try:
        spec = spec_from_file_location(module_name, cmd_path)
        if spec is None or spec.loader is None:
            return (cmd_name, False, "Could not create module spec")

        module = module_from_spec(spec)
        sys.modules[module_name] = module
        spec.loader.exec_module(module)

        return (cmd_name, True, "")

    except SyntaxError as e:
        sys.modules.pop(module_name, None)
        return (cmd_name, False, f"Syntax error: {e}")
    except ImportError as e:
        sys.modules.pop(module_name, None)
        return (cmd_name, False, f"Import error: {e}")
    except Exception as e:
        sys.modules.pop(module_name, None)
        return (cmd_name, False, f"Error: {e}")


def load_user_commands(user_dir: Path | None = None) -> int:
    """
    Load all builtins from the user directory.

    Args:
        user_dir: User commands directory (default: ~/.tinysh/commands)

    Returns:
        Number of successfully loaded commands.
    """
    user_dir = user_dir or USER_COMMANDS_DIR
    total_loaded = 0

    for cmd_path in discover_commands(user_dir):
        cmd_name, success, error = load_command(cmd_path)

        if success:
            total_loaded += 1
            logger.info(f"Loaded user command: {cmd_name}")
        else:
            logger.warning(f"Failed to load command '{cmd_name}': {error}")

    return total_loaded
