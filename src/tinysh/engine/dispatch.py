"""
Dispatcher - runs a builtin or launches an external program.
"""

from __future__ import annotations

import logging

from tinysh.commands import BuiltinRegistry, builtin_registry, load_builtin_commands
from tinysh.core.datamodels import CONTINUE
from tinysh.core.exceptions import FatalShellError
from tinysh.core.helpers import report_error
from tinysh.core.launcher import launch

logger = logging.getLogger(__name__)

# Register the package builtins
load_builtin_commands()


def execute(tokens: list[str], registry: BuiltinRegistry | None = None) -> int:
    """Dispatch one tokenized command line.

    Builtins take priority over external programs of the same name.

    Args:
        tokens: Token list; tokens[0] is the command name.
        registry: Registry to look builtins up in (default: builtin_registry).

    Returns:
        Continuation signal: 0 to stop the loop, non-zero to keep going.
    """
    if not tokens:
        # Blank line
        return CONTINUE

    registry = registry if registry is not None else builtin_registry
    entry = registry.get(tokens[0])
    if entry is None:
        logger.debug(f"No builtin {tokens[0]!r}, launching external program")
        return launch(tokens)

    logger.debug(f"Running builtin {entry.name!r}")
    try:
        return entry.execute(tokens)
    except FatalShellError:
        raise
    except Exception as e:
        logger.exception(f"Builtin {entry.name!r} failed")
        report_error(f"{entry.name}: {e}")
        return CONTINUE
