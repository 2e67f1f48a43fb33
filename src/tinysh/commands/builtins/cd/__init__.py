"""Cd command - change the working directory."""
from __future__ import annotations

import os

from tinysh.commands.registry import builtin_registry
from tinysh.core.datamodels import CONTINUE
from tinysh.core.helpers import report_error, report_os_error


@builtin_registry.register("cd", "Change the working directory", usage="cd <dir>")
def cmd_cd(tokens: list[str]) -> int:
    """Change directory. The working directory is only changed here."""
    if len(tokens) < 2:
        report_error('expected argument to "cd"')
        return CONTINUE

    try:
        os.chdir(tokens[1])
    except OSError as e:
        report_os_error(e, tokens[1])
    return CONTINUE
