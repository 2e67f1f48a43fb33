"""
Core module for the tinysh package.

Provides the tokenizer, line reader and process launcher used by the
command loop.
"""

from tinysh.core.datamodels import CONTINUE, STOP, LaunchResult, LoopState
from tinysh.core.exceptions import (
    AllocationError,
    FatalShellError,
    ShellError,
    SpawnError,
)
from tinysh.core.helpers import report_error, report_os_error
from tinysh.core.launcher import launch, run_external
from tinysh.core.reader import Line, StreamLineReader
from tinysh.core.tokenizer import TOKEN_DELIMITERS, split_line

__all__ = [
    # Signals and models
    "CONTINUE",
    "STOP",
    "LaunchResult",
    "LoopState",
    "Line",
    # Exceptions
    "ShellError",
    "FatalShellError",
    "AllocationError",
    "SpawnError",
    # Tokenizer
    "TOKEN_DELIMITERS",
    "split_line",
    # Input
    "StreamLineReader",
    # Launcher
    "launch",
    "run_external",
    # Helpers
    "report_error",
    "report_os_error",
]
