"""
tinysh - a tiny interactive shell

Reads a line, splits it into a command name and arguments, runs it as a
builtin or as an external program, waits for it and repeats.

Example usage:
    from tinysh import ShellLoop, StreamLineReader
    import io

    loop = ShellLoop(StreamLineReader(io.StringIO("plus 2 3\\nexit\\n")))
    loop.run()  # prints 5

Adding a builtin:
    from tinysh import CONTINUE, builtin_registry

    @builtin_registry.register("hello", "Say hello")
    def cmd_hello(tokens):
        print("Hello!")
        return CONTINUE
"""

__version__ = "0.1.0"

# Core exports
from tinysh.core import (
    CONTINUE,
    STOP,
    AllocationError,
    FatalShellError,
    LaunchResult,
    Line,
    LoopState,
    ShellError,
    SpawnError,
    StreamLineReader,
    launch,
    run_external,
    split_line,
)
from tinysh.commands import BuiltinEntry, BuiltinRegistry, builtin_registry
from tinysh.engine import ShellLoop, execute

__all__ = [
    # Version
    "__version__",
    # Core
    "CONTINUE",
    "STOP",
    "Line",
    "LaunchResult",
    "LoopState",
    "ShellError",
    "FatalShellError",
    "AllocationError",
    "SpawnError",
    "StreamLineReader",
    "split_line",
    "launch",
    "run_external",
    # Builtins
    "BuiltinEntry",
    "BuiltinRegistry",
    "builtin_registry",
    # Engine
    "ShellLoop",
    "execute",
]
