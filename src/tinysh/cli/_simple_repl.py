"""
Simple REPL (Read-Eval-Print Loop) built on input() and readline.
"""

from __future__ import annotations

import atexit
import re
import readline
from pathlib import Path
from typing import Optional

from tinysh.cli.prompt import render_prompt
from tinysh.commands import builtin_registry
from tinysh.core.datamodels import LoopState
from tinysh.core.reader import Line
from tinysh.engine import ShellLoop

# History file path
HISTORY_FILE = Path.home() / ".tinysh" / "history"

_ANSI_RE = re.compile(r"(\033\[[0-9;]*m)")


def readline_safe(prompt: str) -> str:
    """Mark ANSI sequences as zero-width so readline measures the prompt right."""
    return _ANSI_RE.sub("\001\\1\002", prompt)


class BuiltinCompleter:
    """Completer that suggests builtin names for the first word."""

    def __init__(self):
        self.matches: list[str] = []

    def complete(self, text: str, state: int) -> str | None:
        """Return the state-th completion for text."""
        if state == 0:
            line = readline.get_line_buffer()
            # Only the command name is completed
            if line[:readline.get_begidx()].strip():
                self.matches = []
            else:
                self.matches = [name for name in builtin_registry.names() if name.startswith(text)]

        if state < len(self.matches):
            return self.matches[state]
        return None


def setup_readline(history_file: Optional[Path] = HISTORY_FILE, history_size: int = 1000):
    """Configure readline for history and completion."""
    if history_file is not None:
        history_file.parent.mkdir(parents=True, exist_ok=True)
        if history_file.exists():
            try:
                readline.read_history_file(history_file)
            except OSError:
                pass
        readline.set_history_length(history_size)
        # Save history on exit
        atexit.register(readline.write_history_file, history_file)

    completer = BuiltinCompleter()
    readline.set_completer(completer.complete)
    readline.parse_and_bind("tab: complete")


def read_line(prompt: str) -> Line:
    """Read one line with input().

    Ctrl+D gives an end-of-input line, Ctrl+C discards the current line.
    """
    try:
        return Line(input(readline_safe(prompt)))
    except EOFError:
        print()
        return Line("", eof=True)
    except KeyboardInterrupt:
        print()
        return Line("")


def repl(
    color_prompt: bool = True,
    history_file: Optional[Path] = HISTORY_FILE,
    history_size: int = 1000,
) -> LoopState:
    """Run the interactive shell loop on input().

    Args:
        color_prompt: Show the user@host prompt in color.
        history_file: Readline history file, None to keep no history.
        history_size: Number of history lines kept.

    Returns:
        The final loop state (STOPPED).
    """
    setup_readline(history_file, history_size)
    loop = ShellLoop(read_line, get_prompt=lambda: render_prompt(color_prompt))
    return loop.run()
