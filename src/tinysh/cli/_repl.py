"""
Feature-rich REPL (Read-Eval-Print Loop) implementation using prompt_toolkit.

Provides persistent history, builtin completion and history suggestions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.history import FileHistory, InMemoryHistory

from tinysh.cli.prompt import render_prompt
from tinysh.commands import builtin_registry
from tinysh.core.datamodels import LoopState
from tinysh.core.reader import Line
from tinysh.engine import ShellLoop

# History file path
HISTORY_FILE = Path.home() / ".tinysh" / "prompt_history"


class BuiltinCompleter(Completer):
    """Completer for builtin names in command position."""

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor.lstrip()

        # Only complete the first word
        if " " in text or "\t" in text:
            return

        for name, description in builtin_registry.get_completions().items():
            if name.startswith(text):
                yield Completion(
                    name,
                    start_position=-len(text),
                    display_meta=description,
                )


class PromptToolkitReader:
    """Line reader on top of a PromptSession."""

    def __init__(self, session: PromptSession):
        self.session = session

    def __call__(self, prompt: str) -> Line:
        try:
            return Line(self.session.prompt(ANSI(prompt)))
        except EOFError:
            return Line("", eof=True)
        except KeyboardInterrupt:
            # Ctrl+C discards the current input
            return Line("")


def create_session(history_file: Optional[Path] = HISTORY_FILE) -> PromptSession:
    """Create the prompt session with history and completion."""
    if history_file is not None:
        history_file.parent.mkdir(parents=True, exist_ok=True)
        history = FileHistory(str(history_file))
    else:
        history = InMemoryHistory()

    return PromptSession(
        history=history,
        completer=BuiltinCompleter(),
        auto_suggest=AutoSuggestFromHistory(),
        complete_while_typing=False,
        enable_history_search=True,
    )


def repl(color_prompt: bool = True, history_file: Optional[Path] = HISTORY_FILE) -> LoopState:
    """Run the interactive shell loop on prompt_toolkit.

    Features:
        - Command history (persistent across sessions)
        - Tab completion for builtins
        - Ctrl+C to cancel input, Ctrl+D to exit

    Args:
        color_prompt: Show the user@host prompt in color.
        history_file: History file, None for in-memory history.

    Returns:
        The final loop state (STOPPED).
    """
    reader = PromptToolkitReader(create_session(history_file))
    loop = ShellLoop(reader, get_prompt=lambda: render_prompt(color_prompt))
    return loop.run()
