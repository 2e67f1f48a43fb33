"""
Loop driver - the read-tokenize-dispatch-execute cycle.
"""

from __future__ import annotations

import logging
from typing import Callable

from tinysh.core.datamodels import STOP, LoopState
from tinysh.core.reader import Line
from tinysh.core.tokenizer import split_line
from tinysh.engine.dispatch import execute

logger = logging.getLogger(__name__)

# Input collaborator: shows the prompt, blocks for one line
LineReader = Callable[[str], Line]


def _no_prompt() -> str:
    return ""


class ShellLoop:
    """Repeatedly read a line, tokenize it and dispatch it.

    The loop starts RUNNING and moves to STOPPED when a command returns
    the stop signal or when input ends.

    Args:
        read_line: Input collaborator, called with the prompt string.
        get_prompt: Prompt collaborator. Failures give an empty prompt.
        dispatch: Function running a token list and returning a
            continuation signal.
    """

    def __init__(
        self,
        read_line: LineReader,
        get_prompt: Callable[[], str] | None = None,
        dispatch: Callable[[list[str]], int] = execute,
    ):
        self.read_line = read_line
        self.get_prompt = get_prompt or _no_prompt
        self.dispatch = dispatch
        self.state = LoopState.RUNNING

    def _prompt(self) -> str:
        try:
            return self.get_prompt()
        except Exception as e:
            logger.warning(f"Could not render prompt: {e}")
            return ""

    def step(self) -> LoopState:
        """Run one iteration and return the resulting state."""
        if self.state is LoopState.STOPPED:
            return self.state

        line = self.read_line(self._prompt())
        tokens = split_line(line.text)
        status = self.dispatch(tokens)

        if status == STOP:
            logger.debug("Stop signal received")
            self.state = LoopState.STOPPED
        elif line.eof:
            logger.debug("End of input")
            self.state = LoopState.STOPPED
        return self.state

    def run(self) -> LoopState:
        """Step until the loop stops."""
        while self.state is LoopState.RUNNING:
            self.step()
        return self.state
