"""
Data models shared by the dispatcher, the launcher and the loop.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

# Continuation signals returned by every builtin handler and by the launcher.
# Any non-zero value keeps the loop running.
CONTINUE = 1
STOP = 0


class LoopState(Enum):
    """States of the read-tokenize-dispatch loop."""

    RUNNING = "running"
    STOPPED = "stopped"


class LaunchResult(BaseModel):
    """Termination status of a reaped external command."""

    pid: int
    exit_code: int | None = None
    term_signal: int | None = None

    @property
    def signaled(self) -> bool:
        """True if the child was terminated by a signal."""
        return self.term_signal is not None

    @property
    def succeeded(self) -> bool:
        """True if the child exited normally with status 0."""
        return self.exit_code == 0

    def describe(self) -> str:
        if self.signaled:
            return f"pid {self.pid} killed by signal {self.term_signal}"
        return f"pid {self.pid} exited with status {self.exit_code}"
