"""
Exception classes for the shell core.
"""


class ShellError(Exception):
    """Base exception for shell errors.

    Attributes:
        message: Error message shown to the operator.
        exit_code: Process exit code to use if the error ends the shell.
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


class FatalShellError(ShellError):
    """Unrecoverable error. The whole process terminates."""


class AllocationError(FatalShellError):
    """Growing the line buffer or token list failed."""

    def __init__(self, what: str = "buffer"):
        super().__init__("allocation error")
        self.what = what


class SpawnError(ShellError):
    """The child process could not be created."""
