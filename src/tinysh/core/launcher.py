"""
Process launcher - runs an external program and waits for it to finish.
"""

from __future__ import annotations

import logging
import os
import sys

from tinysh.core.datamodels import CONTINUE, LaunchResult
from tinysh.core.exceptions import SpawnError
from tinysh.core.helpers import DIAGNOSTIC_PREFIX, report_error

logger = logging.getLogger(__name__)

# Status the child exits with when exec fails
EXEC_FAILURE_STATUS = 1


def _exec_child(args: list[str]) -> None:
    """Replace the child image with the program; never returns."""
    try:
        os.execvp(args[0], args)
    except (OSError, ValueError) as e:
        # ValueError when a token holds a NUL byte
        # sys.stderr may be a replaced object in the child, write the fd directly
        reason = getattr(e, "strerror", None) or str(e)
        os.write(2, f"{DIAGNOSTIC_PREFIX}: {args[0]}: {reason}\n".encode(errors="replace"))
    finally:
        os._exit(EXEC_FAILURE_STATUS)


def wait_for_child(pid: int) -> LaunchResult:
    """Block until the child exits or is killed by a signal.

    Stop/continue state changes are reported by waitpid because of
    WUNTRACED; they are logged and waited through.
    """
    while True:
        try:
            _, status = os.waitpid(pid, os.WUNTRACED)
        except KeyboardInterrupt:
            # The child got the same SIGINT, keep waiting until it is reaped
            logger.debug(f"Interrupted while waiting for pid {pid}, still waiting")
            continue

        if os.WIFEXITED(status):
            return LaunchResult(pid=pid, exit_code=os.WEXITSTATUS(status))
        if os.WIFSIGNALED(status):
            return LaunchResult(pid=pid, term_signal=os.WTERMSIG(status))
        if os.WIFSTOPPED(status):
            logger.debug(f"pid {pid} stopped by signal {os.WSTOPSIG(status)}")


def run_external(args: list[str]) -> LaunchResult:
    """Fork, exec the program named by args[0] and reap it.

    Args:
        args: Non-empty token list; args[0] is the program name and is
            passed as argv[0].

    Returns:
        LaunchResult with the exit code or terminating signal.

    Raises:
        SpawnError: If the child process could not be created.
    """
    if not args:
        raise ValueError("run_external() needs a program name")

    # Anything still buffered would be written twice once the child exits
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        pid = os.fork()
    except OSError as e:
        raise SpawnError(e.strerror or str(e)) from e

    if pid == 0:
        _exec_child(args)

    logger.debug(f"Launched {args[0]!r} as pid {pid}")
    return wait_for_child(pid)


def launch(args: list[str]) -> int:
    """Run an external command for the shell loop.

    Launch failures never end the session: a failed fork is reported on
    stderr, a program that cannot be executed is reported by the child.

    Returns:
        CONTINUE, always.
    """
    try:
        result = run_external(args)
    except SpawnError as e:
        logger.warning(f"Could not launch {args[0]!r}: {e}")
        report_error(str(e))
        return CONTINUE

    logger.debug(result.describe())
    return CONTINUE
