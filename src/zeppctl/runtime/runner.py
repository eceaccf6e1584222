"""ProcessRunner — launches external commands with a bounded wait.

The runner only classifies what happened (completed, timed out, never
started).  Deciding whether an exit code is acceptable is left to callers,
usually via :func:`ensure_success`.
"""

from __future__ import annotations

import asyncio
import logging
import os
import signal
from typing import IO

from zeppctl.errors import CommandExitError, CommandLaunchError, CommandTimeoutError
from zeppctl.runtime.models import (
    CommandInvocation,
    CommandOutcome,
    Completed,
    LaunchFailed,
    TimedOut,
)
from zeppctl.utils.telemetry import ATTR_COMMAND, ATTR_EXIT_CODE, ATTR_OUTCOME, get_tracer

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)

DEFAULT_TIMEOUT = 90.0
DEFAULT_TERMINATE_GRACE = 5.0

# Each child leads its own process group so a timeout reaches its descendants.
_USE_PROCESS_GROUPS = hasattr(os, "killpg")


class ProcessRunner:
    """Runs one external command at a time and waits for it.

    Children that outlive their timeout are sent SIGTERM, then killed if
    they are still around after ``terminate_grace`` seconds.  On POSIX each
    child starts in a new session, and the signals go to its whole process
    group, so anything it spawned is stopped with it.  Descendants that call
    ``setsid`` themselves escape the group and are not reached.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        terminate_grace: float = DEFAULT_TERMINATE_GRACE,
    ) -> None:
        self._timeout = timeout
        self._terminate_grace = terminate_grace

    @property
    def timeout(self) -> float:
        return self._timeout

    async def run(self, invocation: CommandInvocation) -> CommandOutcome:
        """Launch *invocation* and wait for it to exit or time out."""
        timeout = invocation.timeout if invocation.timeout is not None else self._timeout
        command_line = " ".join(invocation.argv)

        with _tracer.start_as_current_span("zeppctl.command") as span:
            span.set_attribute(ATTR_COMMAND, command_line)
            outcome = await self._run(invocation, timeout)
            span.set_attribute(ATTR_OUTCOME, outcome.kind)
            if isinstance(outcome, Completed):
                span.set_attribute(ATTR_EXIT_CODE, outcome.exit_code)
            return outcome

    async def _run(self, invocation: CommandInvocation, timeout: float) -> CommandOutcome:
        logger.debug("Running [%s] in %s", " ".join(invocation.argv), invocation.cwd or ".")

        log_file: IO[bytes] | None = None
        try:
            if invocation.log_path is not None:
                log_file = invocation.log_path.open("wb")
            proc = await asyncio.create_subprocess_exec(
                *invocation.argv,
                cwd=invocation.cwd,
                stdout=log_file,
                stderr=log_file,
                start_new_session=_USE_PROCESS_GROUPS,
            )
        except OSError as exc:
            if log_file is not None:
                log_file.close()
            logger.debug("Launch of %s failed: %s", invocation.executable, exc)
            return LaunchFailed(cause=str(exc))

        try:
            returncode = await asyncio.wait_for(proc.wait(), timeout=timeout)
        except TimeoutError:
            await self._terminate(proc)
            return TimedOut(timeout=timeout)
        except asyncio.CancelledError:
            # The child is outside the terminal's process group and misses Ctrl-C.
            await self._terminate(proc)
            raise
        finally:
            if log_file is not None:
                log_file.close()

        return Completed(exit_code=returncode)

    async def _terminate(self, proc: asyncio.subprocess.Process) -> None:
        """Stop a child that overran its timeout."""
        logger.warning("Terminating timed-out process %s", proc.pid)
        if not _signal(proc, kill=False):
            return
        try:
            await asyncio.wait_for(proc.wait(), timeout=self._terminate_grace)
        except TimeoutError:
            logger.warning("Process %s ignored SIGTERM; killing it", proc.pid)
            if not _signal(proc, kill=True):
                return
            await proc.wait()
        else:
            # Descendants may outlive the group leader.
            _signal(proc, kill=True)


def _signal(proc: asyncio.subprocess.Process, *, kill: bool) -> bool:
    """Terminate (or kill) the child's process group, or the child alone where
    groups are unavailable.  Returns False once nothing is left to signal."""
    try:
        if _USE_PROCESS_GROUPS:
            os.killpg(proc.pid, signal.SIGKILL if kill else signal.SIGTERM)
        elif kill:
            proc.kill()
        else:
            proc.terminate()
    except ProcessLookupError:
        return False
    return True


def ensure_success(invocation: CommandInvocation, outcome: CommandOutcome) -> None:
    """Raise the matching :class:`~zeppctl.errors.CommandError` unless the
    command completed with exit code 0."""
    if isinstance(outcome, Completed):
        if outcome.exit_code != 0:
            raise CommandExitError(invocation.argv, outcome.exit_code)
        return
    if isinstance(outcome, TimedOut):
        raise CommandTimeoutError(invocation.argv, outcome.timeout)
    raise CommandLaunchError(invocation.argv, outcome.cause)
