"""Runtime layer — bounded execution of external commands."""

from zeppctl.runtime.models import (
    CommandInvocation,
    CommandOutcome,
    Completed,
    LaunchFailed,
    TimedOut,
)
from zeppctl.runtime.runner import ProcessRunner, ensure_success

__all__ = [
    "CommandInvocation",
    "CommandOutcome",
    "Completed",
    "LaunchFailed",
    "ProcessRunner",
    "TimedOut",
    "ensure_success",
]
