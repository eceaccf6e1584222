"""Data models for external command execution."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class CommandInvocation(BaseModel):
    """A single external command to run."""

    executable: str = Field(..., description="Path or name of the program to launch.")
    args: list[str] = Field(default_factory=list, description="Arguments passed after the executable.")
    cwd: Path | None = Field(default=None, description="Working directory for the child.")
    timeout: float | None = Field(default=None, gt=0, description="Per-invocation timeout override.")
    log_path: Path | None = Field(
        default=None,
        description="File receiving stdout and stderr; None inherits the parent's streams.",
    )

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.args]


class Completed(BaseModel):
    """The command exited on its own."""

    kind: Literal["completed"] = "completed"
    exit_code: int

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class TimedOut(BaseModel):
    """The command was still running when the timeout fired."""

    kind: Literal["timed_out"] = "timed_out"
    timeout: float


class LaunchFailed(BaseModel):
    """The command could not be started."""

    kind: Literal["launch_failed"] = "launch_failed"
    cause: str


CommandOutcome = Completed | TimedOut | LaunchFailed
