"""Shared error types for zeppctl.

Every failure the core can report derives from :class:`ZeppelinToolError`.
The CLI is the only place that turns these into a process exit status.
"""

from __future__ import annotations

from collections.abc import Sequence


class ZeppelinToolError(Exception):
    """Base error for all zeppctl failures."""


class ConfigError(ZeppelinToolError):
    """Settings could not be loaded or the requested options conflict."""


class DirectoryCreationError(ZeppelinToolError):
    """The Zeppelin base directory could not be created."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        super().__init__(
            f"Unable to create base directory [{path}] for Zeppelin install"
            + (f": {detail}" if detail else "")
        )


class DirectoryRemovalError(ZeppelinToolError):
    """The Zeppelin base directory could not be removed."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Unable to remove [{path}]" + (f": {detail}" if detail else ""))


class DownloadError(ZeppelinToolError):
    """The Zeppelin archive could not be downloaded."""

    def __init__(self, url: str, detail: str = "") -> None:
        self.url = url
        self.detail = detail
        super().__init__(f"Download of {url} failed" + (f": {detail}" if detail else ""))


class CommandError(ZeppelinToolError):
    """An external command did not complete successfully."""

    def __init__(self, command: Sequence[str], message: str) -> None:
        self.command = list(command)
        super().__init__(f"Command [{self.command_line}] {message}")

    @property
    def command_line(self) -> str:
        return " ".join(self.command)


class CommandTimeoutError(CommandError):
    """The command did not finish within the allowed time."""

    def __init__(self, command: Sequence[str], timeout: float) -> None:
        self.timeout = timeout
        super().__init__(command, f"did not finish within {timeout} seconds")


class CommandExitError(CommandError):
    """The command exited with a non-zero status."""

    def __init__(self, command: Sequence[str], exit_code: int) -> None:
        self.exit_code = exit_code
        super().__init__(command, f"failed with code: {exit_code}")


class CommandLaunchError(CommandError):
    """The command could not be started at all."""

    def __init__(self, command: Sequence[str], cause: str) -> None:
        self.cause = cause
        super().__init__(command, f"could not be launched: {cause}")


class TemplateReadError(ZeppelinToolError):
    """The interpreter template is missing or unreadable."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        super().__init__(
            f"Cannot read interpreter template {path}" + (f": {detail}" if detail else "")
        )


class InterpreterWriteError(ZeppelinToolError):
    """The rendered interpreter document could not be written to disk."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        super().__init__(
            f"Cannot write interpreter document {path}" + (f": {detail}" if detail else "")
        )


class InterpreterUpdateError(ZeppelinToolError):
    """Pushing the interpreter setting to Zeppelin failed."""


class HttpStatusError(InterpreterUpdateError):
    """Zeppelin answered the interpreter update with a status >= 300."""

    def __init__(self, url: str, status_code: int, body: str = "") -> None:
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Received [{status_code}] status when creating Solr interpreter at {url}"
        )


class HttpTransportError(InterpreterUpdateError):
    """The interpreter update request never got a response."""

    def __init__(self, url: str, detail: str = "") -> None:
        self.url = url
        self.detail = detail
        super().__init__(
            f"Error encountered creating/updating Solr interpreter at {url}"
            + (f": {detail}" if detail else "")
        )


class ReadinessTimeoutError(ZeppelinToolError):
    """Zeppelin did not report itself running within the polling budget."""

    def __init__(self, attempts: int, delay: float) -> None:
        self.attempts = attempts
        self.delay = delay
        super().__init__(
            f"Zeppelin did not become ready after {attempts} checks {delay}s apart"
        )
