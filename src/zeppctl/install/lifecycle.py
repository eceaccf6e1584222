"""LifecycleController — bootstrap, start, stop, and clean a Zeppelin sandbox.

The daemon is observed through two signals only:

1. **Bootstrapped** — the daemon script exists at ``layout.daemon_executable``.
2. **Running** — whatever the injected :class:`LivenessCheck` reports.

Every external command must complete with exit code 0; anything else aborts
the current operation without rolling back earlier steps.  A rerun picks up
where the failed one stopped because each install step checks the disk
first.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from zeppctl.config.models import ZeppelinSettings
from zeppctl.errors import DirectoryCreationError, DirectoryRemovalError, ReadinessTimeoutError
from zeppctl.install.fetcher import ArchiveFetcher
from zeppctl.install.liveness import AssumeStopped, LivenessCheck
from zeppctl.runtime.models import CommandInvocation
from zeppctl.runtime.runner import ProcessRunner, ensure_success

if TYPE_CHECKING:
    from zeppctl.config.layout import InstallLayout

logger = logging.getLogger(__name__)


class LifecycleController:
    """Drives the Zeppelin daemon through its install and run states."""

    def __init__(
        self,
        layout: InstallLayout,
        *,
        settings: ZeppelinSettings | None = None,
        runner: ProcessRunner | None = None,
        fetcher: ArchiveFetcher | None = None,
        liveness: LivenessCheck | None = None,
    ) -> None:
        self._layout = layout
        self._settings = settings or ZeppelinSettings()
        self._runner = runner or ProcessRunner(
            timeout=self._settings.process_timeout,
            terminate_grace=self._settings.terminate_grace,
        )
        self._fetcher = fetcher or ArchiveFetcher(self._runner, self._settings)
        self._liveness: LivenessCheck = liveness or AssumeStopped()

    @property
    def layout(self) -> InstallLayout:
        return self._layout

    @property
    def liveness(self) -> LivenessCheck:
        return self._liveness

    @property
    def is_bootstrapped(self) -> bool:
        return self._layout.daemon_executable.exists()

    async def is_running(self) -> bool:
        return await self._liveness.is_running()

    async def bootstrap(self) -> None:
        """Download, unpack, start, install the Solr interpreter, restart.

        Configuring the interpreter setting is a separate step
        (``update-interpreter``) because Zeppelin needs time to come up after
        the restart.
        """
        self._ensure_base_dir()
        await self._fetcher.ensure_downloaded(self._layout)
        await self._fetcher.ensure_unpacked(self._layout)

        logger.info("Finished initializing Zeppelin sandbox, attempting to start zeppelin...")
        await self.start()
        logger.info("Finished starting zeppelin, attempting to install the %s interpreter", self._settings.interpreter_name)
        await self.install_interpreter()
        logger.info("Finished installing interpreter plugin, attempting to restart zeppelin")
        await self.restart()
        logger.info("Finished restarting zeppelin")

    async def start(self) -> None:
        await self._daemon("start")

    async def restart(self) -> None:
        await self._daemon("restart")

    async def stop(self) -> None:
        """Stop the daemon; a missing install or a stopped daemon is a no-op."""
        if not self.is_bootstrapped:
            logger.info("No Zeppelin sandbox exists to stop; done.")
            return
        if not await self.is_running():
            logger.info("Zeppelin was already stopped")
            return
        logger.info("Stopping Zeppelin using executable: %s", self._layout.daemon_executable)
        await self._daemon("stop")

    async def install_interpreter(self) -> None:
        await self._execute(
            self._layout.interpreter_installer,
            "--name",
            self._settings.interpreter_name,
            "--artifact",
            self._settings.interpreter_artifact,
        )

    async def clean(self) -> None:
        """Stop Zeppelin if it is running, then delete the whole base directory.

        Must not run while another zeppctl process uses the same install root.
        """
        if self.is_bootstrapped and await self.is_running():
            await self.stop()

        base_dir = self._layout.base_dir
        if not base_dir.exists():
            logger.info("Nothing to clean at %s", base_dir)
            return
        try:
            shutil.rmtree(base_dir)
        except OSError as exc:
            raise DirectoryRemovalError(str(base_dir), str(exc)) from exc
        logger.info("Removed Zeppelin sandbox at %s", base_dir)

    async def wait_until_ready(
        self,
        *,
        attempts: int | None = None,
        delay: float | None = None,
    ) -> None:
        """Poll the liveness check until Zeppelin reports running."""
        attempts = attempts or self._settings.readiness_attempts
        delay = self._settings.readiness_delay if delay is None else delay

        for attempt in range(1, attempts + 1):
            if await self.is_running():
                logger.info("Zeppelin is up after %d check(s)", attempt)
                return
            if attempt < attempts:
                await asyncio.sleep(delay)
        raise ReadinessTimeoutError(attempts, delay)

    def _ensure_base_dir(self) -> None:
        base_dir = self._layout.base_dir
        if not base_dir.exists():
            try:
                base_dir.mkdir()
            except OSError as exc:
                raise DirectoryCreationError(str(base_dir), str(exc)) from exc
        logger.info("Zeppelin base dir created successfully at %s", base_dir)

    async def _daemon(self, verb: str) -> None:
        await self._execute(self._layout.daemon_executable, verb)

    async def _execute(self, executable: Path, *args: str) -> None:
        invocation = CommandInvocation(executable=str(executable), args=list(args))
        outcome = await self._runner.run(invocation)
        ensure_success(invocation, outcome)
