"""Orchestrator — runs one lifecycle action against a Zeppelin sandbox."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from zeppctl.config.layout import InstallLayout
from zeppctl.config.models import ZeppelinSettings
from zeppctl.errors import ConfigError
from zeppctl.install.fetcher import ArchiveFetcher
from zeppctl.install.lifecycle import LifecycleController
from zeppctl.install.liveness import AssumeStopped, LivenessCheck
from zeppctl.interpreter.configurator import InterpreterConfigurator
from zeppctl.runtime.runner import ProcessRunner
from zeppctl.utils.telemetry import ATTR_ACTION, get_tracer

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)


class LifecycleAction(str, Enum):
    """The actions a single zeppctl invocation can perform."""

    BOOTSTRAP = "bootstrap"
    CLEAN = "clean"
    START = "start"
    STOP = "stop"
    UPDATE_INTERPRETER = "update-interpreter"

    @classmethod
    def parse(cls, value: str) -> LifecycleAction:
        try:
            return cls(value.lower())
        except ValueError as exc:
            msg = f"Invalid action value [{value}]; unable to proceed"
            raise ConfigError(msg) from exc


class Orchestrator:
    """Dispatches a :class:`LifecycleAction` to the controller or configurator.

    Failures surface as :class:`~zeppctl.errors.ZeppelinToolError`; turning
    them into an exit status is the caller's job.
    """

    def __init__(
        self,
        controller: LifecycleController,
        configurator: InterpreterConfigurator,
        settings: ZeppelinSettings | None = None,
    ) -> None:
        self._controller = controller
        self._configurator = configurator
        self._settings = settings or ZeppelinSettings()

    @property
    def controller(self) -> LifecycleController:
        return self._controller

    async def run(
        self,
        action: LifecycleAction | str,
        *,
        solr_url: str,
        zeppelin_url: str | None = None,
        configure_interpreter: bool = False,
    ) -> None:
        """Perform *action*.

        ``configure_interpreter`` only applies to bootstrap: once the daemon
        has been restarted, wait until it answers and push the interpreter
        setting.  That wait needs a real liveness probe.
        """
        if not isinstance(action, LifecycleAction):
            action = LifecycleAction.parse(action)
        zeppelin_url = zeppelin_url or self._settings.zeppelin_url

        if (
            action is LifecycleAction.BOOTSTRAP
            and configure_interpreter
            and isinstance(self._controller.liveness, AssumeStopped)
        ):
            msg = "Configuring the interpreter after bootstrap requires a liveness probe"
            raise ConfigError(msg)

        with _tracer.start_as_current_span("zeppctl.action") as span:
            span.set_attribute(ATTR_ACTION, action.value)
            logger.debug("Running action %s", action.value)

            if action is LifecycleAction.BOOTSTRAP:
                await self._controller.bootstrap()
                if configure_interpreter:
                    logger.info("Waiting for Zeppelin to answer before updating the interpreter")
                    await self._controller.wait_until_ready()
                    await self._configurator.update(zeppelin_url, solr_url)
                else:
                    logger.info(
                        "Run 'update-interpreter' once Zeppelin is up to create the %s interpreter",
                        self._settings.interpreter_name,
                    )
            elif action is LifecycleAction.CLEAN:
                await self._controller.clean()
            elif action is LifecycleAction.START:
                await self._controller.start()
            elif action is LifecycleAction.STOP:
                await self._controller.stop()
            elif action is LifecycleAction.UPDATE_INTERPRETER:
                await self._configurator.update(zeppelin_url, solr_url)


def build_orchestrator(
    install_dir: str | Path,
    settings: ZeppelinSettings | None = None,
    *,
    liveness: LivenessCheck | None = None,
) -> Orchestrator:
    """Wire up the layout, runner, fetcher, controller, and configurator."""
    settings = settings or ZeppelinSettings()
    layout = InstallLayout.from_root(install_dir, settings)
    runner = ProcessRunner(
        timeout=settings.process_timeout,
        terminate_grace=settings.terminate_grace,
    )
    controller = LifecycleController(
        layout,
        settings=settings,
        runner=runner,
        fetcher=ArchiveFetcher(runner, settings),
        liveness=liveness,
    )
    configurator = InterpreterConfigurator(layout, settings)
    return Orchestrator(controller, configurator, settings)
