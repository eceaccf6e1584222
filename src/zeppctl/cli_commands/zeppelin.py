"""``zeppctl zeppelin`` — bootstrap, clean, start, stop, or configure Zeppelin."""

from __future__ import annotations

import asyncio
from pathlib import Path

import click
from pydantic import ValidationError

from zeppctl.cli_commands._output import abort
from zeppctl.config.models import ZeppelinSettings
from zeppctl.errors import ConfigError, ZeppelinToolError
from zeppctl.orchestrator import LifecycleAction

_ACTIONS = [a.value for a in LifecycleAction]


def load_settings(config: str | None, timeout: float | None = None) -> ZeppelinSettings:
    """Build settings from an optional YAML file plus CLI overrides."""
    from zeppctl.config.loader import SettingsLoader

    settings = SettingsLoader(Path(config)).load() if config else ZeppelinSettings()
    if timeout is None:
        return settings
    # model_copy skips validation
    try:
        return ZeppelinSettings.model_validate({**settings.model_dump(), "process_timeout": timeout})
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


@click.command()
@click.option(
    "--action",
    "-a",
    required=True,
    type=click.Choice(_ACTIONS, case_sensitive=False),
    help="The action to perform on the Zeppelin install.",
)
@click.option(
    "--solr-url",
    "-s",
    required=True,
    metavar="URL",
    help="The URL of a valid Solr instance; used to configure the Zeppelin interpreter.",
)
@click.option(
    "--zeppelin-url",
    "-z",
    default=None,
    metavar="URL",
    help="The Zeppelin URL to update. Defaults to http://localhost:8080.",
)
@click.option(
    "--install-dir",
    "-d",
    required=True,
    envvar="SOLR_INSTALL_DIR",
    type=click.Path(file_okay=False),
    help="Solr install directory; Zeppelin lives under its 'zeppelin' subdirectory.",
)
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), default=None, help="Settings YAML file.")
@click.option(
    "--liveness",
    type=click.Choice(["http", "assume-stopped"]),
    default="http",
    show_default=True,
    help="How to tell whether Zeppelin is running.",
)
@click.option(
    "--configure-interpreter",
    is_flag=True,
    help="After bootstrap, wait for Zeppelin and create the Solr interpreter.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds to wait for each external command.",
)
def zeppelin(
    action: str,
    solr_url: str,
    zeppelin_url: str | None,
    install_dir: str,
    config: str | None,
    liveness: str,
    configure_interpreter: bool,
    timeout: float | None,
) -> None:
    """Manage the Zeppelin sandbox under the Solr install directory."""
    from zeppctl.install.liveness import AssumeStopped, HttpLivenessCheck, LivenessCheck
    from zeppctl.orchestrator import build_orchestrator

    try:
        settings = load_settings(config, timeout)
    except ZeppelinToolError as exc:
        abort("Configuration error", exc)

    effective_url = zeppelin_url or settings.zeppelin_url
    probe: LivenessCheck
    if liveness == "http":
        probe = HttpLivenessCheck(effective_url)
    else:
        probe = AssumeStopped()

    orchestrator = build_orchestrator(install_dir, settings, liveness=probe)

    try:
        asyncio.run(
            orchestrator.run(
                LifecycleAction.parse(action),
                solr_url=solr_url,
                zeppelin_url=effective_url,
                configure_interpreter=configure_interpreter,
            )
        )
    except ZeppelinToolError as exc:
        abort(f"Zeppelin {action.lower()} failed", exc)
