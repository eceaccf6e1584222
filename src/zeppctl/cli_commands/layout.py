"""``zeppctl layout`` — show where the Zeppelin sandbox lives."""

from __future__ import annotations

import click

from zeppctl.cli_commands._output import abort, print_layout
from zeppctl.cli_commands.zeppelin import load_settings
from zeppctl.config.layout import InstallLayout
from zeppctl.errors import ZeppelinToolError


@click.command()
@click.option(
    "--install-dir",
    "-d",
    required=True,
    envvar="SOLR_INSTALL_DIR",
    type=click.Path(file_okay=False),
    help="Solr install directory.",
)
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), default=None, help="Settings YAML file.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def layout(install_dir: str, config: str | None, as_json: bool) -> None:
    """Print the paths and download URL computed for INSTALL_DIR."""
    try:
        settings = load_settings(config)
    except ZeppelinToolError as exc:
        abort("Configuration error", exc)

    print_layout(InstallLayout.from_root(install_dir, settings), as_json=as_json)
