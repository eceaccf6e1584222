"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from zeppctl.cli_commands.layout import layout
    from zeppctl.cli_commands.zeppelin import zeppelin

    cli.add_command(zeppelin)
    cli.add_command(layout)
