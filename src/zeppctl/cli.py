"""zeppctl CLI entrypoint."""

from __future__ import annotations

import sys

import click

from zeppctl import __version__


@click.group()
@click.version_option(version=__version__, prog_name="zeppctl")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
@click.option("--telemetry", is_flag=True, help="Export tracing spans to the console.")
@click.option(
    "--otlp-endpoint",
    default=None,
    metavar="URL",
    help="Export tracing spans to this OTLP/gRPC collector (implies tracing).",
)
def main(verbose: bool, telemetry: bool, otlp_endpoint: str | None) -> None:
    """zeppctl — manage a Zeppelin notebook sandbox for Solr."""
    from zeppctl.cli_commands._output import configure_logging, console

    configure_logging(verbose=verbose)
    if telemetry or otlp_endpoint:
        from rich.markup import escape

        from zeppctl.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(export_to_console=telemetry, otlp_endpoint=otlp_endpoint)
        except ImportError as exc:
            console.print(f"[red]Telemetry error:[/red] {escape(str(exc))}", soft_wrap=True)
            sys.exit(1)


# Register subcommands
from zeppctl.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
