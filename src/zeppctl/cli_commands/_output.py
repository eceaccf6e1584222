"""Shared CLI output helpers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from zeppctl.config.layout import InstallLayout  # noqa: TC001
from zeppctl.errors import HttpStatusError, ZeppelinToolError

console = Console()
err_console = Console(stderr=True)


def configure_logging(*, verbose: bool = False) -> None:
    """Send log records to stderr through rich; DEBUG when *verbose*."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def abort(label: str, exc: ZeppelinToolError) -> NoReturn:
    """Print a one-line diagnostic for *exc* and exit with status 1."""
    console.print(f"[red]{label}:[/red] {escape(str(exc))}", soft_wrap=True)
    if isinstance(exc, HttpStatusError) and exc.body:
        err_console.print(exc.body, markup=False, highlight=False, soft_wrap=True)
    sys.exit(1)


def print_layout(layout: InstallLayout, *, as_json: bool = False) -> None:
    """Pretty-print every path of an :class:`InstallLayout`."""
    if as_json:
        console.print_json(layout.model_dump_json())
        return

    table = Table(title="Zeppelin Install Layout")
    table.add_column("Name", style="cyan")
    table.add_column("Location")
    table.add_column("Exists")

    for name, value in layout.model_dump().items():
        if isinstance(value, Path):
            exists = "yes" if value.exists() else "no"
        else:
            exists = "-"
        table.add_row(name, str(value), exists)

    console.print(table)
