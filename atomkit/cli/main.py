#!/usr/bin/env python3
"""
atomkit CLI - deferred builder inspection

Main entrypoint for the atomkit command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from atomkit.cli.commands import inspect
from atomkit.logging_config import setup_logging

app = typer.Typer(
    name="atomkit",
    help="Inspect and replay deferred builder chains",
    add_completion=False,
)

console = Console()

app.command(name="inspect")(inspect.inspect_command)


@app.callback()
def _configure() -> None:
    setup_logging()


@app.command()
def version():
    """Show version information."""
    from atomkit import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]atomkit[/bold]", f"v{__version__}")
    table.add_row("Deferred categories", "form, post_type, settings, ajax, rest, filter")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
