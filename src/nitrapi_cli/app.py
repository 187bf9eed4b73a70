"""Root Typer app: global options and command group registration."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.logging import RichHandler

from nitrapi_cli import __version__
from nitrapi_cli.commands import cloud, config_cmd, gameserver, service

app = typer.Typer(
    name="nitrapi-cli",
    help="CLI for the Nitrado REST API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"nitrapi-cli {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_time=False, show_path=False)],
    )
    logging.getLogger("nitrapi_cli").setLevel(level)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests."),
) -> None:
    """Manage Nitrado cloud servers and gameservers."""
    configure_logging(verbose)


# Register command groups
app.add_typer(config_cmd.app, name="config")
app.add_typer(service.app, name="service")
app.add_typer(cloud.app, name="cloud")
app.add_typer(gameserver.app, name="gameserver")


def main() -> None:
    app()
