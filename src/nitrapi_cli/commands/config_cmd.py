"""Config commands: manage access-token profiles."""

from __future__ import annotations

from collections import Counter
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt

from nitrapi_cli.client.errors import error_handler
from nitrapi_cli.client.http import NitrapiClient
from nitrapi_cli.commands._common import FormatOpt
from nitrapi_cli.config.constants import DEFAULT_API_URL, DEFAULT_APPLICATION_NAME
from nitrapi_cli.config.manager import ConfigManager
from nitrapi_cli.config.models import ApiProfile
from nitrapi_cli.output.formatter import FORMATS, output
from nitrapi_cli.services.registry import ServiceRegistry

app = typer.Typer(name="config", help="Manage access-token profiles.")
console = Console()

NameArg = Annotated[str, typer.Argument(help="Profile name")]


def _get_manager() -> ConfigManager:
    return ConfigManager()


def _mask(token: str | None) -> str:
    if not token:
        return "none"
    return token[:6] + "..." if len(token) > 12 else "***"


def _require(mgr: ConfigManager, name: str) -> ApiProfile:
    profile = mgr.get_profile(name)
    if profile is None:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)
    return profile


@app.command()
@error_handler
def init() -> None:
    """Interactive setup: store an access token as a profile."""
    mgr = _get_manager()
    console.print("[bold]nitrapi-cli setup[/]\n")

    name = Prompt.ask("Profile name", default="default")
    token = Prompt.ask("Access token", password=True)
    application_name = Prompt.ask(
        "Application name for audit messages", default=DEFAULT_APPLICATION_NAME,
    )

    mgr.add_profile(ApiProfile(name=name, token=token, application_name=application_name))
    console.print(f"\n[green]Profile '{name}' saved.[/]")
    console.print(f"Config file: {mgr.config_path}")


@app.command()
@error_handler
def add(
    name: NameArg,
    token: Annotated[str, typer.Option("--token", "-t", help="Access token")],
    url: Annotated[str, typer.Option("--url", "-u", help="API URL")] = DEFAULT_API_URL,
    application_name: Annotated[
        str, typer.Option("--app-name", help="Name reported in audit messages"),
    ] = DEFAULT_APPLICATION_NAME,
    no_verify_ssl: Annotated[bool, typer.Option("--no-verify-ssl", help="Disable SSL verification")] = False,
    make_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add or replace a profile."""
    mgr = _get_manager()
    mgr.add_profile(ApiProfile(
        name=name,
        url=url,
        token=token,
        application_name=application_name,
        verify_ssl=not no_verify_ssl,
    ))
    if make_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: FormatOpt = None,
) -> None:
    """List all configured profiles."""
    mgr = _get_manager()
    fmt = fmt or mgr.config.default_format
    profiles = list(mgr.config.profiles.values())
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'nitrapi-cli config init' to get started.[/]")
        return

    default = mgr.config.default_profile
    output(
        {"profiles": [p.model_dump(exclude={"token"}) for p in profiles]},
        fmt,
        columns=["Name", "URL", "Token", "App Name", "Default"],
        rows=[
            [p.name, p.url, _mask(p.token), p.application_name, "*" if p.name == default else ""]
            for p in profiles
        ],
        title="Profiles",
    )


@app.command()
@error_handler
def show(
    name: NameArg,
    fmt: FormatOpt = None,
) -> None:
    """Show one profile, with the token masked."""
    mgr = _get_manager()
    profile = _require(mgr, name)
    fmt = fmt or mgr.config.default_format
    data = profile.model_dump()
    data["token"] = _mask(profile.token)
    output(data, fmt, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(name: NameArg) -> None:
    """Set the default profile."""
    mgr = _get_manager()
    _require(mgr, name)
    mgr.set_default(name)
    console.print(f"[green]Default profile set to '{name}'.[/]")


@app.command("set-format")
@error_handler
def set_format(
    fmt: Annotated[str, typer.Argument(help="Output format (table, json, yaml, csv)")],
) -> None:
    """Set the output format used when --format is not given."""
    if fmt not in FORMATS:
        console.print(f"[red]Unknown output format '{fmt}'. Choose from: {', '.join(FORMATS)}[/]")
        raise typer.Exit(1)
    _get_manager().set_default_format(fmt)
    console.print(f"[green]Default output format set to '{fmt}'.[/]")


@app.command()
@error_handler
def test(
    name: Annotated[Optional[str], typer.Argument(help="Profile name (uses default if omitted)")] = None,
) -> None:
    """Check the token by listing the services it can see."""
    profile = _get_manager().resolve_profile(profile_name=name)
    console.print(f"Testing connection to [bold]{profile.url}[/]...")

    with NitrapiClient(profile) as client:
        services = ServiceRegistry(client).list_services()
    kinds = Counter(s.type or "unknown" for s in services)
    summary = ", ".join(f"{count} {kind}" for kind, count in sorted(kinds.items()))
    console.print(f"[green]Connected![/] {len(services)} service(s) visible.")
    if summary:
        console.print(summary)


@app.command()
@error_handler
def remove(
    name: NameArg,
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove a profile."""
    mgr = _get_manager()
    _require(mgr, name)
    if not force and not Confirm.ask(f"Remove profile '{name}'?"):
        console.print("Cancelled.")
        return
    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
