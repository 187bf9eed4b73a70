"""Shared helpers for CLI commands: client factory, options, handle lookup."""

from __future__ import annotations

from typing import Annotated, TypeVar

import typer
from rich.console import Console

from nitrapi_cli.client.http import NitrapiClient
from nitrapi_cli.config.manager import ConfigManager
from nitrapi_cli.services.base import Service
from nitrapi_cli.services.registry import ServiceRegistry

ServiceT = TypeVar("ServiceT", bound=Service)

_console = Console()

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Config profile"),
]
UrlOpt = Annotated[
    str | None,
    typer.Option("--url", help="API URL override"),
]
TokenOpt = Annotated[
    str | None,
    typer.Option("--token", help="Access token override"),
]
FormatOpt = Annotated[
    str | None,
    typer.Option(
        "--format", "-f",
        help="Output format (table, json, yaml, csv); defaults to the configured format",
    ),
]
ServiceIdArg = Annotated[int, typer.Argument(help="Service ID")]


def make_client(
    profile: str | None,
    url: str | None,
    token: str | None,
) -> NitrapiClient:
    """Create a NitrapiClient from CLI options, env vars, or config profile."""
    mgr = ConfigManager()
    resolved = mgr.resolve_profile(profile_name=profile, url=url, token=token)
    return NitrapiClient(resolved)


def output_format(fmt: str | None) -> str:
    """Return *fmt*, or the config file's default format when none was given."""
    return fmt or ConfigManager().config.default_format


def load_service(client: NitrapiClient, service_id: int, kind: type[ServiceT]) -> ServiceT:
    """Fetch a service and make sure it is of the expected product type."""
    service = ServiceRegistry(client).get(service_id)
    if not isinstance(service, kind):
        found = service.info.type if service.info else "unknown"
        _console.print(
            f"[red]Service {service_id} is a '{found}', not a {kind.__name__}.[/]"
        )
        raise typer.Exit(1)
    if not service.is_hydrated:
        _console.print(
            f"[yellow]Service {service_id} is {service.status}; no details available yet.[/]"
        )
    return service
