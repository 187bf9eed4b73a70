"""Service commands: list the account's services and show one."""

from __future__ import annotations

import typer

from nitrapi_cli.client.errors import error_handler
from nitrapi_cli.commands._common import (
    FormatOpt,
    ProfileOpt,
    ServiceIdArg,
    TokenOpt,
    UrlOpt,
    make_client,
    output_format,
)
from nitrapi_cli.output.formatter import output
from nitrapi_cli.services.registry import ServiceRegistry

app = typer.Typer(name="service", help="List and inspect services.")


@app.command("list")
@error_handler
def list_services(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """List all services of the account."""
    fmt = output_format(fmt)
    with make_client(profile, url, token) as client:
        services = ServiceRegistry(client).list_services()
        columns = ["ID", "Type", "Status", "Comment", "Suspends"]
        rows = [
            [s.id, s.type_human or s.type, s.status, s.comment, s.suspend_date]
            for s in services
        ]
        output(services, fmt, columns=columns, rows=rows, title="Services")


@app.command()
@error_handler
def show(
    service_id: ServiceIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """Show the service record (type, status, dates)."""
    fmt = output_format(fmt)
    with make_client(profile, url, token) as client:
        service = ServiceRegistry(client).get(service_id, activate=False)
        output(service.info, fmt, title=f"Service {service_id}")
