"""Cloud server commands: details, power actions, backups, traffic."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from nitrapi_cli.client.errors import error_handler
from nitrapi_cli.commands._common import (
    FormatOpt,
    ProfileOpt,
    ServiceIdArg,
    TokenOpt,
    UrlOpt,
    load_service,
    make_client,
    output_format,
)
from nitrapi_cli.output.formatter import output
from nitrapi_cli.services.cloud_server import CloudServer
from nitrapi_cli.services.registry import ServiceRegistry

app = typer.Typer(name="cloud", help="Cloud server details, power actions, and backups.")
console = Console()


@app.command()
@error_handler
def show(
    service_id: ServiceIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """Show cloud server status, hardware, and image."""
    fmt = output_format(fmt)
    with make_client(profile, url, token) as client:
        server = load_service(client, service_id, CloudServer)
        if server.snapshot is not None:
            output(server.snapshot, fmt, title=f"Cloud Server {service_id}")


_ACTIONS = {
    "boot": ("boot", "Boot the cloud server.", "Boot requested"),
    "reboot": ("reboot", "Reboot the cloud server.", "Reboot requested"),
    "shutdown": ("shutdown", "Shut the cloud server down.", "Shutdown requested"),
    "reset": ("hard_reset", "Hard reset; may corrupt data.", "Hard reset triggered"),
    "rescue": ("rescue", "Reboot into rescue mode.", "Rescue mode requested"),
    "unrescue": ("unrescue", "Leave rescue mode and reboot.", "Leaving rescue mode"),
}


def _register_action(command: str, method: str, help_text: str, done: str) -> None:
    @app.command(command, help=help_text)
    @error_handler
    def _action(
        service_id: ServiceIdArg,
        profile: ProfileOpt = None,
        url: UrlOpt = None,
        token: TokenOpt = None,
    ) -> None:
        with make_client(profile, url, token) as client:
            server = ServiceRegistry(client).cloud_server(service_id)
            getattr(server, method)()
            console.print(f"[green]{done}.[/]")


for _command, (_method, _help, _done) in _ACTIONS.items():
    _register_action(_command, _method, _help, _done)


@app.command()
@error_handler
def hostname(
    service_id: ServiceIdArg,
    name: Annotated[str, typer.Argument(help="New hostname")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Change the hostname."""
    with make_client(profile, url, token) as client:
        ServiceRegistry(client).cloud_server(service_id).change_hostname(name)
        console.print(f"[green]Hostname changed to {name}.[/]")


@app.command()
@error_handler
def reinstall(
    service_id: ServiceIdArg,
    image_id: Annotated[int, typer.Argument(help="Image ID to install")],
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Reinstall the server with another image. All data is lost."""
    if not force:
        from rich.prompt import Confirm

        if not Confirm.ask(f"Reinstall cloud server {service_id}? All data will be lost"):
            console.print("Cancelled.")
            return
    with make_client(profile, url, token) as client:
        ServiceRegistry(client).cloud_server(service_id).reinstall(image_id)
        console.print("[green]Reinstallation started.[/]")


@app.command()
@error_handler
def backups(
    service_id: ServiceIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """List backups."""
    fmt = output_format(fmt)
    with make_client(profile, url, token) as client:
        items = ServiceRegistry(client).cloud_server(service_id).get_backups()
        columns = ["ID", "Name", "Status", "Size", "Created"]
        rows = [[b.id, b.name, b.status, b.size, b.created_at] for b in items]
        output(items, fmt, columns=columns, rows=rows, title="Backups")


@app.command("backup-create")
@error_handler
def backup_create(
    service_id: ServiceIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Create a new backup."""
    with make_client(profile, url, token) as client:
        ServiceRegistry(client).cloud_server(service_id).create_backup()
        console.print("[green]Backup creation started.[/]")


@app.command("backup-restore")
@error_handler
def backup_restore(
    service_id: ServiceIdArg,
    backup_id: Annotated[str, typer.Argument(help="Backup ID")],
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Restore a backup, overwriting the current disk."""
    if not force:
        from rich.prompt import Confirm

        if not Confirm.ask(f"Restore backup {backup_id} on cloud server {service_id}?"):
            console.print("Cancelled.")
            return
    with make_client(profile, url, token) as client:
        ServiceRegistry(client).cloud_server(service_id).restore_backup(backup_id)
        console.print("[green]Backup restore initiated.[/]")


@app.command("backup-delete")
@error_handler
def backup_delete(
    service_id: ServiceIdArg,
    backup_id: Annotated[str, typer.Argument(help="Backup ID")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Delete a backup."""
    with make_client(profile, url, token) as client:
        ServiceRegistry(client).cloud_server(service_id).delete_backup(backup_id)
        console.print(f"[green]Backup {backup_id} deleted.[/]")


@app.command("console-logs")
@error_handler
def console_logs(
    service_id: ServiceIdArg,
    lines: Annotated[int, typer.Option("--lines", "-n", help="Number of log lines")] = 50,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Print the serial console log."""
    with make_client(profile, url, token) as client:
        logs = ServiceRegistry(client).cloud_server(service_id).get_console_logs(lines)
        console.print(logs, markup=False, highlight=False)


@app.command()
@error_handler
def traffic(
    service_id: ServiceIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """Show daily traffic usage of the last 31 days (MB)."""
    fmt = output_format(fmt)
    with make_client(profile, url, token) as client:
        stats = ServiceRegistry(client).cloud_server(service_id).get_traffic_statistics()
        columns = ["Day", "Incoming", "Outgoing"]
        rows = [
            [day, entry.incoming, entry.outgoing]
            for day, entry in sorted((stats.last_31_days or {}).items())
        ]
        output(stats, fmt, columns=columns, rows=rows, title="Traffic (MB)")
        month = stats.current_month
        if month is not None and fmt == "table":
            console.print(f"This month: {month.used} of {month.available} MB used")


@app.command()
@error_handler
def users(
    service_id: ServiceIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """List system users and their groups."""
    fmt = output_format(fmt)
    with make_client(profile, url, token) as client:
        items = ServiceRegistry(client).cloud_server(service_id).get_users()
        columns = ["ID", "Username", "Home", "Groups"]
        rows = [
            [u.id, u.username, u.home, [g.name for g in u.groups or ()]]
            for u in items
        ]
        output(items, fmt, columns=columns, rows=rows, title="Users")
