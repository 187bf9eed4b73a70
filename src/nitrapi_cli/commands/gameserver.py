"""Gameserver commands: details, restart/stop, games, statistics."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Optional

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
from nitrapi_cli.services.gameserver import Gameserver
from nitrapi_cli.services.registry import ServiceRegistry

app = typer.Typer(name="gameserver", help="Gameserver details, control, and games.")
console = Console()

GameArg = Annotated[str, typer.Argument(help="Game short name (folder_short)")]
MessageOpt = Annotated[
    Optional[str],
    typer.Option("--message", "-m", help="Message shown to players"),
]


def _format_epoch(ts: int | None) -> str:
    """Convert epoch seconds to a human-readable timestamp string."""
    if ts is None:
        return ""
    try:
        dt = datetime.fromtimestamp(ts, tz=timezone.utc).astimezone()
        return dt.strftime("%Y-%m-%d %H:%M")
    except (ValueError, OSError, OverflowError):
        return str(ts)


@app.command()
@error_handler
def show(
    service_id: ServiceIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """Show gameserver status, address, game, and slots."""
    fmt = output_format(fmt)
    with make_client(profile, url, token) as client:
        server = load_service(client, service_id, Gameserver)
        if server.snapshot is None:
            return
        if fmt != "table":
            output(server.snapshot, fmt)
            return
        address = None
        if server.ip is not None and server.port is not None:
            address = f"{server.ip}:{server.port}"
        summary = {
            "status": server.gameserver_status,
            "address": address,
            "game": server.game_readable,
            "game_short": server.game,
            "slots": server.slots,
            "memory": server.memory_type,
            "location": server.location,
            "label": server.label,
        }
        query = server.query
        if query is not None:
            summary["players"] = f"{query.player_current}/{query.player_max}"
            summary["map"] = query.map
        output(summary, fmt, title=f"Gameserver {service_id}")


@app.command()
@error_handler
def restart(
    service_id: ServiceIdArg,
    message: MessageOpt = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Restart the gameserver."""
    with make_client(profile, url, token) as client:
        ServiceRegistry(client).gameserver(service_id).restart(message)
        console.print("[green]Restart requested.[/]")


@app.command()
@error_handler
def stop(
    service_id: ServiceIdArg,
    message: MessageOpt = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Stop the gameserver."""
    with make_client(profile, url, token) as client:
        ServiceRegistry(client).gameserver(service_id).stop(message)
        console.print("[green]Stop requested.[/]")


@app.command()
@error_handler
def games(
    service_id: ServiceIdArg,
    installed: Annotated[
        bool, typer.Option("--installed", "-i", help="Only installed games"),
    ] = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """List available games."""
    fmt = output_format(fmt)
    with make_client(profile, url, token) as client:
        game_list = ServiceRegistry(client).gameserver(service_id).get_games()
        items = list(game_list.installed or ()) if installed else list(game_list.games or ())
        columns = ["Short", "Name", "Installed", "Active"]
        rows = [[g.folder_short, g.name, g.installed, g.active] for g in items]
        title = "Installed Games" if installed else "Games"
        output(items, fmt, columns=columns, rows=rows, title=title)


@app.command()
@error_handler
def install(
    service_id: ServiceIdArg,
    game: GameArg,
    modpack: Annotated[
        Optional[str], typer.Option("--modpack", help="Modpack file name"),
    ] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Install a game, optionally with a modpack."""
    with make_client(profile, url, token) as client:
        ServiceRegistry(client).gameserver(service_id).install_game(game, modpack)
        console.print(f"[green]Installation of {game} started.[/]")


@app.command()
@error_handler
def uninstall(
    service_id: ServiceIdArg,
    game: GameArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Uninstall a game."""
    with make_client(profile, url, token) as client:
        ServiceRegistry(client).gameserver(service_id).uninstall_game(game)
        console.print(f"[green]{game} uninstalled.[/]")


@app.command("start-game")
@error_handler
def start_game(
    service_id: ServiceIdArg,
    game: GameArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Switch to an already installed game."""
    with make_client(profile, url, token) as client:
        ServiceRegistry(client).gameserver(service_id).start_game(game)
        console.print(f"[green]Switching to {game}.[/]")


@app.command()
@error_handler
def stats(
    service_id: ServiceIdArg,
    hours: Annotated[int, typer.Option("--hours", help="Time range, 1 to 24")] = 24,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """Show player, CPU, and memory statistics."""
    fmt = output_format(fmt)
    with make_client(profile, url, token) as client:
        result = ServiceRegistry(client).gameserver(service_id).get_stats(hours)
        players = {ts: value for value, ts in result.current_players or ()}
        cpu = {ts: value for value, ts in result.cpu_usage or ()}
        memory = {ts: value for value, ts in result.memory_usage or ()}
        columns = ["Time", "Players", "CPU %", "Memory MB"]
        rows = [
            [_format_epoch(ts), players.get(ts), cpu.get(ts), memory.get(ts)]
            for ts in sorted(set(players) | set(cpu) | set(memory))
        ]
        output(result, fmt, columns=columns, rows=rows, title="Statistics")


@app.command()
@error_handler
def command(
    service_id: ServiceIdArg,
    cmd: Annotated[str, typer.Argument(help="Console command")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
) -> None:
    """Send a console command to the game."""
    with make_client(profile, url, token) as client:
        ServiceRegistry(client).gameserver(service_id).send_command(cmd)
        console.print("[green]Command sent.[/]")


@app.command()
@error_handler
def ddos(
    service_id: ServiceIdArg,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = None,
) -> None:
    """Show the DDoS attack history."""
    fmt = output_format(fmt)
    with make_client(profile, url, token) as client:
        attacks = ServiceRegistry(client).gameserver(service_id).get_ddos_history()
        columns = ["ID", "Started", "Ended", "Type", "PPS", "Bandwidth"]
        rows = [
            [a.id, a.started_at, a.ended_at, a.attack_type, a.pps, a.bandwidth]
            for a in attacks
        ]
        output(attacks, fmt, columns=columns, rows=rows, title="DDoS History")
