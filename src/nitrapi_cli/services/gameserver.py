"""Gameserver handle."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from nitrapi_cli.client.http import NitrapiClient
from nitrapi_cli.models.gameserver import (
    Credentials,
    DDoSAttack,
    GameList,
    GameserverInfo,
    GameserverStatus,
    GameserverType,
    MemoryType,
    Modpack,
    Query,
    Quota,
    Stats,
    UpdateStatus,
)
from nitrapi_cli.models.service import ServiceInfo
from nitrapi_cli.services.base import Service, decode, requires_permission

ROLE_GENERAL_CONTROL = "ROLE_WEBINTERFACE_GENERAL_CONTROL"
ROLE_FTP_CREDENTIALS_WRITE = "ROLE_WEBINTERFACE_FTP_CREDENTIALS_WRITE"
ROLE_MYSQL_CREDENTIALS_WRITE = "ROLE_WEBINTERFACE_MYSQL_CREDENTIALS_WRITE"
ROLE_CHANGE_GAME = "ROLE_GAMESERVER_CHANGE_GAME"


@dataclass
class GameserverState:
    """A snapshot together with the two fields the websocket feed may change.

    A new state is created from each snapshot and installed in one assignment.
    :meth:`Gameserver.update_status` and :meth:`Gameserver.update_query` are
    the only writers of *status* and *query*.
    """

    snapshot: GameserverInfo
    status: GameserverStatus | None
    query: Query | None


class Gameserver(Service[GameserverInfo]):
    """A rented gameserver."""

    resource = ("gameservers",)
    response_key = "gameserver"
    snapshot_type = GameserverInfo

    def __init__(
        self,
        client: NitrapiClient,
        service_id: int,
        *,
        info: ServiceInfo | None = None,
    ) -> None:
        super().__init__(client, service_id, info=info)
        self._state: GameserverState | None = None

    @property
    def snapshot(self) -> GameserverInfo | None:
        return self._state.snapshot if self._state is not None else None

    def _install(self, snapshot: GameserverInfo) -> None:
        self._state = GameserverState(
            snapshot=snapshot, status=snapshot.status, query=snapshot.query,
        )

    def _game_specific(self, name: str) -> Any:
        specific = self._field("game_specific")
        if specific is None:
            return None
        return getattr(specific, name)

    def _feature(self, name: str) -> bool | None:
        features = self._game_specific("features")
        if features is None:
            return None
        return getattr(features, name)

    # Push-updatable fields

    @property
    def gameserver_status(self) -> GameserverStatus | None:
        return self._state.status if self._state is not None else None

    @property
    def query(self) -> Query | None:
        return self._state.query if self._state is not None else None

    def update_status(self, status: GameserverStatus) -> None:
        """Apply a status pushed by the event feed; ignored until hydrated."""
        if self._state is not None:
            self._state.status = status

    def update_query(self, query: Query) -> None:
        """Merge query data pushed by the event feed; ignored until hydrated."""
        if self._state is None:
            return
        current = self._state.query
        self._state.query = current.merge(query) if current is not None else query

    # Snapshot accessors

    @property
    def websocket_token(self) -> str | None:
        return self._field("websocket_token")

    @property
    def minecraft_mode(self) -> bool | None:
        return self._field("minecraft_mode")

    @property
    def is_minecraft_game(self) -> bool:
        game = self.game
        return game is not None and game.startswith("mcr") and game != "mcrpocket"

    @property
    def ip(self) -> str | None:
        return self._field("ip")

    @property
    def port(self) -> int | None:
        return self._field("port")

    @property
    def query_port(self) -> int | None:
        return self._field("query_port")

    @property
    def rcon_port(self) -> int | None:
        return self._field("rcon_port")

    @property
    def label(self) -> str | None:
        return self._field("label")

    @property
    def type(self) -> GameserverType | None:
        return self._field("type")

    @property
    def memory_type(self) -> MemoryType | None:
        return self._field("memory")

    @property
    def memory_mb(self) -> int | None:
        return self._field("memory_mb")

    @property
    def game(self) -> str | None:
        """Short name of the installed game (``folder_short``)."""
        return self._field("game")

    @property
    def game_readable(self) -> str | None:
        return self._field("game_human")

    @property
    def slots(self) -> int | None:
        return self._field("slots")

    @property
    def location(self) -> str | None:
        return self._field("location")

    @property
    def modpacks(self) -> dict[str, Modpack] | None:
        return self._field("modpacks")

    @property
    def settings(self) -> dict[str, dict[str, Any]] | None:
        """Customer settings, grouped by category."""
        return self._field("settings")

    @property
    def quota(self) -> Quota | None:
        return self._field("quota")

    def get_credentials(self, type: str) -> Credentials | None:
        """Return the credentials of one side service (e.g. ``ftp``, ``mysql``)."""
        credentials = self._field("credentials")
        if not credentials or not type:
            return None
        return credentials.get(type)

    @property
    def install_path(self) -> str | None:
        return self._game_specific("path")

    @property
    def path_available(self) -> bool | None:
        return self._game_specific("path_available")

    @property
    def game_update_status(self) -> UpdateStatus | None:
        return self._game_specific("update_status")

    @property
    def last_update(self) -> datetime | None:
        return self._game_specific("last_update")

    @property
    def log_files(self) -> tuple[str, ...] | None:
        return self._game_specific("log_files")

    @property
    def config_files(self) -> tuple[str, ...] | None:
        return self._game_specific("config_files")

    @property
    def has_backups(self) -> bool | None:
        return self._feature("has_backups")

    @property
    def has_application_server(self) -> bool | None:
        return self._feature("has_application_server")

    @property
    def has_file_browser(self) -> bool | None:
        return self._feature("has_file_browser")

    @property
    def has_ftp(self) -> bool | None:
        return self._feature("has_ftp")

    @property
    def has_expert_mode(self) -> bool | None:
        return self._feature("has_expert_mode")

    @property
    def has_plugin_system(self) -> bool | None:
        return self._feature("has_plugin_system")

    @property
    def has_restart_message_support(self) -> bool | None:
        return self._feature("has_restart_message_support")

    @property
    def has_database(self) -> bool | None:
        return self._feature("has_database")

    # Control

    @requires_permission(ROLE_GENERAL_CONTROL)
    def restart(self, message: str | None = None) -> None:
        """Restart the server; *message* is shown to players if supported."""
        params = {
            "restart_message": message,
            "message": f"Server restart requested ({self._client.application_name})",
        }
        self._post("gameservers", "restart", params=params)

    @requires_permission(ROLE_GENERAL_CONTROL)
    def stop(self, message: str | None = None) -> None:
        params = {
            "stop_message": message,
            "message": f"Server stop requested ({self._client.application_name})",
        }
        self._post("gameservers", "stop", params=params)

    @requires_permission(ROLE_GENERAL_CONTROL)
    def send_command(self, command: str) -> None:
        """Send a console command; its output goes to the websocket feed."""
        self._post("gameservers", "app_server", "command", params={"command": command})

    @requires_permission(ROLE_FTP_CREDENTIALS_WRITE)
    def change_ftp_password(self, password: str) -> None:
        self._post("gameservers", "ftp", "password", params={"password": password})

    @requires_permission(ROLE_MYSQL_CREDENTIALS_WRITE)
    def change_mysql_password(self, password: str) -> None:
        self._post("gameservers", "mysql", "password", params={"password": password})

    @requires_permission(ROLE_MYSQL_CREDENTIALS_WRITE)
    def reset_mysql_database(self) -> None:
        self._post("gameservers", "mysql", "reset")

    # Games

    @requires_permission(ROLE_CHANGE_GAME)
    def get_games(self) -> GameList:
        data = self._get("gameservers", "games")
        return decode(data, into=GameList)

    @requires_permission(ROLE_CHANGE_GAME)
    def install_game(self, game: str, modpack: str | None = None) -> None:
        """Install *game*, optionally with a modpack file.

        The cached snapshot is not updated; refresh to see the new game.
        """
        params: dict[str, Any] = {"game": game}
        if modpack is not None:
            params["modpack"] = modpack
        self._post("gameservers", "games", "install", params=params)

    @requires_permission(ROLE_CHANGE_GAME)
    def uninstall_game(self, game: str) -> None:
        self._delete("gameservers", "games", "uninstall", params={"game": game})

    @requires_permission(ROLE_CHANGE_GAME)
    def start_game(self, game: str) -> None:
        """Switch to an already installed game."""
        self._post("gameservers", "games", "start", params={"game": game})

    # Statistics

    def get_stats(self, hours: int = 24) -> Stats:
        """Usage statistics of the last *hours* hours (1 to 24)."""
        data = self._get("gameservers", "stats", params={"hours": hours})
        return decode(data, "stats", into=Stats)

    def get_ddos_history(self) -> list[DDoSAttack]:
        data = self._get("ddos")
        return decode(data, "history", into=list[DDoSAttack])
