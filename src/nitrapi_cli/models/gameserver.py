"""Gameserver data models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from nitrapi_cli.models.common import SnapshotModel
from nitrapi_cli.models.value import Value


class GameserverType(Value):
    GAMESERVER = "Gameserver"
    GAMESERVER_BASIC = "Gameserver_Basic"
    GAMESERVER_EPS = "Gameserver_EPS"


class MemoryType(Value):
    STANDARD = "Standard"
    ADVANCED = "Advanced"
    PROFESSIONAL = "Professional"
    ULTIMATE = "Ultimate"


class GameserverStatus(Value):
    """Operational state of a gameserver, also pushed over the websocket."""

    STARTED = "started"
    STOPPED = "stopped"
    STOPPING = "stopping"
    RESTARTING = "restarting"
    SUSPENDED = "suspended"
    GUARDIAN_LOCKED = "guardian_locked"
    GS_INSTALLATION = "gs_installation"
    BACKUP_RESTORE = "backup_restore"
    BACKUP_CREATION = "backup_creation"
    CHUNKFIX = "chunkfix"
    OVERVIEWMAP_RENDER = "overviewmap_render"
    HOST_DOWN = "hostdown"
    UPDATING = "updating"


class UpdateStatus(Value):
    UP_TO_DATE = "up_to_date"
    IN_PROGRESS = "update_in_progress"


class Features(SnapshotModel):
    has_backups: bool | None = None
    has_application_server: bool | None = None
    has_file_browser: bool | None = None
    has_ftp: bool | None = None
    has_expert_mode: bool | None = None
    has_plugin_system: bool | None = None
    has_restart_message_support: bool | None = None
    has_database: bool | None = None


class GameSpecific(SnapshotModel):
    path: str | None = None
    path_available: bool | None = None
    update_status: UpdateStatus | None = None
    last_update: datetime | None = None
    features: Features | None = None
    log_files: tuple[str, ...] | None = None
    config_files: tuple[str, ...] | None = None


class Modpack(SnapshotModel):
    name: str | None = None
    modpack_version: str | None = None
    game_version: str | None = None
    modpack_file: str | None = None


class Credentials(SnapshotModel):
    """Login data for one of the gameserver's side services (ftp, mysql...)."""

    hostname: str | None = None
    port: int | None = None
    username: str | None = None
    password: str | None = None
    database: str | None = None


class Quota(SnapshotModel):
    """Disk quota; block values in KiB, file values as inode counts."""

    block_usage: int | None = None
    block_softlimit: int | None = None
    block_hardlimit: int | None = None
    file_usage: int | None = None
    file_softlimit: int | None = None
    file_hardlimit: int | None = None


class Player(SnapshotModel):
    id: str | None = None
    name: str | None = None
    bot: bool | None = None
    score: int | None = None
    frags: int | None = None
    deaths: int | None = None
    time: int | None = None
    ping: int | None = None


class Query(SnapshotModel):
    """Live game query data (server name, map, players)."""

    server_name: str | None = None
    connect_ip: str | None = None
    map: str | None = None
    version: str | None = None
    player_current: int | None = None
    player_max: int | None = None
    players: tuple[Player, ...] | None = None

    def merge(self, update: Query) -> Query:
        """Return a copy with every field explicitly set on *update* applied."""
        changes = {name: getattr(update, name) for name in update.model_fields_set}
        return self.model_copy(update=changes)


class GameserverInfo(SnapshotModel):
    """Snapshot decoded from ``GET services/{id}/gameservers``."""

    status: GameserverStatus | None = None
    websocket_token: str | None = None
    minecraft_mode: bool | None = None
    ip: str | None = None
    port: int | None = None
    query_port: int | None = None
    rcon_port: int | None = None
    label: str | None = None
    type: GameserverType | None = None
    memory: MemoryType | None = None
    memory_mb: int | None = None
    game: str | None = None
    game_human: str | None = None
    game_specific: GameSpecific | None = None
    modpacks: dict[str, Modpack] | None = None
    slots: int | None = None
    location: str | None = None
    credentials: dict[str, Credentials] | None = None
    settings: dict[str, dict[str, Any]] | None = None
    quota: Quota | None = None
    query: Query | None = None


class Game(SnapshotModel):
    id: int | None = None
    name: str | None = None
    folder_short: str | None = None
    minecraft_mode: bool | None = None
    publisher: str | None = None
    installed: bool | None = None
    active: bool | None = None
    modpacks: dict[str, Modpack] | None = None


class GameList(SnapshotModel):
    """Games available for installation and the ones already installed."""

    games: tuple[Game, ...] | None = None
    installed: tuple[Game, ...] | None = None


class Stats(SnapshotModel):
    """Usage statistics; each series is a list of ``[value, unix_time]`` pairs."""

    current_players: tuple[tuple[float | None, int], ...] | None = Field(
        default=None, alias="currentPlayers",
    )
    cpu_usage: tuple[tuple[float | None, int], ...] | None = Field(
        default=None, alias="cpuUsage",
    )
    memory_usage: tuple[tuple[float | None, int], ...] | None = Field(
        default=None, alias="memoryUsage",
    )


class DDoSAttack(SnapshotModel):
    id: int | None = None
    started_at: datetime | None = None
    ended_at: datetime | None = None
    attack_type: str | None = None
    pps: int | None = Field(default=None, description="Peak packets per second")
    bandwidth: int | None = Field(default=None, description="Peak bandwidth in Mbit/s")
