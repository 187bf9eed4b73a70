"""Cloud server data models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from nitrapi_cli.models.common import SnapshotModel
from nitrapi_cli.models.value import Value


class CloudserverStatus(Value):
    """Operational state of a cloud server."""

    RUNNING = "running"
    STOPPED = "stopped"
    INSTALLING = "installing"
    REINSTALLING = "reinstalling"
    FLAVOUR_CHANGE = "flavour_change"
    RESTORING = "restoring"
    ERROR_FC = "error_fc"
    ERROR_DELETE = "error_delete"
    ERROR_INSTALL = "error_install"
    ERROR_REINSTALL = "error_reinstall"
    RESCUE = "rescue"


class Hardware(SnapshotModel):
    cpu: int | None = None
    ram: int | None = None
    windows: bool | None = None
    ssd: int | None = None
    ipv4: int | None = None
    traffic: int | None = Field(default=None, description="High speed traffic in TB")
    backup: int | None = None


class Ip(SnapshotModel):
    address: str | None = None
    version: int | None = Field(default=None, description="4 or 6")
    main_ip: bool | None = None
    mac: str | None = None
    ptr: str | None = None

    def __str__(self) -> str:
        return self.address or ""


class Image(SnapshotModel):
    id: int | None = None
    name: str | None = None
    windows: bool | None = Field(default=None, alias="is_windows")
    is_default: bool | None = Field(default=None, alias="default")
    has_daemon: bool | None = None
    is_daemon_compatible: bool | None = None


class CloudServerData(SnapshotModel):
    """Snapshot decoded from ``GET services/{id}/cloud_servers``."""

    cloudserver_status: CloudserverStatus | None = Field(default=None, alias="status")
    hostname: str | None = None
    dynamic: bool | None = None
    hardware: Hardware | None = None
    ips: tuple[Ip, ...] | None = None
    image: Image | None = None
    daemon_available: bool | None = None
    password_available: bool | None = None
    bandwidth_limited: bool | None = None


class Backup(SnapshotModel):
    id: int | str | None = None
    name: str | None = None
    status: str | None = None
    size: int | None = None
    created_at: datetime | None = None


class ResourceUsage(SnapshotModel):
    """One sample of the cloud server's resource statistics."""

    timestamp: datetime | None = Field(default=None, alias="datetime")
    cpu: float | None = None
    ram: float | None = None
    disk_read: float | None = None
    disk_write: float | None = None
    network_in: float | None = None
    network_out: float | None = None


class FirewallRule(SnapshotModel):
    number: int | None = None
    target_ip: str | None = None
    target_port: int | str | None = None
    source_ip: str | None = None
    protocol: str | None = None
    comment: str | None = None


class Firewall(SnapshotModel):
    enabled: bool | None = None
    rules: tuple[FirewallRule, ...] | None = None


class SupportAuthorization(SnapshotModel):
    created_at: datetime | None = None
    expires_at: datetime | None = None


class Group(SnapshotModel):
    id: int | None = None
    name: str | None = None


class SystemUser(SnapshotModel):
    """A user from the cloud server's /etc/passwd."""

    id: int | None = None
    username: str | None = None
    home: str | None = None
    groups: tuple[Group, ...] | None = None


class CurrentMonth(SnapshotModel):
    used: int | None = Field(default=None, description="Used traffic in MB")
    available: int | None = Field(default=None, description="Available traffic in MB")


class TrafficEntry(SnapshotModel):
    incoming: int | None = None
    outgoing: int | None = None


class TrafficStatistics(SnapshotModel):
    current_month: CurrentMonth | None = None
    last_31_days: dict[str, TrafficEntry] | None = None
