"""Cloud server handle."""

from __future__ import annotations

from nitrapi_cli.models.cloud_server import (
    Backup,
    CloudServerData,
    CloudserverStatus,
    Firewall,
    Hardware,
    Image,
    Ip,
    ResourceUsage,
    SupportAuthorization,
    SystemUser,
    TrafficStatistics,
)
from nitrapi_cli.services.base import Service, decode, requires_permission

ROLE_SUPPORT_AUTHORIZATION = "ROLE_SUPPORT_AUTHORIZATION"


class CloudServer(Service[CloudServerData]):
    """A rented virtual machine.

    Actions below ``cloud_servers/`` never update the cached snapshot; call
    :meth:`refresh` to see their effect.
    """

    resource = ("cloud_servers",)
    response_key = "cloud_server"
    snapshot_type = CloudServerData

    # Snapshot accessors

    @property
    def cloudserver_status(self) -> CloudserverStatus | None:
        return self._field("cloudserver_status")

    @property
    def hostname(self) -> str | None:
        return self._field("hostname")

    @property
    def dynamic(self) -> bool | None:
        return self._field("dynamic")

    @property
    def hardware(self) -> Hardware | None:
        return self._field("hardware")

    @property
    def ips(self) -> tuple[Ip, ...] | None:
        return self._field("ips")

    @property
    def image(self) -> Image | None:
        """The currently installed image."""
        return self._field("image")

    @property
    def daemon_available(self) -> bool | None:
        """True if a Nitrapi daemon instance runs on the server."""
        return self._field("daemon_available")

    @property
    def password_available(self) -> bool | None:
        return self._field("password_available")

    @property
    def bandwidth_limited(self) -> bool | None:
        return self._field("bandwidth_limited")

    # Backups

    def get_backups(self) -> list[Backup]:
        data = self._get("cloud_servers", "backups")
        return decode(data, "backups", into=list[Backup])

    @requires_permission(None)
    def create_backup(self) -> None:
        self._post("cloud_servers", "backups")

    @requires_permission(None)
    def restore_backup(self, backup_id: str) -> None:
        self._post("cloud_servers", "backups", backup_id, "restore")

    @requires_permission(None)
    def delete_backup(self, backup_id: str) -> None:
        self._delete("cloud_servers", "backups", backup_id)

    # Power and system

    @requires_permission(None)
    def boot(self) -> None:
        self._post("cloud_servers", "boot")

    @requires_permission(None)
    def reboot(self) -> None:
        self._post("cloud_servers", "reboot")

    @requires_permission(None)
    def shutdown(self) -> None:
        self._post("cloud_servers", "shutdown")

    @requires_permission(None)
    def hard_reset(self) -> None:
        """Turn the server off instantly.

        This can cause data loss or file system corruption. Only use it when
        the instance does not respond to a normal reboot.
        """
        self._post("cloud_servers", "hard_reset")

    @requires_permission(None)
    def rescue(self) -> None:
        """Reboot into rescue mode. Might result in data loss."""
        self._post("cloud_servers", "rescue")

    @requires_permission(None)
    def unrescue(self) -> None:
        """Leave rescue mode and reboot. Might result in data loss."""
        self._post("cloud_servers", "unrescue")

    @requires_permission(None)
    def change_hostname(self, hostname: str) -> None:
        self._post("cloud_servers", "hostname", params={"hostname": hostname})

    @requires_permission(None)
    def change_ptr_entry(self, ip_address: str, hostname: str) -> None:
        self._post("cloud_servers", "ptr", ip_address, params={"hostname": hostname})

    @requires_permission(None)
    def reinstall(self, image_id: int) -> None:
        self._post("cloud_servers", "reinstall", params={"image_id": image_id})

    # Read-only sub-resources

    def get_resource_usage(self, time: str) -> list[ResourceUsage]:
        """Return resource statistics; *time* is one of 1h, 4h, 1d, 7d."""
        data = self._get("cloud_servers", "resources", params={"time": time})
        return decode(data, "resources", into=list[ResourceUsage])

    def get_console_logs(self, lines: int) -> str:
        data = self._get("cloud_servers", "console_logs", params={"lines": lines})
        return decode(data, "console_logs", into=str)

    def get_novnc_url(self) -> str:
        data = self._get("cloud_servers", "console")
        return decode(data, "console", "url", into=str)

    def get_initial_password(self) -> str:
        data = self._get("cloud_servers", "password")
        return decode(data, "password", into=str)

    def get_firewall(self) -> Firewall:
        data = self._get("cloud_servers", "firewall")
        return decode(data, "firewall", into=Firewall)

    def get_users(self) -> list[SystemUser]:
        """List the users in /etc/passwd, with their groups."""
        data = self._get("cloud_servers", "user")
        return decode(data, "users", "users", into=list[SystemUser])

    def get_traffic_statistics(self) -> TrafficStatistics:
        """Daily traffic usage of the last 31 days."""
        data = self._get("cloud_servers", "traffic")
        return decode(data, "traffic", into=TrafficStatistics)

    # Support authorization

    @requires_permission(ROLE_SUPPORT_AUTHORIZATION)
    def get_support_authorization(self) -> SupportAuthorization:
        """Return the existing support authorization.

        The API answers 404 when none exists.
        """
        data = self._get("support_authorization")
        return decode(data, "support_authorization", into=SupportAuthorization)

    @requires_permission(ROLE_SUPPORT_AUTHORIZATION)
    def create_support_authorization(self) -> None:
        self._post("support_authorization")

    @requires_permission(ROLE_SUPPORT_AUTHORIZATION)
    def delete_support_authorization(self) -> None:
        self._delete("support_authorization")
