"""Service-level data models shared by every product type."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from nitrapi_cli.models.common import SnapshotModel
from nitrapi_cli.models.value import Value


class ServiceStatus(Value):
    """Coarse lifecycle state of a rented service."""

    INSTALLING = "installing"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    ADMIN_LOCKED = "adminlocked"
    ADMIN_LOCKED_SUSPENDED = "adminlocked_suspended"
    DELETED = "deleted"


class ServiceInfo(SnapshotModel):
    """A service as listed by ``GET services``."""

    id: int
    type: str | None = None
    type_human: str | None = None
    status: ServiceStatus | None = None
    location_id: int | None = None
    user_id: int | None = None
    username: str | None = None
    comment: str | None = None
    auto_extension: bool | None = None
    start_date: datetime | None = None
    suspend_date: datetime | None = None
    delete_date: datetime | None = None
    roles: tuple[str, ...] | None = None
    details: dict[str, Any] | None = None
