"""Pydantic data models for the Nitrado REST API."""

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
from nitrapi_cli.models.common import SnapshotModel
from nitrapi_cli.models.gameserver import (
    Credentials,
    DDoSAttack,
    GameList,
    GameserverInfo,
    GameserverStatus,
    GameserverType,
    MemoryType,
    Query,
    Quota,
    Stats,
    UpdateStatus,
)
from nitrapi_cli.models.service import ServiceInfo, ServiceStatus
from nitrapi_cli.models.value import Value

__all__ = [
    "Backup",
    "CloudServerData",
    "CloudserverStatus",
    "Credentials",
    "DDoSAttack",
    "Firewall",
    "GameList",
    "GameserverInfo",
    "GameserverStatus",
    "GameserverType",
    "Hardware",
    "Image",
    "Ip",
    "MemoryType",
    "Query",
    "Quota",
    "ResourceUsage",
    "ServiceInfo",
    "ServiceStatus",
    "SnapshotModel",
    "Stats",
    "SupportAuthorization",
    "SystemUser",
    "TrafficStatistics",
    "UpdateStatus",
    "Value",
]
