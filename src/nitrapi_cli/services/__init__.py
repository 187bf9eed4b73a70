"""Lazy handles for the services of a Nitrado account."""

from nitrapi_cli.services.base import Service, requires_permission
from nitrapi_cli.services.cloud_server import CloudServer
from nitrapi_cli.services.gameserver import Gameserver
from nitrapi_cli.services.registry import ServiceRegistry

__all__ = [
    "CloudServer",
    "Gameserver",
    "Service",
    "ServiceRegistry",
    "requires_permission",
]
