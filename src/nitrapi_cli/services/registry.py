"""Service lookup: turns service listings into typed handles."""

from __future__ import annotations

import logging

from nitrapi_cli.client.http import NitrapiClient
from nitrapi_cli.models.service import ServiceInfo
from nitrapi_cli.services.base import Service, decode
from nitrapi_cli.services.cloud_server import CloudServer
from nitrapi_cli.services.gameserver import Gameserver

logger = logging.getLogger(__name__)

SERVICE_TYPES: dict[str, type[Service]] = {
    "cloud_server": CloudServer,
    "gameserver": Gameserver,
}


class ServiceRegistry:
    """Entry point for obtaining service handles."""

    def __init__(self, client: NitrapiClient) -> None:
        self._client = client

    def list_services(self) -> list[ServiceInfo]:
        data = self._client.data_get("services")
        return decode(data, "services", into=list[ServiceInfo])

    def get(self, service_id: int, *, activate: bool = True) -> Service:
        """Fetch one service and return its handle.

        The handle is activated unless *activate* is false, in which case only
        the service record is fetched.
        """
        data = self._client.data_get(f"services/{service_id}")
        info = decode(data, "service", into=ServiceInfo)
        return self.handle(info, activate=activate)

    def handle(self, info: ServiceInfo, *, activate: bool = True) -> Service:
        """Build the handle matching ``info.type``, activated unless told otherwise."""
        cls = SERVICE_TYPES.get(info.type or "", Service)
        if cls is Service:
            logger.debug("No dedicated handle for service type %r", info.type)
        service = cls(self._client, info.id, info=info)
        if activate:
            service.activate()
        return service

    def cloud_server(self, service_id: int) -> CloudServer:
        """Return an unhydrated cloud server handle without any request."""
        return CloudServer(self._client, service_id)

    def gameserver(self, service_id: int) -> Gameserver:
        """Return an unhydrated gameserver handle without any request."""
        return Gameserver(self._client, service_id)
