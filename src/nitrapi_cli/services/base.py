"""Lazy service handles and the request/response conventions they share.

A handle is created with nothing but a service id. It holds no data until
:meth:`Service.refresh` fetches and decodes a snapshot. Accessors never
fetch on their own, so every blocking call is visible at the call site;
before the first refresh they return ``None``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Callable, ClassVar, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from nitrapi_cli.client.errors import DecodeError
from nitrapi_cli.client.http import NitrapiClient, Params
from nitrapi_cli.models.service import ServiceInfo, ServiceStatus

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])
SnapshotT = TypeVar("SnapshotT", bound=BaseModel)

# Service states in which the product data is expected to exist.
AUTO_HYDRATE_STATES = (ServiceStatus.ACTIVE, ServiceStatus.SUSPENDED)


def requires_permission(role: str | None) -> Callable[[F], F]:
    """Record the authorization role an operation needs.

    The role is stored as ``func.required_permission``; ``None`` declares that
    the operation needs no role beyond access to the service. Nothing is
    enforced locally; the API rejects calls the token is not allowed to make.
    """

    def decorator(func: F) -> F:
        func.required_permission = role  # type: ignore[attr-defined]
        return func

    return decorator


@lru_cache(maxsize=None)
def _adapter(into: Any) -> TypeAdapter[Any]:
    return TypeAdapter(into)


def decode(data: Mapping[str, Any], *keys: str, into: Any) -> Any:
    """Pick ``data[keys[0]][keys[1]]...`` and validate it as *into*.

    Raises :class:`DecodeError` when a key is missing or the value does not
    match the expected shape.
    """
    value: Any = data
    walked: list[str] = []
    for key in keys:
        walked.append(key)
        if not isinstance(value, Mapping) or key not in value:
            raise DecodeError(
                f"Response is missing expected key '{'.'.join(walked)}'",
                key=".".join(walked),
            )
        value = value[key]
    try:
        return _adapter(into).validate_python(value)
    except PydanticValidationError as exc:
        raise DecodeError(
            f"Cannot decode '{'.'.join(keys)}': {exc}", key=".".join(keys),
        ) from exc


class Service(Generic[SnapshotT]):
    """Local handle for a remote service, identified by its id.

    Subclasses set :attr:`resource` (the path below ``services/{id}``),
    :attr:`response_key` (the top-level key of the refresh response) and
    :attr:`snapshot_type`. The plain class hydrates from ``services/{id}``
    itself, which is what unknown product types fall back to.
    """

    resource: ClassVar[tuple[str, ...]] = ()
    response_key: ClassVar[str] = "service"
    snapshot_type: ClassVar[type[BaseModel]] = ServiceInfo

    def __init__(
        self,
        client: NitrapiClient,
        service_id: int,
        *,
        info: ServiceInfo | None = None,
    ) -> None:
        self._client = client
        self._id = int(service_id)
        self._info = info
        self._snapshot: SnapshotT | None = None

    def __repr__(self) -> str:
        state = "hydrated" if self.is_hydrated else "unhydrated"
        return f"<{type(self).__name__} id={self._id} {state}>"

    @property
    def id(self) -> int:
        return self._id

    @property
    def info(self) -> ServiceInfo | None:
        """Service listing data this handle was created from, if any."""
        return self._info

    @property
    def status(self) -> ServiceStatus | None:
        return self._info.status if self._info is not None else None

    @property
    def snapshot(self) -> SnapshotT | None:
        return self._snapshot

    @property
    def is_hydrated(self) -> bool:
        return self.snapshot is not None

    def path(self, *segments: object) -> str:
        """Build ``services/{id}/<segments>``; empty segments are skipped."""
        parts = ["services", str(self._id)]
        parts.extend(str(s) for s in segments if s != "")
        return "/".join(parts)

    def refresh(self) -> SnapshotT:
        """Fetch and decode a new snapshot, replacing the current one.

        On any error the previous snapshot (or the unhydrated state) is kept
        and the error propagates.
        """
        data = self._client.data_get(self.path(*self.resource))
        snapshot: SnapshotT = decode(data, self.response_key, into=self.snapshot_type)
        self._install(snapshot)
        logger.debug("Refreshed %r", self)
        return snapshot

    def activate(self) -> None:
        """Hydrate once if the service is in a state that has product data."""
        if self.status in AUTO_HYDRATE_STATES:
            self.refresh()
        else:
            logger.debug("Skipping initial refresh of %r (status %s)", self, self.status)

    def _install(self, snapshot: SnapshotT) -> None:
        self._snapshot = snapshot

    def _field(self, name: str) -> Any:
        snapshot = self.snapshot
        if snapshot is None:
            return None
        return getattr(snapshot, name)

    def _get(self, *segments: object, params: Params | None = None) -> dict[str, Any]:
        return self._client.data_get(self.path(*segments), params)

    def _post(self, *segments: object, params: Params | None = None) -> dict[str, Any]:
        return self._client.data_post(self.path(*segments), params)

    def _delete(self, *segments: object, params: Params | None = None) -> dict[str, Any]:
        return self._client.data_delete(self.path(*segments), params)
