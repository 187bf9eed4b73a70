"""Nitrado API HTTP client."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from nitrapi_cli import __version__
from nitrapi_cli.client.auth import resolve_auth
from nitrapi_cli.client.errors import (
    AuthenticationError,
    ConflictError,
    DecodeError,
    NitrapiAPIError,
    NitrapiConnectionError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from nitrapi_cli.config.constants import DEFAULT_MAX_RETRIES
from nitrapi_cli.config.models import ApiProfile

logger = logging.getLogger(__name__)

Params = dict[str, Any]


def _clean_params(params: Params | None) -> Params | None:
    """Drop parameters whose value is None; they are never sent."""
    if not params:
        return None
    cleaned = {k: v for k, v in params.items() if v is not None}
    return cleaned or None


class NitrapiClient:
    """Synchronous HTTP client for the Nitrado REST API.

    Every ``data_*`` method returns the JSON object inside the API's
    ``{"status": ..., "data": {...}}`` envelope. Errors are raised as
    :class:`~nitrapi_cli.client.errors.NitrapiError` subclasses and are never
    retried here; only connection attempts are retried by the httpx transport.
    """

    def __init__(self, profile: ApiProfile) -> None:
        self.profile = profile
        self.base_url = profile.url
        if not profile.verify_ssl:
            logger.warning("TLS certificate verification is disabled")
        transport = httpx.HTTPTransport(
            verify=profile.verify_ssl, retries=DEFAULT_MAX_RETRIES,
        )
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=resolve_auth(profile),
            timeout=profile.timeout,
            transport=transport,
            headers={
                "Accept": "application/json",
                "User-Agent": f"{profile.application_name} nitrapi-cli/{__version__}",
            },
        )

    @property
    def application_name(self) -> str:
        return self.profile.application_name

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> NitrapiClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        if response.is_success:
            return response
        status = response.status_code
        try:
            detail = response.json().get("message", response.text)
        except (json.JSONDecodeError, UnicodeDecodeError, AttributeError):
            detail = response.text
        logger.debug("%s %s failed with %s: %s",
                     response.request.method, response.request.url, status, detail)
        if status in (401, 403):
            raise AuthenticationError(
                f"Authentication failed ({status}): {detail}. Check your access token."
            )
        if status == 404:
            raise NotFoundError(f"Not found: {detail}")
        if status == 409:
            raise ConflictError(f"Conflict: {detail}")
        if status == 422:
            raise ValidationError(detail)
        if status == 429:
            raise RateLimitError(f"Rate limit exceeded: {detail}")
        raise NitrapiAPIError(status, detail)

    def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug("%s %s", method, path)
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.ConnectError as exc:
            raise NitrapiConnectionError(
                f"Cannot connect to {self.base_url}: {exc}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise NitrapiConnectionError(
                f"Request to {self.base_url} timed out: {exc}"
            ) from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise NitrapiConnectionError(
                f"Invalid API URL {self.base_url}: {exc}"
            ) from exc
        logger.debug("%s %s -> %s", method, path, response.status_code)
        return self._handle_response(response)

    def _json(self, response: httpx.Response) -> dict[str, Any]:
        if response.status_code == 204 or not response.content:
            return {}
        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(
                f"Response from {response.request.url} is not valid JSON"
            ) from exc
        if not isinstance(body, dict):
            raise DecodeError(
                f"Expected a JSON object from {response.request.url}, "
                f"got {type(body).__name__}"
            )
        data = body.get("data")
        if isinstance(data, dict):
            return data
        return body

    def data_get(self, path: str, params: Params | None = None) -> dict[str, Any]:
        """GET *path* with query parameters and return the unwrapped body."""
        response = self.request("GET", path, params=_clean_params(params))
        return self._json(response)

    def data_post(self, path: str, params: Params | None = None) -> dict[str, Any]:
        """POST *path* with form parameters and return the unwrapped body."""
        response = self.request("POST", path, data=_clean_params(params))
        return self._json(response)

    def data_delete(self, path: str, params: Params | None = None) -> dict[str, Any]:
        """DELETE *path* with form parameters and return the unwrapped body."""
        response = self.request("DELETE", path, data=_clean_params(params))
        return self._json(response)
