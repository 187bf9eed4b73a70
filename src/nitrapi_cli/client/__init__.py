"""HTTP transport for the Nitrado REST API."""

from nitrapi_cli.client.errors import DecodeError, NitrapiError
from nitrapi_cli.client.http import NitrapiClient

__all__ = ["DecodeError", "NitrapiClient", "NitrapiError"]
