"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class NitrapiError(Exception):
    """Base exception for nitrapi-cli."""

    exit_code: int = 1


class NitrapiConnectionError(NitrapiError):
    """Cannot reach the API."""

    exit_code = 2


class AuthenticationError(NitrapiError):
    """Authentication failed (401/403)."""

    exit_code = 3


class NotFoundError(NitrapiError):
    """Resource not found (404)."""

    exit_code = 4


class ConflictError(NitrapiError):
    """Resource conflict (409)."""

    exit_code = 5


class ConfigurationError(NitrapiError):
    """Missing or invalid local configuration."""

    exit_code = 6


class ValidationError(NitrapiError):
    """The API rejected the request parameters (422)."""

    exit_code = 7

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or "Validation error")


class RateLimitError(NitrapiError):
    """Rate limit exceeded (429)."""

    exit_code = 8


class NitrapiAPIError(NitrapiError):
    """Generic API error returned by the remote service."""

    def __init__(self, status_code: int, detail: str = "") -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API returned {status_code}: {detail}")


class DecodeError(NitrapiError):
    """The API answered, but not with the shape we expected."""

    exit_code = 9

    def __init__(self, message: str, *, key: str | None = None) -> None:
        self.key = key
        super().__init__(message)


def error_handler(func: F) -> F:
    """Decorator that catches NitrapiError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except NitrapiError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
