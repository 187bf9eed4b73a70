"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from nitrapi_cli.config.constants import (
    DEFAULT_API_URL,
    DEFAULT_APPLICATION_NAME,
    DEFAULT_TIMEOUT,
)


class ApiProfile(BaseModel):
    """A named API connection profile."""

    name: str
    url: str = Field(default=DEFAULT_API_URL, description="API base URL")
    token: str | None = Field(default=None, description="Nitrado access token")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )
    application_name: str = Field(
        default=DEFAULT_APPLICATION_NAME,
        description="Name reported to the API in audit messages",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def auth_configured(self) -> bool:
        return self.token is not None


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    default_format: str = "table"
    profiles: dict[str, ApiProfile] = Field(default_factory=dict)
