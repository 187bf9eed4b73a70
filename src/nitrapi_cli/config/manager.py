"""Configuration manager: profile storage in TOML and connection resolution."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import ValidationError as PydanticValidationError

from nitrapi_cli.client.errors import ConfigurationError
from nitrapi_cli.config.constants import (
    CONFIG_FILE,
    ENV_API_PROFILE,
    ENV_API_TOKEN,
    ENV_API_URL,
)
from nitrapi_cli.config.models import ApiProfile, CLIConfig

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib

logger = logging.getLogger(__name__)


def _profile_table(profile: ApiProfile) -> dict[str, Any]:
    """Serialise a profile, leaving out the name and every default value."""
    table: dict[str, Any] = {}
    for field, info in ApiProfile.model_fields.items():
        value = getattr(profile, field)
        if field == "name" or value is None or value == info.default:
            continue
        table[field] = value
    return table


class ConfigManager:
    """Reads and writes the profile file and resolves the active profile.

    The file is loaded lazily on first access to :attr:`config` and written
    back in full after every change.
    """

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            logger.debug("No config file at %s", self.config_path)
            return CLIConfig()
        try:
            data = tomllib.loads(self.config_path.read_text())
            profiles = {
                name: ApiProfile(name=name, **table)
                for name, table in data.get("profiles", {}).items()
            }
            return CLIConfig(
                default_profile=data.get("default_profile"),
                default_format=data.get("default_format", "table"),
                profiles=profiles,
            )
        except (tomllib.TOMLDecodeError, PydanticValidationError, TypeError) as exc:
            raise ConfigurationError(
                f"Cannot read config file {self.config_path}: {exc}"
            ) from exc

    def _dump(self) -> dict[str, Any]:
        config = self.config
        data: dict[str, Any] = {}
        if config.default_profile:
            data["default_profile"] = config.default_profile
        if config.default_format != "table":
            data["default_format"] = config.default_format
        if config.profiles:
            data["profiles"] = {
                name: _profile_table(profile) for name, profile in config.profiles.items()
            }
        return data

    def save(self) -> None:
        """Write the config atomically, readable by the owner only."""
        directory = self.config_path.parent
        directory.mkdir(parents=True, exist_ok=True)
        os.chmod(directory, 0o700)
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, tomli_w.dumps(self._dump()).encode())
        finally:
            os.close(fd)
        temp.replace(self.config_path)
        logger.debug("Saved config to %s", self.config_path)

    def add_profile(self, profile: ApiProfile) -> None:
        """Add or replace a profile; the first one becomes the default."""
        config = self.config
        config.profiles[profile.name] = profile
        config.default_profile = config.default_profile or profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        config = self.config
        if config.profiles.pop(name, None) is None:
            return False
        if config.default_profile == name:
            config.default_profile = next(iter(config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def set_default_format(self, fmt: str) -> None:
        self.config.default_format = fmt
        self.save()

    def get_profile(self, name: str | None = None) -> ApiProfile | None:
        """Return profile *name*, or the default profile when no name is given."""
        name = name or self.config.default_profile
        if not name:
            return None
        return self.config.profiles.get(name)

    def resolve_profile(
        self,
        profile_name: str | None = None,
        url: str | None = None,
        token: str | None = None,
    ) -> ApiProfile:
        """Build the profile a command connects with.

        Precedence: CLI flags > NITRAPI_* env vars > config profile > defaults.
        """
        name = profile_name or os.environ.get(ENV_API_PROFILE)
        base = self.get_profile(name)
        if base is None:
            if name:
                raise ConfigurationError(f"Profile '{name}' not found.")
            base = ApiProfile(name="cli")

        overrides: dict[str, Any] = {}
        resolved_url = url or os.environ.get(ENV_API_URL)
        if resolved_url:
            overrides["url"] = resolved_url
        resolved_token = token or os.environ.get(ENV_API_TOKEN) or base.token
        if not resolved_token:
            raise ConfigurationError(
                "No access token configured. Use 'nitrapi-cli config add' or set "
                f"{ENV_API_TOKEN} or pass --token."
            )
        overrides["token"] = resolved_token

        return ApiProfile.model_validate({**base.model_dump(), **overrides})
