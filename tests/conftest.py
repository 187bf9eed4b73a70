"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from nitrapi_cli.client.http import NitrapiClient
from nitrapi_cli.config.manager import ConfigManager
from nitrapi_cli.config.models import ApiProfile

API_URL = "https://api.test"


def _envelope(data: dict[str, Any] | None = None, message: str | None = None) -> dict[str, Any]:
    """Wrap *data* the way the API does on success."""
    body: dict[str, Any] = {"status": "success"}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body


@pytest.fixture
def envelope():
    """Return a helper wrapping data in the API success envelope."""
    return _envelope


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> ApiProfile:
    """Return a sample API profile for testing."""
    return ApiProfile(
        name="test",
        url=API_URL,
        token="test-access-token",
        application_name="pytest",
    )


@pytest.fixture
def client(sample_profile: ApiProfile) -> Iterator[NitrapiClient]:
    with NitrapiClient(sample_profile) as c:
        yield c


@pytest.fixture
def cloud_server_payload() -> dict:
    """Sample ``GET services/{id}/cloud_servers`` data."""
    return {
        "cloud_server": {
            "status": "running",
            "hostname": "vm-100",
            "dynamic": False,
            "hardware": {
                "cpu": 4, "ram": 8, "windows": False, "ssd": 100,
                "ipv4": 1, "traffic": 10, "backup": 2,
            },
            "ips": [
                {"address": "203.0.113.10", "version": 4, "main_ip": True,
                 "mac": "aa:bb:cc:dd:ee:ff", "ptr": "vm-100.example.net"},
            ],
            "image": {
                "id": 7, "name": "Debian 12", "is_windows": False,
                "default": True, "has_daemon": True, "is_daemon_compatible": True,
            },
            "daemon_available": True,
            "password_available": False,
            "bandwidth_limited": False,
        }
    }


@pytest.fixture
def gameserver_payload() -> dict:
    """Sample ``GET services/{id}/gameservers`` data."""
    return {
        "gameserver": {
            "status": "started",
            "websocket_token": "ws-token",
            "minecraft_mode": False,
            "ip": "198.51.100.7",
            "port": 27015,
            "query_port": 27015,
            "rcon_port": 27016,
            "label": "ni",
            "type": "Gameserver",
            "memory": "Standard",
            "memory_mb": 4096,
            "game": "cs2",
            "game_human": "Counter-Strike 2",
            "game_specific": {
                "path": "/games/ni200_1/ftproot/cs2/",
                "path_available": True,
                "update_status": "up_to_date",
                "last_update": "2026-10-01T12:00:00+00:00",
                "features": {
                    "has_backups": True,
                    "has_application_server": True,
                    "has_file_browser": True,
                    "has_ftp": True,
                    "has_expert_mode": False,
                    "has_plugin_system": False,
                    "has_restart_message_support": True,
                    "has_database": False,
                },
                "log_files": ["cs2/console.log"],
                "config_files": ["cs2/cfg/server.cfg"],
            },
            "modpacks": {},
            "slots": 12,
            "location": "DE",
            "credentials": {
                "ftp": {"hostname": "ftp.test", "port": 21,
                        "username": "ni200_1", "password": "ftp-pass"},
                "mysql": {"hostname": "db.test", "port": 3306,
                          "username": "ni200_1", "password": "db-pass",
                          "database": "ni200_1_db"},
            },
            "settings": {"general": {"hostname": "My Server"}},
            "quota": {"block_usage": 1024, "block_softlimit": 20480,
                      "block_hardlimit": 25600},
            "query": {
                "server_name": "My Server",
                "connect_ip": "198.51.100.7:27015",
                "map": "de_dust2",
                "version": "1.0",
                "player_current": 3,
                "player_max": 12,
                "players": [{"name": "alice", "score": 10, "ping": 25}],
            },
        }
    }
