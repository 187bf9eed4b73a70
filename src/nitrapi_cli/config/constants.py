"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "nitrapi-cli"
APP_AUTHOR = "nitrapi"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_API_URL = "NITRAPI_URL"
ENV_API_TOKEN = "NITRAPI_TOKEN"
ENV_API_PROFILE = "NITRAPI_PROFILE"

# API defaults
DEFAULT_API_URL = "https://api.nitrado.net"
DEFAULT_APPLICATION_NAME = "nitrapi-cli"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3
