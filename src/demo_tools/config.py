"""Runtime settings for the CLI.

Settings are resolved in three layers, later layers winning:

    1. model defaults
    2. an optional YAML file (``--config`` or ``$DEMO_TOOLS_CONFIG``)
    3. ``DEMO_TOOLS_*`` environment variables (``.env`` is loaded by the CLI)

Invalid values fail fast with a :class:`~demo_tools.errors.ConfigError`
before any file or network I/O happens.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from demo_tools.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "DEMO_TOOLS_CONFIG"

# setting name -> environment variable
_ENV_OVERRIDES = {
    "log_level": "DEMO_TOOLS_LOG_LEVEL",
    "api_url": "DEMO_TOOLS_API_URL",
    "timeout": "DEMO_TOOLS_TIMEOUT",
    "user_count": "DEMO_TOOLS_USER_COUNT",
    "output_path": "DEMO_TOOLS_OUTPUT",
}


class ToolSettings(BaseModel):
    log_level: str = "WARNING"
    api_url: str = "http://localhost:8080"
    timeout: float = Field(10.0, gt=0)
    user_count: int = Field(10, ge=0)
    output_path: str = "users.json"
    auth_token_env: str | None = None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    def auth_headers(self) -> dict[str, str]:
        """Return the Authorization header built from ``auth_token_env``, if any."""
        if not self.auth_token_env:
            return {}
        token = os.environ.get(self.auth_token_env, "")
        if not token:
            logger.warning(
                "auth_token_env=%r is set in config but the env var is empty/unset",
                self.auth_token_env,
            )
            return {}
        return {"Authorization": f"Bearer {token}"}


def load_settings(config_path: str | Path | None = None) -> ToolSettings:
    """Build :class:`ToolSettings` from defaults, a YAML file and the environment."""
    raw: dict[str, Any] = {}

    path = config_path or os.environ.get(CONFIG_ENV)
    if path:
        raw.update(_read_yaml(Path(path)))

    for field, env_var in _ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            raw[field] = value

    try:
        return ToolSettings.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file {path} is not valid YAML: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at the top level")
    logger.info("Loaded settings from %s", path)
    return data
