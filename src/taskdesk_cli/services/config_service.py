"""Configuration service for managing TaskDesk CLI configuration.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json
- Dot-notation get/set/reset of individual keys
- Resolving where the task database lives
"""

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, ValidationError

from taskdesk_cli.models.config_models import AppConfig

logger = logging.getLogger(__name__)

APP_NAME = "taskdesk_cli"
DB_ENV_VAR = "TASKDESK_DB"
DEFAULT_DB_FILE = "tasks.db"


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir(APP_NAME))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir(APP_NAME))

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage.

        A missing file yields defaults; a corrupted one is logged and also
        yields defaults, leaving the file untouched until the next save.
        """
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            self._config = AppConfig()
        except (OSError, ValidationError) as e:
            logger.warning("Ignoring unreadable config %s: %s", self.config_path, e)
            self._config = AppConfig()

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))

            self.config_path.chmod(0o600)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not exist
        """
        value: Any = self.config
        for k in key.split("."):
            if not isinstance(value, BaseModel) or k not in type(value).model_fields:
                raise KeyError(key)
            value = getattr(value, k)
        if isinstance(value, BaseModel):
            return value.model_dump()
        return value

    def set(self, key: str, value: Any) -> Any:
        """Set a configuration value by dot-separated key and save.

        Returns:
            The value as stored after validation

        Raises:
            KeyError: If the key does not exist
            ValueError: If the value fails validation
        """
        self.get(key)
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        try:
            new_config = AppConfig(**config_dict)
        except ValidationError as e:
            raise ValueError(f"Invalid value for '{key}': {e.errors()[0]['msg']}") from e

        self._config = new_config
        self.save_config()
        return self.get(key)

    def reset(self, key: str | None = None) -> None:
        """Reset one key, or the whole configuration, to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return

        self.get(key)
        self.set(key, self._read(AppConfig(), key))

    def resolve_db_path(self, override: str | Path | None = None) -> Path:
        """Resolve the task database location.

        Order: explicit override, ``TASKDESK_DB``, ``storage.db_path``,
        then the platform data directory.
        """
        if override:
            return Path(override).expanduser()
        env_path = os.environ.get(DB_ENV_VAR)
        if env_path:
            return Path(env_path).expanduser()
        if self.config.storage.db_path:
            return Path(self.config.storage.db_path).expanduser()
        return self.data_dir / DEFAULT_DB_FILE

    @staticmethod
    def _read(config: AppConfig, key: str) -> Any:
        value: Any = config
        for k in key.split("."):
            value = getattr(value, k)
        return value.model_dump() if isinstance(value, BaseModel) else value


def parse_config_value(raw: str) -> Any:
    """Convert a command-line string to bool, int, JSON null or plain text."""
    lowered = raw.strip().lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if lowered in ("null", "none"):
        return None
    if lowered.lstrip("-").isdigit():
        return int(lowered)
    try:
        parsed = json.loads(raw)
    except ValueError:
        return raw
    return parsed if isinstance(parsed, (dict, list)) else raw


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Process-wide ConfigService."""
    return ConfigService()
