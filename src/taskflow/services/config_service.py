"""Configuration service for managing TaskFlow configuration.

This module provides the ConfigService class, the single source of truth for
configuration in TaskFlow. It handles:

- Loading and saving config.json
- Resolving where the task store lives (config, environment, platform default)
- Building the key-value store used by the persistence adapter
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel

from taskflow.adapters import JsonFileStore
from taskflow.models.config_models import AppConfig
from taskflow.repositories import KeyValueStore

DATA_FILE_ENV = "TASKFLOW_DATA_FILE"


class ConfigService:
    """Service for managing application configuration.

    Loads the configuration lazily, writes defaults on first run, and knows
    how to turn the storage settings into a concrete key-value store.
    """

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("taskflow"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("taskflow"))

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run: persist defaults so users have a file to edit
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def reset_config(self) -> None:
        """Reset configuration to defaults."""
        self._config = AppConfig()
        self.save_config()

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        value: Any = self.config
        for k in key.split("."):
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and save."""
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            current = current.setdefault(k, {})
        current[keys[-1]] = value

        self._config = AppConfig.model_validate(config_dict)
        self.save_config()

    def get_data_file(self) -> Path:
        """Resolve the task store file.

        Priority: environment variable > config file > platform data dir.
        """
        env_value = os.environ.get(DATA_FILE_ENV)
        if env_value:
            return Path(env_value).expanduser()
        if self.config.storage.data_file:
            return Path(self.config.storage.data_file).expanduser()
        return self.data_dir / "tasks.json"

    def get_store(self, data_file: str | Path | None = None) -> KeyValueStore:
        """Build the key-value store for the configured (or given) data file."""
        path = Path(data_file).expanduser() if data_file else self.get_data_file()
        return JsonFileStore(path)


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
