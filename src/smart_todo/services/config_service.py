"""Configuration service for Smart ToDo.

ConfigService is the single place that reads and writes ``config.json``:

- Loading the config with defaults on first run
- Dotted-key access (``ui.theme``, ``storage.path``) for the CLI
- Resolving where the task file lives
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, ValidationError

from smart_todo.models.config_models import AppConfig
from smart_todo.storage.task_store import DEFAULT_FILE_NAME
from smart_todo.utils.logger import get_logger


class ConfigService:
    """Service for loading, changing and saving the application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("smart_todo"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("smart_todo"))

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from disk, falling back to defaults."""
        if self._config is not None:
            return self._config  # Return cached config if already loaded

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # Expected on first run
            self._config = AppConfig()
        except (OSError, ValidationError) as e:
            get_logger("config").warning(
                "ignoring unreadable config %s: %s", self.config_path, e
            )
            self._config = AppConfig()

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to disk."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w", encoding="utf-8") as f:
            f.write(self.config.model_dump_json(indent=4))

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not exist
        """
        value: Any = self.config
        for part in key.split("."):
            if not isinstance(value, BaseModel) or part not in type(value).model_fields:
                raise KeyError(key)
            value = getattr(value, part)
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and save.

        Raises:
            KeyError: If the key does not exist
            ValidationError: If the value is not valid for the key
        """
        self.get(key)  # Validate the key exists
        parts = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for part in parts[:-1]:
            current = current[part]
        current[parts[-1]] = value

        self._config = AppConfig(**config_dict)
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset one key, or the whole configuration, to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return

        self.get(key)  # Validate the key exists
        default_value: Any = AppConfig()
        for part in key.split("."):
            default_value = getattr(default_value, part)
        if isinstance(default_value, BaseModel):
            default_value = default_value.model_dump()
        self.set(key, default_value)

    def task_file(self) -> Path:
        """Return the configured task file, or the default in the data dir."""
        if self.config.storage.path:
            return Path(self.config.storage.path).expanduser()
        return self.data_dir / DEFAULT_FILE_NAME


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
