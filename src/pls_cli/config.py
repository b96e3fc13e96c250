"""Configuration management for pls.

Settings live inside the store document under the ``settings`` key so that a
single file holds everything pls knows. Paths follow platformdirs, with a
``PLS_HOME`` override for tests and portable installs.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from platformdirs import user_cache_dir, user_config_dir, user_log_dir
from pydantic import BaseModel, Field, ValidationError

from pls_cli.utils.logger import get_logger

if TYPE_CHECKING:
    from pls_cli.repositories.store import KeyValueStore

APP_NAME = "pls"
STORE_FILE_NAME = "pls.json"
SETTINGS_KEY = "settings"
HOME_ENV_VAR = "PLS_HOME"


class WeatherConfig(BaseModel):
    """Weather provider and cache policy."""

    endpoint: str = Field(default="https://wttr.in")
    format: str = Field(default="%l:+%C+%c+%t")
    timeout: float = Field(default=10, gt=0)
    threshold: int = Field(default=900, ge=0, description="Seconds before the cache is stale")
    refresh_lock_ttl: int = Field(default=60, ge=0)


class OutputConfig(BaseModel):
    """Output configuration."""

    color: bool = Field(default=True)


class Settings(BaseModel):
    """Main configuration."""

    weather: WeatherConfig = Field(default_factory=WeatherConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def get_config_dir() -> Path:
    """Directory holding the store document."""
    override = os.getenv(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path(user_config_dir(APP_NAME))


def get_store_path() -> Path:
    """Full path of the store document."""
    return get_config_dir() / STORE_FILE_NAME


def get_cache_dir() -> Path:
    """Directory for throwaway state such as the refresh marker."""
    override = os.getenv(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser() / "cache"
    return Path(user_cache_dir(APP_NAME))


def get_log_dir() -> Path:
    """Directory for the rotating log file."""
    override = os.getenv(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser() / "logs"
    return Path(user_log_dir(APP_NAME))


class SettingsManager:
    """Reads and writes :class:`Settings` through the store."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self._settings: Settings | None = None

    @property
    def settings(self) -> Settings:
        """Get the current settings, loading them on first access."""
        if self._settings is None:
            self._settings = self.load()
        return self._settings

    def load(self) -> Settings:
        """Load settings from the store, falling back to defaults."""
        raw = self.store.get(SETTINGS_KEY, dict)
        if raw is None:
            return Settings()
        try:
            return Settings(**raw)
        except ValidationError as e:
            get_logger().warning("ignoring invalid settings: %s", e)
            return Settings()

    def save(self, settings: Settings | None = None) -> None:
        """Persist settings to the store."""
        if settings is None:
            settings = self.settings
        self.store.set(SETTINGS_KEY, settings.model_dump())
        self._settings = settings

    def get(self, key: str) -> Any:
        """Get a setting by dot-separated key."""
        value: Any = self.settings
        for k in key.split("."):
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a setting by dot-separated key.

        Raises:
            KeyError: If the key does not name a known setting
            ValidationError: If the value does not fit the setting's type
        """
        keys = key.split(".")
        existing = self.get(key)
        if existing is None or isinstance(existing, BaseModel):
            raise KeyError(key)

        data = self.settings.model_dump()
        current = data
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        self.save(Settings(**data))

    def reset(self) -> None:
        """Reset every setting to its default."""
        self._settings = Settings()
        self.store.remove(SETTINGS_KEY)
