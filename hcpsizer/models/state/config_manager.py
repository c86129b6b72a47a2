"""Settings persistence backed by a YAML file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from hcpsizer.constants.defaults import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    CONFIG_PATH_ENV_VAR,
)
from hcpsizer.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads and saves AppSettings.

    The file location is ``$HCP_SIZER_CONFIG`` when set, otherwise
    ``$XDG_CONFIG_HOME/hcp-sizer/settings.yaml`` (``~/.config`` by default).
    """

    @staticmethod
    def config_path(path: str | Path | None = None) -> Path:
        """Resolve the settings file path."""
        if path:
            return Path(path).expanduser()
        env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
        if env_path:
            return Path(env_path).expanduser()
        config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
        return Path(config_home) / CONFIG_DIR_NAME / CONFIG_FILE_NAME

    @classmethod
    def load(cls, path: str | Path | None = None) -> AppSettings:
        """Load settings, falling back to defaults when no file exists.

        Raises:
            ConfigLoadError: If the file cannot be read, parsed or validated.
        """
        config_file = cls.config_path(path)
        if not config_file.exists():
            logger.debug("No settings file at %s, using defaults", config_file)
            return AppSettings()

        try:
            with config_file.open(encoding="utf-8") as handle:
                raw = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Cannot read {config_file}: {e}") from e

        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"{config_file} must contain a mapping")

        try:
            settings = AppSettings.model_validate(raw)
        except ValidationError as e:
            raise ConfigLoadError(f"Invalid settings in {config_file}: {e}") from e

        logger.debug("Loaded settings from %s", config_file)
        return settings

    @classmethod
    def save(cls, settings: AppSettings, path: str | Path | None = None) -> Path:
        """Write settings to disk and return the file written.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        config_file = cls.config_path(path)
        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with config_file.open("w", encoding="utf-8") as handle:
                yaml.safe_dump(
                    settings.model_dump(mode="json"),
                    handle,
                    default_flow_style=False,
                    sort_keys=False,
                )
        except OSError as e:
            raise ConfigSaveError(f"Cannot write {config_file}: {e}") from e
        return config_file

    @classmethod
    def reset(cls, path: str | Path | None = None) -> AppSettings:
        """Overwrite the settings file with defaults."""
        settings = AppSettings()
        cls.save(settings, path)
        return settings


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
