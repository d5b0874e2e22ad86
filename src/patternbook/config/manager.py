"""Unified configuration management for the application."""
from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from patternbook._package import ENV_PREFIX
from patternbook.config.schemas import AppConfig
from patternbook.config.utils.env_expansion import expand_config_env_vars
from patternbook.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = f"{ENV_PREFIX}_CONFIG"

# Environment variable -> dotted configuration key
ENV_OVERRIDES = {
    f"{ENV_PREFIX}_LOG_LEVEL": "logging.level",
    f"{ENV_PREFIX}_OUTPUT_FORMAT": "output.format",
}


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is resolved from, in increasing precedence:
    - schema defaults
    - a JSON or YAML configuration file
    - environment variable overrides

    The typed ``AppConfig`` is loaded lazily on first access.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(CONFIG_PATH_ENV) or None
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        data = self._read_file() if self._config_file else {}
        data = expand_config_env_vars(data)
        self._apply_env_overrides(data)

        try:
            config = AppConfig.model_validate(data)
        except PydanticValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ConfigurationError(
                f"Invalid configuration: {', '.join(fields)}", missing_fields=fields
            ) from e

        logger.debug("Loaded configuration from %s", self._config_file or "defaults")
        return config

    def _read_file(self) -> Dict[str, Any]:
        path = Path(self._config_file)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return data

    @staticmethod
    def _apply_env_overrides(data: Dict[str, Any]) -> None:
        for env_var, dotted_key in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if not value:
                continue
            section, key = dotted_key.split(".", 1)
            target = data.setdefault(section, {})
            if not isinstance(target, dict):
                raise ConfigurationError(f"Configuration section '{section}' must be a mapping")
            target[key] = value
            logger.debug("Applied %s override to %s", env_var, dotted_key)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dotted key, e.g. ``logging.level``."""
        value: Any = self.to_dict()
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def to_dict(self) -> Dict[str, Any]:
        """Get the resolved configuration as plain data."""
        return self.app_config.model_dump(mode="json")

    def reload(self) -> AppConfig:
        """Discard the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.app_config


_managers: Dict[Optional[str], ConfigurationManager] = {}
_managers_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Get the cached configuration manager for a configuration file."""
    with _managers_lock:
        if config_file not in _managers:
            _managers[config_file] = ConfigurationManager(config_file)
        return _managers[config_file]
