"""Configuration management for the catalog."""
from __future__ import annotations

from typing import Any, Dict, Optional

from pattern_catalog.config.loader import ConfigurationLoader
from pattern_catalog.config.schemas import AppConfig, LoggingConfig, OutputConfig, validate_config
from pattern_catalog.config.utils.env_expansion import expand_config_env_vars


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is loaded lazily on first access from defaults, an optional
    JSON/YAML file and environment overrides, then validated into AppConfig.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._loader = ConfigurationLoader()
        self._raw_config: Optional[Dict[str, Any]] = None
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            self._app_config = validate_config(self.get_raw_config())
        return self._app_config

    def get_raw_config(self) -> Dict[str, Any]:
        """Merged and env-expanded configuration before validation."""
        if self._raw_config is None:
            raw = self._loader.load_configuration(self._config_file)
            self._raw_config = expand_config_env_vars(raw)
        return self._raw_config

    def get_logging_config(self) -> LoggingConfig:
        return self.app_config.logging

    def get_output_config(self) -> OutputConfig:
        return self.app_config.output

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value: Any = self.app_config.model_dump()
        for part in key.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default
        return value

    def reload(self) -> None:
        """Drop cached configuration so the next access reloads it."""
        self._raw_config = None
        self._app_config = None
