"""Configuration loader - reads, merges and overrides raw configuration data."""
import copy
import json
import os
from typing import Any, Dict, Optional

import yaml

from pattern_catalog.config.defaults import CONFIG_ENV_VAR, DEFAULT_CONFIG, ENV_OVERRIDES
from pattern_catalog.domain.base.exceptions import ConfigurationError
from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ConfigurationLoader:
    """Loads configuration from defaults, a JSON/YAML file and the environment."""

    def load_configuration(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        """
        Build the raw configuration dictionary.

        The file is taken from ``config_file`` or, when absent, from the
        ``PATTERN_CATALOG_CONFIG`` environment variable. Without either, the
        defaults are returned.

        Args:
            config_file: Optional path to a JSON or YAML configuration file

        Returns:
            Merged configuration dictionary (not yet validated)
        """
        config_data = copy.deepcopy(DEFAULT_CONFIG)

        path = config_file or os.environ.get(CONFIG_ENV_VAR)
        if path:
            file_data = self.load_from_file(path)
            config_data = self.merge(config_data, file_data)

        return self.apply_environment_overrides(config_data)

    def load_from_file(self, path: str) -> Dict[str, Any]:
        """
        Load a configuration file, choosing the parser by extension.

        Raises:
            ConfigurationError: If the file is missing, unreadable or malformed
        """
        if not os.path.exists(path):
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.endswith((".yml", ".yaml")):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")

        logger.debug("Loaded configuration file", path=path, keys=sorted(data.keys()))
        return data

    def merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep-merge ``override`` into a copy of ``base``."""
        result = copy.deepcopy(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(result.get(key), dict):
                result[key] = self.merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)
        return result

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply single-key overrides from environment variables."""
        for env_var, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value:
                config_data.setdefault(section, {})[key] = value
                logger.debug("Applied environment override", env_var=env_var, section=section, key=key)
        return config_data
