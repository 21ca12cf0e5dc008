"""Configuration package with clean public API."""

from .loader import ConfigurationLoader
from .manager import ConfigurationManager
from .schemas import AppConfig, LoggingConfig, OutputConfig, validate_config

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "OutputConfig",
    "validate_config",
    "ConfigurationLoader",
    "ConfigurationManager",
]
