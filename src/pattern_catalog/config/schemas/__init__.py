"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .logging_schema import LoggingConfig
from .output_schema import OUTPUT_FORMATS, OutputConfig

__all__ = [
    "AppConfig",
    "validate_config",
    "LoggingConfig",
    "OutputConfig",
    "OUTPUT_FORMATS",
]
