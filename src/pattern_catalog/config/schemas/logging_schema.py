"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Root log level")
    destination: str = Field("console", description="console, file or both")
    file_path: str = Field("logs/pattern_catalog.log", description="Log file path")
    max_size_mb: int = Field(10, ge=1, description="Rotate after this many megabytes")
    backup_count: int = Field(5, ge=0, description="Rotated files to keep")
    renderer: str = Field("console", description="console or json")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        valid_destinations = ["console", "file", "both"]
        if v not in valid_destinations:
            raise ValueError(f"Log destination must be one of {valid_destinations}")
        return v

    @field_validator("renderer")
    @classmethod
    def validate_renderer(cls, v: str) -> str:
        """Validate log renderer."""
        if v not in ("console", "json"):
            raise ValueError("Log renderer must be 'console' or 'json'")
        return v
