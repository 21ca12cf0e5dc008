"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationError, field_validator

from pattern_catalog.domain.base.exceptions import ConfigurationError

from .logging_schema import LoggingConfig
from .output_schema import OutputConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    output: OutputConfig = Field(default_factory=lambda: OutputConfig())
    environment: str = Field("development", description="Environment")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """
        Validate environment.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If environment is invalid
        """
        valid_environments = ["development", "testing", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """
    Validate raw configuration data into an AppConfig.

    Raises:
        ConfigurationError: If the data violates the schema
    """
    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
        raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e
