"""CLI output configuration schema."""

from pydantic import BaseModel, Field, field_validator

OUTPUT_FORMATS = ["text", "json", "yaml", "table", "list"]


class OutputConfig(BaseModel):
    """Output configuration for CLI rendering."""

    format: str = Field("text", description="Default output format")
    show_headers: bool = Field(True, description="Print '== Name ==' before each run when several run")
    width: int = Field(100, ge=40, description="Console width for tables")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate output format."""
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"Output format must be one of {OUTPUT_FORMATS}")
        return v
