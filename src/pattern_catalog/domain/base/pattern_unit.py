"""Pattern unit value object - the documentation half of every catalog entry."""
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PatternCategory(str, Enum):
    """Gang-of-Four pattern families."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class PatternUnit(BaseModel):
    """Description, trade-offs and documented output of one pattern."""
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Registry key, e.g. 'singleton'")
    name: str
    category: PatternCategory
    description: str
    advantages: List[str] = Field(..., min_length=1)
    disadvantages: List[str] = Field(..., min_length=1)
    sample_output: List[str] = Field(..., min_length=1)

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Keys are lowercase identifiers."""
        if not v or v != v.lower() or not v.replace("_", "").isalnum():
            raise ValueError(f"Pattern key must be a lowercase identifier, got '{v}'")
        return v
