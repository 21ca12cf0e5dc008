"""Data transfer objects returned by the catalog service."""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict

from pattern_catalog.domain.base.pattern_unit import PatternCategory, PatternUnit


class BaseResponse(BaseModel):
    """Base class for catalog responses."""
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class PatternSummary(BaseResponse):
    key: str
    name: str
    category: PatternCategory
    description: str

    @classmethod
    def from_unit(cls, unit: PatternUnit) -> "PatternSummary":
        return cls(
            key=unit.key,
            name=unit.name,
            category=unit.category,
            description=unit.description,
        )


class PatternDetail(BaseResponse):
    key: str
    name: str
    category: PatternCategory
    description: str
    advantages: List[str]
    disadvantages: List[str]
    sample_output: List[str]

    @classmethod
    def from_unit(cls, unit: PatternUnit) -> "PatternDetail":
        return cls(**unit.model_dump())


class PatternRunResult(BaseResponse):
    """Lines produced by running one example, checked against its documentation."""
    key: str
    name: str
    output: List[str]
    matches_sample: bool
