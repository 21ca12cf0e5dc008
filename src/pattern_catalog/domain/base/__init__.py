"""Domain base package."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    DuplicatePatternError,
    PatternNotFoundError,
    SingletonViolationError,
    UnknownVehicleTypeError,
    ValidationError,
)
from .pattern_unit import PatternCategory, PatternUnit

__all__ = [
    "DomainException",
    "ValidationError",
    "UnknownVehicleTypeError",
    "PatternNotFoundError",
    "DuplicatePatternError",
    "SingletonViolationError",
    "ConfigurationError",
    "PatternCategory",
    "PatternUnit",
]
