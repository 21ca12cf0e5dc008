"""Domain exceptions for the pattern catalog."""
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all catalog errors."""
    pass


class ValidationError(DomainException):
    """Raised when input validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class UnknownVehicleTypeError(ValidationError):
    """Raised by the vehicle factory for an unrecognized type tag."""
    def __init__(self, vehicle_type: str):
        super().__init__(f"Unknown vehicle type: {vehicle_type}", {"vehicle_type": vehicle_type})
        self.vehicle_type = vehicle_type


class PatternNotFoundError(DomainException):
    """Raised when a pattern key is not registered in the catalog."""
    def __init__(self, key: str):
        super().__init__(f"Pattern '{key}' not found")
        self.key = key


class DuplicatePatternError(DomainException):
    """Raised when a pattern key is registered twice."""
    def __init__(self, key: str):
        super().__init__(f"Pattern '{key}' is already registered")
        self.key = key


class SingletonViolationError(DomainException):
    """Raised when a singleton is constructed directly instead of through get_instance()."""
    def __init__(self, class_name: str):
        super().__init__(
            f"{class_name} is a singleton; use {class_name}.get_instance() instead"
        )
        self.class_name = class_name


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
