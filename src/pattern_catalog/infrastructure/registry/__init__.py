"""Registry package."""

from .pattern_discovery import discover_patterns
from .pattern_registry import PatternRegistry, get_pattern_registry

__all__ = ["PatternRegistry", "get_pattern_registry", "discover_patterns"]
