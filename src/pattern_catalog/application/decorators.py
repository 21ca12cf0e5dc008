"""
Application Layer Decorators for pattern registration.

Pattern modules mark their example class with ``@pattern_example``; the
infrastructure discovery step later copies these marks into the
PatternRegistry. Keeping the mark here lets the registry be cleared and
rebuilt without re-importing the pattern modules.
"""
from __future__ import annotations

from typing import Dict, Type, TypeVar

from pattern_catalog.domain.base.exceptions import DuplicatePatternError
from pattern_catalog.domain.base.ports.example_port import PatternExample

TExample = TypeVar("TExample", bound=Type[PatternExample])

# Example registry (application-level abstraction)
_pattern_example_registry: Dict[str, Type[PatternExample]] = {}


def pattern_example(example_class: TExample) -> TExample:
    """
    Application-layer decorator to mark pattern examples.

    Usage:
        @pattern_example
        class StrategyExample(PatternExample):
            unit = PatternUnit(key="strategy", ...)

    Raises:
        DuplicatePatternError: If another class already claimed the unit key
    """
    key = example_class.unit.key
    existing = _pattern_example_registry.get(key)
    if existing is not None and existing is not example_class:
        raise DuplicatePatternError(key)

    _pattern_example_registry[key] = example_class

    # Mark the class for infrastructure discovery
    example_class._is_pattern_example = True

    return example_class


def get_registered_pattern_examples() -> Dict[str, Type[PatternExample]]:
    """Get all marked pattern examples (for infrastructure consumption)."""
    return _pattern_example_registry.copy()
