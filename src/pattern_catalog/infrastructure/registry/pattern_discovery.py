"""Discovery of pattern examples marked with ``@pattern_example``."""

import importlib
from typing import Optional

from pattern_catalog.application.decorators import get_registered_pattern_examples
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.registry.pattern_registry import (
    PatternRegistry,
    get_pattern_registry,
)

PATTERNS_PACKAGE = "pattern_catalog.patterns"

logger = get_logger(__name__)


def discover_patterns(registry: Optional[PatternRegistry] = None) -> PatternRegistry:
    """
    Import the patterns package and register every marked example.

    Already-registered keys are skipped, so discovery is idempotent.

    Args:
        registry: Registry to populate; defaults to the process-wide one

    Returns:
        The populated registry
    """
    if registry is None:
        registry = get_pattern_registry()
    package = importlib.import_module(PATTERNS_PACKAGE)

    discovered = 0
    # Catalog order follows PATTERN_MODULES, not import order
    for module_name in package.PATTERN_MODULES:
        module = importlib.import_module(f"{PATTERNS_PACKAGE}.{module_name}")
        marked = get_registered_pattern_examples().values()
        for example_class in marked:
            if example_class.__module__ != module.__name__:
                continue
            if not registry.is_registered(example_class.unit.key):
                registry.register(example_class)
                discovered += 1

    logger.debug("Pattern discovery complete", discovered=discovered, total=len(registry))
    return registry
