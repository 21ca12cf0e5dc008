"""Pattern Registry - Registry pattern for catalog examples.

Maps a pattern key ('singleton', 'factory', ...) to the example class that
implements it, so the catalog never hard-codes the list of patterns.
"""

import threading
from typing import Dict, List, Optional, Type

from pattern_catalog.domain.base.exceptions import DuplicatePatternError, PatternNotFoundError
from pattern_catalog.domain.base.pattern_unit import PatternCategory
from pattern_catalog.domain.base.ports.example_port import PatternExample
from pattern_catalog.infrastructure.logging.logger import get_logger


class PatternRegistry:
    """
    Registry for pattern example classes.

    Thread-safe singleton implementation; registration order is preserved
    and is the order the catalog lists patterns in.
    """

    _instance: Optional["PatternRegistry"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "PatternRegistry":
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize pattern registry."""
        if hasattr(self, "_initialized"):
            return

        self._registrations: Dict[str, Type[PatternExample]] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)
        self._initialized = True

        self.logger.debug("Pattern registry initialized")

    def register(self, example_class: Type[PatternExample]) -> None:
        """
        Register an example class under its unit key.

        Raises:
            DuplicatePatternError: If the key is already registered
        """
        key = example_class.unit.key
        with self._registry_lock:
            if key in self._registrations:
                raise DuplicatePatternError(key)
            self._registrations[key] = example_class

        self.logger.debug("Registered pattern example", key=key, example=example_class.__name__)

    def unregister(self, key: str) -> bool:
        """Remove a registration. Returns True if something was removed."""
        with self._registry_lock:
            return self._registrations.pop(key, None) is not None

    def get(self, key: str) -> Type[PatternExample]:
        """
        Look up an example class by key (case-insensitive).

        Raises:
            PatternNotFoundError: If the key is not registered
        """
        normalized = key.strip().lower()
        if normalized not in self._registrations:
            raise PatternNotFoundError(key)
        return self._registrations[normalized]

    def create(self, key: str) -> PatternExample:
        """Instantiate the example registered under ``key``."""
        return self.get(key)()

    def is_registered(self, key: str) -> bool:
        return key.strip().lower() in self._registrations

    def get_registered_keys(self, category: Optional[PatternCategory] = None) -> List[str]:
        """Registered keys in registration order, optionally filtered by category."""
        return [
            key
            for key, example_class in self._registrations.items()
            if category is None or example_class.unit.category == category
        ]

    def clear_registrations(self) -> None:
        """Clear all registrations (primarily for testing)."""
        with self._registry_lock:
            self._registrations.clear()

    def __len__(self) -> int:
        return len(self._registrations)


def get_pattern_registry() -> PatternRegistry:
    """Get the pattern registry singleton instance."""
    return PatternRegistry()
