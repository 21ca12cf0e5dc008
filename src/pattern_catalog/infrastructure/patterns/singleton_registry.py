"""Registry of process-wide shared instances keyed by class."""

import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pattern_catalog.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Holds at most one instance per registered class.

    Instances are created lazily on first ``get`` and live until ``reset``
    or ``clear`` explicitly ends their scope.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        self._instances: Dict[Type[Any], Any] = {}
        self._instances_lock = threading.RLock()
        self.logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the registry itself, creating it on first access."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """Return the shared instance of ``singleton_class``, constructing it if needed."""
        with self._instances_lock:
            if singleton_class not in self._instances:
                self.logger.debug("Creating singleton instance", cls=singleton_class.__name__)
                self._instances[singleton_class] = singleton_class(*args, **kwargs)
            return self._instances[singleton_class]

    def has(self, singleton_class: Type[Any]) -> bool:
        return singleton_class in self._instances

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """Install a pre-built instance, replacing any existing one."""
        with self._instances_lock:
            self._instances[singleton_class] = instance

    def reset(self, singleton_class: Type[Any]) -> None:
        """Forget the instance of one class."""
        with self._instances_lock:
            self._instances.pop(singleton_class, None)

    def clear(self) -> None:
        """Forget every instance."""
        with self._instances_lock:
            self._instances.clear()
