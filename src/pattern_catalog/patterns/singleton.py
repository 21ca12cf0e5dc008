"""Singleton pattern - one lazily created, process-wide instance.

The shared Database is created on the first ``get_instance()`` call and lives
until ``reset_instance()`` explicitly ends its scope. No locking: the catalog
runs single-threaded.
"""
from typing import ClassVar, Optional

from pattern_catalog.application.decorators import pattern_example
from pattern_catalog.domain.base.exceptions import SingletonViolationError
from pattern_catalog.domain.base.pattern_unit import PatternCategory, PatternUnit
from pattern_catalog.domain.base.ports.example_port import OutputSink, PatternExample

DEFAULT_CONNECTION = "mysql://localhost:3306/catalog"

# Only get_instance() holds this token, so Database() alone always fails
_CREATION_TOKEN = object()


class Database:
    """Resource-holding object of which at most one instance may exist."""

    _instance: ClassVar[Optional["Database"]] = None

    def __init__(self, connection_string: str = DEFAULT_CONNECTION, *, _token: object = None):
        if _token is not _CREATION_TOKEN:
            raise SingletonViolationError(type(self).__name__)
        self.connection_string = connection_string
        self.status = "Database connection established"

    @classmethod
    def get_instance(cls) -> "Database":
        """Return the shared instance, constructing it on first access."""
        if cls._instance is None:
            cls._instance = cls(_token=_CREATION_TOKEN)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """End the shared instance's scope; the next access creates a new one."""
        cls._instance = None

    @classmethod
    def has_instance(cls) -> bool:
        return cls._instance is not None

    def query(self, sql: str) -> str:
        return f"Executing '{sql}' on {self.connection_string}"


@pattern_example
class SingletonExample(PatternExample):
    unit = PatternUnit(
        key="singleton",
        name="Singleton",
        category=PatternCategory.CREATIONAL,
        description=(
            "Ensures a class has only one instance and provides a global point of "
            "access to it. The instance is created lazily, the first time it is "
            "requested, and every later request returns that same object."
        ),
        advantages=[
            "Guarantees a single instance of a shared resource",
            "Lazy initialization: the resource is created only when first needed",
            "One well-known access point instead of passing the object around",
        ],
        disadvantages=[
            "Introduces hidden global state that couples distant code",
            "Hard to substitute in unit tests without an explicit reset",
            "Needs extra care (locking) once multiple threads are involved",
        ],
        sample_output=[
            "Database connection established",
            "Connection: mysql://localhost:3306/catalog",
            "Same instance: True",
        ],
    )

    def run(self, output: OutputSink) -> None:
        Database.reset_instance()
        try:
            db1 = Database.get_instance()
            db2 = Database.get_instance()

            output(db1.status)
            output(f"Connection: {db1.connection_string}")
            output(f"Same instance: {db1 is db2}")
        finally:
            Database.reset_instance()


def main() -> None:
    SingletonExample().run(print)


if __name__ == "__main__":
    main()
