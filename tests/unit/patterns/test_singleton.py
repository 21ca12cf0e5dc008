"""Tests for the Singleton pattern unit."""
import pytest

from pattern_catalog.domain.base.exceptions import SingletonViolationError
from pattern_catalog.patterns.singleton import DEFAULT_CONNECTION, Database, SingletonExample


@pytest.mark.unit
class TestDatabaseSingleton:
    """Shared Database instance lifecycle."""

    def setup_method(self):
        Database.reset_instance()

    def teardown_method(self):
        Database.reset_instance()

    def test_get_instance_returns_same_object(self):
        assert Database.get_instance() is Database.get_instance()

    def test_instance_is_created_lazily(self):
        assert not Database.has_instance()
        Database.get_instance()
        assert Database.has_instance()

    def test_instance_reports_status_and_connection(self):
        db = Database.get_instance()
        assert db.status == "Database connection established"
        assert db.connection_string == DEFAULT_CONNECTION

    def test_direct_construction_rejected_while_instance_live(self):
        Database.get_instance()
        with pytest.raises(SingletonViolationError, match="get_instance"):
            Database()

    def test_direct_construction_rejected_before_first_access(self):
        with pytest.raises(SingletonViolationError):
            Database()
        with pytest.raises(SingletonViolationError):
            Database("sqlite:///other.db")
        assert not Database.has_instance()

    def test_only_shared_instance_exists_after_rejected_construction(self):
        with pytest.raises(SingletonViolationError):
            Database()
        shared = Database.get_instance()
        assert shared is Database.get_instance()
        assert shared.connection_string == DEFAULT_CONNECTION

    def test_reset_ends_scope(self):
        first = Database.get_instance()
        Database.reset_instance()
        second = Database.get_instance()
        assert first is not second

    def test_query_uses_connection(self):
        db = Database.get_instance()
        assert db.query("SELECT 1") == f"Executing 'SELECT 1' on {DEFAULT_CONNECTION}"


@pytest.mark.unit
class TestSingletonExample:
    def test_example_output(self):
        assert SingletonExample().render() == [
            "Database connection established",
            "Connection: mysql://localhost:3306/catalog",
            "Same instance: True",
        ]

    def test_example_leaves_no_live_instance(self):
        SingletonExample().render()
        assert not Database.has_instance()

    def test_example_can_run_twice(self):
        example = SingletonExample()
        assert example.render() == example.render()
