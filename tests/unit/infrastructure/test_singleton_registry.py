"""Tests for the shared-instance registry."""
import pytest

from pattern_catalog.infrastructure.patterns import SingletonRegistry, get_singleton, reset_singletons


class Counter:
    created = 0

    def __init__(self, start: int = 0):
        Counter.created += 1
        self.value = start


@pytest.mark.unit
class TestSingletonRegistry:
    def setup_method(self):
        Counter.created = 0
        reset_singletons()

    def test_registry_is_shared(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_get_singleton_creates_once(self):
        first = get_singleton(Counter, 5)
        second = get_singleton(Counter, 99)
        assert first is second
        assert first.value == 5
        assert Counter.created == 1

    def test_has_and_reset(self):
        registry = SingletonRegistry.get_instance()
        assert not registry.has(Counter)
        get_singleton(Counter)
        assert registry.has(Counter)
        registry.reset(Counter)
        assert not registry.has(Counter)

    def test_register_replaces_instance(self):
        registry = SingletonRegistry.get_instance()
        get_singleton(Counter)
        replacement = Counter(7)
        registry.register(Counter, replacement)
        assert get_singleton(Counter) is replacement

    def test_reset_singletons_clears_all(self):
        get_singleton(Counter)
        reset_singletons()
        assert not SingletonRegistry.get_instance().has(Counter)
