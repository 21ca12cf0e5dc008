"""Tests for the Observer pattern unit."""
import pytest

from pattern_catalog.patterns.observer import ConcreteObserver, ObserverExample, Subject


@pytest.mark.unit
class TestSubject:
    def setup_method(self):
        self.lines = []
        self.subject = Subject()
        self.first = ConcreteObserver("first", self.lines.append)
        self.second = ConcreteObserver("second", self.lines.append)

    def test_notify_in_attachment_order(self):
        self.subject.attach(self.second)
        self.subject.attach(self.first)
        self.subject.notify("ping")
        assert self.lines == ["second received: ping", "first received: ping"]

    def test_attach_is_idempotent(self):
        self.subject.attach(self.first)
        self.subject.attach(self.first)
        self.subject.notify("once")
        assert self.lines == ["first received: once"]
        assert len(self.subject.observers) == 1

    def test_detach_stops_notifications(self):
        self.subject.attach(self.first)
        self.subject.attach(self.second)
        self.subject.detach(self.first)
        self.subject.notify("x")
        assert self.lines == ["second received: x"]

    def test_detach_unknown_observer_is_ignored(self):
        self.subject.detach(self.first)
        assert self.subject.observers == []

    def test_notify_without_observers(self):
        self.subject.notify("nobody")
        assert self.lines == []

    def test_set_state_stores_and_notifies(self):
        self.subject.attach(self.first)
        self.subject.set_state(42)
        assert self.subject.state == 42
        assert self.first.received == [42]


@pytest.mark.unit
def test_observer_example_output():
    assert ObserverExample().render() == [
        "Observer 1 received: Hello observers!",
        "Observer 2 received: Hello observers!",
    ]
