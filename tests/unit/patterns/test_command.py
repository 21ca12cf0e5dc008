"""Tests for the Command pattern unit."""
import pytest

from pattern_catalog.patterns.command import (
    CommandExample,
    Light,
    LightOffCommand,
    LightOnCommand,
    RemoteControl,
)


@pytest.mark.unit
class TestRemoteControl:
    def setup_method(self):
        self.lines = []
        self.light = Light(self.lines.append)
        self.remote = RemoteControl()

    def test_press_without_command_does_nothing(self):
        self.remote.press_button()
        assert self.lines == []
        assert self.remote.history_size == 0

    def test_press_executes_bound_command(self):
        self.remote.set_command(LightOnCommand(self.light))
        self.remote.press_button()
        assert self.light.is_on
        assert self.lines == ["Light is ON"]

    def test_rebinding_changes_behaviour(self):
        self.remote.set_command(LightOnCommand(self.light))
        self.remote.press_button()
        self.remote.set_command(LightOffCommand(self.light))
        self.remote.press_button()
        assert not self.light.is_on
        assert self.lines == ["Light is ON", "Light is OFF"]

    def test_undo_reverses_in_lifo_order(self):
        self.remote.set_command(LightOnCommand(self.light))
        self.remote.press_button()
        self.remote.set_command(LightOffCommand(self.light))
        self.remote.press_button()
        self.remote.press_undo()
        assert self.light.is_on
        self.remote.press_undo()
        assert not self.light.is_on
        assert self.remote.history_size == 0

    def test_undo_with_empty_history_does_nothing(self):
        self.remote.press_undo()
        assert self.lines == []


@pytest.mark.unit
def test_command_example_output():
    assert CommandExample().render() == ["Light is ON", "Light is OFF", "Light is ON"]
