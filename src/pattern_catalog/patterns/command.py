"""Command pattern - requests as objects, triggered by a remote control."""
from abc import ABC, abstractmethod
from typing import List, Optional

from pattern_catalog.application.decorators import pattern_example
from pattern_catalog.domain.base.pattern_unit import PatternCategory, PatternUnit
from pattern_catalog.domain.base.ports.example_port import OutputSink, PatternExample


class Command(ABC):
    """Encapsulated request."""

    @abstractmethod
    def execute(self) -> None:
        pass

    @abstractmethod
    def undo(self) -> None:
        pass


class Light:
    """Receiver: the object that actually does the work."""

    def __init__(self, output: OutputSink = print):
        self.is_on = False
        self._output = output

    def turn_on(self) -> None:
        self.is_on = True
        self._output("Light is ON")

    def turn_off(self) -> None:
        self.is_on = False
        self._output("Light is OFF")


class LightOnCommand(Command):
    def __init__(self, light: Light):
        self._light = light

    def execute(self) -> None:
        self._light.turn_on()

    def undo(self) -> None:
        self._light.turn_off()


class LightOffCommand(Command):
    def __init__(self, light: Light):
        self._light = light

    def execute(self) -> None:
        self._light.turn_off()

    def undo(self) -> None:
        self._light.turn_on()


class RemoteControl:
    """
    Invoker holding one bound command.

    The remote never knows what the command's receiver is. Executed commands
    are kept on a history stack so they can be undone in reverse order.
    """

    def __init__(self) -> None:
        self._command: Optional[Command] = None
        self._history: List[Command] = []

    def set_command(self, command: Command) -> None:
        self._command = command

    def press_button(self) -> None:
        if self._command is None:
            return
        self._command.execute()
        self._history.append(self._command)

    def press_undo(self) -> None:
        if not self._history:
            return
        self._history.pop().undo()

    @property
    def history_size(self) -> int:
        return len(self._history)


@pattern_example
class CommandExample(PatternExample):
    unit = PatternUnit(
        key="command",
        name="Command",
        category=PatternCategory.BEHAVIORAL,
        description=(
            "Encapsulates a request as an object exposing a single execute "
            "operation. An invoker triggers the command without knowing which "
            "receiver performs the work, which also makes undo and queuing possible."
        ),
        advantages=[
            "Decouples the object that invokes an operation from the one that performs it",
            "Commands can be stored, queued, logged and undone",
            "New commands are added without changing the invoker",
        ],
        disadvantages=[
            "One class per action increases the number of classes",
            "Simple calls gain an extra level of indirection",
        ],
        sample_output=[
            "Light is ON",
            "Light is OFF",
            "Light is ON",
        ],
    )

    def run(self, output: OutputSink) -> None:
        light = Light(output)
        remote = RemoteControl()

        remote.set_command(LightOnCommand(light))
        remote.press_button()

        remote.set_command(LightOffCommand(light))
        remote.press_button()

        remote.press_undo()


def main() -> None:
    CommandExample().run(print)


if __name__ == "__main__":
    main()
