"""Observer pattern - a subject notifies its observers of state changes."""
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from pattern_catalog.application.decorators import pattern_example
from pattern_catalog.domain.base.pattern_unit import PatternCategory, PatternUnit
from pattern_catalog.domain.base.ports.example_port import OutputSink, PatternExample


class Observer(ABC):
    """Receives updates from a Subject."""

    @abstractmethod
    def update(self, data: Any) -> None:
        """Called by the subject with its new state."""


class ConcreteObserver(Observer):
    """Observer that records every update and prints it."""

    def __init__(self, name: str, output: OutputSink = print):
        self.name = name
        self.received: List[Any] = []
        self._output = output

    def update(self, data: Any) -> None:
        self.received.append(data)
        self._output(f"{self.name} received: {data}")


class Subject:
    """
    Publisher holding an ordered list of observers.

    Observers are notified in attachment order. Attaching the same observer
    twice has no effect; detaching an unknown observer is ignored.
    """

    def __init__(self) -> None:
        self._observers: List[Observer] = []
        self._state: Optional[Any] = None

    @property
    def observers(self) -> List[Observer]:
        return list(self._observers)

    @property
    def state(self) -> Optional[Any]:
        return self._state

    def attach(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, data: Any) -> None:
        for observer in self._observers:
            observer.update(data)

    def set_state(self, state: Any) -> None:
        """Store new state and push it to every observer."""
        self._state = state
        self.notify(state)


@pattern_example
class ObserverExample(PatternExample):
    unit = PatternUnit(
        key="observer",
        name="Observer",
        category=PatternCategory.BEHAVIORAL,
        description=(
            "Defines a one-to-many dependency between objects: when the subject "
            "changes state, every attached observer is notified automatically, in "
            "the order it subscribed."
        ),
        advantages=[
            "Loose coupling between the subject and its observers",
            "Observers can be attached and detached at runtime",
            "Supports broadcast communication to any number of listeners",
        ],
        disadvantages=[
            "Notification order is easy to depend on accidentally",
            "Forgotten observers keep receiving updates (and stay alive)",
            "A cascade of updates can be hard to trace and debug",
        ],
        sample_output=[
            "Observer 1 received: Hello observers!",
            "Observer 2 received: Hello observers!",
        ],
    )

    def run(self, output: OutputSink) -> None:
        subject = Subject()
        subject.attach(ConcreteObserver("Observer 1", output))
        subject.attach(ConcreteObserver("Observer 2", output))

        subject.set_state("Hello observers!")


def main() -> None:
    ObserverExample().run(print)


if __name__ == "__main__":
    main()
