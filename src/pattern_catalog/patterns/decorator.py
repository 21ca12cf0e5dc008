"""Decorator pattern - layer extras onto a coffee order."""
from abc import ABC, abstractmethod

from pattern_catalog.application.decorators import pattern_example
from pattern_catalog.domain.base.pattern_unit import PatternCategory, PatternUnit
from pattern_catalog.domain.base.ports.example_port import OutputSink, PatternExample


class Coffee(ABC):
    @abstractmethod
    def cost(self) -> int:
        pass

    @abstractmethod
    def description(self) -> str:
        pass


class SimpleCoffee(Coffee):
    def cost(self) -> int:
        return 10

    def description(self) -> str:
        return "Caffè semplice"


class CoffeeDecorator(Coffee):
    """Forwards to the wrapped coffee; subclasses augment the result."""

    def __init__(self, coffee: Coffee):
        self._coffee = coffee

    def cost(self) -> int:
        return self._coffee.cost()

    def description(self) -> str:
        return self._coffee.description()


class MilkDecorator(CoffeeDecorator):
    def cost(self) -> int:
        return super().cost() + 2

    def description(self) -> str:
        return super().description() + ", con latte"


class SugarDecorator(CoffeeDecorator):
    def cost(self) -> int:
        return super().cost() + 1

    def description(self) -> str:
        return super().description() + ", con zucchero"


def _describe(coffee: Coffee) -> str:
    return f"{coffee.description()}: {coffee.cost()}"


@pattern_example
class DecoratorExample(PatternExample):
    unit = PatternUnit(
        key="decorator",
        name="Decorator",
        category=PatternCategory.STRUCTURAL,
        description=(
            "Attaches additional responsibilities to an object dynamically by "
            "wrapping it. Each decorator forwards to the wrapped object and augments "
            "the result, and layers can be stacked in any order."
        ),
        advantages=[
            "Extends behavior without subclassing every combination",
            "Responsibilities can be added or removed at runtime",
            "Each decorator has a single, small responsibility",
        ],
        disadvantages=[
            "Many small wrapper objects can be hard to follow",
            "The result depends on the order the layers are applied",
            "Identity checks against the wrapped object no longer work",
        ],
        sample_output=[
            "Caffè semplice: 10",
            "Caffè semplice, con latte: 12",
            "Caffè semplice, con latte, con zucchero: 13",
        ],
    )

    def run(self, output: OutputSink) -> None:
        coffee: Coffee = SimpleCoffee()
        output(_describe(coffee))

        coffee = MilkDecorator(coffee)
        output(_describe(coffee))

        coffee = SugarDecorator(coffee)
        output(_describe(coffee))


def main() -> None:
    DecoratorExample().run(print)


if __name__ == "__main__":
    main()
