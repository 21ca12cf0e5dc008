"""Composite pattern - leaves and containers share one operation."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.application.decorators import pattern_example
from pattern_catalog.domain.base.pattern_unit import PatternCategory, PatternUnit
from pattern_catalog.domain.base.ports.example_port import OutputSink, PatternExample


class Component(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def operation(self) -> str:
        pass

    def is_composite(self) -> bool:
        return False


class Leaf(Component):
    def operation(self) -> str:
        return self.name


class Composite(Component):
    """
    Container node.

    ``operation`` recurses into every child and formats the results as
    ``Name(child1+child2+...)``.
    """

    def __init__(self, name: str):
        super().__init__(name)
        self._children: List[Component] = []

    @property
    def children(self) -> List[Component]:
        return list(self._children)

    def add(self, component: Component) -> "Composite":
        self._children.append(component)
        return self

    def remove(self, component: Component) -> None:
        self._children.remove(component)

    def is_composite(self) -> bool:
        return True

    def operation(self) -> str:
        results = [child.operation() for child in self._children]
        return f"{self.name}({'+'.join(results)})"


def build_sample_tree() -> Composite:
    """Root containing a two-leaf branch and a third leaf."""
    branch = Composite("Branch")
    branch.add(Leaf("A"))
    branch.add(Leaf("B"))

    tree = Composite("Root")
    tree.add(branch)
    tree.add(Leaf("C"))
    return tree


@pattern_example
class CompositeExample(PatternExample):
    unit = PatternUnit(
        key="composite",
        name="Composite",
        category=PatternCategory.STRUCTURAL,
        description=(
            "Composes objects into tree structures and lets clients treat single "
            "objects and compositions uniformly. Calling the operation on a "
            "composite recursively calls it on every child and aggregates the results."
        ),
        advantages=[
            "Clients treat leaves and containers through one interface",
            "New component types fit into existing trees",
            "Recursive structures are expressed naturally",
        ],
        disadvantages=[
            "The shared interface can become too general",
            "Hard to restrict which components a container may hold",
        ],
        sample_output=[
            "Result: Root(Branch(A+B)+C)",
        ],
    )

    def run(self, output: OutputSink) -> None:
        tree = build_sample_tree()
        output(f"Result: {tree.operation()}")


def main() -> None:
    CompositeExample().run(print)


if __name__ == "__main__":
    main()
