"""Builder pattern - step-by-step construction driven by a director."""
from abc import ABC, abstractmethod
from typing import List, Optional

from pattern_catalog.application.decorators import pattern_example
from pattern_catalog.domain.base.pattern_unit import PatternCategory, PatternUnit
from pattern_catalog.domain.base.ports.example_port import OutputSink, PatternExample


class Product:
    """Multi-part product assembled by a builder."""

    def __init__(self) -> None:
        self.parts: List[str] = []

    def add(self, part: str) -> None:
        self.parts.append(part)

    def list_parts(self) -> str:
        return f"Product parts: {', '.join(self.parts)}"


class Builder(ABC):
    """Declares the construction steps."""

    @abstractmethod
    def build_part_a(self) -> None:
        pass

    @abstractmethod
    def build_part_b(self) -> None:
        pass

    @abstractmethod
    def build_part_c(self) -> None:
        pass

    @abstractmethod
    def get_result(self) -> Product:
        pass


class ConcreteBuilder(Builder):
    """Builds a Product; ``get_result`` hands it over and starts a fresh one."""

    def __init__(self) -> None:
        self._product = Product()

    def reset(self) -> None:
        self._product = Product()

    def build_part_a(self) -> None:
        self._product.add("PartA")

    def build_part_b(self) -> None:
        self._product.add("PartB")

    def build_part_c(self) -> None:
        self._product.add("PartC")

    def get_result(self) -> Product:
        product = self._product
        self.reset()
        return product


class Director:
    """
    Owns the order of construction steps.

    The director knows which steps to call and in which order, but nothing
    about how the builder represents the product.
    """

    def __init__(self, builder: Optional[Builder] = None):
        self._builder = builder

    @property
    def builder(self) -> Optional[Builder]:
        return self._builder

    @builder.setter
    def builder(self, builder: Builder) -> None:
        self._builder = builder

    def _require_builder(self) -> Builder:
        if self._builder is None:
            raise ValueError("Director has no builder assigned")
        return self._builder

    def construct(self) -> None:
        """Standard product: part A, then part B."""
        builder = self._require_builder()
        builder.build_part_a()
        builder.build_part_b()

    def construct_full(self) -> None:
        builder = self._require_builder()
        builder.build_part_a()
        builder.build_part_b()
        builder.build_part_c()


@pattern_example
class BuilderExample(PatternExample):
    unit = PatternUnit(
        key="builder",
        name="Builder",
        category=PatternCategory.CREATIONAL,
        description=(
            "Separates the construction of a complex object from its "
            "representation. A builder exposes discrete construction steps and a "
            "director invokes them in a fixed order, so the same sequence can "
            "produce different representations."
        ),
        advantages=[
            "Step-by-step construction with full control over the order",
            "The same construction process can build different representations",
            "Isolates complex assembly code from the product's business logic",
        ],
        disadvantages=[
            "More classes than constructing the object directly",
            "Overkill for products with only a few parts",
        ],
        sample_output=[
            "Product parts: PartA, PartB",
            "Product parts: PartA, PartB, PartC",
        ],
    )

    def run(self, output: OutputSink) -> None:
        builder = ConcreteBuilder()
        director = Director(builder)

        director.construct()
        output(builder.get_result().list_parts())

        director.construct_full()
        output(builder.get_result().list_parts())


def main() -> None:
    BuilderExample().run(print)


if __name__ == "__main__":
    main()
