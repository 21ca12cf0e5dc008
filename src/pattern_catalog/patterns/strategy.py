"""Strategy pattern - interchangeable sorting algorithms behind one context."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.application.decorators import pattern_example
from pattern_catalog.domain.base.pattern_unit import PatternCategory, PatternUnit
from pattern_catalog.domain.base.ports.example_port import OutputSink, PatternExample

SAMPLE_DATA = [64, 34, 25, 12, 22, 11, 90]


class SortStrategy(ABC):
    """Sorting algorithm. Implementations return a new list and leave the input untouched."""

    @abstractmethod
    def sort(self, data: List[int]) -> List[int]:
        pass


class BubbleSortStrategy(SortStrategy):
    def sort(self, data: List[int]) -> List[int]:
        result = list(data)
        n = len(result)
        for i in range(n):
            swapped = False
            for j in range(n - i - 1):
                if result[j] > result[j + 1]:
                    result[j], result[j + 1] = result[j + 1], result[j]
                    swapped = True
            if not swapped:
                break
        return result


class QuickSortStrategy(SortStrategy):
    def sort(self, data: List[int]) -> List[int]:
        if len(data) <= 1:
            return list(data)
        pivot = data[len(data) // 2]
        left = [x for x in data if x < pivot]
        middle = [x for x in data if x == pivot]
        right = [x for x in data if x > pivot]
        return self.sort(left) + middle + self.sort(right)


class Sorter:
    """Context that delegates sorting to whichever strategy it currently holds."""

    def __init__(self, strategy: SortStrategy):
        self._strategy = strategy

    @property
    def strategy(self) -> SortStrategy:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: SortStrategy) -> None:
        self._strategy = strategy

    def sort(self, data: List[int]) -> List[int]:
        return self._strategy.sort(data)


@pattern_example
class StrategyExample(PatternExample):
    unit = PatternUnit(
        key="strategy",
        name="Strategy",
        category=PatternCategory.BEHAVIORAL,
        description=(
            "Defines a family of algorithms, encapsulates each one and makes them "
            "interchangeable. The context holds one strategy and delegates to it, "
            "so swapping the strategy changes behavior without touching the context."
        ),
        advantages=[
            "Algorithms can be swapped at runtime",
            "Replaces conditional logic with polymorphism",
            "Each algorithm is isolated and testable on its own",
        ],
        disadvantages=[
            "Clients must know the strategies to choose between them",
            "More classes for what might be a simple conditional",
        ],
        sample_output=[
            "Bubble sort: [11, 12, 22, 25, 34, 64, 90]",
            "Quick sort: [11, 12, 22, 25, 34, 64, 90]",
        ],
    )

    def run(self, output: OutputSink) -> None:
        sorter = Sorter(BubbleSortStrategy())
        output(f"Bubble sort: {sorter.sort(SAMPLE_DATA)}")

        sorter.strategy = QuickSortStrategy()
        output(f"Quick sort: {sorter.sort(SAMPLE_DATA)}")


def main() -> None:
    StrategyExample().run(print)


if __name__ == "__main__":
    main()
