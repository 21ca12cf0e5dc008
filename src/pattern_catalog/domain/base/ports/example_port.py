"""Example port - the runnable half of every catalog entry."""
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, List

from pattern_catalog.domain.base.pattern_unit import PatternUnit

OutputSink = Callable[[str], None]


class PatternExample(ABC):
    """Port implemented by every pattern unit's usage example."""

    unit: ClassVar[PatternUnit]

    @abstractmethod
    def run(self, output: OutputSink) -> None:
        """Execute the usage section, emitting one printed line per call."""

    def render(self) -> List[str]:
        """Run the example and collect its lines instead of printing them."""
        lines: List[str] = []
        self.run(lines.append)
        return lines
