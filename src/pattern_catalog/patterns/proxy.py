"""Proxy pattern - load an expensive image only when it is first displayed."""
from abc import ABC, abstractmethod
from typing import Optional

from pattern_catalog.application.decorators import pattern_example
from pattern_catalog.domain.base.pattern_unit import PatternCategory, PatternUnit
from pattern_catalog.domain.base.ports.example_port import OutputSink, PatternExample


class Image(ABC):
    @abstractmethod
    def display(self) -> None:
        pass


class RealImage(Image):
    """Expensive object: loads its data as soon as it is constructed."""

    def __init__(self, filename: str, output: OutputSink = print):
        self.filename = filename
        self._output = output
        self._load_from_disk()

    def _load_from_disk(self) -> None:
        self._output(f"Loading image: {self.filename}")

    def display(self) -> None:
        self._output(f"Displaying image: {self.filename}")


class ProxyImage(Image):
    """Stand-in that creates the RealImage on first display and reuses it after."""

    def __init__(self, filename: str, output: OutputSink = print):
        self.filename = filename
        self._output = output
        self._real_image: Optional[RealImage] = None

    @property
    def is_loaded(self) -> bool:
        return self._real_image is not None

    def display(self) -> None:
        if self._real_image is None:
            self._real_image = RealImage(self.filename, self._output)
        self._real_image.display()


@pattern_example
class ProxyExample(PatternExample):
    unit = PatternUnit(
        key="proxy",
        name="Proxy",
        category=PatternCategory.STRUCTURAL,
        description=(
            "Provides a surrogate that controls access to another object. This "
            "virtual proxy defers loading the expensive real object until it is "
            "first used, then caches it for every later call."
        ),
        advantages=[
            "Expensive objects are created only when actually needed",
            "Clients use the proxy exactly like the real object",
            "Access control, caching or logging can be added transparently",
        ],
        disadvantages=[
            "The first call pays the full loading cost",
            "Adds a class per proxied interface",
        ],
        sample_output=[
            "Loading image: photo.jpg",
            "Displaying image: photo.jpg",
            "Displaying image: photo.jpg",
        ],
    )

    def run(self, output: OutputSink) -> None:
        image = ProxyImage("photo.jpg", output)

        # First call loads the image, the second reuses it
        image.display()
        image.display()


def main() -> None:
    ProxyExample().run(print)


if __name__ == "__main__":
    main()
