"""Factory pattern - create vehicles from a type tag."""
from abc import ABC, abstractmethod
from typing import Dict, List, Type

from pattern_catalog.application.decorators import pattern_example
from pattern_catalog.domain.base.exceptions import UnknownVehicleTypeError
from pattern_catalog.domain.base.pattern_unit import PatternCategory, PatternUnit
from pattern_catalog.domain.base.ports.example_port import OutputSink, PatternExample


class Vehicle(ABC):
    """Shared capability of every vehicle the factory builds."""

    @abstractmethod
    def drive(self) -> str:
        """Describe how the vehicle is driven."""


class Car(Vehicle):
    def drive(self) -> str:
        return "Driving a car"


class Motorcycle(Vehicle):
    def drive(self) -> str:
        return "Riding a motorcycle"


class VehicleFactory:
    """Maps a vehicle type tag to a freshly constructed Vehicle."""

    _vehicle_types: Dict[str, Type[Vehicle]] = {
        "car": Car,
        "motorcycle": Motorcycle,
    }

    @classmethod
    def create_vehicle(cls, vehicle_type: str) -> Vehicle:
        """
        Create a new vehicle for the given tag.

        Args:
            vehicle_type: Type tag such as 'car' or 'motorcycle' (case-insensitive)

        Returns:
            A new Vehicle instance

        Raises:
            UnknownVehicleTypeError: If the tag is not recognized
        """
        vehicle_class = cls._vehicle_types.get(vehicle_type.lower())
        if vehicle_class is None:
            raise UnknownVehicleTypeError(vehicle_type)
        return vehicle_class()

    @classmethod
    def supported_types(cls) -> List[str]:
        return list(cls._vehicle_types)


@pattern_example
class FactoryExample(PatternExample):
    unit = PatternUnit(
        key="factory",
        name="Factory",
        category=PatternCategory.CREATIONAL,
        description=(
            "Delegates object creation to a dedicated function that decides, from "
            "a type tag, which concrete class to instantiate. Callers depend only "
            "on the shared interface, never on the concrete classes."
        ),
        advantages=[
            "Decouples client code from concrete classes",
            "Centralizes creation logic in one place",
            "New variants are added by extending the factory's mapping",
        ],
        disadvantages=[
            "Adds an extra layer of indirection",
            "The factory must change whenever a new variant is introduced",
        ],
        sample_output=[
            "Driving a car",
            "Riding a motorcycle",
            "Error: Unknown vehicle type: truck",
        ],
    )

    def run(self, output: OutputSink) -> None:
        car = VehicleFactory.create_vehicle("car")
        output(car.drive())

        motorcycle = VehicleFactory.create_vehicle("motorcycle")
        output(motorcycle.drive())

        try:
            VehicleFactory.create_vehicle("truck")
        except UnknownVehicleTypeError as e:
            output(f"Error: {e}")


def main() -> None:
    FactoryExample().run(print)


if __name__ == "__main__":
    main()
