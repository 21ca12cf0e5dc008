"""Tests for the Factory pattern unit."""
import pytest

from pattern_catalog.domain.base.exceptions import UnknownVehicleTypeError, ValidationError
from pattern_catalog.patterns.factory import Car, FactoryExample, Motorcycle, VehicleFactory


@pytest.mark.unit
class TestVehicleFactory:
    def test_create_car(self):
        vehicle = VehicleFactory.create_vehicle("car")
        assert isinstance(vehicle, Car)
        assert vehicle.drive() == "Driving a car"

    def test_create_motorcycle(self):
        vehicle = VehicleFactory.create_vehicle("motorcycle")
        assert isinstance(vehicle, Motorcycle)
        assert vehicle.drive() == "Riding a motorcycle"

    def test_tags_are_case_insensitive(self):
        assert isinstance(VehicleFactory.create_vehicle("CAR"), Car)

    def test_each_call_returns_new_instance(self):
        assert VehicleFactory.create_vehicle("car") is not VehicleFactory.create_vehicle("car")

    def test_unknown_type_raises(self):
        with pytest.raises(UnknownVehicleTypeError) as exc_info:
            VehicleFactory.create_vehicle("truck")
        assert str(exc_info.value) == "Unknown vehicle type: truck"
        assert exc_info.value.vehicle_type == "truck"

    def test_unknown_type_is_validation_error(self):
        with pytest.raises(ValidationError):
            VehicleFactory.create_vehicle("")

    def test_supported_types(self):
        assert VehicleFactory.supported_types() == ["car", "motorcycle"]


@pytest.mark.unit
def test_factory_example_output():
    assert FactoryExample().render() == [
        "Driving a car",
        "Riding a motorcycle",
        "Error: Unknown vehicle type: truck",
    ]
