"""
Unit tests for Room, Dimensions and their factories.
"""

import math

import pytest

from smarthome.domain.device import Device
from smarthome.domain.exceptions import ValidationError
from smarthome.domain.room import Dimensions, Room, RoomFactory


@pytest.fixture()
def room(device_factory, dimensions_factory):
    return Room("Kitchen", "0", 2.5, 4.0, 5.0, device_factory, dimensions_factory)


class TestDimensions:
    def test_valid(self):
        dimensions = Dimensions(2.5, 4, 5.0)
        assert dimensions.width == 4

    @pytest.mark.parametrize(
        "height, width, length",
        [(0, 1, 1), (1, -1, 1), (1, 1, math.nan), (1, 1, math.inf), (True, 1, 1), ("2", 1, 1)],
    )
    def test_invalid(self, height, width, length):
        with pytest.raises(ValidationError):
            Dimensions(height, width, length)


class TestRoomCreation:
    def test_attributes(self, room):
        assert room.name == "Kitchen"
        assert room.house_floor == "0"
        assert room.dimensions == Dimensions(2.5, 4.0, 5.0)

    @pytest.mark.parametrize("name, floor", [("", "1"), ("Bedroom", " "), (None, "1")])
    def test_invalid_name_or_floor(self, device_factory, dimensions_factory, name, floor):
        with pytest.raises(ValidationError):
            Room(name, floor, 2.5, 3.0, 3.0, device_factory, dimensions_factory)

    def test_invalid_dimensions(self, device_factory, dimensions_factory):
        with pytest.raises(ValidationError):
            Room("Bedroom", "1", 2.5, 0, 3.0, device_factory, dimensions_factory)

    def test_missing_factories(self, dimensions_factory):
        with pytest.raises(ValidationError):
            Room("Bedroom", "1", 2.5, 3.0, 3.0, None, dimensions_factory)

    def test_room_factory(self, device_factory, dimensions_factory):
        room = RoomFactory().create_room("Bedroom", "1", 2.5, 3.0, 3.0, device_factory, dimensions_factory)
        assert room.name == "Bedroom"


class TestRoomDevices:
    def test_add_and_get(self, room):
        assert room.add_device("Fridge", "F-200") is True
        device = room.get_device("fridge")
        assert isinstance(device, Device)
        assert device.device_model == "F-200"

    def test_duplicate_name_case_insensitive(self, room):
        room.add_device("Fridge", "F-200")
        assert room.add_device("FRIDGE", "F-300") is False
        assert len(room.get_devices()) == 1

    def test_invalid_device_propagates(self, room):
        with pytest.raises(ValidationError):
            room.add_device("Oven", "")
        assert room.get_devices() == []

    def test_unknown_device(self, room):
        assert room.get_device("Toaster") is None
        assert room.get_device(None) is None

    def test_devices_keep_insertion_order_and_copy(self, room):
        room.add_device("Fridge", "F-200")
        room.add_device("Oven", "O-1")
        devices = room.get_devices()
        devices.pop()
        assert [d.name for d in room.get_devices()] == ["Fridge", "Oven"]
