"""
House Aggregate
===============
Root of the ownership tree: a house has a location and rooms, rooms have
devices, devices have sensors and actuators.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from smarthome.constants import WITHOUT_FUNCTIONALITY
from smarthome.domain.device import Device, DeviceFactory
from smarthome.domain.location import Location, LocationFactory
from smarthome.domain.room import DimensionsFactory, Room, RoomFactory
from smarthome.enums.device import SensorFunctionality

logger = logging.getLogger(__name__)


class DeviceRoom(NamedTuple):
    """A device name paired with the room it is installed in."""

    device: str
    room: str


def group_devices_by_functionality(rooms: list[Room]) -> dict[str, list[DeviceRoom]]:
    """
    Group every device by the functionalities of its sensors.

    A device appears once under each functionality it has a sensor for.
    Devices without sensors are listed under ``"Without functionality"``.
    Keys follow the functionality enumeration order, with the no-sensor group
    last; functionalities no device offers are left out.
    """
    grouped: dict[str, list[DeviceRoom]] = {}
    for functionality in SensorFunctionality:
        for room in rooms:
            for device in room.get_devices():
                if any(sensor.functionality is functionality for sensor in device.get_sensors()):
                    grouped.setdefault(functionality.value, []).append(DeviceRoom(device.name, room.name))

    for room in rooms:
        for device in room.get_devices():
            if not device.get_sensors():
                grouped.setdefault(WITHOUT_FUNCTIONALITY, []).append(DeviceRoom(device.name, room.name))
    return grouped


class House:
    """House holding rooms keyed by case-insensitive name."""

    def __init__(self, location_factory: LocationFactory, room_factory: RoomFactory):
        self._location_factory = location_factory
        self._room_factory = room_factory
        self._location: Optional[Location] = None
        self._rooms: list[Room] = []

    @property
    def location(self) -> Optional[Location]:
        return self._location

    def configure_location(
        self,
        street: str,
        door_number: str,
        zip_code: str,
        city: str,
        country: str,
        latitude: float,
        longitude: float,
    ) -> Location:
        """
        Set (or replace) the house location.

        Raises:
            ValidationError: an address field is blank or the coordinates are out of range
        """
        self._location = self._location_factory.create_location(
            street, door_number, zip_code, city, country, latitude, longitude
        )
        logger.info("House location set to %s, %s", city, country)
        return self._location

    def add_room(
        self,
        name: str,
        house_floor: str,
        height: float,
        width: float,
        length: float,
        device_factory: DeviceFactory,
        dimensions_factory: DimensionsFactory,
    ) -> bool:
        """
        Add a room.

        Returns:
            False if a room with the same (case-insensitive) name exists

        Raises:
            ValidationError: name, floor or dimensions are invalid
        """
        if self.get_room(name) is not None:
            logger.debug("House already has a room named '%s'", name)
            return False
        room = self._room_factory.create_room(
            name, house_floor, height, width, length, device_factory, dimensions_factory
        )
        self._rooms.append(room)
        logger.info("Added room '%s' on floor %s", name, house_floor)
        return True

    def get_room(self, name: str) -> Optional[Room]:
        if not isinstance(name, str):
            return None
        key = name.casefold()
        for room in self._rooms:
            if room.name.casefold() == key:
                return room
        return None

    def get_rooms(self) -> list[Room]:
        return list(self._rooms)

    def get_devices(self) -> list[tuple[Device, Room]]:
        """Every device in the house with the room it belongs to."""
        return [(device, room) for room in self._rooms for device in room.get_devices()]

    def get_devices_by_room_and_functionality(self) -> dict[str, list[DeviceRoom]]:
        return group_devices_by_functionality(self._rooms)
