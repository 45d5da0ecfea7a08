from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from smarthome.domain.device import DeviceFactory
from smarthome.domain.exceptions import ValidationError
from smarthome.domain.house import House
from smarthome.domain.room import DimensionsFactory
from smarthome.schemas.home import DeviceRoomDTO, LocationDTO, RoomDTO
from smarthome.schemas.mappers import DeviceMapper, LocationMapper, RoomMapper

logger = logging.getLogger(__name__)


@dataclass
class HouseService:
    """
    Use cases on the house as a whole: its location, its rooms and the
    functionality overview of every installed device.

    Domain validation failures are reported as ``None``/``False`` results.
    """

    house: House
    device_factory: DeviceFactory
    dimensions_factory: DimensionsFactory = field(default_factory=DimensionsFactory)

    # --- Location ----------------------------------------------------------------
    def configure_location(
        self,
        *,
        street: str,
        door_number: str,
        zip_code: str,
        city: str,
        country: str,
        latitude: float,
        longitude: float,
    ) -> Optional[LocationDTO]:
        try:
            location = self.house.configure_location(
                street, door_number, zip_code, city, country, latitude, longitude
            )
        except ValidationError as e:
            logger.warning("Rejected house location: %s", e)
            return None
        return LocationMapper.to_dto(location)

    def get_location(self) -> Optional[LocationDTO]:
        return LocationMapper.to_dto(self.house.location)

    # --- Rooms -------------------------------------------------------------------
    def add_room(self, *, name: str, floor: str, height: float, width: float, length: float) -> bool:
        try:
            return self.house.add_room(
                name, floor, height, width, length, self.device_factory, self.dimensions_factory
            )
        except ValidationError as e:
            logger.warning("Rejected room '%s': %s", name, e)
            return False

    def list_rooms(self) -> List[RoomDTO]:
        return [RoomMapper.to_dto(room) for room in self.house.get_rooms()]

    # --- Overview ----------------------------------------------------------------
    def group_devices_by_functionality(self) -> Dict[str, List[DeviceRoomDTO]]:
        return DeviceMapper.grouping_to_dto(self.house.get_devices_by_room_and_functionality())
