"""
Schemas
=======
Pydantic DTOs and the mappers that build them from domain aggregates.
"""

from smarthome.schemas.home import CapabilityDTO, DeviceDTO, DeviceRoomDTO, GpsDTO, LocationDTO, RoomDTO
from smarthome.schemas.mappers import CapabilityMapper, DeviceMapper, LocationMapper, RoomMapper

__all__ = [
    "CapabilityDTO",
    "CapabilityMapper",
    "DeviceDTO",
    "DeviceMapper",
    "DeviceRoomDTO",
    "GpsDTO",
    "LocationDTO",
    "LocationMapper",
    "RoomDTO",
    "RoomMapper",
]
