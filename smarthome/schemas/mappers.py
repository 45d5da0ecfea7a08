"""
Domain to DTO mappers.

The ``*_map`` helpers return DTO-keyed dicts so that services can hand DTOs to
callers and later find the aggregate a caller selected.
"""

from __future__ import annotations

from typing import Optional

from smarthome.domain.device import Device
from smarthome.domain.house import DeviceRoom
from smarthome.domain.location import Location
from smarthome.domain.room import Room
from smarthome.hardware.capability import Capability
from smarthome.schemas.home import CapabilityDTO, DeviceDTO, DeviceRoomDTO, GpsDTO, LocationDTO, RoomDTO


class LocationMapper:
    @staticmethod
    def to_dto(location: Optional[Location]) -> Optional[LocationDTO]:
        if location is None:
            return None
        return LocationDTO(
            street=location.street,
            door_number=location.door_number,
            zip_code=location.zip_code,
            city=location.city,
            country=location.country,
            gps=GpsDTO(latitude=location.gps.latitude, longitude=location.gps.longitude),
        )


class RoomMapper:
    @staticmethod
    def to_dto(room: Room) -> RoomDTO:
        dimensions = room.dimensions
        return RoomDTO(
            name=room.name,
            floor=room.house_floor,
            height=dimensions.height,
            width=dimensions.width,
            length=dimensions.length,
        )

    @staticmethod
    def to_dto_map(rooms: list[Room]) -> dict[RoomDTO, Room]:
        return {RoomMapper.to_dto(room): room for room in rooms}


class DeviceMapper:
    @staticmethod
    def to_dto(device: Device) -> DeviceDTO:
        return DeviceDTO(name=device.name, device_model=device.device_model, is_active=device.is_active)

    @staticmethod
    def to_dto_map(devices: list[Device]) -> dict[DeviceDTO, Device]:
        return {DeviceMapper.to_dto(device): device for device in devices}

    @staticmethod
    def grouping_to_dto(grouped: dict[str, list[DeviceRoom]]) -> dict[str, list[DeviceRoomDTO]]:
        return {
            functionality: [DeviceRoomDTO(device=entry.device, room=entry.room) for entry in entries]
            for functionality, entries in grouped.items()
        }


class CapabilityMapper:
    @staticmethod
    def to_dto(capability: Capability) -> CapabilityDTO:
        if capability.requires_window:
            reading, unit = None, None
        else:
            reading = capability.get_reading()
            unit = capability.get_measurement_unit()
        return CapabilityDTO(
            name=capability.name,
            functionality=capability.functionality,
            reading=reading,
            unit=unit or None,
        )
