from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from smarthome.domain.device import Device
from smarthome.domain.exceptions import ValidationError
from smarthome.domain.house import House
from smarthome.domain.room import Room
from smarthome.domain.values import ValueFactory
from smarthome.hardware.registry import ActuatorCatalogue, SensorCatalogue
from smarthome.schemas.home import CapabilityDTO, DeviceDTO, RoomDTO
from smarthome.schemas.mappers import CapabilityMapper, DeviceMapper

logger = logging.getLogger(__name__)

RoomRef = Union[RoomDTO, str]
DeviceRef = Union[DeviceDTO, str]


def _name_of(ref) -> Optional[str]:
    return ref if isinstance(ref, str) else getattr(ref, "name", None)


@dataclass
class DeviceService:
    """
    Use cases on devices and their sensors and actuators.

    Rooms and devices are addressed by name or by the DTOs this service hands
    out. Sensors and actuators are created through the injected catalogues.
    """

    house: House
    sensor_catalogue: SensorCatalogue
    actuator_catalogue: ActuatorCatalogue
    value_factory: ValueFactory

    def _room(self, room: RoomRef) -> Optional[Room]:
        return self.house.get_room(_name_of(room))

    def _device(self, room: RoomRef, device: DeviceRef) -> Optional[Device]:
        found = self._room(room)
        if found is None:
            return None
        return found.get_device(_name_of(device))

    # --- Devices -----------------------------------------------------------------
    def add_device(self, room: RoomRef, *, name: str, device_model: str) -> bool:
        target = self._room(room)
        if target is None:
            logger.debug("Cannot add device '%s': room %s not found", name, _name_of(room))
            return False
        try:
            return target.add_device(name, device_model)
        except ValidationError as e:
            logger.warning("Rejected device '%s': %s", name, e)
            return False

    def list_devices(self, room: RoomRef) -> List[DeviceDTO]:
        target = self._room(room)
        if target is None:
            return []
        return [DeviceMapper.to_dto(device) for device in target.get_devices()]

    def list_house_devices(self) -> List[DeviceDTO]:
        return [DeviceMapper.to_dto(device) for device, _room in self.house.get_devices()]

    def deactivate_device(self, device: DeviceRef, room: Optional[RoomRef] = None) -> bool:
        """
        Switch a device off.

        Without ``room`` the first device with that name anywhere in the house
        is used.

        Returns:
            True if the device was active and is now inactive
        """
        if room is not None:
            target = self._device(room, device)
        else:
            key = (_name_of(device) or "").casefold()
            target = next((d for d, _room in self.house.get_devices() if d.name.casefold() == key), None)
        if target is None:
            return False
        return target.switch_device(False)

    # --- Sensors -----------------------------------------------------------------
    def list_sensor_functionalities(self, room: RoomRef, device: DeviceRef) -> List[str]:
        target = self._device(room, device)
        if target is None:
            return []
        return [functionality.value for functionality in target.get_sensor_functionalities()]

    def list_sensor_models(self) -> List[str]:
        return self.sensor_catalogue.list_recognized_names()

    def add_sensor(self, room: RoomRef, device: DeviceRef, *, model: str, name: str) -> Optional[CapabilityDTO]:
        target = self._device(room, device)
        if target is None:
            return None
        sensor = target.add_sensor(model, name, self.sensor_catalogue, self.value_factory)
        return CapabilityMapper.to_dto(sensor) if sensor is not None else None

    def list_sensors(self, room: RoomRef, device: DeviceRef) -> List[CapabilityDTO]:
        target = self._device(room, device)
        if target is None:
            return []
        return [CapabilityMapper.to_dto(sensor) for sensor in target.get_sensors()]

    # --- Actuators ---------------------------------------------------------------
    def list_actuator_functionalities(self, room: RoomRef, device: DeviceRef) -> List[str]:
        target = self._device(room, device)
        if target is None:
            return []
        return [functionality.value for functionality in target.get_actuator_functionalities()]

    def list_actuator_models(self) -> List[str]:
        return self.actuator_catalogue.list_recognized_names()

    def add_actuator(self, room: RoomRef, device: DeviceRef, *, model: str, name: str) -> Optional[CapabilityDTO]:
        target = self._device(room, device)
        if target is None:
            return None
        actuator = target.add_actuator(model, name, self.actuator_catalogue, self.value_factory)
        return CapabilityMapper.to_dto(actuator) if actuator is not None else None

    def list_actuators(self, room: RoomRef, device: DeviceRef) -> List[CapabilityDTO]:
        target = self._device(room, device)
        if target is None:
            return []
        return [CapabilityMapper.to_dto(actuator) for actuator in target.get_actuators()]
