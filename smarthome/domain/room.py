"""
Room Domain Entity
==================
A room on a house floor, with fixed dimensions and the devices installed in it.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from smarthome.domain.device import Device, DeviceFactory
from smarthome.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dimensions:
    """Room size in metres; every side strictly positive."""

    height: float
    width: float
    length: float

    def __post_init__(self) -> None:
        for label in ("height", "width", "length"):
            value = getattr(self, label)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
                raise ValidationError(f"Invalid {label}: {value!r}", detail={label: value})


class DimensionsFactory:
    def create_dimensions(self, height: float, width: float, length: float) -> Dimensions:
        return Dimensions(height, width, length)


class Room:
    """Room holding devices keyed by case-insensitive name."""

    def __init__(
        self,
        name: str,
        house_floor: str,
        height: float,
        width: float,
        length: float,
        device_factory: DeviceFactory,
        dimensions_factory: DimensionsFactory,
    ):
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Invalid arguments passed to constructor.", detail={"name": name})
        if not isinstance(house_floor, str) or not house_floor.strip():
            raise ValidationError("Invalid arguments passed to constructor.", detail={"house_floor": house_floor})
        if device_factory is None or dimensions_factory is None:
            raise ValidationError("Invalid arguments passed to constructor.")

        self._name = name
        self._house_floor = house_floor
        self._device_factory = device_factory
        self._dimensions = dimensions_factory.create_dimensions(height, width, length)
        self._devices: list[Device] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def house_floor(self) -> str:
        return self._house_floor

    @property
    def dimensions(self) -> Dimensions:
        return self._dimensions

    def add_device(self, name: str, device_model: str) -> bool:
        """
        Install a new device.

        Returns:
            False if a device with the same (case-insensitive) name exists

        Raises:
            ValidationError: name or model is blank
        """
        if self.get_device(name) is not None:
            logger.debug("Room '%s' already has a device named '%s'", self._name, name)
            return False
        device = self._device_factory.create_device(name, device_model)
        self._devices.append(device)
        logger.info("Added device '%s' (%s) to room '%s'", name, device_model, self._name)
        return True

    def get_device(self, name: str) -> Optional[Device]:
        if not isinstance(name, str):
            return None
        key = name.casefold()
        for device in self._devices:
            if device.name.casefold() == key:
                return device
        return None

    def get_devices(self) -> list[Device]:
        return list(self._devices)

    def __repr__(self) -> str:
        return f"Room(name={self._name!r}, house_floor={self._house_floor!r}, dimensions={self._dimensions!r})"


class RoomFactory:
    def create_room(
        self,
        name: str,
        house_floor: str,
        height: float,
        width: float,
        length: float,
        device_factory: DeviceFactory,
        dimensions_factory: DimensionsFactory,
    ) -> Room:
        return Room(name, house_floor, height, width, length, device_factory, dimensions_factory)
