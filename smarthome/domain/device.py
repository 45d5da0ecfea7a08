"""
Device Domain Entity
====================
A device owns sensors and actuators by name and can be switched on or off.

Sensor names and actuator names are each unique within a device, compared
case-insensitively; the two namespaces are independent of each other.
"""

from __future__ import annotations

import logging
from typing import Optional

from smarthome.constants import ACTUATOR_NAMESPACE, SENSOR_NAMESPACE
from smarthome.domain.exceptions import ValidationError
from smarthome.enums.device import ActuatorFunctionality, SensorFunctionality
from smarthome.hardware.actuators.base import Actuator
from smarthome.hardware.registry import ActuatorCatalogue, SensorCatalogue
from smarthome.hardware.sensors.base import Sensor

logger = logging.getLogger(__name__)


def _find(items, name: str):
    if not isinstance(name, str):
        return None
    key = name.casefold()
    for item in items:
        if item.name.casefold() == key:
            return item
    return None


class Device:
    """
    Smart home device with its sensors and actuators.

    The catalogues given at construction only back the functionality listings;
    ``add_sensor``/``add_actuator`` resolve through the catalogue passed to them.
    """

    def __init__(
        self,
        name: str,
        device_model: str,
        sensor_catalogue: Optional[SensorCatalogue] = None,
        actuator_catalogue: Optional[ActuatorCatalogue] = None,
    ):
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Invalid arguments passed to constructor.", detail={"name": name})
        if not isinstance(device_model, str) or not device_model.strip():
            raise ValidationError("Invalid arguments passed to constructor.", detail={"device_model": device_model})

        self._name = name
        self._device_model = device_model
        self._is_active = False
        self._sensors: list[Sensor] = []
        self._actuators: list[Actuator] = []
        self._sensor_catalogue = sensor_catalogue
        self._actuator_catalogue = actuator_catalogue

    @property
    def name(self) -> str:
        return self._name

    @property
    def device_model(self) -> str:
        return self._device_model

    @property
    def is_active(self) -> bool:
        return self._is_active

    def switch_device(self, is_active: bool) -> bool:
        """
        Move the device to the requested state.

        Returns:
            True if the state changed, False if it was already there
        """
        if bool(is_active) == self._is_active:
            return False
        self._is_active = bool(is_active)
        logger.info("Device '%s' %s", self._name, "activated" if self._is_active else "deactivated")
        return True

    # --- Sensors -----------------------------------------------------------

    def add_sensor(self, model: str, name: str, catalogue: SensorCatalogue, value_factory) -> Optional[Sensor]:
        """
        Create a sensor of type ``model`` named ``name``.

        Returns:
            The new sensor, or None if the catalogue cannot build ``model`` or
            a sensor with that name already exists
        """
        if catalogue is None:
            return None
        if self.get_sensor(name) is not None:
            logger.debug("Device '%s' already has a sensor named '%s'", self._name, name)
            return None
        sensor = catalogue.resolve(model, SENSOR_NAMESPACE, name, value_factory)
        if sensor is None:
            return None
        self._sensors.append(sensor)
        logger.info("Added %s '%s' to device '%s'", model, name, self._name)
        return sensor

    def get_sensor(self, name: str) -> Optional[Sensor]:
        return _find(self._sensors, name)

    def get_sensors(self) -> list[Sensor]:
        return list(self._sensors)

    def get_sensor_functionalities(self) -> list[SensorFunctionality]:
        return self._catalogues()[0].list_functionalities()

    # --- Actuators ---------------------------------------------------------

    def add_actuator(self, model: str, name: str, catalogue: ActuatorCatalogue, value_factory) -> Optional[Actuator]:
        """
        Create an actuator of type ``model`` named ``name``.

        Returns:
            The new actuator, or None if the catalogue cannot build ``model``
            or an actuator with that name already exists
        """
        if catalogue is None:
            return None
        if self.get_actuator(name) is not None:
            logger.debug("Device '%s' already has an actuator named '%s'", self._name, name)
            return None
        actuator = catalogue.resolve(model, ACTUATOR_NAMESPACE, name, value_factory)
        if actuator is None:
            return None
        self._actuators.append(actuator)
        logger.info("Added %s '%s' to device '%s'", model, name, self._name)
        return actuator

    def get_actuator(self, name: str) -> Optional[Actuator]:
        return _find(self._actuators, name)

    def get_actuators(self) -> list[Actuator]:
        return list(self._actuators)

    def get_actuator_functionalities(self) -> list[ActuatorFunctionality]:
        return self._catalogues()[1].list_functionalities()

    def _catalogues(self) -> tuple[SensorCatalogue, ActuatorCatalogue]:
        # Fall back to the packaged catalogue configuration
        if self._sensor_catalogue is None:
            self._sensor_catalogue = SensorCatalogue.from_default()
        if self._actuator_catalogue is None:
            self._actuator_catalogue = ActuatorCatalogue.from_default()
        return self._sensor_catalogue, self._actuator_catalogue

    def __repr__(self) -> str:
        return f"Device(name={self._name!r}, device_model={self._device_model!r}, is_active={self._is_active})"


class DeviceFactory:
    """Creates devices that share one pair of catalogues."""

    def __init__(
        self,
        sensor_catalogue: Optional[SensorCatalogue] = None,
        actuator_catalogue: Optional[ActuatorCatalogue] = None,
    ):
        self.sensor_catalogue = sensor_catalogue
        self.actuator_catalogue = actuator_catalogue

    def create_device(self, name: str, device_model: str) -> Device:
        return Device(name, device_model, self.sensor_catalogue, self.actuator_catalogue)
