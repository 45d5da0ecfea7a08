"""
Sensor base classes.
"""

from __future__ import annotations

from typing import ClassVar

from smarthome.enums.device import SensorFunctionality
from smarthome.hardware.capability import Capability
from smarthome.hardware.registry import SensorCatalogue


class Sensor(Capability):
    """A capability that reports on its surroundings."""

    functionality: ClassVar[SensorFunctionality]
    catalogue_type = SensorCatalogue

    @property
    def sensor_functionality(self) -> SensorFunctionality:
        return self.functionality


class MeasuringSensor(Sensor):
    """Sensor whose reading is a single measurement value."""

    def set_reading(self, text: str) -> bool:
        """Store a new reading; ``False`` if it does not parse or is out of bounds."""
        return self.value.set_value(text)
