"""
Power and energy sensors
========================
Sensors that keep time-stamped readings and report over a period.
"""

from __future__ import annotations

import logging
from datetime import time

from smarthome.domain.values import Value
from smarthome.enums.device import SensorFunctionality, ValueKind
from smarthome.hardware.sensors.base import Sensor

logger = logging.getLogger(__name__)

NO_READINGS = "No readings to show"
EXPECTED_TWO_READINGS = "There should be exactly two readings"
INVALID_PERIOD = "Invalid time period"


class AveragePowerConsumptionSensor(Sensor):
    """Average power draw (W) over a time window."""

    functionality = SensorFunctionality.Power_Consumption
    value_kind = ValueKind.WATT
    requires_window = True

    def __init__(self, catalogue, name: str, value_factory) -> None:
        super().__init__(catalogue, name, value_factory)
        self._readings: dict[time, Value] = {}

    def add_reading(self, reading: Value | None, at: time | None) -> bool:
        """Record a watt reading taken at ``at``; a later reading at the same time replaces it."""
        if reading is None or at is None:
            return False
        if reading.kind is not ValueKind.WATT:
            logger.debug("%s rejected a %s reading", self.name, reading.kind.value)
            return False
        self._readings[at] = reading
        return True

    def get_reading(self, start: time, end: time) -> str:
        """
        Average of the non-zero readings taken strictly between ``start`` and ``end``.

        Returns:
            e.g. ``"150.0 W"``, or ``"No readings to show"`` when the window is empty
        """
        window = [
            reading.reading
            for taken_at, reading in self._readings.items()
            if start < taken_at < end and reading.reading != 0
        ]
        if not window:
            return NO_READINGS
        return f"{sum(window) / len(window)} {self.get_measurement_unit()}"


class ElectricEnergyConsumptionSensor(Sensor):
    """Energy consumed (Wh) between two meter readings."""

    functionality = SensorFunctionality.Energy_Consumption
    value_kind = ValueKind.WATT_HOUR
    requires_window = True

    def __init__(self, catalogue, name: str, value_factory) -> None:
        super().__init__(catalogue, name, value_factory)
        self._readings: dict[time, Value] = {}

    def add_reading(self, reading: Value | None, at: time | None) -> bool:
        """Record a meter reading; zero readings are rejected."""
        if reading is None or at is None:
            return False
        if reading.kind is not ValueKind.WATT_HOUR or reading.reading == 0:
            return False
        self._readings[at] = reading
        return True

    def _reading_at(self, at: time) -> float:
        reading = self._readings.get(at)
        return reading.reading if reading is not None else 0.0

    def get_reading(self, start: time | None, end: time | None) -> str:
        """
        Consumption between the readings taken at ``start`` and ``end``.

        Exactly two readings must have been recorded.
        """
        if len(self._readings) != 2:
            return EXPECTED_TWO_READINGS
        if start is None or end is None or start > end:
            return INVALID_PERIOD
        consumption = float(self._reading_at(end) - self._reading_at(start))
        return f"{consumption} {self.get_measurement_unit()}"
