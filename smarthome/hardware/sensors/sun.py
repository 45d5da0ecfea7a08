"""
Sunrise and sunset sensors
==========================
Compute the UTC time of sunrise or sunset for a date and position and keep
the last result as their reading. When the sun does not cross the horizon
(polar day or night) the current time is stored instead.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timezone

from smarthome.enums.device import SensorFunctionality
from smarthome.hardware.sensors.base import Sensor
from smarthome.utils.sun_times import calculate_sun_times

logger = logging.getLogger(__name__)


class _SunEventSensor(Sensor):
    _event: str = ""

    def __init__(self, catalogue, name: str, value_factory) -> None:
        super().__init__(catalogue, name, value_factory)
        self._current_time: time | None = None

    def _calculate(self, on_date: date, latitude: float, longitude: float) -> time:
        sun_times = calculate_sun_times(on_date, latitude, longitude)
        event_time = getattr(sun_times, self._event)
        if event_time is None:
            logger.info("No %s on %s at (%s, %s); using current time", self._event, on_date, latitude, longitude)
            event_time = datetime.now(timezone.utc).time().replace(microsecond=0)
        self._current_time = event_time
        return event_time

    def get_reading(self) -> str | None:
        """ISO time of the last calculation, or None before the first one."""
        if self._current_time is None:
            return None
        return self._current_time.isoformat()

    def get_measurement_unit(self) -> str:
        return "UTC"


class SunriseSensor(_SunEventSensor):
    functionality = SensorFunctionality.Sunrise
    _event = "sunrise"

    def calculate_sunrise(self, on_date: date, latitude: float, longitude: float) -> time:
        return self._calculate(on_date, latitude, longitude)


class SunsetSensor(_SunEventSensor):
    functionality = SensorFunctionality.Sunset
    _event = "sunset"

    def calculate_sunset(self, on_date: date, latitude: float, longitude: float) -> time:
        return self._calculate(on_date, latitude, longitude)
