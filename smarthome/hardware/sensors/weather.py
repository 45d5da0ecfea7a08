"""
Weather sensors
===============
Wind speed with direction, and dew point derived from temperature and
relative humidity.
"""

from __future__ import annotations

import logging

from smarthome.enums.device import SensorFunctionality, ValueKind, WindDirection
from smarthome.hardware.sensors.base import MeasuringSensor
from smarthome.utils.psychrometrics import calculate_dew_point_c

logger = logging.getLogger(__name__)


class WindSensor(MeasuringSensor):
    """Wind speed (km/h) and the direction it points to."""

    functionality = SensorFunctionality.Wind
    value_kind = ValueKind.WIND

    def set_direction(self, direction: WindDirection | str | None) -> bool:
        return self.value.set_direction(direction)


class DewPointSensor(MeasuringSensor):
    """
    Dew point in Celsius.

    The reading is not measured directly; it is computed with the
    Magnus-Tetens approximation whenever new temperature and humidity
    figures arrive.
    """

    functionality = SensorFunctionality.DewPoint
    value_kind = ValueKind.CELSIUS

    def calculate_dew_point(self, temperature_c: float, relative_humidity: float) -> bool:
        """
        Recompute the reading.

        Args:
            temperature_c: Air temperature in Celsius
            relative_humidity: Relative humidity percentage (0-100)

        Returns:
            True if the reading was updated
        """
        dew_point = calculate_dew_point_c(temperature_c, relative_humidity)
        if dew_point is None:
            logger.debug("Dew point undefined for T=%s RH=%s", temperature_c, relative_humidity)
            return False
        return self.value.set_value(str(dew_point))

    def update_from(self, temperature_sensor: MeasuringSensor, humidity_sensor: MeasuringSensor) -> bool:
        """Recompute the reading from a temperature and a humidity sensor."""
        return self.calculate_dew_point(temperature_sensor.value.reading, humidity_sensor.value.reading)
