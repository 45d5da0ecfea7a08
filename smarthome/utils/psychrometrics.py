"""
Psychrometric Calculations
==========================

Pure utility functions for air-science derived metrics used by the climate
sensors.

Functions:
- calculate_dew_point_c: Dew point temperature
"""

from __future__ import annotations

import math

# Magnus constants
MAGNUS_A = 17.27
MAGNUS_B = 237.3


def calculate_dew_point_c(temperature_c: float | None, relative_humidity: float | None) -> float | None:
    """
    Calculate dew point temperature in Celsius using Magnus-Tetens approximation.

    Formula:
        gamma = (a * T) / (b + T) + ln(RH/100)
        Td = (b * gamma) / (a - gamma)

    Args:
        temperature_c: Temperature in Celsius
        relative_humidity: Relative humidity percentage (0-100)

    Returns:
        Dew point in Celsius rounded to 2 places, or None if an input is
        missing or humidity is not positive
    """
    if temperature_c is None or relative_humidity is None:
        return None

    temp_c = float(temperature_c)
    humidity = float(relative_humidity)
    if not (math.isfinite(temp_c) and math.isfinite(humidity)):
        return None

    if humidity <= 0:
        return None
    humidity = min(humidity, 100.0)

    gamma = (MAGNUS_A * temp_c) / (MAGNUS_B + temp_c) + math.log(humidity / 100.0)
    dew_point = (MAGNUS_B * gamma) / (MAGNUS_A - gamma)

    return round(dew_point, 2)
