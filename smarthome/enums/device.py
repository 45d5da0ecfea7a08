"""
Capability enums
================

Closed enumerations for sensor and actuator functionalities, value kinds and
wind directions.
"""

from enum import Enum


class SensorFunctionality(str, Enum):
    """What a sensor measures."""

    Temperature = "Temperature"
    Humidity = "Humidity"
    Binary_Switch = "Binary_Switch"
    Scale = "Scale"
    Wind = "Wind"
    DewPoint = "DewPoint"
    Power_Consumption = "Power_Consumption"
    SolarIrradiance = "SolarIrradiance"
    Energy_Consumption = "Energy_Consumption"
    Sunrise = "Sunrise"
    Sunset = "Sunset"

    def __str__(self) -> str:
        return self.value


class ActuatorFunctionality(str, Enum):
    """What an actuator controls."""

    On_Off = "On_Off"
    Range = "Range"
    BlindRoller = "BlindRoller"

    def __str__(self) -> str:
        return self.value


class ValueKind(str, Enum):
    """Measurement value representations."""

    INTEGER_RANGE = "integer_range"
    DECIMAL_RANGE = "decimal_range"
    PERCENTAGE = "percentage"
    CELSIUS = "celsius"
    WATT = "watt"
    WATT_HOUR = "watt_hour"
    WIND = "wind"
    IRRADIANCE = "irradiance"

    @property
    def is_range(self) -> bool:
        return self in (ValueKind.INTEGER_RANGE, ValueKind.DECIMAL_RANGE)


class WindDirection(str, Enum):
    """Cardinal and intercardinal wind directions"""

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"

    @classmethod
    def _missing_(cls, value: object) -> "WindDirection | None":
        """Accept lower-case abbreviations."""
        if isinstance(value, str):
            upper = value.strip().upper()
            for member in cls:
                if member.value == upper:
                    return member
        return None

    def __str__(self) -> str:
        return self.value
