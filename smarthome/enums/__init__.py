"""
Enums
=====
Shared enumerations for the SmartHome capability model.
"""

from smarthome.enums.device import ActuatorFunctionality, SensorFunctionality, ValueKind, WindDirection

__all__ = [
    "ActuatorFunctionality",
    "SensorFunctionality",
    "ValueKind",
    "WindDirection",
]
