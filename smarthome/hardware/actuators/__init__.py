"""
Actuator implementations resolvable through the actuator catalogue.
"""

from smarthome.hardware.actuators.base import Actuator
from smarthome.hardware.actuators.blind_roller import BlindRollerActuator
from smarthome.hardware.actuators.range import RangeActuatorDecimal, RangeActuatorInt
from smarthome.hardware.actuators.switch import SwitchOnOffActuator

__all__ = [
    "Actuator",
    "BlindRollerActuator",
    "RangeActuatorDecimal",
    "RangeActuatorInt",
    "SwitchOnOffActuator",
]
