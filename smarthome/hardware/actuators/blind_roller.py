"""
Blind roller actuator: position as a percentage (0 closed, 100 open).
"""

from smarthome.enums.device import ActuatorFunctionality, ValueKind
from smarthome.hardware.actuators.base import Actuator


class BlindRollerActuator(Actuator):
    functionality = ActuatorFunctionality.BlindRoller
    value_kind = ValueKind.PERCENTAGE

    def set_position(self, text: str) -> bool:
        return self.value.set_value(text)
