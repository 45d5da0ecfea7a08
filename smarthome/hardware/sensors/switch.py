"""
Binary switch sensor: mirrors the state of a linked on/off actuator.
"""

from __future__ import annotations

from smarthome.enums.device import SensorFunctionality
from smarthome.hardware.actuators.switch import SwitchOnOffActuator
from smarthome.hardware.sensors.base import Sensor


class BinarySwitch(Sensor):
    functionality = SensorFunctionality.Binary_Switch

    def __init__(self, catalogue, name: str, value_factory) -> None:
        super().__init__(catalogue, name, value_factory)
        self._switch: SwitchOnOffActuator | None = None

    def configure_sensor(self, switch: SwitchOnOffActuator | None) -> bool:
        """Link the actuator whose state this sensor reports."""
        if not isinstance(switch, SwitchOnOffActuator):
            return False
        self._switch = switch
        return True

    def read_status(self) -> bool:
        """True when the linked switch is on; False when off or unlinked."""
        return self._switch is not None and self._switch.is_on

    def get_reading(self) -> str:
        return "on" if self.read_status() else "off"

    def get_measurement_unit(self) -> str:
        return ""
