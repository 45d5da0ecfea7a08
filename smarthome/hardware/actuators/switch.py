"""
On/off switch actuator.
"""

from __future__ import annotations

import logging

from smarthome.enums.device import ActuatorFunctionality
from smarthome.hardware.actuators.base import Actuator

logger = logging.getLogger(__name__)


class SwitchOnOffActuator(Actuator):
    """Two-state switch, initially off."""

    functionality = ActuatorFunctionality.On_Off

    def __init__(self, catalogue, name: str, value_factory) -> None:
        super().__init__(catalogue, name, value_factory)
        self._is_on = False

    @property
    def is_on(self) -> bool:
        return self._is_on

    def switch_actuator(self) -> bool:
        """Toggle the switch and return the new state."""
        self._is_on = not self._is_on
        logger.debug("Switch '%s' turned %s", self.name, self.get_reading())
        return self._is_on

    def get_reading(self) -> str:
        return "on" if self._is_on else "off"

    def get_measurement_unit(self) -> str:
        return ""
