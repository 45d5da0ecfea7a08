"""
Actuator base class.
"""

from __future__ import annotations

from typing import ClassVar

from smarthome.enums.device import ActuatorFunctionality
from smarthome.hardware.capability import Capability
from smarthome.hardware.registry import ActuatorCatalogue


class Actuator(Capability):
    """A capability that changes its surroundings."""

    functionality: ClassVar[ActuatorFunctionality]
    catalogue_type = ActuatorCatalogue

    @property
    def actuator_functionality(self) -> ActuatorFunctionality:
        return self.functionality
