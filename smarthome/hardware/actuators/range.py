"""
Range actuators
===============
Actuators holding a setting bounded by ``[lower_limit, upper_limit]``.

The value is created as soon as the actuator is built, with the default
``[-1, 1]`` bounds, and recreated whenever the actuator is reconfigured.
Bounds are enforced on every write: a setting outside them is rejected and the
previous one kept.
"""

from __future__ import annotations

import logging

from smarthome.domain.exceptions import ValidationError
from smarthome.domain.values.factory import DEFAULT_LOWER_LIMIT, DEFAULT_UPPER_LIMIT
from smarthome.enums.device import ActuatorFunctionality, ValueKind
from smarthome.hardware.actuators.base import Actuator

logger = logging.getLogger(__name__)


class _RangeActuator(Actuator):
    functionality = ActuatorFunctionality.Range

    def __init__(self, catalogue, name: str, value_factory) -> None:
        super().__init__(catalogue, name, value_factory)
        self._lower_limit = self._coerce(DEFAULT_LOWER_LIMIT)
        self._upper_limit = self._coerce(DEFAULT_UPPER_LIMIT)
        self._value = self._value_factory.create(self.value_kind, self._lower_limit, self._upper_limit)

    @staticmethod
    def _coerce(limit):
        return limit

    @property
    def lower_limit(self):
        return self._lower_limit

    @property
    def upper_limit(self):
        return self._upper_limit

    def _reconfigure(self, lower_limit, upper_limit, value_factory) -> bool:
        factory = value_factory or self._value_factory
        try:
            value = factory.create(self.value_kind, lower_limit, upper_limit)
        except ValidationError as e:
            logger.debug("Rejected limits for '%s': %s", self.name, e)
            return False
        self._value = value
        self._value_factory = factory
        self._lower_limit = self._coerce(lower_limit)
        self._upper_limit = self._coerce(upper_limit)
        return True

    def set_measurement(self, text: str) -> bool:
        """Apply a new setting; ``False`` if it does not parse or lies outside the limits."""
        return self.value.set_value(text)


class RangeActuatorInt(_RangeActuator):
    """Integer setting within configurable limits."""

    value_kind = ValueKind.INTEGER_RANGE

    def configure_actuator(self, lower_limit: int, upper_limit: int, value_factory=None) -> bool:
        """
        Replace the limits and reset the setting.

        Returns:
            False if the limits are invalid (the previous configuration is kept)
        """
        return self._reconfigure(lower_limit, upper_limit, value_factory)


class RangeActuatorDecimal(_RangeActuator):
    """Decimal setting within configurable limits and a nominal precision."""

    value_kind = ValueKind.DECIMAL_RANGE

    def __init__(self, catalogue, name: str, value_factory) -> None:
        super().__init__(catalogue, name, value_factory)
        self._precision = 0.0

    @staticmethod
    def _coerce(limit):
        return float(limit)

    @property
    def precision(self) -> float:
        return self._precision

    def configure_actuator(
        self, lower_limit: float, upper_limit: float, precision: float = 0.0, value_factory=None
    ) -> bool:
        """
        Replace the limits and precision and reset the setting.

        Returns:
            False if the limits or the precision are invalid
        """
        if isinstance(precision, bool) or not isinstance(precision, (int, float)) or not precision >= 0:
            return False
        if not self._reconfigure(lower_limit, upper_limit, value_factory):
            return False
        self._precision = float(precision)
        return True
