"""
Value Factory
=============
Creates measurement values on behalf of capabilities. Capabilities receive the
factory by injection and never construct values directly, so tests can hand
them a double.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from smarthome.domain.values.value import (
    CelsiusValue,
    DecimalRangeValue,
    IntegerRangeValue,
    IrradianceValue,
    PercentageValue,
    Value,
    WattHourValue,
    WattValue,
    WindValue,
)
from smarthome.enums.device import ValueKind

DEFAULT_LOWER_LIMIT = -1
DEFAULT_UPPER_LIMIT = 1


class ValueFactory(ABC):
    """Interface for creating measurement values."""

    @abstractmethod
    def create_integer_range(self, lower_limit: int, upper_limit: int) -> Value: ...

    @abstractmethod
    def create_decimal_range(self, lower_limit: float, upper_limit: float) -> Value: ...

    @abstractmethod
    def create_percentage(self) -> Value: ...

    @abstractmethod
    def create_celsius(self) -> Value: ...

    @abstractmethod
    def create_watt(self) -> Value: ...

    @abstractmethod
    def create_watt_hour(self) -> Value: ...

    @abstractmethod
    def create_wind(self) -> Value: ...

    @abstractmethod
    def create_irradiance(self) -> Value: ...

    def create(self, kind: ValueKind | str, lower_limit=None, upper_limit=None) -> Value:
        """
        Create a value of the requested kind.

        Range kinds fall back to ``[-1, 1]`` for any bound not given. Bounds are
        ignored for the other kinds.

        Raises:
            ValidationError: range bounds are NaN, infinite or inverted
            ValueError: ``kind`` is not a known value kind
        """
        kind = ValueKind(kind)
        if kind.is_range:
            lower = DEFAULT_LOWER_LIMIT if lower_limit is None else lower_limit
            upper = DEFAULT_UPPER_LIMIT if upper_limit is None else upper_limit
            if kind is ValueKind.INTEGER_RANGE:
                return self.create_integer_range(lower, upper)
            return self.create_decimal_range(lower, upper)

        creators = {
            ValueKind.PERCENTAGE: self.create_percentage,
            ValueKind.CELSIUS: self.create_celsius,
            ValueKind.WATT: self.create_watt,
            ValueKind.WATT_HOUR: self.create_watt_hour,
            ValueKind.WIND: self.create_wind,
            ValueKind.IRRADIANCE: self.create_irradiance,
        }
        return creators[kind]()


class DefaultValueFactory(ValueFactory):
    """Builds the standard value implementations."""

    def create_integer_range(self, lower_limit: int = DEFAULT_LOWER_LIMIT, upper_limit: int = DEFAULT_UPPER_LIMIT):
        return IntegerRangeValue(lower_limit, upper_limit)

    def create_decimal_range(
        self, lower_limit: float = float(DEFAULT_LOWER_LIMIT), upper_limit: float = float(DEFAULT_UPPER_LIMIT)
    ):
        return DecimalRangeValue(lower_limit, upper_limit)

    def create_percentage(self):
        return PercentageValue()

    def create_celsius(self):
        return CelsiusValue()

    def create_watt(self):
        return WattValue()

    def create_watt_hour(self):
        return WattHourValue()

    def create_wind(self):
        return WindValue()

    def create_irradiance(self):
        return IrradianceValue()
