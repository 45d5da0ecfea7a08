"""
Measurement values and the factory that creates them.
"""

from smarthome.domain.values.factory import DefaultValueFactory, ValueFactory
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

__all__ = [
    "CelsiusValue",
    "DecimalRangeValue",
    "DefaultValueFactory",
    "IntegerRangeValue",
    "IrradianceValue",
    "PercentageValue",
    "Value",
    "ValueFactory",
    "WattHourValue",
    "WattValue",
    "WindValue",
]
