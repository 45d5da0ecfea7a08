"""
Unit tests for smarthome.domain.values.

Covers parsing, bounds enforcement and rendering of every value kind, plus
the value factory's dispatch and default bounds.
"""

import math

import pytest

from smarthome.domain.exceptions import ValidationError
from smarthome.domain.values import (
    CelsiusValue,
    DecimalRangeValue,
    DefaultValueFactory,
    IntegerRangeValue,
    IrradianceValue,
    PercentageValue,
    WattHourValue,
    WattValue,
    WindValue,
)
from smarthome.enums import ValueKind, WindDirection


class TestDecimalRange:
    """Decimal range value with inclusive limits."""

    def test_valid_reading_is_rendered(self):
        value = DecimalRangeValue(-1.0, 1.0)
        assert value.set_value("0.5") is True
        assert str(value) == "0.5"

    def test_unparseable_reading_keeps_previous(self):
        value = DecimalRangeValue(-1.0, 1.0)
        value.set_value("0.5")
        assert value.set_value("abc") is False
        assert str(value) == "0.5"

    def test_out_of_range_rejected(self):
        value = DecimalRangeValue(-1.0, 1.0)
        assert value.set_value("1.5") is False
        assert value.set_value("-1.01") is False
        assert value.reading == 0.0

    def test_limits_are_inclusive(self):
        value = DecimalRangeValue(-1.0, 1.0)
        assert value.set_value("1") is True
        assert value.set_value("-1.0") is True

    def test_nan_and_infinity_rejected(self):
        value = DecimalRangeValue(-1.0, 1.0)
        assert value.set_value("nan") is False
        assert value.set_value("inf") is False

    def test_none_rejected_without_raising(self):
        assert DecimalRangeValue().set_value(None) is False

    def test_unit(self):
        assert DecimalRangeValue().get_measurement_unit() == "Double precision"

    @pytest.mark.parametrize(
        "lower, upper",
        [(1.0, -1.0), (math.nan, 1.0), (0.0, math.inf), ("a", 1.0)],
    )
    def test_invalid_bounds(self, lower, upper):
        with pytest.raises(ValidationError):
            DecimalRangeValue(lower, upper)


class TestIntegerRange:
    def test_default_bounds(self):
        value = IntegerRangeValue()
        assert value.lower_limit == -1
        assert value.upper_limit == 1

    @pytest.mark.parametrize("lower, upper, expected", [(2, 8, 2), (-8, -2, -2), (-3, 3, 0)])
    def test_initial_reading_within_limits(self, lower, upper, expected):
        assert IntegerRangeValue(lower, upper).reading == expected

    def test_rejects_decimals(self):
        value = IntegerRangeValue(0, 10)
        assert value.set_value("2.5") is False
        assert value.set_value("7") is True
        assert str(value) == "7"

    def test_out_of_range_rejected(self):
        value = IntegerRangeValue(0, 10)
        assert value.set_value("11") is False
        assert value.reading == 0

    def test_fractional_limits_rejected(self):
        with pytest.raises(ValidationError):
            IntegerRangeValue(0.5, 3)

    def test_unit(self):
        assert IntegerRangeValue().unit == "Integer"


class TestPercentage:
    def test_render(self):
        value = PercentageValue()
        assert value.set_value("42") is True
        assert str(value) == "42 %"

    @pytest.mark.parametrize("text", ["-1", "101", "50.5", ""])
    def test_rejected(self, text):
        value = PercentageValue()
        assert value.set_value(text) is False
        assert str(value) == "0 %"


class TestScalarValues:
    def test_celsius_accepts_negative(self):
        value = CelsiusValue()
        assert value.set_value("-3.5") is True
        assert str(value) == "-3.5 ºC"

    def test_watt_rejects_negative(self):
        value = WattValue()
        assert value.set_value("-0.1") is False
        assert value.set_value("150") is True
        assert str(value) == "150.0 W"

    def test_watt_hour_rejects_negative(self):
        value = WattHourValue()
        assert value.set_value("-5") is False
        assert value.unit == "Wh"

    def test_irradiance(self):
        value = IrradianceValue()
        assert value.set_value("800") is True
        assert str(value) == "800.0 W/m2"


class TestWind:
    def test_speed_and_direction(self):
        value = WindValue()
        assert value.set_value("12.5") is True
        assert value.set_direction(WindDirection.NE) is True
        assert str(value) == "12.5 km/h pointing to: NE"

    def test_direction_from_lowercase_text(self):
        value = WindValue()
        assert value.set_direction("sw") is True
        assert value.direction is WindDirection.SW

    def test_invalid_direction(self):
        value = WindValue()
        assert value.set_direction("north-ish") is False
        assert value.set_direction(None) is False
        assert value.direction is None

    def test_without_direction(self):
        assert str(WindValue()) == "0.0 km/h"

    def test_negative_speed_rejected(self):
        value = WindValue()
        assert value.set_value("-2") is False
        assert value.speed == 0.0


class TestValueFactory:
    @pytest.mark.parametrize(
        "kind, expected",
        [
            (ValueKind.PERCENTAGE, PercentageValue),
            (ValueKind.CELSIUS, CelsiusValue),
            (ValueKind.WATT, WattValue),
            (ValueKind.WATT_HOUR, WattHourValue),
            (ValueKind.WIND, WindValue),
            (ValueKind.IRRADIANCE, IrradianceValue),
            (ValueKind.INTEGER_RANGE, IntegerRangeValue),
            (ValueKind.DECIMAL_RANGE, DecimalRangeValue),
        ],
    )
    def test_create_dispatches_on_kind(self, kind, expected):
        value = DefaultValueFactory().create(kind)
        assert isinstance(value, expected)
        assert value.kind is kind

    def test_range_defaults(self):
        value = DefaultValueFactory().create(ValueKind.DECIMAL_RANGE)
        assert (value.lower_limit, value.upper_limit) == (-1.0, 1.0)

    def test_partial_bounds(self):
        value = DefaultValueFactory().create("integer_range", upper_limit=10)
        assert (value.lower_limit, value.upper_limit) == (-1, 10)

    def test_invalid_bounds_raise(self):
        with pytest.raises(ValidationError):
            DefaultValueFactory().create(ValueKind.INTEGER_RANGE, 5, 1)
