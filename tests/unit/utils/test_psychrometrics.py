"""
Unit tests for smarthome.utils.psychrometrics module.

Tests the dew point calculation used by the dew point sensor.
"""

import math

import pytest

from smarthome.utils.psychrometrics import calculate_dew_point_c


class TestDewPoint:
    """Test dew point calculation."""

    def test_dew_point_100_percent_humidity_equals_temp(self):
        """At 100% RH, dew point should equal air temperature."""
        temp = 25
        dew_point = calculate_dew_point_c(temp, 100)
        assert dew_point == pytest.approx(temp, abs=0.5)

    def test_dew_point_lower_than_temp(self):
        """Dew point should always be <= air temperature."""
        dew_point = calculate_dew_point_c(25, 60)
        assert dew_point < 25

    def test_dew_point_typical_conditions(self):
        """25°C at 60% RH should give dew point around 16.7°C."""
        dew_point = calculate_dew_point_c(25, 60)
        assert 15 < dew_point < 18

    def test_dew_point_is_rounded(self):
        """20°C at 50% RH gives 9.27°C."""
        assert calculate_dew_point_c(20, 50) == 9.27

    def test_dew_point_sub_zero(self):
        """Dew point should work with sub-zero temperatures."""
        dew_point = calculate_dew_point_c(-5, 80)
        assert dew_point < -5

    def test_humidity_above_100_is_capped(self):
        assert calculate_dew_point_c(25, 130) == calculate_dew_point_c(25, 100)


class TestUndefinedInputs:
    """Inputs for which no dew point exists."""

    @pytest.mark.parametrize(
        "temperature, humidity",
        [(None, 60), (25, None), (25, 0), (25, -10), (math.nan, 50), (25, math.inf)],
    )
    def test_returns_none(self, temperature, humidity):
        assert calculate_dew_point_c(temperature, humidity) is None
