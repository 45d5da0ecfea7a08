"""
Measurement Values
==================
Typed, unit-carrying readings owned by sensors and actuators.

Every value parses its new reading from text through :meth:`Value.set_value`,
which reports success as a bool and never raises: a reading that does not
parse, or that falls outside the value's bounds, leaves the previous reading
untouched.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Callable

from smarthome.domain.exceptions import ValidationError
from smarthome.enums.device import ValueKind, WindDirection


def _parse(text: Any, cast: Callable[[str], Any]) -> Any | None:
    """Parse ``text`` with ``cast``; ``None`` when it is not a valid literal."""
    if not isinstance(text, str):
        return None
    try:
        parsed = cast(text.strip())
    except (TypeError, ValueError):
        return None
    if isinstance(parsed, float) and not math.isfinite(parsed):
        return None
    return parsed


def validate_bounds(lower: float, upper: float) -> None:
    """Raise ValidationError unless ``lower <= upper`` and both are finite numbers."""
    for limit in (lower, upper):
        if isinstance(limit, bool) or not isinstance(limit, (int, float)):
            raise ValidationError("Limits must be numeric", detail={"lower": lower, "upper": upper})
        if not math.isfinite(limit):
            raise ValidationError("Limits must be finite", detail={"lower": lower, "upper": upper})
    if lower > upper:
        raise ValidationError(
            f"Lower limit {lower} is greater than upper limit {upper}",
            detail={"lower": lower, "upper": upper},
        )


class Value(ABC):
    """A single typed reading with a fixed unit."""

    kind: ValueKind
    unit: str

    @abstractmethod
    def set_value(self, text: str) -> bool:
        """Parse ``text`` into the current reading; ``False`` leaves it unchanged."""

    @property
    @abstractmethod
    def reading(self) -> Any:
        """The current reading in its native representation."""

    def get_measurement_unit(self) -> str:
        return self.unit

    def __str__(self) -> str:
        return f"{self.reading} {self.unit}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.reading!r})"


class _ScalarValue(Value):
    """Single number with an optional lower bound."""

    _cast: Callable[[str], Any] = float
    _minimum: float | None = None

    def __init__(self) -> None:
        self._current = self._cast("0")

    @property
    def reading(self):
        return self._current

    def _accepts(self, value) -> bool:
        return self._minimum is None or value >= self._minimum

    def set_value(self, text: str) -> bool:
        value = _parse(text, self._cast)
        if value is None or not self._accepts(value):
            return False
        self._current = value
        return True


class _RangeValue(_ScalarValue):
    """Number constrained to an inclusive ``[lower_limit, upper_limit]`` interval."""

    def __init__(self, lower_limit, upper_limit) -> None:
        validate_bounds(lower_limit, upper_limit)
        self.lower_limit = self._cast(lower_limit)
        self.upper_limit = self._cast(upper_limit)
        super().__init__()
        # Start at zero, or at the nearest limit when zero is out of range
        self._current = min(max(self._current, self.lower_limit), self.upper_limit)

    def _accepts(self, value) -> bool:
        return self.lower_limit <= value <= self.upper_limit

    def __str__(self) -> str:
        return str(self._current)


class IntegerRangeValue(_RangeValue):
    kind = ValueKind.INTEGER_RANGE
    unit = "Integer"
    _cast = int

    def __init__(self, lower_limit: int = -1, upper_limit: int = 1) -> None:
        if isinstance(lower_limit, float) or isinstance(upper_limit, float):
            if not (float(lower_limit).is_integer() and float(upper_limit).is_integer()):
                raise ValidationError(
                    "Integer range limits must be whole numbers",
                    detail={"lower": lower_limit, "upper": upper_limit},
                )
        super().__init__(lower_limit, upper_limit)


class DecimalRangeValue(_RangeValue):
    kind = ValueKind.DECIMAL_RANGE
    unit = "Double precision"

    def __init__(self, lower_limit: float = -1.0, upper_limit: float = 1.0) -> None:
        super().__init__(lower_limit, upper_limit)


class PercentageValue(_RangeValue):
    kind = ValueKind.PERCENTAGE
    unit = "%"
    _cast = int

    def __init__(self) -> None:
        super().__init__(0, 100)

    def __str__(self) -> str:
        return f"{self._current} {self.unit}"


class CelsiusValue(_ScalarValue):
    kind = ValueKind.CELSIUS
    unit = "ºC"


class WattValue(_ScalarValue):
    kind = ValueKind.WATT
    unit = "W"
    _minimum = 0.0


class WattHourValue(_ScalarValue):
    kind = ValueKind.WATT_HOUR
    unit = "Wh"
    _minimum = 0.0


class IrradianceValue(_ScalarValue):
    kind = ValueKind.IRRADIANCE
    unit = "W/m2"


class WindValue(Value):
    """Wind speed in km/h plus the direction it points to."""

    kind = ValueKind.WIND
    unit = "km/h"

    def __init__(self) -> None:
        self._speed = 0.0
        self._direction: WindDirection | None = None

    @property
    def reading(self) -> tuple[float, WindDirection | None]:
        return self._speed, self._direction

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def direction(self) -> WindDirection | None:
        return self._direction

    def set_value(self, text: str) -> bool:
        speed = _parse(text, float)
        if speed is None or speed < 0:
            return False
        self._speed = speed
        return True

    def set_direction(self, direction: WindDirection | str | None) -> bool:
        if direction is None:
            return False
        try:
            self._direction = WindDirection(direction)
        except ValueError:
            return False
        return True

    def __str__(self) -> str:
        if self._direction is None:
            return f"{self._speed} {self.unit}"
        return f"{self._speed} {self.unit} pointing to: {self._direction}"
