"""
Capability base
===============
Shared behaviour of sensors and actuators: a validated, immutable name, a
functionality tag fixed by the concrete class and an optional measurement
value created lazily through the injected value factory.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from smarthome.domain.exceptions import ValidationError
from smarthome.domain.values import Value
from smarthome.enums.device import ValueKind


class Capability:
    """A named sensor or actuator owning at most one measurement value."""

    functionality: ClassVar[Enum]
    value_kind: ClassVar[ValueKind | None] = None
    catalogue_type: ClassVar[type] = object
    # get_reading() takes a (start, end) time window
    requires_window: ClassVar[bool] = False

    def __init__(self, catalogue, name: str, value_factory) -> None:
        if catalogue is None:
            raise ValidationError("Catalogue cannot be null")
        if not isinstance(catalogue, self.catalogue_type):
            raise ValidationError(
                f"{type(self).__name__} requires a {self.catalogue_type.__name__}",
                detail={"catalogue": type(catalogue).__name__},
            )
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Name cannot be null or empty")
        if value_factory is None:
            raise ValidationError("ValueFactory cannot be null")

        self._name = name
        self._value_factory = value_factory
        self._value: Value | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> Value:
        """The measurement value, created on first access."""
        if self._value is None:
            self._value = self._create_value()
        return self._value

    def _create_value(self) -> Value:
        if self.value_kind is None:
            raise NotImplementedError(f"{type(self).__name__} has no measurement value")
        return self._value_factory.create(self.value_kind)

    def get_reading(self) -> Any:
        return str(self.value)

    def get_measurement_unit(self) -> str:
        return self.value.get_measurement_unit()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, functionality={self.functionality.value!r})"
