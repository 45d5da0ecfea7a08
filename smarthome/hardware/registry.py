"""
Capability Registry

Catalogue pattern for turning configuration-declared type names into live
sensors and actuators.

Features:
- Recognised names come from the catalogue configuration (``sensor`` /
  ``actuator`` keys), in declaration order
- Construction goes through an explicit factory table keyed by
  ``namespace + type name``
- Resolution never raises: unknown names and failed constructions both
  come back as ``None``
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from smarthome.config import CatalogueConfig
from smarthome.constants import ACTUATOR_KEY, DEFAULT_CATALOGUE_PATH, SENSOR_KEY
from smarthome.domain.exceptions import ConfigurationError
from smarthome.enums.device import ActuatorFunctionality, SensorFunctionality

logger = logging.getLogger(__name__)

CapabilityFactory = Callable[["CapabilityRegistry", str, Any], Any]

_default_factories: dict[str, CapabilityFactory] | None = None


class CapabilityRegistry:
    """
    Resolves recognised type names to capability instances.

    Subclasses pin the configuration key and the functionality enumeration of
    their family (sensor or actuator).
    """

    config_key: str = ""
    functionality_enum: type[Enum] = Enum

    def __init__(
        self,
        config: CatalogueConfig | Mapping[str, Any] | None,
        factories: Mapping[str, CapabilityFactory] | None = None,
        config_key: str | None = None,
    ):
        """
        Initialize the registry.

        Args:
            config: Catalogue configuration, or a plain mapping of key to names
            factories: Factory table override (defaults to the built-in table)
            config_key: Configuration key override for the recognised names

        Raises:
            ConfigurationError: no configuration was supplied
        """
        if config is None:
            raise ConfigurationError("Invalid arguments")
        if not isinstance(config, CatalogueConfig):
            config = CatalogueConfig.from_mapping(config)

        key = config_key or self.config_key
        self._recognized_names: tuple[str, ...] = tuple(config.get_list(key))
        self._factories: dict[str, CapabilityFactory] = dict(
            factories if factories is not None else get_default_factories()
        )
        self.source = config.source

        logger.info(
            "%s initialized from %s with %d recognised names",
            type(self).__name__,
            config.source,
            len(self._recognized_names),
        )

    @classmethod
    def from_file(cls, path: str | os.PathLike | None, **kwargs):
        """Build a registry from a properties-style configuration file."""
        return cls(CatalogueConfig.from_file(path), **kwargs)

    @classmethod
    def from_default(cls, **kwargs):
        """Build a registry from the packaged default configuration."""
        return cls.from_file(DEFAULT_CATALOGUE_PATH, **kwargs)

    @classmethod
    def from_names(cls, names, **kwargs):
        """Build a registry that recognises exactly ``names``."""
        key = kwargs.get("config_key") or cls.config_key
        return cls(CatalogueConfig.from_mapping({key: list(names)}), **kwargs)

    def list_recognized_names(self) -> list[str]:
        """Declared type names, in declaration order (a copy)."""
        return list(self._recognized_names)

    def list_functionalities(self) -> list:
        """Every functionality of this family, whether configured or not."""
        return list(self.functionality_enum)

    def lookup_functionality(self, tag) -> Enum | None:
        """
        Return ``tag`` if it belongs to this family's enumeration.

        Args:
            tag: Enum member or its string value

        Returns:
            The matching member, or None
        """
        if isinstance(tag, self.functionality_enum):
            return tag
        if isinstance(tag, str):
            try:
                return self.functionality_enum(tag)
            except ValueError:
                return None
        return None

    def is_recognized(self, requested_name: str) -> bool:
        return self._match(requested_name) is not None

    def _match(self, requested_name: str) -> str | None:
        # Case-sensitive substring match, first declared entry wins
        if not isinstance(requested_name, str) or not requested_name:
            return None
        for name in self._recognized_names:
            if requested_name in name:
                return name
        return None

    def resolve(self, requested_name: str, namespace: str, instance_name: str, value_factory) -> Any | None:
        """
        Construct a capability for a recognised type name.

        Args:
            requested_name: Type name to look for among the recognised names
            namespace: Prefix joined with ``requested_name`` to form the factory key
            instance_name: Name given to the new capability
            value_factory: Factory the capability uses for its measurement value

        Returns:
            The new capability, or None if the name is not recognised or
            construction failed for any reason
        """
        matched = self._match(requested_name)
        if matched is None:
            logger.debug("'%s' is not a recognised %s name", requested_name, self.config_key)
            return None

        if not namespace:
            logger.debug("No construction namespace given for '%s'", requested_name)
            return None

        factory_key = f"{namespace}{requested_name}"
        factory = self._factories.get(factory_key)
        if factory is None:
            logger.debug("No factory registered for '%s'", factory_key)
            return None

        try:
            capability = factory(self, instance_name, value_factory)
        except Exception as e:
            logger.warning("Failed to construct %s '%s': %s", factory_key, instance_name, e)
            return None

        logger.debug("Constructed %s '%s'", factory_key, instance_name)
        return capability

    def register_factory(self, key: str, factory: CapabilityFactory) -> None:
        """Add or replace a factory-table entry on this registry."""
        self._factories[key] = factory

    def __repr__(self) -> str:
        return f"{type(self).__name__}(names={list(self._recognized_names)!r})"


class SensorCatalogue(CapabilityRegistry):
    """Registry for the sensor family."""

    config_key = SENSOR_KEY
    functionality_enum = SensorFunctionality

    def list_sensor_functionalities(self) -> list[SensorFunctionality]:
        return self.list_functionalities()

    def get_sensor(self, requested_name: str, namespace: str, instance_name: str, value_factory):
        return self.resolve(requested_name, namespace, instance_name, value_factory)


class ActuatorCatalogue(CapabilityRegistry):
    """Registry for the actuator family."""

    config_key = ACTUATOR_KEY
    functionality_enum = ActuatorFunctionality

    def list_actuator_functionalities(self) -> list[ActuatorFunctionality]:
        return self.list_functionalities()

    def get_actuator(self, requested_name: str, namespace: str, instance_name: str, value_factory):
        return self.resolve(requested_name, namespace, instance_name, value_factory)


def _initialize_default_factories() -> dict[str, CapabilityFactory]:
    """Build the factory table for every implemented sensor and actuator."""
    from smarthome.constants import ACTUATOR_NAMESPACE, SENSOR_NAMESPACE
    from smarthome.hardware.actuators import (
        BlindRollerActuator,
        RangeActuatorDecimal,
        RangeActuatorInt,
        SwitchOnOffActuator,
    )
    from smarthome.hardware.sensors import (
        AveragePowerConsumptionSensor,
        BinarySwitch,
        DewPointSensor,
        ElectricEnergyConsumptionSensor,
        HumiditySensor,
        InstantPowerConsumptionSensor,
        ScaleSensor,
        SolarIrradianceSensor,
        SunriseSensor,
        SunsetSensor,
        TemperatureSensor,
        WindSensor,
    )

    sensors = (
        AveragePowerConsumptionSensor,
        BinarySwitch,
        DewPointSensor,
        ElectricEnergyConsumptionSensor,
        HumiditySensor,
        InstantPowerConsumptionSensor,
        ScaleSensor,
        SolarIrradianceSensor,
        SunriseSensor,
        SunsetSensor,
        TemperatureSensor,
        WindSensor,
    )
    actuators = (BlindRollerActuator, RangeActuatorDecimal, RangeActuatorInt, SwitchOnOffActuator)

    table: dict[str, CapabilityFactory] = {}
    for cls in sensors:
        table[SENSOR_NAMESPACE + cls.__name__] = cls
    for cls in actuators:
        table[ACTUATOR_NAMESPACE + cls.__name__] = cls
    return table


def get_default_factories() -> dict[str, CapabilityFactory]:
    """Built-in factory table, populated once on first use."""
    global _default_factories
    if _default_factories is None:
        _default_factories = _initialize_default_factories()
        logger.debug("Default factory table populated with %d entries", len(_default_factories))
    return dict(_default_factories)
