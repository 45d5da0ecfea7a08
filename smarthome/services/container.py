from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from smarthome.config import AppConfig, CatalogueConfig, load_catalogue_config
from smarthome.domain.device import DeviceFactory
from smarthome.domain.house import House
from smarthome.domain.location import LocationFactory
from smarthome.domain.room import DimensionsFactory, RoomFactory
from smarthome.domain.values import DefaultValueFactory, ValueFactory
from smarthome.hardware.registry import ActuatorCatalogue, SensorCatalogue
from smarthome.services.application.device_service import DeviceService
from smarthome.services.application.house_service import HouseService

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Aggregate and wire the catalogues, the house and its services."""

    config: AppConfig
    catalogue_config: CatalogueConfig
    sensor_catalogue: SensorCatalogue
    actuator_catalogue: ActuatorCatalogue
    value_factory: ValueFactory
    house: House
    house_service: HouseService
    device_service: DeviceService

    @classmethod
    def build(
        cls,
        config: AppConfig,
        *,
        catalogue_config: Optional[CatalogueConfig] = None,
        value_factory: Optional[ValueFactory] = None,
    ) -> "ServiceContainer":
        """
        Build the object graph.

        Args:
            config: Runtime configuration
            catalogue_config: Catalogue override (defaults to ``config.catalogue_path``)
            value_factory: Value factory override

        Raises:
            ConfigurationError: the catalogue file cannot be read
        """
        catalogue_config = catalogue_config or load_catalogue_config(config)
        sensor_catalogue = SensorCatalogue(catalogue_config, config_key=config.sensor_key)
        actuator_catalogue = ActuatorCatalogue(catalogue_config, config_key=config.actuator_key)
        value_factory = value_factory or DefaultValueFactory()

        house = House(LocationFactory(), RoomFactory())
        device_factory = DeviceFactory(sensor_catalogue, actuator_catalogue)

        container = cls(
            config=config,
            catalogue_config=catalogue_config,
            sensor_catalogue=sensor_catalogue,
            actuator_catalogue=actuator_catalogue,
            value_factory=value_factory,
            house=house,
            house_service=HouseService(house, device_factory, DimensionsFactory()),
            device_service=DeviceService(house, sensor_catalogue, actuator_catalogue, value_factory),
        )
        logger.info("Service container built from %s", catalogue_config.source)
        return container
