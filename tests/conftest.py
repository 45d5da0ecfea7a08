"""
Shared test fixtures for the SmartHome test suite.

Provides:
- In-memory catalogue configuration listing every implemented capability
- Sensor and actuator catalogues built from it
- The default value factory
- Factories and an empty house wired the way the service container wires them

Usage:
    def test_example(sensor_catalogue, value_factory):
        sensor = sensor_catalogue.resolve("TemperatureSensor", SENSOR_NAMESPACE, "t1", value_factory)
        assert sensor is not None
"""

from __future__ import annotations

import logging

import pytest

from smarthome.config import AppConfig, CatalogueConfig
from smarthome.domain.device import DeviceFactory
from smarthome.domain.house import House
from smarthome.domain.location import LocationFactory
from smarthome.domain.room import DimensionsFactory, RoomFactory
from smarthome.domain.values import DefaultValueFactory
from smarthome.hardware.registry import ActuatorCatalogue, SensorCatalogue

# ---------------------------------------------------------------------------
# Logging: keep test output clean
# ---------------------------------------------------------------------------
logging.getLogger("smarthome").setLevel(logging.WARNING)

SENSOR_NAMES = [
    "TemperatureSensor",
    "HumiditySensor",
    "BinarySwitch",
    "ScaleSensor",
    "WindSensor",
    "DewPointSensor",
    "InstantPowerConsumptionSensor",
    "AveragePowerConsumptionSensor",
    "SolarIrradianceSensor",
    "ElectricEnergyConsumptionSensor",
    "SunriseSensor",
    "SunsetSensor",
    "BarometerSensor",
]
ACTUATOR_NAMES = ["SwitchOnOffActuator", "RangeActuatorInt", "RangeActuatorDecimal", "BlindRollerActuator"]


# ========================== Catalogue Fixtures =============================


@pytest.fixture()
def catalogue_config():
    """Every implemented capability plus one recognised name with no implementation."""
    return CatalogueConfig.from_mapping({"sensor": SENSOR_NAMES, "actuator": ACTUATOR_NAMES})


@pytest.fixture()
def sensor_catalogue(catalogue_config):
    return SensorCatalogue(catalogue_config)


@pytest.fixture()
def actuator_catalogue(catalogue_config):
    return ActuatorCatalogue(catalogue_config)


@pytest.fixture()
def value_factory():
    return DefaultValueFactory()


@pytest.fixture()
def catalogue_file(tmp_path):
    """Properties file with a short sensor and actuator list."""
    path = tmp_path / "catalogue.properties"
    path.write_text(
        "# test catalogue\nsensor=TemperatureSensor, HumiditySensor\nactuator=SwitchOnOffActuator,RangeActuatorInt\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def app_config(catalogue_file):
    return AppConfig(catalogue_path=str(catalogue_file))


# ========================== Aggregate Fixtures =============================


@pytest.fixture()
def device_factory(sensor_catalogue, actuator_catalogue):
    return DeviceFactory(sensor_catalogue, actuator_catalogue)


@pytest.fixture()
def dimensions_factory():
    return DimensionsFactory()


@pytest.fixture()
def house():
    return House(LocationFactory(), RoomFactory())
