"""
Sensor implementations resolvable through the sensor catalogue.
"""

from smarthome.hardware.sensors.base import MeasuringSensor, Sensor
from smarthome.hardware.sensors.measurement import (
    HumiditySensor,
    InstantPowerConsumptionSensor,
    ScaleSensor,
    SolarIrradianceSensor,
    TemperatureSensor,
)
from smarthome.hardware.sensors.power import AveragePowerConsumptionSensor, ElectricEnergyConsumptionSensor
from smarthome.hardware.sensors.sun import SunriseSensor, SunsetSensor
from smarthome.hardware.sensors.switch import BinarySwitch
from smarthome.hardware.sensors.weather import DewPointSensor, WindSensor

__all__ = [
    "AveragePowerConsumptionSensor",
    "BinarySwitch",
    "DewPointSensor",
    "ElectricEnergyConsumptionSensor",
    "HumiditySensor",
    "InstantPowerConsumptionSensor",
    "MeasuringSensor",
    "ScaleSensor",
    "Sensor",
    "SolarIrradianceSensor",
    "SunriseSensor",
    "SunsetSensor",
    "TemperatureSensor",
    "WindSensor",
]
