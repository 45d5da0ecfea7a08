"""
Single-value sensors: temperature, humidity, scale, solar irradiance and
instant power.
"""

from smarthome.enums.device import SensorFunctionality, ValueKind
from smarthome.hardware.sensors.base import MeasuringSensor


class TemperatureSensor(MeasuringSensor):
    functionality = SensorFunctionality.Temperature
    value_kind = ValueKind.CELSIUS


class HumiditySensor(MeasuringSensor):
    functionality = SensorFunctionality.Humidity
    value_kind = ValueKind.PERCENTAGE


class ScaleSensor(MeasuringSensor):
    functionality = SensorFunctionality.Scale
    value_kind = ValueKind.PERCENTAGE


class SolarIrradianceSensor(MeasuringSensor):
    functionality = SensorFunctionality.SolarIrradiance
    value_kind = ValueKind.IRRADIANCE


class InstantPowerConsumptionSensor(MeasuringSensor):
    """Current power draw in watts."""

    functionality = SensorFunctionality.Power_Consumption
    value_kind = ValueKind.WATT
