"""
Hardware capabilities: the sensor and actuator catalogues and the capability
implementations they construct.
"""

from smarthome.hardware.registry import ActuatorCatalogue, CapabilityRegistry, SensorCatalogue

__all__ = ["ActuatorCatalogue", "CapabilityRegistry", "SensorCatalogue"]
