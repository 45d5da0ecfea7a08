"""
Catalogue constants
===================
Configuration keys and construction namespaces shared by the catalogues and
the device aggregate.
"""

from pathlib import Path

SENSOR_KEY = "sensor"
ACTUATOR_KEY = "actuator"

# Prefixes joined with a requested type name to form a factory-table key
SENSOR_NAMESPACE = "smarthome.hardware.sensors."
ACTUATOR_NAMESPACE = "smarthome.hardware.actuators."

DEFAULT_CATALOGUE_PATH = Path(__file__).resolve().parent / "resources" / "catalogue.properties"

WITHOUT_FUNCTIONALITY = "Without functionality"
