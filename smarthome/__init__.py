"""
SmartHome
=========
Smart-home capability catalogue: houses, rooms, devices and the sensors and
actuators resolved at runtime from configuration.
"""

__version__ = "1.0.0"
