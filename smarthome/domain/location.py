"""
Location and GPS value objects for a house.
"""

from __future__ import annotations

import math

from smarthome.domain.exceptions import ValidationError


def valid_coordinates(latitude, longitude) -> bool:
    for value in (latitude, longitude):
        if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
            return False
    return -90 <= latitude <= 90 and -180 <= longitude <= 180


def _valid_address(*parts) -> bool:
    return all(isinstance(part, str) and part.strip() for part in parts)


class GPS:
    """Latitude in [-90, 90] and longitude in [-180, 180], in degrees."""

    def __init__(self, latitude: float, longitude: float):
        if not valid_coordinates(latitude, longitude):
            raise ValidationError(
                "Latitude must be between -90 and 90, and Longitude must be between -180 and 180.",
                detail={"latitude": latitude, "longitude": longitude},
            )
        self._latitude = float(latitude)
        self._longitude = float(longitude)

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    def configure_gps(self, latitude: float, longitude: float) -> bool:
        if not valid_coordinates(latitude, longitude):
            return False
        self._latitude = float(latitude)
        self._longitude = float(longitude)
        return True

    def __repr__(self) -> str:
        return f"GPS(latitude={self._latitude}, longitude={self._longitude})"


class GPSFactory:
    def create_gps(self, latitude: float, longitude: float) -> GPS:
        return GPS(latitude, longitude)


class Location:
    """Postal address plus GPS position."""

    def __init__(
        self,
        street: str,
        door_number: str,
        zip_code: str,
        city: str,
        country: str,
        latitude: float,
        longitude: float,
        gps_factory: GPSFactory | None = None,
    ):
        if not _valid_address(street, door_number, zip_code, city, country):
            raise ValidationError("Invalid arguments passed to constructor.")
        self._gps = (gps_factory or GPSFactory()).create_gps(latitude, longitude)
        self._street = street
        self._door_number = door_number
        self._zip_code = zip_code
        self._city = city
        self._country = country

    @property
    def street(self) -> str:
        return self._street

    @property
    def door_number(self) -> str:
        return self._door_number

    @property
    def zip_code(self) -> str:
        return self._zip_code

    @property
    def city(self) -> str:
        return self._city

    @property
    def country(self) -> str:
        return self._country

    @property
    def gps(self) -> GPS:
        return self._gps

    def configure_location(
        self,
        street: str,
        door_number: str,
        zip_code: str,
        city: str,
        country: str,
        latitude: float,
        longitude: float,
    ) -> bool:
        """Update every field at once; nothing changes if any of them is invalid."""
        if not _valid_address(street, door_number, zip_code, city, country):
            return False
        if not self._gps.configure_gps(latitude, longitude):
            return False
        self._street = street
        self._door_number = door_number
        self._zip_code = zip_code
        self._city = city
        self._country = country
        return True

    def __repr__(self) -> str:
        return (
            f"Location(street={self._street!r}, door_number={self._door_number!r}, zip_code={self._zip_code!r}, "
            f"city={self._city!r}, country={self._country!r}, gps={self._gps!r})"
        )


class LocationFactory:
    def __init__(self, gps_factory: GPSFactory | None = None):
        self._gps_factory = gps_factory or GPSFactory()

    def create_location(
        self,
        street: str,
        door_number: str,
        zip_code: str,
        city: str,
        country: str,
        latitude: float,
        longitude: float,
    ) -> Location:
        return Location(street, door_number, zip_code, city, country, latitude, longitude, self._gps_factory)
