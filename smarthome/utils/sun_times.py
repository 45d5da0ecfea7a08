"""
Sun Times
=========

Sunrise, sunset and solar noon for a date and geographic position, computed
locally with astral (no network access).

Times are UTC. Inside the polar circles the sun may not cross the horizon on
a given date, in which case sunrise and sunset are ``None``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, time, timezone
from typing import Any, Dict, Optional

from astral import Observer
from astral.sun import daylight, elevation, noon, sunrise, sunset

from smarthome.domain.exceptions import ValidationError
from smarthome.domain.location import valid_coordinates

logger = logging.getLogger(__name__)


@dataclass
class SunTimes:
    """Sun times for a specific date and location."""
    date: date
    sunrise: Optional[time]
    sunset: Optional[time]
    solar_noon: time
    day_length_hours: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        def time_str(t: Optional[time]) -> Optional[str]:
            return t.strftime("%H:%M:%S") if t else None

        return {
            "date": self.date.isoformat(),
            "sunrise": time_str(self.sunrise),
            "sunset": time_str(self.sunset),
            "solar_noon": time_str(self.solar_noon),
            "day_length_hours": self.day_length_hours,
        }


def _utc_time(event, observer: Observer, target_date: date) -> Optional[time]:
    try:
        moment = event(observer, date=target_date, tzinfo=timezone.utc)
    except ValueError:
        # Sun never reaches the horizon on this date
        return None
    return moment.time().replace(microsecond=0)


def calculate_sun_times(target_date: date, latitude: float, longitude: float) -> SunTimes:
    """
    Calculate sun times for a date and position.

    Args:
        target_date: Calendar date
        latitude: Degrees north, in [-90, 90]
        longitude: Degrees east, in [-180, 180]

    Returns:
        SunTimes in UTC; sunrise/sunset are None during polar day or night

    Raises:
        ValidationError: coordinates are out of range or not numbers
    """
    if not valid_coordinates(latitude, longitude):
        raise ValidationError(
            f"Invalid coordinates: latitude={latitude}, longitude={longitude}",
            detail={"latitude": latitude, "longitude": longitude},
        )

    observer = Observer(latitude=latitude, longitude=longitude)
    solar_noon = noon(observer, date=target_date, tzinfo=timezone.utc)
    rise = _utc_time(sunrise, observer, target_date)
    set_ = _utc_time(sunset, observer, target_date)

    try:
        start, end = daylight(observer, date=target_date, tzinfo=timezone.utc)
        # UTC sunset can fall before UTC sunrise on the same calendar date
        seconds = (end - start).total_seconds() % 86400
        day_length = round(seconds / 3600, 2)
    except ValueError:
        polar_day = elevation(observer, solar_noon) > 0
        logger.debug(
            "No sunrise/sunset on %s at (%s, %s): polar %s",
            target_date,
            latitude,
            longitude,
            "day" if polar_day else "night",
        )
        rise = set_ = None
        day_length = 24.0 if polar_day else 0.0

    return SunTimes(
        date=target_date,
        sunrise=rise,
        sunset=set_,
        solar_noon=solar_noon.time().replace(microsecond=0),
        day_length_hours=day_length,
    )
