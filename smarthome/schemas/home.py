"""
Home Schemas
============

Pydantic models used to hand aggregate state to callers without exposing the
aggregates themselves. Models are frozen so they can key lookup maps.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GpsDTO(BaseModel):
    """GPS position of a house"""
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, description="Degrees north")
    longitude: float = Field(..., ge=-180, le=180, description="Degrees east")


class LocationDTO(BaseModel):
    """House address and position"""
    model_config = ConfigDict(frozen=True)

    street: str = Field(..., min_length=1)
    door_number: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    gps: GpsDTO


class RoomDTO(BaseModel):
    """Room summary"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Room name")
    floor: str = Field(..., min_length=1, description="House floor")
    height: float = Field(..., gt=0)
    width: float = Field(..., gt=0)
    length: float = Field(..., gt=0)


class DeviceDTO(BaseModel):
    """Device summary"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Device name")
    device_model: str = Field(..., min_length=1, description="Device model identifier")
    is_active: bool = False


class DeviceRoomDTO(BaseModel):
    """Device name with the room it is installed in"""
    model_config = ConfigDict(frozen=True)

    device: str
    room: str


class CapabilityDTO(BaseModel):
    """Sensor or actuator summary"""
    model_config = ConfigDict(frozen=True)

    name: str
    functionality: str
    reading: Optional[str] = None
    unit: Optional[str] = None

    @field_validator("functionality", mode="before")
    def _coerce_functionality(cls, v):
        """Accept functionality enum members"""
        return getattr(v, "value", v)
