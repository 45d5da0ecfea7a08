from smarthome.services.application.device_service import DeviceService
from smarthome.services.application.house_service import HouseService

__all__ = ["DeviceService", "HouseService"]
