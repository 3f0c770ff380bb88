"""brickpi-color library modules."""

from .bus import SensorBus, SensorPort, SensorType, open_bus
from .color import RGBColor
from .driver import DEFAULT_FULL_SCALE, ColorSensorDriver
from .errors import BusError, BusReadError, BusUnavailableError, InvalidPortError
from .modes import ColorCode, SensingMode
from .observation import SensorObservation

__all__ = [
    "ColorSensorDriver",
    "DEFAULT_FULL_SCALE",
    "SensingMode",
    "ColorCode",
    "RGBColor",
    "SensorObservation",
    "SensorBus",
    "SensorPort",
    "SensorType",
    "open_bus",
    "BusError",
    "BusReadError",
    "BusUnavailableError",
    "InvalidPortError",
]
