"""Sensor bus protocol and firmware type codes."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum
from typing import Protocol, runtime_checkable

CHANNEL_COUNT = 4  # Red, green, blue, background


class SensorPort(IntEnum):
    """Sensor connectors on the daughterboard."""

    S1 = 0
    S2 = 1
    S3 = 2
    S4 = 3


class SensorType(IntEnum):
    """Firmware sensor type codes for the NXT color sensor."""

    COLOR_FULL = 36  # On-board color classification
    COLOR_RED = 37  # Red LED, reflected light
    COLOR_GREEN = 38  # Green LED
    COLOR_BLUE = 39  # Blue LED
    COLOR_NONE = 40  # LEDs off, ambient light


@runtime_checkable
class SensorBus(Protocol):
    """Protocol for the daughterboard link a sensor driver talks through."""

    @property
    def name(self) -> str:
        """Human-readable name for this bus."""
        ...

    def is_available(self) -> bool:
        """Check if this bus can be used on the current system."""
        ...

    def configure_sensor_type(self, port: int, sensor_type: SensorType) -> None:
        """Stage a sensor type for a port. Takes effect after finalize_setup()."""
        ...

    def finalize_setup(self) -> None:
        """Commit staged per-port configuration to the firmware."""
        ...

    def get_scalar_value(self, port: int) -> int:
        """Latest single summary value for a port."""
        ...

    def get_channel_array(self, port: int) -> Sequence[int]:
        """Latest raw per-channel samples for a port."""
        ...
