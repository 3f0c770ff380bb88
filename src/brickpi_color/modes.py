"""Sensing modes, color codes and the mode to firmware type mapping."""

from __future__ import annotations

from enum import Enum, IntEnum

from .bus.protocol import SensorType


class SensingMode(Enum):
    """Sensing configurations of the NXT color sensor."""

    FULL_COLOR = "FullColor"
    REFLECTION = "Reflection"
    GREEN_CHANNEL = "GreenChannel"
    BLUE_CHANNEL = "BlueChannel"
    AMBIENT = "Ambient"

    @classmethod
    def from_name(cls, name: str) -> SensingMode:
        """Look up a mode by canonical name or member name, case-insensitively."""
        wanted = name.strip().replace("-", "_").lower()
        for mode in cls:
            if wanted in (mode.value.lower(), mode.name.lower()):
                return mode
        raise ValueError(f"Unknown sensing mode: {name}")


class ColorCode(IntEnum):
    """Colors the firmware classifies in full color mode."""

    NONE = 0
    BLACK = 1
    BLUE = 2
    GREEN = 3
    YELLOW = 4
    RED = 5
    WHITE = 6
    BROWN = 7

    @property
    def label(self) -> str:
        """Display name, e.g. "White"."""
        return self.name.capitalize()


# Cycling order for next/previous mode selection
MODE_ORDER: tuple[SensingMode, ...] = (
    SensingMode.FULL_COLOR,
    SensingMode.REFLECTION,
    SensingMode.GREEN_CHANNEL,
    SensingMode.BLUE_CHANNEL,
    SensingMode.AMBIENT,
)

MODE_SENSOR_TYPES: dict[SensingMode, SensorType] = {
    SensingMode.FULL_COLOR: SensorType.COLOR_FULL,
    SensingMode.REFLECTION: SensorType.COLOR_RED,
    SensingMode.GREEN_CHANNEL: SensorType.COLOR_GREEN,
    SensingMode.BLUE_CHANNEL: SensorType.COLOR_BLUE,
    SensingMode.AMBIENT: SensorType.COLOR_NONE,
}


def sensor_type_for(mode: SensingMode) -> SensorType:
    """Firmware sensor type to program for a sensing mode."""
    return MODE_SENSOR_TYPES[mode]


def next_mode(mode: SensingMode) -> SensingMode:
    """Mode after the given one, wrapping from the last to the first."""
    return MODE_ORDER[(MODE_ORDER.index(mode) + 1) % len(MODE_ORDER)]


def previous_mode(mode: SensingMode) -> SensingMode:
    """Mode before the given one, wrapping from the first to the last."""
    return MODE_ORDER[(MODE_ORDER.index(mode) - 1) % len(MODE_ORDER)]
