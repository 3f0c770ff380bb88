"""Sensor bus abstraction with plugin support."""

from __future__ import annotations

from .loader import discover_backends, load_plugins, open_bus
from .protocol import CHANNEL_COUNT, SensorBus, SensorPort, SensorType
from .registry import BusRegistry

__all__ = [
    "CHANNEL_COUNT",
    "BusRegistry",
    "SensorBus",
    "SensorPort",
    "SensorType",
    "discover_backends",
    "load_plugins",
    "open_bus",
]
