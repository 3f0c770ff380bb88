"""Plugin loading for sensor bus backends."""

from __future__ import annotations

import importlib.metadata
import logging
from typing import TYPE_CHECKING

from ..errors import BusUnavailableError
from .registry import BusRegistry

if TYPE_CHECKING:
    from .protocol import SensorBus

ENTRY_POINT_GROUP = "brickpi_color.buses"

logger = logging.getLogger(__name__)


def load_plugins() -> None:
    """
    Load bus backends from entry points.

    Plugins can register via pyproject.toml:

    [project.entry-points."brickpi_color.buses"]
    my_bus = "my_package.bus:MySerialBus"
    """
    for ep in importlib.metadata.entry_points(group=ENTRY_POINT_GROUP):
        try:
            backend_class = ep.load()
        except Exception as e:
            logger.debug("Skipping bus plugin %s: %s", ep.name, e)
            continue
        # Check if it looks like a SensorBus
        if (
            isinstance(backend_class, type)
            and hasattr(backend_class, "configure_sensor_type")
            and hasattr(backend_class, "get_channel_array")
            and hasattr(backend_class, "is_available")
        ):
            BusRegistry.register(backend_class)
        else:
            logger.debug("Entry point %s is not a sensor bus", ep.name)


def load_builtin_backends() -> None:
    """Load the built-in bus backends."""
    # Import backends to trigger registration
    from . import backends  # noqa: F401


def discover_backends() -> list[dict]:
    """Discover and list all available backends."""
    load_builtin_backends()
    load_plugins()

    return BusRegistry.list_backends()


def open_bus(name: str | None = None) -> SensorBus:
    """
    Open a new bus handle.

    With a name, that backend is created. Without one, the first registered
    backend that reports itself available is used.
    """
    load_builtin_backends()
    load_plugins()

    if name is not None:
        try:
            return BusRegistry.create(name)
        except KeyError:
            raise BusUnavailableError(f"Unknown bus backend: {name}") from None

    for candidate in BusRegistry.names():
        bus = BusRegistry.create(candidate)
        if bus.is_available():
            return bus
    raise BusUnavailableError("No sensor bus backend is available")
