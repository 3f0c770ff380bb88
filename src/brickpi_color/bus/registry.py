"""Sensor bus backend registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .protocol import SensorBus

logger = logging.getLogger(__name__)


class BusRegistry:
    """
    Registry for sensor bus backends.

    Supports:
    - Decorator registration of backend classes
    - Backend listing with status
    - Fresh, unshared instances for each driver
    """

    _backends: dict[str, type[SensorBus]] = {}
    _instances: dict[str, SensorBus] = {}

    @classmethod
    def register(cls, backend_class: type[SensorBus]) -> type[SensorBus]:
        """Register a backend class (decorator-friendly)."""
        name = backend_class.__name__
        cls._backends[name] = backend_class
        return backend_class

    @classmethod
    def create(cls, name: str) -> SensorBus:
        """Create a new, unshared instance of a registered backend."""
        if name not in cls._backends:
            raise KeyError(name)
        return cls._backends[name]()

    @classmethod
    def names(cls) -> list[str]:
        """Names of all registered backends, in registration order."""
        return list(cls._backends)

    @classmethod
    def _get_instance(cls, name: str) -> SensorBus | None:
        """Get or create the instance used for listing."""
        if name not in cls._instances and name in cls._backends:
            try:
                cls._instances[name] = cls._backends[name]()
            except Exception as e:
                logger.debug("Skipping bus backend %s: %s", name, e)
                return None
        return cls._instances.get(name)

    @classmethod
    def list_backends(cls) -> list[dict]:
        """List all registered backends with status."""
        result = []
        for name in cls._backends:
            instance = cls._get_instance(name)
            if instance:
                result.append(
                    {
                        "name": name,
                        "display_name": instance.name,
                        "available": instance.is_available(),
                    }
                )
        return result

    @classmethod
    def clear(cls) -> None:
        """Clear all registered backends (for testing)."""
        cls._backends.clear()
        cls._instances.clear()
