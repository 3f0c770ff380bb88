"""Built-in sensor bus backends."""

from __future__ import annotations

from .simulated import SimulatedBus

__all__ = ["SimulatedBus"]
