"""Shared pytest fixtures for brickpi-color tests."""

from __future__ import annotations

import pytest

from brickpi_color.bus.backends.simulated import SimulatedBus
from brickpi_color.bus.protocol import SensorPort
from brickpi_color.driver import ColorSensorDriver
from brickpi_color.modes import SensingMode


# =============================================================================
# Bus fixtures
# =============================================================================

@pytest.fixture
def sim_bus():
    """A fresh in-memory bus with all four sensor ports."""
    return SimulatedBus()


@pytest.fixture
def make_sensor(sim_bus):
    """
    Factory for drivers bound to the shared simulated bus.

    Values can be scripted on the bus before or after construction:

        sensor = make_sensor(SensingMode.AMBIENT, scalar=511)
    """

    def _make(
        mode: SensingMode = SensingMode.FULL_COLOR,
        port: SensorPort = SensorPort.S1,
        scalar: int | None = None,
        channels: list[int] | None = None,
        **kwargs,
    ) -> ColorSensorDriver:
        if scalar is not None:
            sim_bus.set_scalar_value(port, scalar)
        if channels is not None:
            sim_bus.set_channel_array(port, channels)
        return ColorSensorDriver(port, mode, bus=sim_bus, **kwargs)

    return _make


@pytest.fixture
def color_sensor(make_sensor):
    """A driver in full color mode on port S1."""
    return make_sensor()


@pytest.fixture
def config_path(tmp_path):
    """Path for a throwaway config file."""
    return tmp_path / "brickpi-color" / "config.json"
