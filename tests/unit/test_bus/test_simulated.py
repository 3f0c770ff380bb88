"""Tests for bus/backends/simulated.py - In-memory sensor bus."""

from __future__ import annotations

import pytest

from brickpi_color.bus.backends.simulated import SimulatedBus
from brickpi_color.bus.protocol import SensorBus, SensorPort, SensorType
from brickpi_color.errors import BusReadError, InvalidPortError


class TestProtocol:
    """SimulatedBus satisfies the SensorBus protocol."""

    def test_is_sensor_bus(self, sim_bus):
        assert isinstance(sim_bus, SensorBus)

    def test_name_and_availability(self, sim_bus):
        assert sim_bus.name == "Simulated BrickPi"
        assert sim_bus.is_available()


class TestConfiguration:
    """Tests for staged configuration and finalize_setup()."""

    def test_type_pending_until_finalized(self, sim_bus):
        sim_bus.configure_sensor_type(SensorPort.S2, SensorType.COLOR_FULL)
        assert sim_bus.sensor_type(SensorPort.S2) is None
        sim_bus.finalize_setup()
        assert sim_bus.sensor_type(SensorPort.S2) is SensorType.COLOR_FULL

    def test_records_calls(self, sim_bus):
        sim_bus.configure_sensor_type(SensorPort.S1, SensorType.COLOR_RED)
        sim_bus.configure_sensor_type(SensorPort.S4, SensorType.COLOR_NONE)
        assert sim_bus.configure_calls == [
            (0, SensorType.COLOR_RED),
            (3, SensorType.COLOR_NONE),
        ]

    def test_accepts_plain_type_codes(self, sim_bus):
        sim_bus.configure_sensor_type(0, 38)
        sim_bus.finalize_setup()
        assert sim_bus.sensor_type(0) is SensorType.COLOR_GREEN

    def test_rejects_unknown_port(self, sim_bus):
        with pytest.raises(InvalidPortError, match="No sensor port"):
            sim_bus.configure_sensor_type(4, SensorType.COLOR_FULL)

    def test_rejects_unknown_type(self, sim_bus):
        with pytest.raises(InvalidPortError, match="Unsupported sensor type"):
            sim_bus.configure_sensor_type(SensorPort.S1, 99)
        assert sim_bus.configure_calls == []

    def test_restricted_ports(self):
        bus = SimulatedBus(ports=[SensorPort.S1])
        with pytest.raises(InvalidPortError):
            bus.configure_sensor_type(SensorPort.S2, SensorType.COLOR_FULL)

    def test_finalize_counts(self, sim_bus):
        sim_bus.finalize_setup()
        sim_bus.finalize_setup()
        assert sim_bus.setup_count == 2


class TestReads:
    """Tests for scalar and channel reads."""

    @pytest.fixture
    def ready_bus(self, sim_bus):
        sim_bus.configure_sensor_type(SensorPort.S1, SensorType.COLOR_FULL)
        sim_bus.finalize_setup()
        return sim_bus

    def test_unconfigured_port_read_fails(self, sim_bus):
        with pytest.raises(BusReadError, match="not been set up"):
            sim_bus.get_scalar_value(SensorPort.S1)
        with pytest.raises(BusReadError):
            sim_bus.get_channel_array(SensorPort.S1)

    def test_defaults_to_zero(self, ready_bus):
        assert ready_bus.get_scalar_value(SensorPort.S1) == 0
        assert ready_bus.get_channel_array(SensorPort.S1) == [0, 0, 0, 0]

    def test_scripted_values(self, ready_bus):
        ready_bus.set_scalar_value(SensorPort.S1, 6)
        ready_bus.set_channel_array(SensorPort.S1, [1, 2, 3, 4])
        assert ready_bus.get_scalar_value(SensorPort.S1) == 6
        assert ready_bus.get_channel_array(SensorPort.S1) == [1, 2, 3, 4]

    def test_channel_array_is_a_copy(self, ready_bus):
        ready_bus.set_channel_array(SensorPort.S1, [1, 2, 3, 4])
        ready_bus.get_channel_array(SensorPort.S1)[0] = 99
        assert ready_bus.get_channel_array(SensorPort.S1)[0] == 1

    def test_channel_array_length_checked(self, sim_bus):
        with pytest.raises(ValueError, match="Expected 4 channel values"):
            sim_bus.set_channel_array(SensorPort.S1, [1, 2, 3])

    def test_scripting_unknown_port(self, sim_bus):
        with pytest.raises(InvalidPortError):
            sim_bus.set_scalar_value(7, 1)
