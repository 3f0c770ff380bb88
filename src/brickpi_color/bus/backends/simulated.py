"""In-memory sensor bus backend."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ...errors import BusReadError, InvalidPortError
from ..protocol import CHANNEL_COUNT, SensorBus, SensorPort, SensorType
from ..registry import BusRegistry


@BusRegistry.register
class SimulatedBus(SensorBus):
    """
    Sensor bus that keeps firmware state in memory.

    Sensor types are staged by configure_sensor_type() and only become
    active on finalize_setup(), the same two-step commit the daughterboard
    firmware uses. Values are scripted with set_scalar_value() and
    set_channel_array(). Every configuration call is recorded in
    configure_calls.
    """

    def __init__(self, ports: Iterable[int] = tuple(SensorPort)):
        self._ports = {int(p) for p in ports}
        self._pending: dict[int, SensorType] = {}
        self._active: dict[int, SensorType] = {}
        self._scalars: dict[int, int] = {}
        self._channels: dict[int, list[int]] = {}
        self.configure_calls: list[tuple[int, SensorType]] = []
        self.setup_count = 0

    @property
    def name(self) -> str:
        return "Simulated BrickPi"

    def is_available(self) -> bool:
        return True

    def _check_port(self, port: int) -> int:
        if int(port) not in self._ports:
            raise InvalidPortError(f"No sensor port {port!r} on this bus")
        return int(port)

    def configure_sensor_type(self, port: int, sensor_type: SensorType) -> None:
        port = self._check_port(port)
        try:
            sensor_type = SensorType(sensor_type)
        except ValueError:
            raise InvalidPortError(f"Unsupported sensor type {sensor_type!r} for port {port}") from None
        self.configure_calls.append((port, sensor_type))
        self._pending[port] = sensor_type

    def finalize_setup(self) -> None:
        self._active.update(self._pending)
        self._pending.clear()
        self.setup_count += 1

    def sensor_type(self, port: int) -> SensorType | None:
        """Active (committed) sensor type for a port, if any."""
        return self._active.get(self._check_port(port))

    def get_scalar_value(self, port: int) -> int:
        port = self._require_configured(port)
        return self._scalars.get(port, 0)

    def get_channel_array(self, port: int) -> list[int]:
        port = self._require_configured(port)
        return list(self._channels.get(port, [0] * CHANNEL_COUNT))

    def _require_configured(self, port: int) -> int:
        port = self._check_port(port)
        if port not in self._active:
            raise BusReadError(f"Sensor port {port} has not been set up")
        return port

    # Scripting

    def set_scalar_value(self, port: int, value: int) -> None:
        """Set the value get_scalar_value() reports for a port."""
        self._scalars[self._check_port(port)] = int(value)

    def set_channel_array(self, port: int, values: Sequence[int]) -> None:
        """Set the samples get_channel_array() reports for a port."""
        if len(values) != CHANNEL_COUNT:
            raise ValueError(f"Expected {CHANNEL_COUNT} channel values, got {len(values)}")
        self._channels[self._check_port(port)] = [int(v) for v in values]
