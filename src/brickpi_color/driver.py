"""
NXT color sensor driver.

Reads the color/light sensor on one BrickPi sensor port and turns the
values the firmware reports into color codes, light percentages and RGB
colors. How a value is read depends on the sensing mode:

    FullColor      color code from the firmware's own classification;
                   raw average is the mean of the red, green and blue samples
    Reflection     light level with the red LED on
    GreenChannel   light level with the green LED on
    BlueChannel    light level with the blue LED on
    Ambient        light level with the LEDs off

In every mode but FullColor the firmware averages on board and the driver
uses its scalar value directly.

A driver is not thread safe. Callers sharing one across threads must
serialize access themselves.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Protocol

import numpy as np

from .bus.loader import open_bus
from .bus.protocol import CHANNEL_COUNT, SensorBus
from .color import BLUE_INDEX, GREEN_INDEX, RED_INDEX, RGBColor
from .modes import MODE_ORDER, ColorCode, SensingMode, next_mode, previous_mode, sensor_type_for
from .observation import SensorObservation

logger = logging.getLogger(__name__)

# Assumed full-scale raw reading for percentages. Not verified against the
# actual ADC resolution of the daughterboard.
DEFAULT_FULL_SCALE = 1023


def _div_toward_zero(numerator: int, denominator: int) -> int:
    """Integer division that truncates toward zero instead of flooring."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


class Sensor(Protocol):
    """Surface shared by the mode-switching sensor drivers."""

    @property
    def sensor_name(self) -> str: ...

    def update_sensor(self) -> SensorObservation: ...

    def read_raw_value(self) -> int: ...

    def read_as_display_string(self) -> str: ...

    def count_of_modes(self) -> int: ...

    def current_mode_name(self) -> str: ...

    def select_next_mode(self) -> None: ...

    def select_previous_mode(self) -> None: ...


class ColorSensorDriver(Sensor):
    """Driver for an NXT color sensor on a BrickPi sensor port."""

    SENSOR_NAME = "NXT Color Sensor"

    def __init__(
        self,
        port: int,
        mode: SensingMode = SensingMode.FULL_COLOR,
        bus: SensorBus | None = None,
        full_scale: int = DEFAULT_FULL_SCALE,
    ):
        """
        Bind the driver to a port and program the bus for the initial mode.

        Args:
            port: Sensor port the sensor is plugged into.
            mode: Initial sensing mode.
            bus: Bus handle to use. A new one is opened when omitted.
            full_scale: Raw reading treated as 100 percent.

        Raises:
            BusError: If the bus rejects the port or the configuration.
        """
        self._bus = bus if bus is not None else open_bus()
        self._port = port
        self._mode = mode
        self._raw = np.zeros(CHANNEL_COUNT, dtype=np.int16)
        self._last_observation: SensorObservation | None = None
        self.full_scale = full_scale

        logger.debug("Opening %s on port %s via %s", self.SENSOR_NAME, port, self._bus.name)
        self._configure(mode)

    @property
    def port(self) -> int:
        return self._port

    @property
    def sensor_name(self) -> str:
        return self.SENSOR_NAME

    @property
    def bus(self) -> SensorBus:
        return self._bus

    @property
    def raw_sample(self) -> tuple[int, int, int, int]:
        """Channels from the last fetch: red, green, blue, background."""
        return tuple(int(v) for v in self._raw)

    @property
    def last_observation(self) -> SensorObservation | None:
        """Observation recorded by the most recent update_sensor() call."""
        return self._last_observation

    # Mode selection

    @property
    def mode(self) -> SensingMode:
        return self._mode

    @mode.setter
    def mode(self, mode: SensingMode) -> None:
        self.set_mode(mode)

    def set_mode(self, mode: SensingMode) -> None:
        """
        Switch to another sensing mode.

        The bus is reprogrammed before the new mode takes effect, so a
        rejected configuration leaves the driver in its old mode. Setting
        the current mode again does nothing.
        """
        if mode == self._mode:
            return
        self._configure(mode)
        self._mode = mode

    def select_next_mode(self) -> None:
        self.set_mode(next_mode(self._mode))

    def select_previous_mode(self) -> None:
        self.set_mode(previous_mode(self._mode))

    def count_of_modes(self) -> int:
        return len(MODE_ORDER)

    def current_mode_name(self) -> str:
        return self._mode.value

    def _configure(self, mode: SensingMode) -> None:
        sensor_type = sensor_type_for(mode)
        logger.debug("Configuring port %s as %s for %s mode", self._port, sensor_type.name, mode.value)
        self._bus.configure_sensor_type(self._port, sensor_type)
        self._bus.finalize_setup()

    # Reading

    def fetch_raw_channels(self) -> None:
        """Replace the raw sample with the bus's current channel array."""
        values = self._bus.get_channel_array(self._port)
        fresh = np.array([int(values[i]) for i in range(CHANNEL_COUNT)], dtype=np.int64)
        # Wraps like a cast to a signed 16-bit integer
        self._raw = fresh.astype(np.int16)

    def calculate_raw_average(self) -> int:
        """
        Raw light level for the current mode.

        In FullColor mode this fetches the channels and averages red, green
        and blue (background excluded). In other modes the firmware has
        already averaged, and its scalar value is returned as is.
        """
        if self._mode is SensingMode.FULL_COLOR:
            self.fetch_raw_channels()
            total = int(self._raw[RED_INDEX]) + int(self._raw[BLUE_INDEX]) + int(self._raw[GREEN_INDEX])
            return _div_toward_zero(total, 3)
        return int(self._bus.get_scalar_value(self._port))

    def calculate_raw_average_as_percent(self) -> int:
        """Raw average scaled to 0-100 of full_scale, truncated."""
        return _div_toward_zero(self.calculate_raw_average() * 100, self.full_scale)

    def read_raw_value(self) -> int:
        """Color code in FullColor mode, raw average otherwise."""
        if self._mode is SensingMode.FULL_COLOR:
            return int(self.read_color())
        return self.calculate_raw_average()

    def read_normalized_value(self) -> int:
        """Light intensity in percent. In FullColor mode the color code is returned."""
        if self._mode is SensingMode.FULL_COLOR:
            return int(self.read_color())
        return self.calculate_raw_average_as_percent()

    def read_color(self) -> ColorCode:
        """
        Color classified by the firmware.

        Always ColorCode.NONE outside FullColor mode. The firmware value is
        relabelled 1:1 and not range checked.
        """
        if self._mode is not SensingMode.FULL_COLOR:
            return ColorCode.NONE
        return ColorCode(self._bus.get_scalar_value(self._port))

    def read_rgb_color(self) -> RGBColor:
        """
        Fetch the channels and return them as an 8-bit RGB color.

        This works in any mode, but the channels only carry RGB data while
        the port is set up for FullColor. In other modes the result is
        whatever the firmware leaves in those slots.
        """
        self.fetch_raw_channels()
        return RGBColor.from_channels(self._raw)

    def read_as_display_string(self) -> str:
        """Color name in FullColor mode, percentage otherwise."""
        if self._mode is SensingMode.FULL_COLOR:
            return self.read_color().label
        return str(self.read_normalized_value())

    def update_sensor(self) -> SensorObservation:
        """
        Read the sensor once and record the result as the last observation.

        The display text is derived from the same reading as the value, so
        the two always describe one sample.
        """
        value = self.read_raw_value()
        if self._mode is SensingMode.FULL_COLOR:
            text = ColorCode(value).label
        else:
            text = str(_div_toward_zero(value * 100, self.full_scale))
        observation = SensorObservation(
            timestamp=datetime.now(),
            port=int(self._port),
            mode=self._mode,
            value=value,
            text=text,
        )
        self._last_observation = observation
        return observation

    def __repr__(self) -> str:
        return f"{type(self).__name__}(port={self._port!r}, mode={self._mode.value})"
