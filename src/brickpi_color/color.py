"""RGB values read from the color sensor's raw channels."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

RED_INDEX = 0
GREEN_INDEX = 1
BLUE_INDEX = 2
BACKGROUND_INDEX = 3


@dataclass(frozen=True)
class RGBColor:
    """An 8-bit RGB color."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_channels(cls, channels: Sequence[int] | np.ndarray) -> RGBColor:
        """
        Build a color from raw channel samples.

        Each of the red, green and blue samples is cut to its low 8 bits,
        so 300 becomes 44 and -1 becomes 255. The background slot is ignored.
        """
        rgb = np.asarray(channels)[[RED_INDEX, GREEN_INDEX, BLUE_INDEX]].astype(np.int64)
        r, g, b = (rgb & 0xFF).astype(np.uint8).tolist()
        return cls(r, g, b)

    def as_tuple(self) -> tuple[int, int, int]:
        return self.red, self.green, self.blue

    def to_hex(self) -> str:
        """Hex color string, e.g. "#2c14f4"."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @property
    def brightness(self) -> int:
        """Perceived brightness (0-255) using ITU-R BT.601 luminance formula."""
        return int((self.red * 299 + self.green * 587 + self.blue * 114) / 1000)
