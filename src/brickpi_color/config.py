"""User configuration for the color sensor tools."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .bus.protocol import SensorPort
from .driver import DEFAULT_FULL_SCALE
from .modes import SensingMode

CONFIG_FILE = Path.home() / ".config/brickpi-color/config.json"

DEFAULTS: dict[str, Any] = {
    "port": "S1",
    "mode": SensingMode.FULL_COLOR.value,
    "full_scale": DEFAULT_FULL_SCALE,
    "bus": "SimulatedBus",
}

logger = logging.getLogger(__name__)


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from file, falling back to defaults for missing keys."""
    path = path or CONFIG_FILE
    config = dict(DEFAULTS)

    if path.exists():
        try:
            with open(path) as f:
                config.update(json.load(f))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)

    return config


def save_config(config: dict[str, Any], path: Path | None = None) -> None:
    """Write configuration to file."""
    path = path or CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(config, f, indent=2)


def parse_port(value: str | int) -> SensorPort:
    """
    Parse a port setting.

    Accepts a connector name ("S1", "s2") or a zero-based index (0, "3").
    """
    if isinstance(value, int):
        return SensorPort(value)
    text = value.strip().upper()
    if text.isdigit():
        return SensorPort(int(text))
    try:
        return SensorPort[text]
    except KeyError:
        raise ValueError(f"Unknown sensor port: {value}") from None


def configured_port(config: dict[str, Any]) -> SensorPort:
    return parse_port(config["port"])


def configured_mode(config: dict[str, Any]) -> SensingMode:
    return SensingMode.from_name(config["mode"])


def check_full_scale(value: int | str) -> int:
    """Parse a full-scale reading, which must be a positive integer."""
    full_scale = int(value)
    if full_scale <= 0:
        raise ValueError(f"full_scale must be positive, got {full_scale}")
    return full_scale


def configured_full_scale(config: dict[str, Any]) -> int:
    return check_full_scale(config["full_scale"])
