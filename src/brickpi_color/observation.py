"""Snapshot of the last reading a sensor driver published."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .modes import SensingMode


@dataclass(frozen=True)
class SensorObservation:
    """One refresh of a sensor: the raw value and how it is displayed."""

    timestamp: datetime
    port: int
    mode: SensingMode
    value: int  # Color code in full color mode, raw average otherwise
    text: str  # Color name in full color mode, percentage otherwise

    def age_seconds(self, now: datetime | None = None) -> float:
        """Seconds since this observation was taken."""
        now = now or datetime.now()
        return (now - self.timestamp).total_seconds()

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "port": self.port,
            "mode": self.mode.value,
            "value": self.value,
            "text": self.text,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SensorObservation:
        """Deserialize from JSON."""
        return cls(
            timestamp=datetime.fromisoformat(data["timestamp"]),
            port=int(data["port"]),
            mode=SensingMode(data["mode"]),
            value=int(data["value"]),
            text=data["text"],
        )
