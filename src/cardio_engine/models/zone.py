"""Heart-rate zone record produced by the zone calculator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HeartRateZone:
    """A single training zone expressed both as %max-HR and as BPM.

    The guided workout only reads ``min_bpm``/``max_bpm`` and ``name``;
    the remaining fields feed the chart, the table and the exports.
    """

    identifier: str
    name: str
    min_percent: float
    max_percent: float
    min_bpm: int
    max_bpm: int
    description: str = ""
    duration: str = ""
    goal: str = ""
    color: str = "#94a3b8"
    text_color: str = "#1e293b"
    is_target: bool = False

    @property
    def range_label(self) -> str:
        """Percent range label, e.g. ``"60-80%"``."""
        return f"{round(self.min_percent * 100)}-{round(self.max_percent * 100)}%"

    def contains(self, bpm: int) -> bool:
        """True if ``bpm`` lies inside the zone (bounds inclusive)."""
        return self.min_bpm <= bpm <= self.max_bpm
