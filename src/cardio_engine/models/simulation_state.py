"""Mutable per-session state and the read-only snapshot handed to the UI."""

from __future__ import annotations

from dataclasses import dataclass

from cardio_engine.models.enums import (
    DEFAULT_EFFORT,
    EFFORT_MAX,
    EFFORT_MIN,
    RESTING_BPM,
    SessionPhase,
)
from cardio_engine.models.feedback import FeedbackState
from cardio_engine.models.zone import HeartRateZone


@dataclass
class SimulationState:
    """State owned and mutated by a single WorkoutSession.

    Unlike the frozen models elsewhere in the engine this one changes every
    tick; nothing outside the owning session should write to it.
    """

    current_bpm: int = RESTING_BPM
    effort_level: int = DEFAULT_EFFORT
    elapsed_seconds: int = 0
    is_running: bool = False
    is_muted: bool = False
    last_announcement_ts: float | None = None  # monotonic seconds; None = never

    def adjust_effort(self, delta: int) -> int:
        """Shift effort by ``delta``, clamped to [EFFORT_MIN, EFFORT_MAX]."""
        self.effort_level = max(EFFORT_MIN, min(EFFORT_MAX, self.effort_level + delta))
        return self.effort_level


@dataclass(frozen=True)
class SessionSnapshot:
    """Point-in-time view of a session for rendering."""

    phase: SessionPhase
    elapsed_seconds: int
    current_bpm: int
    effort_level: int
    is_running: bool
    is_muted: bool
    feedback: FeedbackState | None
    target_zone: HeartRateZone | None
    max_hr: int

    @property
    def gauge_percent(self) -> float:
        """Current BPM as % of max HR, clamped to 0-100 for gauges."""
        if self.max_hr <= 0:
            return 0.0
        return min(100.0, max(0.0, self.current_bpm / self.max_hr * 100.0))
