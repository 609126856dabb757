"""Elapsed-time counter for a workout session."""

from __future__ import annotations

from cardio_engine.models.enums import ClockState


class SessionClock:
    """Counts whole seconds while running.

    Transitions: STOPPED -> RUNNING <-> PAUSED -> STOPPED (via reset).
    """

    def __init__(self) -> None:
        self.state = ClockState.STOPPED
        self.elapsed_seconds = 0

    @property
    def is_running(self) -> bool:
        return self.state == ClockState.RUNNING

    def start(self) -> None:
        """Start from STOPPED or resume from PAUSED."""
        self.state = ClockState.RUNNING

    def pause(self) -> None:
        if self.state == ClockState.RUNNING:
            self.state = ClockState.PAUSED

    def reset(self) -> None:
        """Return to STOPPED with zero elapsed time.

        Raises:
            ValueError: If the clock is running.
        """
        if self.state == ClockState.RUNNING:
            raise ValueError("cannot reset a running clock; pause it first")
        self.state = ClockState.STOPPED
        self.elapsed_seconds = 0

    def tick(self) -> int:
        """Add one second if running; return the elapsed total."""
        if self.state == ClockState.RUNNING:
            self.elapsed_seconds += 1
        return self.elapsed_seconds


def format_elapsed(total_seconds: int) -> str:
    """Seconds to ``MM:SS``, e.g. 125 -> ``"02:05"``. Minutes are not capped."""
    if total_seconds <= 0:
        return "00:00"
    return f"{total_seconds // 60:02d}:{total_seconds % 60:02d}"
