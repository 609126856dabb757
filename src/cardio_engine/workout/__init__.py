"""Guided workout: simulator, zone monitor, announcer, clock and session."""

from cardio_engine.workout.session import WorkoutSession
from cardio_engine.workout.speech import LoggingSpeech, NullSpeech, QueuedSpeech
from cardio_engine.workout.ticker import IntervalTicker, ManualTicker

__all__ = [
    "IntervalTicker",
    "LoggingSpeech",
    "ManualTicker",
    "NullSpeech",
    "QueuedSpeech",
    "WorkoutSession",
]
