"""Data models for the cardio engine."""

from cardio_engine.models.enums import (
    ClockState,
    ColorCategory,
    FeedbackKind,
    Gender,
    SessionPhase,
)
from cardio_engine.models.feedback import FeedbackState
from cardio_engine.models.simulation_state import SessionSnapshot, SimulationState
from cardio_engine.models.zone import HeartRateZone

__all__ = [
    "ClockState",
    "ColorCategory",
    "FeedbackKind",
    "FeedbackState",
    "Gender",
    "HeartRateZone",
    "SessionPhase",
    "SessionSnapshot",
    "SimulationState",
]
