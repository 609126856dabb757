"""Zone monitor: classifies a BPM reading against the target zone."""

from __future__ import annotations

from cardio_engine.models.feedback import ABOVE_TARGET, BELOW_TARGET, IN_TARGET, FeedbackState
from cardio_engine.models.zone import HeartRateZone


def classify(current_bpm: int, zone: HeartRateZone) -> FeedbackState:
    """Map ``current_bpm`` to below / in / above the zone.

    Bounds are inclusive, so a degenerate zone (min == max) still has an
    in-target value.
    """
    if current_bpm < zone.min_bpm:
        return BELOW_TARGET
    if current_bpm > zone.max_bpm:
        return ABOVE_TARGET
    return IN_TARGET
