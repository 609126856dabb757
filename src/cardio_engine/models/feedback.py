"""Feedback state: zone-monitor output for one tick."""

from __future__ import annotations

from dataclasses import dataclass

from cardio_engine.models.enums import ColorCategory, FeedbackKind


@dataclass(frozen=True)
class FeedbackState:
    """Classification of the current BPM against the target zone.

    Holds no identity of its own: two instances with the same kind are
    interchangeable.
    """

    kind: FeedbackKind
    message: str
    color: ColorCategory

    @property
    def is_out_of_zone(self) -> bool:
        return self.kind != FeedbackKind.IN_TARGET


BELOW_TARGET = FeedbackState(
    kind=FeedbackKind.BELOW_TARGET,
    message="Increase your pace!",
    color=ColorCategory.INFO,
)
IN_TARGET = FeedbackState(
    kind=FeedbackKind.IN_TARGET,
    message="Good work! Maintain this pace.",
    color=ColorCategory.SUCCESS,
)
ABOVE_TARGET = FeedbackState(
    kind=FeedbackKind.ABOVE_TARGET,
    message="Slow down! Heart rate too high.",
    color=ColorCategory.WARNING,
)
