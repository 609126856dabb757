"""Tests for zone classification."""

import pytest

from cardio_engine.models.enums import ColorCategory, FeedbackKind
from cardio_engine.workout.monitor import classify


class TestClassify:
    @pytest.mark.parametrize(
        "bpm, kind",
        [
            (119, FeedbackKind.BELOW_TARGET),
            (120, FeedbackKind.IN_TARGET),
            (135, FeedbackKind.IN_TARGET),
            (150, FeedbackKind.IN_TARGET),
            (151, FeedbackKind.ABOVE_TARGET),
        ],
    )
    def test_boundaries(self, narrow_zone, bpm: int, kind: FeedbackKind) -> None:
        assert classify(bpm, narrow_zone).kind == kind

    def test_colors_follow_kind(self, narrow_zone) -> None:
        assert classify(60, narrow_zone).color == ColorCategory.INFO
        assert classify(130, narrow_zone).color == ColorCategory.SUCCESS
        assert classify(190, narrow_zone).color == ColorCategory.WARNING

    def test_degenerate_zone_has_in_target_value(self, degenerate_zone) -> None:
        assert classify(133, degenerate_zone).kind == FeedbackKind.IN_TARGET
        assert classify(132, degenerate_zone).kind == FeedbackKind.BELOW_TARGET
        assert classify(134, degenerate_zone).kind == FeedbackKind.ABOVE_TARGET

    def test_extreme_values_accepted(self, aerobic_zone) -> None:
        assert classify(0, aerobic_zone).kind == FeedbackKind.BELOW_TARGET
        assert classify(400, aerobic_zone).kind == FeedbackKind.ABOVE_TARGET
