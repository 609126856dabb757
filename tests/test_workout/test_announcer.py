"""Tests for throttled spoken feedback."""

import numpy as np
import pytest

from cardio_engine.models.feedback import ABOVE_TARGET, BELOW_TARGET, IN_TARGET
from cardio_engine.models.simulation_state import SimulationState
from cardio_engine.workout.announcer import FeedbackAnnouncer

from conftest import FailingSpeech, FixedDraw


class TestGap:
    def test_first_announcement_immediate(self, speech) -> None:
        announcer = FeedbackAnnouncer(speech=speech)
        state = SimulationState(is_running=True)
        spoken, ts = announcer.maybe_announce(BELOW_TARGET, state, now=5.0)
        assert spoken is True
        assert ts == 5.0
        assert speech.spoken == [("Increase your pace!", "en-US")]

    def test_within_gap_skipped(self, speech) -> None:
        announcer = FeedbackAnnouncer(speech=speech)
        state = SimulationState(last_announcement_ts=100.0)
        spoken, ts = announcer.maybe_announce(ABOVE_TARGET, state, now=109.9)
        assert spoken is False
        assert ts == 100.0
        assert speech.spoken == []

    def test_exactly_gap_allowed(self, speech) -> None:
        announcer = FeedbackAnnouncer(speech=speech)
        state = SimulationState(last_announcement_ts=100.0)
        spoken, ts = announcer.maybe_announce(ABOVE_TARGET, state, now=110.0)
        assert spoken is True
        assert ts == 110.0
        assert state.last_announcement_ts == 110.0

    def test_custom_locale_passed_through(self, speech) -> None:
        announcer = FeedbackAnnouncer(speech=speech, locale="it-IT")
        announcer.maybe_announce(BELOW_TARGET, SimulationState(), now=0.0)
        assert speech.spoken[0][1] == "it-IT"


class TestMute:
    def test_muted_never_speaks(self, speech) -> None:
        announcer = FeedbackAnnouncer(speech=speech)
        state = SimulationState(is_muted=True)
        spoken, ts = announcer.maybe_announce(BELOW_TARGET, state, now=50.0)
        assert spoken is False
        assert ts is None
        assert speech.spoken == []


class TestInZoneProbability:
    def test_draw_below_probability_speaks(self, speech) -> None:
        announcer = FeedbackAnnouncer(speech=speech, rng=FixedDraw(0.1))
        spoken, _ = announcer.maybe_announce(IN_TARGET, SimulationState(), now=0.0)
        assert spoken is True
        assert speech.spoken == [("Good work! Maintain this pace.", "en-US")]

    def test_draw_above_probability_silent(self, speech) -> None:
        announcer = FeedbackAnnouncer(speech=speech, rng=FixedDraw(0.9))
        state = SimulationState()
        spoken, ts = announcer.maybe_announce(IN_TARGET, state, now=0.0)
        assert spoken is False
        assert ts is None
        assert state.last_announcement_ts is None

    def test_out_of_zone_ignores_draw(self, speech) -> None:
        announcer = FeedbackAnnouncer(speech=speech, rng=FixedDraw(0.99))
        spoken, _ = announcer.maybe_announce(ABOVE_TARGET, SimulationState(), now=0.0)
        assert spoken is True

    def test_zero_probability_never_speaks_in_zone(self, speech, rng) -> None:
        announcer = FeedbackAnnouncer(speech=speech, rng=rng, in_target_probability=0.0)
        state = SimulationState()
        for t in range(0, 200, 10):
            announcer.maybe_announce(IN_TARGET, state, now=float(t))
        assert speech.spoken == []

    def test_default_probability_rate(self, speech) -> None:
        announcer = FeedbackAnnouncer(speech=speech, rng=np.random.default_rng(2024))
        state = SimulationState()
        calls = 1000
        # One call per gap, so every call is eligible.
        for i in range(calls):
            announcer.maybe_announce(IN_TARGET, state, now=i * 10.0)
        assert 0.25 <= len(speech.spoken) / calls <= 0.35

    @pytest.mark.parametrize("probability", [-0.1, 1.5])
    def test_invalid_probability_rejected(self, probability: float) -> None:
        with pytest.raises(ValueError, match="in_target_probability"):
            FeedbackAnnouncer(in_target_probability=probability)


class TestSpeechFailure:
    def test_failure_does_not_propagate(self) -> None:
        sink = FailingSpeech()
        announcer = FeedbackAnnouncer(speech=sink)
        state = SimulationState()
        spoken, ts = announcer.maybe_announce(BELOW_TARGET, state, now=20.0)
        assert spoken is False
        assert ts == 20.0
        assert sink.calls == 1

    def test_failed_attempt_still_throttles(self) -> None:
        sink = FailingSpeech()
        announcer = FeedbackAnnouncer(speech=sink)
        state = SimulationState()
        announcer.maybe_announce(BELOW_TARGET, state, now=20.0)
        announcer.maybe_announce(BELOW_TARGET, state, now=25.0)
        assert sink.calls == 1
