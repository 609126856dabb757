"""Throttled spoken feedback.

Rules, in order:
    1. Muted sessions never speak.
    2. At least ``gap_s`` seconds must separate two attempted announcements.
    3. Out-of-zone feedback is always spoken once the gap has elapsed.
    4. In-zone feedback is spoken with probability ``in_target_probability``
       so "good work" is not repeated every ten seconds.
"""

from __future__ import annotations

import logging

import numpy as np

from cardio_engine.models.enums import (
    ANNOUNCE_GAP_S,
    DEFAULT_LOCALE,
    IN_TARGET_ANNOUNCE_PROBABILITY,
)
from cardio_engine.models.feedback import FeedbackState
from cardio_engine.models.simulation_state import SimulationState
from cardio_engine.workout.speech import NullSpeech, SpeechSink

logger = logging.getLogger(__name__)


class FeedbackAnnouncer:
    """Decides whether and what to say, and hands it to a speech sink."""

    def __init__(
        self,
        speech: SpeechSink | None = None,
        rng: np.random.Generator | None = None,
        gap_s: float = ANNOUNCE_GAP_S,
        in_target_probability: float = IN_TARGET_ANNOUNCE_PROBABILITY,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        if not 0.0 <= in_target_probability <= 1.0:
            raise ValueError(
                f"in_target_probability must be within [0, 1], got {in_target_probability}"
            )
        self.speech = speech if speech is not None else NullSpeech()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.gap_s = gap_s
        self.in_target_probability = in_target_probability
        self.locale = locale

    def maybe_announce(
        self, feedback: FeedbackState, state: SimulationState, now: float
    ) -> tuple[bool, float | None]:
        """Possibly speak ``feedback.message``.

        Args:
            feedback: Classification from the same tick.
            state: Session state; ``last_announcement_ts`` is updated in place
                   whenever an announcement is attempted.
            now: Monotonic time in seconds.

        Returns:
            ``(spoken, last_announcement_ts)``. ``spoken`` is False when the
            announcement was skipped or the sink failed.
        """
        if state.is_muted:
            return False, state.last_announcement_ts

        last = state.last_announcement_ts
        if last is not None and now - last < self.gap_s:
            return False, last

        if not feedback.is_out_of_zone and self.rng.random() >= self.in_target_probability:
            return False, last

        state.last_announcement_ts = now
        try:
            self.speech.announce(feedback.message, self.locale)
        except Exception:
            logger.warning("Speech delivery failed; continuing without audio", exc_info=True)
            return False, state.last_announcement_ts
        logger.debug("Announced %r at t=%.1f", feedback.message, now)
        return True, state.last_announcement_ts
