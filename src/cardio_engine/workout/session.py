"""WorkoutSession — orchestrates one guided, simulated workout.

Lifecycle:

    IDLE --start()--> ACTIVE <--toggle_running()--> PAUSED
      \\                 \\                          /
       `----------------- close() ----------------'--> CLOSED

Every tick runs, in this order and under one lock:

    clock.tick -> simulator.tick -> monitor.classify -> announcer.maybe_announce

so the feedback published for a tick always describes the BPM computed in
that same tick.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable

import numpy as np

from cardio_engine.models.enums import (
    ANNOUNCE_GAP_S,
    DEFAULT_EFFORT,
    DEFAULT_LOCALE,
    IN_TARGET_ANNOUNCE_PROBABILITY,
    RESTING_BPM,
    SessionPhase,
)
from cardio_engine.models.feedback import FeedbackState
from cardio_engine.models.simulation_state import SessionSnapshot, SimulationState
from cardio_engine.models.zone import HeartRateZone
from cardio_engine.workout.announcer import FeedbackAnnouncer
from cardio_engine.workout.clock import SessionClock
from cardio_engine.workout.monitor import classify
from cardio_engine.workout.simulator import BiometricSimulator
from cardio_engine.workout.speech import SpeechSink
from cardio_engine.workout.ticker import IntervalTicker, Ticker

logger = logging.getLogger(__name__)


class WorkoutSession:
    """Sole owner and mutator of a session's SimulationState.

    Usage:
        session = WorkoutSession(rng=np.random.default_rng(7))
        session.start(target_zone, max_hr=190)
        session.adjust_effort(+10)
        view = session.snapshot()
        session.close()

    Args:
        rng: Random source shared by the simulator jitter and the
             in-zone announcement draw. Seed it for deterministic runs.
        speech: Audio capability; defaults to a no-op sink.
        ticker: Tick source; defaults to a one-second ``IntervalTicker``.
        time_fn: Monotonic clock used for announcement throttling.
        locale: Locale passed to the speech sink.
        announce_gap_s: Minimum seconds between announcements.
        in_target_announce_probability: Chance of speaking while in zone.
        initial_effort: Starting effort level (0-100).
        resting_bpm: Starting simulated BPM.
    """

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        speech: SpeechSink | None = None,
        ticker: Ticker | None = None,
        time_fn: Callable[[], float] = time.monotonic,
        locale: str = DEFAULT_LOCALE,
        announce_gap_s: float = ANNOUNCE_GAP_S,
        in_target_announce_probability: float = IN_TARGET_ANNOUNCE_PROBABILITY,
        initial_effort: int = DEFAULT_EFFORT,
        resting_bpm: int = RESTING_BPM,
    ) -> None:
        rng = rng if rng is not None else np.random.default_rng()
        self.state = SimulationState(current_bpm=resting_bpm, effort_level=initial_effort)
        self.state.adjust_effort(0)
        self.clock = SessionClock()
        self.simulator = BiometricSimulator(rng=rng)
        self.announcer = FeedbackAnnouncer(
            speech=speech,
            rng=rng,
            gap_s=announce_gap_s,
            in_target_probability=in_target_announce_probability,
            locale=locale,
        )
        self.ticker: Ticker = ticker if ticker is not None else IntervalTicker()
        self._time_fn = time_fn
        self._lock = threading.Lock()

        self.phase = SessionPhase.IDLE
        self.target_zone: HeartRateZone | None = None
        self.max_hr = 0
        self.feedback: FeedbackState | None = None
        self.announcement_times: list[float] = []

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def start(self, target_zone: HeartRateZone | None, max_hr: int) -> bool:
        """Enter ACTIVE from IDLE and begin ticking.

        Returns False (and stays put) when called outside IDLE, without a
        target zone, or with a non-positive max HR.
        """
        with self._lock:
            if self.phase != SessionPhase.IDLE:
                logger.warning("start() ignored: session is %s", self.phase.name)
                return False
            if target_zone is None or max_hr <= 0:
                logger.warning(
                    "start() rejected: target_zone=%r max_hr=%r", target_zone, max_hr
                )
                return False

            self.target_zone = target_zone
            self.max_hr = max_hr
            self.clock.start()
            self.state.is_running = True
            self.phase = SessionPhase.ACTIVE
            # Ticker must exist before close() can observe ACTIVE.
            self.ticker.start(self.step)

        logger.info(
            "Workout started: zone=%s (%d-%d bpm), max_hr=%d",
            target_zone.name,
            target_zone.min_bpm,
            target_zone.max_bpm,
            max_hr,
        )
        return True

    def toggle_running(self) -> SessionPhase:
        """Switch between ACTIVE and PAUSED; other phases are unchanged."""
        with self._lock:
            if self.phase == SessionPhase.ACTIVE:
                self.clock.pause()
                self.state.is_running = False
                self.phase = SessionPhase.PAUSED
                logger.info("Workout paused at %ds", self.state.elapsed_seconds)
            elif self.phase == SessionPhase.PAUSED:
                self.clock.start()
                self.state.is_running = True
                self.phase = SessionPhase.ACTIVE
                logger.info("Workout resumed at %ds", self.state.elapsed_seconds)
            return self.phase

    def adjust_effort(self, delta: int) -> int:
        """Shift effort by ``delta`` (clamped to 0-100); applies next tick."""
        with self._lock:
            if self.phase == SessionPhase.CLOSED:
                return self.state.effort_level
            return self.state.adjust_effort(delta)

    def set_muted(self, muted: bool) -> bool:
        with self._lock:
            if self.phase != SessionPhase.CLOSED:
                self.state.is_muted = bool(muted)
            return self.state.is_muted

    def close(self) -> None:
        """Stop ticking for good. Idempotent.

        When this returns no further tick will run: the phase flips to
        CLOSED under the lock, then the ticker is joined outside it so an
        in-flight tick can finish.
        """
        with self._lock:
            if self.phase == SessionPhase.CLOSED:
                return
            self.phase = SessionPhase.CLOSED
            self.state.is_running = False
            self.clock.pause()
            self.clock.reset()

        self.ticker.stop()
        logger.info("Workout closed after %ds", self.state.elapsed_seconds)

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def step(self) -> FeedbackState | None:
        """Run one ordered tick. No-op unless ACTIVE."""
        with self._lock:
            if self.phase != SessionPhase.ACTIVE or self.target_zone is None:
                return self.feedback

            self.state.elapsed_seconds = self.clock.tick()
            bpm = self.simulator.tick(self.state, self.max_hr)
            feedback = classify(bpm, self.target_zone)
            self.feedback = feedback

            previous_ts = self.state.last_announcement_ts
            _, announced_ts = self.announcer.maybe_announce(
                feedback, self.state, self._time_fn()
            )
            if announced_ts is not None and announced_ts != previous_ts:
                self.announcement_times.append(announced_ts)

            logger.debug(
                "tick t=%ds bpm=%d effort=%d -> %s",
                self.state.elapsed_seconds,
                bpm,
                self.state.effort_level,
                feedback.kind.name,
            )
            return feedback

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                phase=self.phase,
                elapsed_seconds=self.state.elapsed_seconds,
                current_bpm=self.state.current_bpm,
                effort_level=self.state.effort_level,
                is_running=self.state.is_running,
                is_muted=self.state.is_muted,
                feedback=self.feedback,
                target_zone=self.target_zone,
                max_hr=self.max_hr,
            )
