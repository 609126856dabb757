"""Synthetic heart-rate generator driven by an effort level.

Each tick moves the simulated BPM a fixed fraction of the way toward an
effort-dependent target and adds bounded uniform jitter:

    target = 60 + (max_hr - 60) * effort / 100
    bpm'   = round(bpm + (target - bpm) * 0.1 + U(-2, 2))

No floor or ceiling is applied; transient out-of-range values are accepted.
"""

from __future__ import annotations

import numpy as np

from cardio_engine.math.zones import round_half_up
from cardio_engine.models.enums import (
    EFFORT_MAX,
    JITTER_BPM,
    SIM_FLOOR_BPM,
    SMOOTHING_FACTOR,
)
from cardio_engine.models.simulation_state import SimulationState


def target_bpm(effort_level: int, max_hr: int) -> float:
    """Steady-state BPM the simulator converges to at ``effort_level``."""
    return SIM_FLOOR_BPM + (max_hr - SIM_FLOOR_BPM) * (effort_level / EFFORT_MAX)


class BiometricSimulator:
    """Produces one synthetic BPM reading per tick.

    Args:
        rng: numpy Generator used for jitter. Pass a seeded generator
             (``np.random.default_rng(42)``) for reproducible sequences.
        smoothing: Fraction of the gap to target closed per tick.
        jitter_bpm: Half-width of the uniform noise band.
    """

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        smoothing: float = SMOOTHING_FACTOR,
        jitter_bpm: float = JITTER_BPM,
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()
        self.smoothing = smoothing
        self.jitter_bpm = jitter_bpm

    def tick(self, state: SimulationState, max_hr: int) -> int:
        """Advance ``state.current_bpm`` by one step and return it.

        A paused state is left untouched and its current BPM returned.
        """
        if not state.is_running:
            return state.current_bpm

        drift = (target_bpm(state.effort_level, max_hr) - state.current_bpm) * self.smoothing
        jitter = float(self.rng.uniform(-self.jitter_bpm, self.jitter_bpm))
        state.current_bpm = round_half_up(state.current_bpm + drift + jitter)
        return state.current_bpm
